import logging

from django.conf import settings
from django.contrib import admin
from django.http import HttpResponseRedirect
from django.utils.http import urlencode
from django.utils.safestring import mark_safe

from . import hooks
from .editor import SaveDirective
from .nonces import create_nonce, item_action
from .screens import Screen, ScreenMode
from .utils import admin_url

logger = logging.getLogger(__name__)


class EditorAdmin(admin.ModelAdmin):
    """
    Admin for models with a post_type and a status. New objects are created as
    auto-drafts through the create-new screen, saves and redirects run through
    the editor hooks.
    """

    change_form_template = "admin/editor_changeform.html"
    readonly_fields = ['post_type']

    def add_view(self, request, form_url='', extra_context=None):
        if request.method == 'GET':
            post_type = request.GET.get('type') or settings.POST_TYPES[0]
            return HttpResponseRedirect(admin_url('create-new?' + urlencode({'type': post_type})))
        return super().add_view(request, form_url, extra_context)

    def render_change_form(self, request, context, add=False, change=False, form_url='', obj=None):
        if not getattr(request, 'screen', None):
            mode = ScreenMode.CREATE_NEW if add else ScreenMode.EDIT_EXISTING
            request.screen = Screen(mode, obj.post_type if obj else '')

        if obj is not None and obj.pk:
            context['editor_nonce'] = create_nonce(item_action(obj.pk), request.user)
        context['editor_actions'] = mark_safe(''.join(hooks.render_editor.dispatch(obj, request)))
        return super().render_change_form(request, context, add, change, form_url, obj)

    def save_model(self, request, obj, form, change):
        directive = SaveDirective.from_instance(obj)
        if directive.status == obj.AUTO_DRAFT:
            directive = directive.with_status(obj.DRAFT)

        directive = hooks.before_save.apply(directive, request)
        directive.apply_to(obj)
        super().save_model(request, obj, form, change)

    def response_add(self, request, obj, post_url_continue=None):
        response = super().response_add(request, obj, post_url_continue)
        return self.filter_redirect(request, obj, response)

    def response_change(self, request, obj):
        return self.filter_redirect(request, obj, super().response_change(request, obj))

    def filter_redirect(self, request, obj, response):
        if not isinstance(response, HttpResponseRedirect):
            return response

        location = hooks.after_save_redirect.apply(response.url, obj.pk, request)
        if location == response.url:
            return response
        logger.debug(f'Redirecting {obj} to {location} instead of {response.url}')
        return HttpResponseRedirect(location)
