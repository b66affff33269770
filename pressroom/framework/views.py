import logging

from braces.views import LoginRequiredMixin, StaffuserRequiredMixin

from django.apps import apps
from django.conf import settings
from django.contrib import admin, messages
from django.core.exceptions import PermissionDenied
from django.http import HttpResponseRedirect
from django.urls import reverse, reverse_lazy
from django.utils.html import strip_tags
from django.utils.translation import gettext as _
from django.views.generic import View

from .screens import Screen, ScreenMode

logger = logging.getLogger(__name__)


class CreateNewView(LoginRequiredMixin, StaffuserRequiredMixin, View):
    """
    Creates an auto-draft of the requested post type and renders its change form
    in create-new mode. The form posts to the regular change view.
    """

    login_url = reverse_lazy('admin:login')

    def get_model_admin(self):
        model = apps.get_model(settings.EDITOR_MODEL)
        return admin.site._registry[model]

    def get(self, request, *args, **kwargs):
        model_admin = self.get_model_admin()
        model = model_admin.model
        opts = model._meta

        if not model_admin.has_add_permission(request):
            raise PermissionDenied

        post_type = strip_tags(request.GET.get('type', '')).strip() or settings.POST_TYPES[0]
        if post_type not in settings.POST_TYPES:
            messages.add_message(request, messages.ERROR, _('Invalid post type.'))
            return HttpResponseRedirect(reverse(f'admin:{opts.app_label}_{opts.model_name}_changelist'))

        post = model.objects.create(title='', post_type=post_type, status=model.AUTO_DRAFT, author=request.user)
        logger.debug(f'Created auto-draft {post.pk} of type {post_type}')

        request.screen = Screen(ScreenMode.CREATE_NEW, post_type)
        form_url = reverse(f'admin:{opts.app_label}_{opts.model_name}_change', args=[post.pk])
        return model_admin.change_view(request, str(post.pk), form_url=form_url)
