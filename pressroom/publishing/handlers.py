"""
Publish & Add New.

The button submits the edit form with a publish_and_add_new field. The
before_save handler then publishes the post and the after_save_redirect handler
sends the editor to a fresh create-new screen of the same post type. Both
handlers read the same SubmittedIntent and check the nonce on their own.
"""
import logging

from django.template.loader import render_to_string
from django.utils.http import urlencode
from django.utils.translation import gettext_lazy as _

from framework import hooks as editor_hooks
from framework.behaviours import StatusAble
from framework.nonces import item_action, verify_nonce
from framework.utils import admin_url

from . import hooks
from .intent import get_submitted_intent
from .visibility import button_visible_for, should_show_button

logger = logging.getLogger(__name__)

DEFAULT_BUTTON_LABEL = _('Publish & Add New')
ASSET_PRIORITY = 15


def render_button(post, request):
    if post is None or not button_visible_for(post.status):
        return None

    label = hooks.button_label.apply(DEFAULT_BUTTON_LABEL)
    return render_to_string('publishing/button.html', {'label': label}, request=request)


def render_style(screen):
    if not should_show_button(screen):
        return None
    return render_to_string('publishing/style.html')


def render_script(screen):
    if not should_show_button(screen):
        return None
    return render_to_string('publishing/script.html')


def publish_on_save(directive, request):
    """Forces the status to publish when the button was used."""
    if not directive.id:
        return directive

    intent = get_submitted_intent(request)
    if not intent.token:
        return directive

    if not verify_nonce(intent.token, item_action(directive.id), request.user):
        logger.debug(f'Nonce check failed for post {directive.id}, keeping status {directive.status}')
        return directive

    if not intent.publish_requested:
        return directive

    logger.info(f'Publishing post {directive.id} before adding a new {directive.post_type}')
    return directive.with_status(StatusAble.PUBLISH)


def redirect_to_create_new(location, post_id, request):
    """Sends the editor to the create-new screen of the submitted post type."""
    intent = get_submitted_intent(request)
    if not verify_nonce(intent.token, item_action(post_id), request.user):
        return location

    if not intent.publish_requested:
        return location

    if not intent.item_type:
        return location

    return admin_url('create-new?' + urlencode({'type': intent.item_type}))


def register():
    editor_hooks.render_editor.register(render_button)
    editor_hooks.print_styles.register(render_style, priority=ASSET_PRIORITY)
    editor_hooks.print_footer_scripts.register(render_script, priority=ASSET_PRIORITY)
    editor_hooks.before_save.register(publish_on_save)
    editor_hooks.after_save_redirect.register(redirect_to_create_new)


def unregister():
    editor_hooks.render_editor.unregister(render_button)
    editor_hooks.print_styles.unregister(render_style)
    editor_hooks.print_footer_scripts.unregister(render_script)
    editor_hooks.before_save.unregister(publish_on_save)
    editor_hooks.after_save_redirect.unregister(redirect_to_create_new)
