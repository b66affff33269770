from django import template
from django.utils.safestring import mark_safe

from framework import hooks
from framework.screens import get_current_screen

register = template.Library()


@register.simple_tag
def print_styles(request):
    return mark_safe(''.join(hooks.print_styles.dispatch(get_current_screen(request))))


@register.simple_tag
def print_footer_scripts(request):
    return mark_safe(''.join(hooks.print_footer_scripts.dispatch(get_current_screen(request))))
