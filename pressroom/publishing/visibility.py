from framework.behaviours import StatusAble
from framework.screens import ScreenMode

from . import hooks

BUTTON_STATUSES = (StatusAble.AUTO_DRAFT, StatusAble.DRAFT)


def button_visible_for(status):
    return status in BUTTON_STATUSES


def default_should_show(screen):
    return screen.mode == ScreenMode.CREATE_NEW


def should_show_button(screen):
    """Whether the button assets are printed on this screen. Filterable."""
    return hooks.should_show_button.apply(default_should_show(screen), screen)
