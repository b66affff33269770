from dataclasses import dataclass
from enum import Enum


class ScreenMode(Enum):
    EDIT_EXISTING = 'edit-existing'
    CREATE_NEW = 'create-new'
    OTHER = 'other'


@dataclass(frozen=True)
class Screen:
    mode: ScreenMode = ScreenMode.OTHER
    post_type: str = ''


def get_current_screen(request):
    return getattr(request, 'screen', None) or Screen()
