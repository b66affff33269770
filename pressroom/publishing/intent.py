from dataclasses import dataclass
from typing import Optional

from django.utils.html import strip_tags

INTENT_FIELD = 'publish_and_add_new'
ID_FIELD = 'post_ID'
TYPE_FIELD = 'post_type'
NONCE_FIELD = '_nonce'


def sanitize_text_field(value):
    """Strips tags and collapses whitespace of an untrusted form value."""
    return ' '.join(strip_tags(value or '').split())


def _parse_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class SubmittedIntent:
    """What the editor asked for with the submitted form, parsed once per request."""

    publish_requested: bool = False
    item_id: Optional[int] = None
    item_type: str = ''
    token: str = ''

    @classmethod
    def from_request(cls, request):
        if request.method != 'POST':
            return cls()

        data = request.POST
        return cls(
            publish_requested=bool(data.get(INTENT_FIELD)),
            item_id=_parse_id(data.get(ID_FIELD)),
            item_type=sanitize_text_field(data.get(TYPE_FIELD)),
            token=sanitize_text_field(data.get(NONCE_FIELD)),
        )


def get_submitted_intent(request):
    if not hasattr(request, 'submitted_intent'):
        request.submitted_intent = SubmittedIntent.from_request(request)
    return request.submitted_intent
