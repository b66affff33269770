from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SaveDirective:
    """Values about to be written for a post. Filters return modified copies."""

    id: Optional[int]
    post_type: str
    status: str
    title: str = ''

    @classmethod
    def from_instance(cls, obj):
        return cls(id=obj.pk, post_type=obj.post_type, status=obj.status, title=obj.title)

    def apply_to(self, obj):
        obj.post_type = self.post_type
        obj.status = self.status
        obj.title = self.title
        return obj

    def with_status(self, status):
        return replace(self, status=status)
