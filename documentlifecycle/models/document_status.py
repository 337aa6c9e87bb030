from __future__ import annotations
from enum import Enum

class DocumentStatus(str, Enum):
    """Lifecycle status of a document; exactly one is active at a time."""
    DRAFT = "Draft"
    MODERATION = "Moderation"
    PUBLISHED = "Published"
    ARCHIVED = "Archived"

    def __str__(self) -> str:
        return self.value
