from .archived_state import ArchivedState
from .base_state import DocumentState
from .draft_state import DraftState
from .moderation_state import ModerationState
from .published_state import PublishedState
from .registry import STATE_TYPES, state_for

__all__ = [
    "DocumentState",
    "DraftState",
    "ModerationState",
    "PublishedState",
    "ArchivedState",
    "STATE_TYPES",
    "state_for",
]
