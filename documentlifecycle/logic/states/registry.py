from __future__ import annotations

from typing import Dict, Type, Union

from documentlifecycle.models.document_status import DocumentStatus
from .archived_state import ArchivedState
from .base_state import DocumentState
from .draft_state import DraftState
from .moderation_state import ModerationState
from .published_state import PublishedState

STATE_TYPES: Dict[DocumentStatus, Type[DocumentState]] = {
    DocumentStatus.DRAFT: DraftState,
    DocumentStatus.MODERATION: ModerationState,
    DocumentStatus.PUBLISHED: PublishedState,
    DocumentStatus.ARCHIVED: ArchivedState,
}


def state_for(status: Union[DocumentStatus, str]) -> DocumentState:
    """Return a fresh handler for ``status`` (member or its value)."""
    return STATE_TYPES[DocumentStatus(status)]()
