from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from .actor import Actor
from .document_action import DocumentAction
from .document_status import DocumentStatus


@dataclass(frozen=True, slots=True)
class TransitionRecord:
    """One successful state change, kept in the document's in-memory history."""
    action: DocumentAction
    actor: Actor
    source: DocumentStatus
    target: DocumentStatus
    occurred_at: datetime  # UTC

    def describe(self) -> str:
        return f"{self.source.value} -> {self.target.value} ({self.action.value} by {self.actor})"
