"""
===============================================================================
ActionResult – outcome of one lifecycle action
-------------------------------------------------------------------------------
Every action call on a document yields exactly one result, whether it
succeeded or not. The result is what gets reported to the injected sink and
returned to the caller.

Outcome taxonomy:
    SUCCESS             guard satisfied, side effect applied
    PERMISSION_DENIED   action valid for the state, but role/identity fails
    INVALID_TRANSITION  action not defined for the current state at all
    REDUNDANT           action would be a no-op (e.g. archiving an archive)

None of the non-success outcomes changes the document.
===============================================================================
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from documentlifecycle.exceptions.errors import InvalidTransitionError, PermissionDeniedError
from .actor import Actor
from .document_action import DocumentAction
from .document_status import DocumentStatus


class ActionOutcome(str, Enum):
    SUCCESS = "success"
    PERMISSION_DENIED = "permission_denied"
    INVALID_TRANSITION = "invalid_transition"
    REDUNDANT = "redundant"


_MARKS = {
    ActionOutcome.SUCCESS: "✅",
    ActionOutcome.PERMISSION_DENIED: "❌",
    ActionOutcome.INVALID_TRANSITION: "❌",
    ActionOutcome.REDUNDANT: "ℹ️",
}


@dataclass(frozen=True, slots=True)
class ActionResult:
    action: DocumentAction
    outcome: ActionOutcome
    actor: Actor
    status_before: DocumentStatus
    status_after: DocumentStatus
    message: str

    @property
    def succeeded(self) -> bool:
        return self.outcome is ActionOutcome.SUCCESS

    @property
    def changed_state(self) -> bool:
        return self.status_before is not self.status_after

    @property
    def log_level(self) -> str:
        if self.outcome in (ActionOutcome.SUCCESS, ActionOutcome.REDUNDANT):
            return "INFO"
        return "WARNING"

    def describe(self) -> str:
        """One human-readable report line."""
        line = f"{_MARKS[self.outcome]} {self.message}"
        if self.changed_state:
            line += f" [{self.status_before.value} -> {self.status_after.value}]"
        return line

    def raise_for_outcome(self) -> "ActionResult":
        """
        Raise for denials, return ``self`` otherwise.

        For hosts that want exceptions; the document itself never raises.
        Redundant actions are informational and do not raise.
        """
        if self.outcome is ActionOutcome.PERMISSION_DENIED:
            raise PermissionDeniedError(self.message)
        if self.outcome is ActionOutcome.INVALID_TRANSITION:
            raise InvalidTransitionError(self.message)
        return self

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class LifecycleNotice:
    """Informational report that is not the answer to an action (e.g. creation)."""
    event: str
    author: str
    status: DocumentStatus
    message: str
    log_level: str = "INFO"

    def describe(self) -> str:
        return self.message

    def __str__(self) -> str:
        return self.describe()
