"""
===============================================================================
DocumentState – common interface of all lifecycle state handlers
-------------------------------------------------------------------------------
A state handler is a stateless behavior object. It receives the document per
call, decides whether the action is meaningful in this state and whether the
actor passes the guard, applies the side effect and, if needed, asks the
document to switch to a fresh handler.

Every concrete state implements all six actions. Actions that make no sense
in a state are explicit denials, so delegation from the document is total.
===============================================================================
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from documentlifecycle.models.action_result import ActionOutcome, ActionResult
from documentlifecycle.models.actor import Actor
from documentlifecycle.models.document_action import DocumentAction
from documentlifecycle.models.document_status import DocumentStatus

if TYPE_CHECKING:
    from documentlifecycle.models.document import Document


class DocumentState(ABC):
    """Behavior of a document while it is in one lifecycle status."""

    status: ClassVar[DocumentStatus]

    @property
    def name(self) -> str:
        return self.status.value

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # -------- Guards ------------------------------------------------------- #
    @abstractmethod
    def permits(self, action: DocumentAction, document: "Document", actor: Actor) -> bool:
        """Return True if ``action`` by ``actor`` would succeed right now."""

    # -------- Actions ------------------------------------------------------ #
    @abstractmethod
    def set_content(self, document: "Document", text: str, actor: Actor) -> ActionResult: ...

    @abstractmethod
    def request_review(self, document: "Document", actor: Actor) -> ActionResult: ...

    @abstractmethod
    def approve(self, document: "Document", actor: Actor) -> ActionResult: ...

    @abstractmethod
    def reject(self, document: "Document", actor: Actor) -> ActionResult: ...

    @abstractmethod
    def unpublish(self, document: "Document", actor: Actor) -> ActionResult: ...

    @abstractmethod
    def archive(self, document: "Document", actor: Actor) -> ActionResult: ...

    # -------- Result helpers ----------------------------------------------- #
    def _succeed(
        self,
        document: "Document",
        action: DocumentAction,
        actor: Actor,
        message: str,
        *,
        target: DocumentStatus | None = None,
    ) -> ActionResult:
        if target is not None:
            from .registry import state_for

            document.transition_to(state_for(target), action=action, actor=actor)
        return ActionResult(
            action=action,
            outcome=ActionOutcome.SUCCESS,
            actor=actor,
            status_before=self.status,
            status_after=document.status,
            message=message,
        )

    def _deny(self, action: DocumentAction, actor: Actor, message: str) -> ActionResult:
        return self._unchanged(action, actor, ActionOutcome.PERMISSION_DENIED, message)

    def _invalid(self, action: DocumentAction, actor: Actor, message: str) -> ActionResult:
        return self._unchanged(action, actor, ActionOutcome.INVALID_TRANSITION, message)

    def _redundant(self, action: DocumentAction, actor: Actor, message: str) -> ActionResult:
        return self._unchanged(action, actor, ActionOutcome.REDUNDANT, message)

    def _unchanged(
        self, action: DocumentAction, actor: Actor, outcome: ActionOutcome, message: str
    ) -> ActionResult:
        return ActionResult(
            action=action,
            outcome=outcome,
            actor=actor,
            status_before=self.status,
            status_after=self.status,
            message=message,
        )
