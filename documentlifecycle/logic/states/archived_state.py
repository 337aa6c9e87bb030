from __future__ import annotations

from typing import TYPE_CHECKING

from documentlifecycle.models.action_result import ActionResult
from documentlifecycle.models.actor import Actor
from documentlifecycle.models.document_action import DocumentAction
from documentlifecycle.models.document_status import DocumentStatus
from .base_state import DocumentState

if TYPE_CHECKING:
    from documentlifecycle.models.document import Document


class ArchivedState(DocumentState):
    """No outgoing transitions; every action is refused."""

    status = DocumentStatus.ARCHIVED

    def permits(self, action: DocumentAction, document: "Document", actor: Actor) -> bool:
        return False

    def set_content(self, document: "Document", text: str, actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.SET_CONTENT, actor, "Cannot set content in Archived state.")

    def request_review(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.REQUEST_REVIEW, actor, "Cannot request review in Archived state.")

    def approve(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.APPROVE, actor, "Cannot approve in Archived state.")

    def reject(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.REJECT, actor, "Cannot reject in Archived state.")

    def unpublish(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.UNPUBLISH, actor, "Cannot unpublish from Archived state.")

    def archive(self, document: "Document", actor: Actor) -> ActionResult:
        # no-op regardless of role
        return self._redundant(DocumentAction.ARCHIVE, actor, "Document is already archived.")
