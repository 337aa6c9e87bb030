from __future__ import annotations

from typing import TYPE_CHECKING

from documentlifecycle.logic.policy.permission_policy import has_role
from documentlifecycle.models.action_result import ActionResult
from documentlifecycle.models.actor import Actor
from documentlifecycle.models.document_action import DocumentAction
from documentlifecycle.models.document_status import DocumentStatus
from documentlifecycle.models.system_role import SystemRole
from .base_state import DocumentState

if TYPE_CHECKING:
    from documentlifecycle.models.document import Document


class PublishedState(DocumentState):
    """Live document: only an admin can take it back or archive it."""

    status = DocumentStatus.PUBLISHED

    def permits(self, action: DocumentAction, document: "Document", actor: Actor) -> bool:
        if action in (DocumentAction.UNPUBLISH, DocumentAction.ARCHIVE):
            return has_role(actor, SystemRole.ADMIN)
        return False

    def set_content(self, document: "Document", text: str, actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.SET_CONTENT, actor, "Cannot set content in Published state.")

    def request_review(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.REQUEST_REVIEW, actor, "Cannot request review in Published state.")

    def approve(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.APPROVE, actor, "Cannot approve in Published state.")

    def reject(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.REJECT, actor, "Cannot reject in Published state.")

    def unpublish(self, document: "Document", actor: Actor) -> ActionResult:
        action = DocumentAction.UNPUBLISH
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only admins can unpublish.")
        return self._succeed(document, action, actor, "Document unpublished.", target=DocumentStatus.DRAFT)

    def archive(self, document: "Document", actor: Actor) -> ActionResult:
        action = DocumentAction.ARCHIVE
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only admins can archive.")
        return self._succeed(document, action, actor, "Document archived.", target=DocumentStatus.ARCHIVED)
