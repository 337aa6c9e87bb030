from __future__ import annotations

from typing import TYPE_CHECKING

from documentlifecycle.logic.policy.permission_policy import has_role, is_owner
from documentlifecycle.models.action_result import ActionResult
from documentlifecycle.models.actor import Actor
from documentlifecycle.models.document_action import DocumentAction
from documentlifecycle.models.document_status import DocumentStatus
from documentlifecycle.models.system_role import SystemRole
from .base_state import DocumentState

if TYPE_CHECKING:
    from documentlifecycle.models.document import Document


class DraftState(DocumentState):
    """Authoring phase: only the owning author edits and submits."""

    status = DocumentStatus.DRAFT

    def permits(self, action: DocumentAction, document: "Document", actor: Actor) -> bool:
        if action in (DocumentAction.SET_CONTENT, DocumentAction.REQUEST_REVIEW):
            return is_owner(actor, document)
        if action is DocumentAction.ARCHIVE:
            return has_role(actor, SystemRole.ADMIN)
        return False

    def set_content(self, document: "Document", text: str, actor: Actor) -> ActionResult:
        action = DocumentAction.SET_CONTENT
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only the original author can edit content in Draft state.")
        document._store_content(text)
        return self._succeed(document, action, actor, "Content updated.")

    def request_review(self, document: "Document", actor: Actor) -> ActionResult:
        action = DocumentAction.REQUEST_REVIEW
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only the author can request a review.")
        return self._succeed(
            document, action, actor, "Document submitted for review.", target=DocumentStatus.MODERATION
        )

    def approve(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.APPROVE, actor, "Cannot approve from Draft state.")

    def reject(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.REJECT, actor, "Cannot reject from Draft state.")

    def unpublish(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.UNPUBLISH, actor, "Cannot unpublish from Draft state.")

    def archive(self, document: "Document", actor: Actor) -> ActionResult:
        action = DocumentAction.ARCHIVE
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only admins can archive.")
        return self._succeed(document, action, actor, "Document archived.", target=DocumentStatus.ARCHIVED)
