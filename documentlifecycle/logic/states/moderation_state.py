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


class ModerationState(DocumentState):
    """Under review: content is frozen, moderators decide."""

    status = DocumentStatus.MODERATION

    def permits(self, action: DocumentAction, document: "Document", actor: Actor) -> bool:
        if action is DocumentAction.APPROVE:
            return has_role(actor, SystemRole.MODERATOR, SystemRole.ADMIN)
        if action in (DocumentAction.REJECT, DocumentAction.ARCHIVE):
            return has_role(actor, SystemRole.ADMIN)
        return False

    def set_content(self, document: "Document", text: str, actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.SET_CONTENT, actor, "Cannot set content in Moderation state.")

    def request_review(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.REQUEST_REVIEW, actor, "Cannot request review in Moderation state.")

    def approve(self, document: "Document", actor: Actor) -> ActionResult:
        action = DocumentAction.APPROVE
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only moderators or admins can approve.")
        return self._succeed(document, action, actor, "Document approved.", target=DocumentStatus.PUBLISHED)

    def reject(self, document: "Document", actor: Actor) -> ActionResult:
        action = DocumentAction.REJECT
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only admins can reject.")
        return self._succeed(document, action, actor, "Document rejected.", target=DocumentStatus.DRAFT)

    def unpublish(self, document: "Document", actor: Actor) -> ActionResult:
        return self._invalid(DocumentAction.UNPUBLISH, actor, "Cannot unpublish from Moderation state.")

    def archive(self, document: "Document", actor: Actor) -> ActionResult:
        action = DocumentAction.ARCHIVE
        if not self.permits(action, document, actor):
            return self._deny(action, actor, "Only admins can archive.")
        return self._succeed(document, action, actor, "Document archived.", target=DocumentStatus.ARCHIVED)
