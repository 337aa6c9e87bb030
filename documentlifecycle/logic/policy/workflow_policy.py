"""
===============================================================================
Workflow Policy – what can happen to a document next
-------------------------------------------------------------------------------
Purpose:
    Answer host questions such as "which actions may this actor run now?"
    and "what is the forward step for this actor?". All computations are pure
    and ask the current state handler via ``permits``; nothing is executed.

Decisions implemented:
    - Forward order: DRAFT -> MODERATION -> PUBLISHED
    - DRAFT expects the owning author, MODERATION a moderator; PUBLISHED and
      ARCHIVED have no pending human step.
    - Backward moves (reject, unpublish) and archive are never suggested as
      the next action; they are listed by available_actions only.

Integration:
    - Consumed by the console walkthrough and by hosts building menus.
===============================================================================
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from documentlifecycle.models.actor import Actor
from documentlifecycle.models.document import Document
from documentlifecycle.models.document_action import DocumentAction
from documentlifecycle.models.document_status import DocumentStatus
from documentlifecycle.models.system_role import SystemRole

_FORWARD_ACTIONS = (DocumentAction.SET_CONTENT, DocumentAction.REQUEST_REVIEW, DocumentAction.APPROVE)


@dataclass(slots=True)
class WorkflowPhase:
    """
    Derived runtime phase from the document's status.

    Fields
    ------
    active : bool
        True if the document waits for a human decision (moderation).
    required_role : Optional[SystemRole]
        The role expected to act in the current phase, if any.
    """
    active: bool
    required_role: SystemRole | None


class WorkflowPolicy:
    """Compute phase and action availability for a document."""

    # -------- Phase detection --------------------------------------------- #
    def derive_phase(self, doc: Document) -> WorkflowPhase:
        """
        DRAFT      -> inactive phase, expected role = AUTHOR
        MODERATION -> active phase, expected role = MODERATOR
        others     -> inactive (PUBLISHED/ARCHIVED)
        """
        if doc.status == DocumentStatus.DRAFT:
            return WorkflowPhase(active=False, required_role=SystemRole.AUTHOR)
        if doc.status == DocumentStatus.MODERATION:
            return WorkflowPhase(active=True, required_role=SystemRole.MODERATOR)
        return WorkflowPhase(active=False, required_role=None)

    # -------- Availability ------------------------------------------------- #
    def available_actions(self, doc: Document, actor: Actor) -> List[DocumentAction]:
        return doc.available_actions(actor.role, actor.name)

    def can_perform(self, doc: Document, actor: Actor, action: DocumentAction) -> bool:
        return doc.state.permits(DocumentAction(action), doc, actor)

    def next_action(self, doc: Document, actor: Actor) -> Optional[DocumentAction]:
        """
        Suggest the forward step for ``actor``.

        In Draft the author is pointed to review only once there is content;
        editing remains available through available_actions.
        """
        allowed = set(self.available_actions(doc, actor))
        if DocumentAction.REQUEST_REVIEW in allowed and doc.content:
            return DocumentAction.REQUEST_REVIEW
        for action in _FORWARD_ACTIONS:
            if action in allowed:
                return action
        return None

    def is_terminal(self, doc: Document) -> bool:
        """True if no actor can move the document anywhere."""
        return not any(
            doc.state.permits(action, doc, Actor(role=role, name=doc.author))
            for action in DocumentAction
            for role in SystemRole
        )
