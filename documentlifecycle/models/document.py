"""
===============================================================================
Document – context of the lifecycle state machine
-------------------------------------------------------------------------------
Holds the persistent fields (author, content) and exactly one active state
handler. Every action is delegated to that handler; the document itself never
decides whether an action is allowed.

Notes:
    - 'author'   opaque identity, fixed at creation
    - 'state'    replaced wholesale by transition_to(), never mutated
    - reports    every action result goes to the injected IReportSink;
                 rule violations are reported, not raised
    - sinks      reports are emitted after the state change; a raising sink
                 propagates to the caller unless wrapped in CompositeReportSink
===============================================================================
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from core.config.config_service import config_service
from core.contracts.reporting import IReportSink
from core.helpers.date_time_helper import utc_now
from documentlifecycle.logic.adapters.report_sinks import LoggerReportSink
from documentlifecycle.logic.states.registry import state_for
from .action_result import ActionResult, LifecycleNotice
from .actor import Actor
from .document_action import DocumentAction
from .document_status import DocumentStatus
from .dto.document_status_dto import DocumentStatusSnapshot
from .system_role import SystemRole
from .transition_record import TransitionRecord

if TYPE_CHECKING:
    from documentlifecycle.logic.states.base_state import DocumentState

RoleLike = Union[SystemRole, str]


class Document:
    """A document whose permitted actions depend on its lifecycle state."""

    def __init__(
        self,
        author: str,
        *,
        reporter: Optional[IReportSink] = None,
        preview_length: Optional[int] = None,
        preview_suffix: Optional[str] = None,
    ) -> None:
        self._author = author
        self._content = ""
        self._state: "DocumentState" = state_for(DocumentStatus.DRAFT)
        self._history: List[TransitionRecord] = []
        self._reporter = reporter if reporter is not None else LoggerReportSink()

        cfg = config_service.lifecycle
        self._preview_length = cfg.preview_length if preview_length is None else preview_length
        self._preview_suffix = cfg.preview_suffix if preview_suffix is None else preview_suffix
        if self._preview_length < 0:
            raise ValueError(f"preview_length must not be negative: {self._preview_length}")

        self._reporter.emit(
            LifecycleNotice(
                event="created",
                author=author,
                status=self.status,
                message=f"Document created by {author}. Initial state: {self.status.value}",
            )
        )

    # -------- Read-only fields --------------------------------------------- #
    @property
    def author(self) -> str:
        return self._author

    @property
    def content(self) -> str:
        return self._content

    @property
    def state(self) -> "DocumentState":
        return self._state

    @property
    def status(self) -> DocumentStatus:
        return self._state.status

    @property
    def history(self) -> Tuple[TransitionRecord, ...]:
        return tuple(self._history)

    @property
    def reporter(self) -> IReportSink:
        return self._reporter

    # -------- Actions (delegated) ------------------------------------------ #
    def set_content(self, text: str, role: RoleLike, name: str) -> ActionResult:
        return self._report(self._state.set_content(self, text, Actor.of(role, name)))

    def request_review(self, role: RoleLike, name: str) -> ActionResult:
        return self._report(self._state.request_review(self, Actor.of(role, name)))

    def approve(self, role: RoleLike, name: str) -> ActionResult:
        return self._report(self._state.approve(self, Actor.of(role, name)))

    def reject(self, role: RoleLike, name: str) -> ActionResult:
        return self._report(self._state.reject(self, Actor.of(role, name)))

    def unpublish(self, role: RoleLike, name: str) -> ActionResult:
        return self._report(self._state.unpublish(self, Actor.of(role, name)))

    def archive(self, role: RoleLike, name: str) -> ActionResult:
        return self._report(self._state.archive(self, Actor.of(role, name)))

    def perform(self, action: Union[DocumentAction, str], role: RoleLike, name: str,
                text: str = "") -> ActionResult:
        """Dispatch by action id; ``text`` is only used by set_content."""
        action = DocumentAction(action)
        if action is DocumentAction.SET_CONTENT:
            return self.set_content(text, role, name)
        return getattr(self, action.value)(role, name)

    # -------- State hooks (called by state handlers only) ------------------ #
    def transition_to(
        self,
        new_state: "DocumentState",
        *,
        action: Optional[DocumentAction] = None,
        actor: Optional[Actor] = None,
    ) -> None:
        """Replace the current state unconditionally."""
        source = self._state.status
        self._state = new_state
        if action is not None and actor is not None:
            self._history.append(
                TransitionRecord(
                    action=action,
                    actor=actor,
                    source=source,
                    target=new_state.status,
                    occurred_at=utc_now(),
                )
            )

    def _store_content(self, text: str) -> None:
        self._content = text

    # -------- Queries ------------------------------------------------------ #
    def get_status(self) -> DocumentStatusSnapshot:
        content = self._content
        if len(content) > self._preview_length:
            content = content[: self._preview_length] + self._preview_suffix
        return DocumentStatusSnapshot(status=self.status, author=self._author, content_preview=content)

    def available_actions(self, role: RoleLike, name: str) -> List[DocumentAction]:
        """Actions that would succeed right now for this actor (no side effects)."""
        actor = Actor.of(role, name)
        return [a for a in DocumentAction if self._state.permits(a, self, actor)]

    # -------- Internals ---------------------------------------------------- #
    def _report(self, result: ActionResult) -> ActionResult:
        self._reporter.emit(result)
        return result

    def __repr__(self) -> str:
        return f"Document(author={self._author!r}, status={self.status.value})"
