"""
documentlifecycle/tests/test_document_lifecycle.py

Walkthrough scenarios and invariants of the Document context.
Uses unittest to avoid external test dependencies.
"""

from __future__ import annotations

import unittest

from documentlifecycle.exceptions import InvalidTransitionError, PermissionDeniedError, UnknownRoleError
from documentlifecycle.logic.adapters.report_sinks import CollectingReportSink
from documentlifecycle.models.action_result import ActionOutcome, LifecycleNotice
from documentlifecycle.models.document import Document
from documentlifecycle.models.document_action import DocumentAction
from documentlifecycle.models.document_status import DocumentStatus
from documentlifecycle.models.system_role import SystemRole


class TestDocumentConstruction(unittest.TestCase):
    def test_initial_fields(self) -> None:
        sink = CollectingReportSink()
        doc = Document("Alice", reporter=sink)
        self.assertIs(doc.status, DocumentStatus.DRAFT)
        self.assertEqual(doc.content, "")
        self.assertEqual(doc.author, "Alice")
        self.assertEqual(doc.history, ())

    def test_creation_is_reported(self) -> None:
        sink = CollectingReportSink()
        Document("Alice", reporter=sink)
        self.assertEqual(len(sink.results), 1)
        self.assertIsInstance(sink.last, LifecycleNotice)
        self.assertEqual(sink.lines, ["Document created by Alice. Initial state: Draft"])

    def test_author_is_read_only(self) -> None:
        doc = Document("Alice", reporter=CollectingReportSink())
        with self.assertRaises(AttributeError):
            doc.author = "Mallory"  # type: ignore[misc]


class TestScenarios(unittest.TestCase):
    """The seven scenarios run in sequence on one document."""

    def setUp(self) -> None:
        self.sink = CollectingReportSink()
        self.doc = Document("Alice", reporter=self.sink)

    def test_full_sequence(self) -> None:
        doc = self.doc

        r = doc.set_content("draft text", SystemRole.AUTHOR, "Alice")
        self.assertTrue(r.succeeded)
        self.assertEqual(doc.content, "draft text")

        r = doc.request_review(SystemRole.AUTHOR, "Alice")
        self.assertTrue(r.succeeded)
        self.assertIs(doc.status, DocumentStatus.MODERATION)

        r = doc.set_content("x", SystemRole.AUTHOR, "Alice")
        self.assertIs(r.outcome, ActionOutcome.INVALID_TRANSITION)
        self.assertEqual(doc.content, "draft text")

        r = doc.approve(SystemRole.AUTHOR, "Bob")
        self.assertIs(r.outcome, ActionOutcome.PERMISSION_DENIED)
        self.assertIs(doc.status, DocumentStatus.MODERATION)

        r = doc.approve(SystemRole.MODERATOR, "Charlie")
        self.assertTrue(r.succeeded)
        self.assertIs(doc.status, DocumentStatus.PUBLISHED)

        r = doc.unpublish(SystemRole.ADMIN, "Dave")
        self.assertTrue(r.succeeded)
        self.assertIs(doc.status, DocumentStatus.DRAFT)

        r = doc.archive(SystemRole.ADMIN, "Dave")
        self.assertTrue(r.succeeded)
        self.assertIs(doc.status, DocumentStatus.ARCHIVED)

        for result in (
            doc.set_content("late", SystemRole.AUTHOR, "Alice"),
            doc.approve(SystemRole.MODERATOR, "Charlie"),
            doc.unpublish(SystemRole.ADMIN, "Dave"),
        ):
            self.assertFalse(result.succeeded)
        self.assertIs(doc.status, DocumentStatus.ARCHIVED)
        self.assertEqual(doc.content, "draft text")

        self.assertEqual(
            [(h.source, h.target) for h in doc.history],
            [
                (DocumentStatus.DRAFT, DocumentStatus.MODERATION),
                (DocumentStatus.MODERATION, DocumentStatus.PUBLISHED),
                (DocumentStatus.PUBLISHED, DocumentStatus.DRAFT),
                (DocumentStatus.DRAFT, DocumentStatus.ARCHIVED),
            ],
        )

    def test_every_call_is_reported_once(self) -> None:
        self.sink.clear()
        self.doc.set_content("a", SystemRole.AUTHOR, "Alice")
        self.doc.approve(SystemRole.ADMIN, "Dave")
        self.doc.request_review(SystemRole.AUTHOR, "Bob")
        self.assertEqual(len(self.sink.results), 3)
        self.assertEqual(self.sink.lines[0], "✅ Content updated.")
        self.assertEqual(self.sink.lines[1], "❌ Cannot approve from Draft state.")
        self.assertEqual(self.sink.lines[2], "❌ Only the author can request a review.")

    def test_transition_line_names_both_states(self) -> None:
        r = self.doc.request_review(SystemRole.AUTHOR, "Alice")
        self.assertEqual(r.describe(), "✅ Document submitted for review. [Draft -> Moderation]")

    def test_archiving_archive_is_informational(self) -> None:
        self.doc.archive(SystemRole.ADMIN, "Dave")
        r = self.doc.archive(SystemRole.ADMIN, "Dave")
        self.assertIs(r.outcome, ActionOutcome.REDUNDANT)
        self.assertEqual(r.log_level, "INFO")
        self.assertIs(r.raise_for_outcome(), r)
        self.assertEqual(len(self.doc.history), 1)


class TestInvariants(unittest.TestCase):
    def setUp(self) -> None:
        self.doc = Document("Alice", reporter=CollectingReportSink())

    def test_status_is_idempotent(self) -> None:
        self.doc.set_content("x" * 50, SystemRole.AUTHOR, "Alice")
        first = self.doc.get_status()
        self.assertEqual(first, self.doc.get_status())
        self.assertEqual(first, self.doc.get_status())

    def test_preview_truncates_after_30_characters(self) -> None:
        text = "My updated article on the State Pattern!"
        self.doc.set_content(text, SystemRole.AUTHOR, "Alice")
        snap = self.doc.get_status()
        self.assertEqual(snap.content_preview, text[:30] + "...")
        self.assertEqual(
            snap.describe(),
            '--- STATUS --- Document (Author: Alice): State: Draft, '
            'Content: "My updated article on the Stat..."',
        )

    def test_preview_keeps_short_content(self) -> None:
        self.doc.set_content("x" * 30, SystemRole.AUTHOR, "Alice")
        self.assertEqual(self.doc.get_status().content_preview, "x" * 30)

    def test_preview_length_can_be_overridden(self) -> None:
        doc = Document("Alice", reporter=CollectingReportSink(), preview_length=3, preview_suffix="~")
        doc.set_content("abcdef", SystemRole.AUTHOR, "Alice")
        self.assertEqual(doc.get_status().content_preview, "abc~")

    def test_negative_preview_length_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Document("Alice", reporter=CollectingReportSink(), preview_length=-1)

    def test_zero_preview_length_shows_only_suffix(self) -> None:
        doc = Document("Alice", reporter=CollectingReportSink(), preview_length=0)
        doc.set_content("abc", SystemRole.AUTHOR, "Alice")
        self.assertEqual(doc.get_status().content_preview, "...")

    def test_denied_sequence_changes_nothing(self) -> None:
        self.doc.set_content("kept", SystemRole.AUTHOR, "Alice")
        denied = [
            lambda: self.doc.set_content("x", SystemRole.AUTHOR, "Bob"),
            lambda: self.doc.set_content("x", SystemRole.ADMIN, "Alice"),
            lambda: self.doc.request_review(SystemRole.MODERATOR, "Alice"),
            lambda: self.doc.approve(SystemRole.ADMIN, "Dave"),
            lambda: self.doc.reject(SystemRole.ADMIN, "Dave"),
            lambda: self.doc.unpublish(SystemRole.ADMIN, "Dave"),
            lambda: self.doc.archive(SystemRole.MODERATOR, "Charlie"),
        ]
        for call in denied * 3:
            self.assertFalse(call().succeeded)
        self.assertIs(self.doc.status, DocumentStatus.DRAFT)
        self.assertEqual(self.doc.content, "kept")
        self.assertEqual(self.doc.history, ())

    def test_roles_accept_strings(self) -> None:
        r = self.doc.set_content("text", "author", "Alice")
        self.assertTrue(r.succeeded)
        self.assertIs(r.actor.role, SystemRole.AUTHOR)

    def test_unknown_role_is_a_programmer_error(self) -> None:
        with self.assertRaises(UnknownRoleError):
            self.doc.approve("Janitor", "Eve")
        self.assertIs(self.doc.status, DocumentStatus.DRAFT)

    def test_raise_for_outcome(self) -> None:
        with self.assertRaises(InvalidTransitionError):
            self.doc.approve(SystemRole.MODERATOR, "Charlie").raise_for_outcome()
        with self.assertRaises(PermissionDeniedError):
            self.doc.request_review(SystemRole.AUTHOR, "Bob").raise_for_outcome()

    def test_available_actions(self) -> None:
        self.assertEqual(
            self.doc.available_actions(SystemRole.AUTHOR, "Alice"),
            [DocumentAction.SET_CONTENT, DocumentAction.REQUEST_REVIEW],
        )
        self.assertEqual(self.doc.available_actions(SystemRole.ADMIN, "Dave"), [DocumentAction.ARCHIVE])
        self.assertEqual(self.doc.available_actions(SystemRole.AUTHOR, "Bob"), [])


if __name__ == "__main__":
    unittest.main()
