"""
main.py

Console walkthrough of the document lifecycle.

Reports are printed to stdout and recorded by the central feature logger.
At the end the logger's entries and the document's transition history are
listed.
"""
import logging

from core.config.config_service import config_service
from core.qm_logging.logic.logger import get_logger
from documentlifecycle.logic.adapters.report_sinks import (
    CallbackReportSink,
    CompositeReportSink,
    LoggerReportSink,
)
from documentlifecycle.logic.policy.workflow_policy import WorkflowPolicy
from documentlifecycle.models.actor import Actor
from documentlifecycle.models.document import Document
from documentlifecycle.models.system_role import SystemRole

ALICE = "Alice"      # author of the document
BOB = "Bob"          # another author
CHARLIE = "Charlie"  # moderator
DAVE = "Dave"        # admin


def print_status(doc: Document) -> None:
    print(doc.get_status().describe())


def run() -> Document:
    logger = get_logger()
    reporter = CompositeReportSink([CallbackReportSink(print), LoggerReportSink(logger)])
    policy = WorkflowPolicy()

    doc = Document(ALICE, reporter=reporter)
    print_status(doc)

    doc.set_content("My updated article on the State Pattern!", SystemRole.AUTHOR, ALICE)
    print_status(doc)

    doc.request_review(SystemRole.AUTHOR, ALICE)
    print_status(doc)

    # Alice edits while under moderation -> refused
    doc.set_content("A quick edit while under review.", SystemRole.AUTHOR, ALICE)
    print_status(doc)

    # Bob is an author, not a moderator
    doc.approve(SystemRole.AUTHOR, BOB)
    print_status(doc)

    doc.approve(SystemRole.MODERATOR, CHARLIE)
    print_status(doc)

    doc.unpublish(SystemRole.AUTHOR, ALICE)
    print_status(doc)

    doc.unpublish(SystemRole.ADMIN, DAVE)
    print_status(doc)

    doc.request_review(SystemRole.AUTHOR, ALICE)
    print_status(doc)

    doc.reject(SystemRole.ADMIN, DAVE)
    print_status(doc)

    nxt = policy.next_action(doc, Actor(SystemRole.AUTHOR, ALICE))
    print(f"Next step for {ALICE}: {nxt.label if nxt else '-'}")

    doc.archive(SystemRole.ADMIN, DAVE)
    print_status(doc)

    doc.set_content("Trying to edit archived doc.", SystemRole.AUTHOR, ALICE)
    doc.approve(SystemRole.MODERATOR, CHARLIE)
    doc.unpublish(SystemRole.ADMIN, DAVE)
    doc.archive(SystemRole.ADMIN, DAVE)
    print_status(doc)

    print("\n--- HISTORY ---")
    for record in doc.history:
        print(record.describe())

    print(f"\n--- LOG ({config_service.logging.feature}) ---")
    for entry in reversed(logger.fetch_logs(limit=50)):
        row = entry.as_dict()
        print(f"{row['timestamp']} [{row['log_level']}] {row['event']} ({row['username']}): {row['message']}")
    return doc


if __name__ == "__main__":
    logging.basicConfig(level=config_service.logging.level)
    run()
