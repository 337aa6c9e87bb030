"""Canonical action identifiers of the document lifecycle.

Reports, log events and policies use these ids instead of hardcoded strings.
"""
from __future__ import annotations

from enum import Enum


class DocumentAction(str, Enum):
    """The six actions every lifecycle state must answer."""

    SET_CONTENT = "set_content"
    REQUEST_REVIEW = "request_review"
    APPROVE = "approve"
    REJECT = "reject"
    UNPUBLISH = "unpublish"
    ARCHIVE = "archive"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")
