"""core/contracts/reporting.py
==========================

Report channel contract.

Features that produce user-facing outcome messages (e.g. the document
lifecycle) hand them to an injected sink. The producer never decides how or
where a report is displayed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IReportSink(ABC):
    """Receives one report per handled action."""

    @abstractmethod
    def emit(self, result: Any) -> None:
        """Deliver a report. ``result`` must provide ``describe() -> str``."""
