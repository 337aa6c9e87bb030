"""
===============================================================================
Report sinks – where lifecycle outcome reports go
-------------------------------------------------------------------------------
The document hands every ActionResult (and its creation notice) to one
injected IReportSink. Sinks decide how a report is displayed or stored:

    LoggerReportSink      central feature logger (default)
    CallbackReportSink    any ``Callable[[str], None]`` such as ``print``
    CollectingReportSink  keeps results in memory
    CompositeReportSink   fan-out to several sinks
===============================================================================
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Union

from core.config.config_service import config_service
from core.contracts.reporting import IReportSink
from core.qm_logging.logic.logger import Logger, get_logger
from documentlifecycle.models.action_result import ActionOutcome, ActionResult, LifecycleNotice

_std_logger = logging.getLogger(__name__)

Report = Union[ActionResult, LifecycleNotice]


class LoggerReportSink(IReportSink):
    """Forward reports to the central Logger (event = action id)."""

    def __init__(self, logger: Optional[Logger] = None, *, feature: Optional[str] = None) -> None:
        self._logger = logger
        self._feature = feature or config_service.logging.feature

    @property
    def logger(self) -> Logger:
        if self._logger is None:
            self._logger = get_logger()
        return self._logger

    def emit(self, result: Report) -> None:
        if isinstance(result, LifecycleNotice):
            event, username, status = result.event, result.author, result.status
        else:
            event, username, status = result.action.value, result.actor.name, result.status_after
        self.logger.log(
            self._feature,
            event,
            username=username,
            level=result.log_level,
            reference_id=status.value,
            message=result.describe(),
        )


class CallbackReportSink(IReportSink):
    """Pass the formatted report line to a callback."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def emit(self, result: Report) -> None:
        self._callback(result.describe())


class CollectingReportSink(IReportSink):
    """Keep every report in memory, in arrival order."""

    def __init__(self) -> None:
        self.results: List[Report] = []

    def emit(self, result: Report) -> None:
        self.results.append(result)

    @property
    def lines(self) -> List[str]:
        return [r.describe() for r in self.results]

    @property
    def last(self) -> Optional[Report]:
        return self.results[-1] if self.results else None

    def with_outcome(self, outcome: ActionOutcome) -> List[ActionResult]:
        return [r for r in self.results if isinstance(r, ActionResult) and r.outcome is outcome]

    def clear(self) -> None:
        self.results.clear()


class CompositeReportSink(IReportSink):
    """
    Deliver each report to all wrapped sinks.

    A failing sink does not stop the others; the action it reports on has
    already been applied. The failure is recorded in the central Logger.
    """

    def __init__(self, sinks: Iterable[IReportSink], *, logger: Optional[Logger] = None) -> None:
        self._sinks = list(sinks)
        self._logger = logger

    def emit(self, result: Report) -> None:
        for sink in self._sinks:
            try:
                sink.emit(result)
            except Exception as exc:
                _std_logger.exception("Report sink %r failed", sink)
                (self._logger or get_logger()).log(
                    config_service.logging.feature,
                    "report_sink_failed",
                    level="ERROR",
                    message=f"{type(sink).__name__}: {exc}",
                )
