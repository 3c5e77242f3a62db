"""Request coordinator — owns the single in-flight report request."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from sentireport.analysis_client import AnalysisServiceError
from sentireport.models import Report
from sentireport.state import (
    Event,
    Idle,
    Pending,
    Rejected,
    RequestState,
    Resolved,
    Submitted,
    reduce,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[RequestState], None]


class ReportService(Protocol):
    def generate_report(self, statement: str) -> Report:
        ...


class RequestCoordinator:
    """Serialise report submissions and track their outcome.

    The coordinator is the only writer of the request state. At most one
    request is outstanding: :meth:`submit` is ignored while one is pending.
    Service and transport errors never escape; they end up in a ``Failed``
    state carrying the message.
    """

    def __init__(self, service: ReportService) -> None:
        self._service = service
        self._state: RequestState = Idle()
        self._listeners: list[StateListener] = []

    # ── public ──────────────────────────────────────────────────────────
    def current_state(self) -> RequestState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call *listener* with every new state; returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def submit(self, statement: str) -> None:
        """Request a report for *statement* unless one is already in flight."""
        if isinstance(self._state, Pending):
            logger.warning("Submission ignored: a report request is already pending.")
            return

        self._dispatch(Submitted(statement=statement))
        logger.info("Requesting sentiment report (%d chars)", len(statement))

        try:
            report = await asyncio.to_thread(self._service.generate_report, statement)
        except AnalysisServiceError as exc:
            logger.warning("Sentiment report request failed: %s", exc)
            self._dispatch(Rejected(message=f"Failed to generate sentiment report: {exc}"))
            return
        except Exception as exc:
            logger.exception("Unexpected error generating sentiment report")
            self._dispatch(Rejected(message=f"Failed to generate sentiment report: {exc}"))
            return

        self._dispatch(Resolved(report=report))
        logger.info("Sentiment report ready: %d segments", len(report.items))

    # ── private ─────────────────────────────────────────────────────────
    def _dispatch(self, event: Event) -> None:
        self._state = reduce(self._state, event)
        logger.debug("Request state -> %s", self._state.status)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener %r failed", listener)
