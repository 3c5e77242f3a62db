"""Renderer-facing session: filter state plus the derived report view."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from sentireport.aggregate import chart_series, count_by_sentiment, filter_items
from sentireport.coordinator import RequestCoordinator
from sentireport.models import (
    ChartSeries,
    Report,
    SentimentCounts,
    SentimentFilter,
    SentimentItem,
)
from sentireport.state import Failed, Pending, RequestState, last_good_report

logger = logging.getLogger(__name__)


class ReportView(BaseModel):
    """Everything a renderer needs for one frame, derived on demand."""

    model_config = ConfigDict(frozen=True)

    state: RequestState
    filter: SentimentFilter
    report: Report | None = None
    counts: SentimentCounts
    items: tuple[SentimentItem, ...] = ()
    chart: ChartSeries

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Pending)

    @property
    def error(self) -> str | None:
        return self.state.message if isinstance(self.state, Failed) else None

    @property
    def has_report(self) -> bool:
        return self.report is not None


def build_view(state: RequestState, sentiment_filter: SentimentFilter) -> ReportView:
    """Derive the view for *state* under *sentiment_filter*.

    Counts always cover the whole report; only ``items`` is filtered.
    """
    report = last_good_report(state)
    all_items = report.items if report is not None else ()
    counts = count_by_sentiment(all_items)
    return ReportView(
        state=state,
        filter=sentiment_filter,
        report=report,
        counts=counts,
        items=filter_items(all_items, sentiment_filter),
        chart=chart_series(counts),
    )


class ReportSession:
    """Pairs a :class:`RequestCoordinator` with the active sentiment filter.

    The filter survives new submissions until :meth:`reset_filter` is called.
    """

    def __init__(
        self,
        coordinator: RequestCoordinator,
        initial_filter: SentimentFilter | str = SentimentFilter.ALL,
    ) -> None:
        self._coordinator = coordinator
        self._filter = SentimentFilter.parse(initial_filter)

    @property
    def state(self) -> RequestState:
        return self._coordinator.current_state()

    @property
    def filter(self) -> SentimentFilter:
        return self._filter

    def set_filter(self, value: SentimentFilter | str) -> None:
        self._filter = SentimentFilter.parse(value)
        logger.debug("Filter set to %s", self._filter.value)

    def reset_filter(self) -> None:
        self._filter = SentimentFilter.ALL

    async def submit(self, statement: str) -> None:
        await self._coordinator.submit(statement)

    def view(self) -> ReportView:
        return build_view(self.state, self._filter)
