"""Counts, filtered views and chart data derived from report items."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from sentireport.models import (
    SENTIMENT_ORDER,
    ChartSeries,
    Sentiment,
    SentimentCounts,
    SentimentFilter,
    SentimentItem,
)


def count_by_sentiment(items: Iterable[SentimentItem]) -> SentimentCounts:
    """Count items per sentiment; categories with no items report 0."""
    tally = Counter(item.sentiment for item in items)
    return SentimentCounts(
        positive=tally[Sentiment.POSITIVE],
        negative=tally[Sentiment.NEGATIVE],
        neutral=tally[Sentiment.NEUTRAL],
    )


def filter_items(
    items: Sequence[SentimentItem],
    sentiment_filter: SentimentFilter | str,
) -> tuple[SentimentItem, ...]:
    """Return the items selected by *sentiment_filter*, in their original order."""
    selected = SentimentFilter.parse(sentiment_filter)
    if selected is SentimentFilter.ALL:
        return tuple(items)
    wanted = Sentiment(selected.value)
    return tuple(item for item in items if item.sentiment == wanted)


def chart_series(counts: SentimentCounts) -> ChartSeries:
    """Build the dataset for the sentiment bar/pie charts."""
    return ChartSeries(data=tuple(counts[s] for s in SENTIMENT_ORDER))
