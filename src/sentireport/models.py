"""Domain models used across the report pipeline."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictFloat


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


# Display order for counts and chart series.
SENTIMENT_ORDER: tuple[Sentiment, ...] = (
    Sentiment.POSITIVE,
    Sentiment.NEGATIVE,
    Sentiment.NEUTRAL,
)


class SentimentFilter(str, Enum):
    """Which subset of report items is shown."""

    ALL = "All"
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    @classmethod
    def parse(cls, value: SentimentFilter | str) -> SentimentFilter:
        """Accept an enum member or a case-insensitive name such as ``"negative"``."""
        if isinstance(value, cls):
            return value
        wanted = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown sentiment filter {value!r}; expected one of {choices}")


class SentimentItem(BaseModel):
    """One analysed text segment, as returned by the analysis service."""

    model_config = ConfigDict(frozen=True)

    heading: str
    combined_text: str
    sentiment: Sentiment
    polarity: StrictFloat
    subjectivity: StrictFloat


class Report(BaseModel):
    """Normalised result of one successful submission."""

    model_config = ConfigDict(frozen=True)

    items: tuple[SentimentItem, ...] = ()
    final_verdict: str = ""
    detailed_verdict: str = ""


class SentimentCounts(BaseModel):
    """Per-category item counts; every category is always present."""

    model_config = ConfigDict(frozen=True)

    positive: int = Field(default=0, ge=0)
    negative: int = Field(default=0, ge=0)
    neutral: int = Field(default=0, ge=0)

    def __getitem__(self, sentiment: Sentiment) -> int:
        return getattr(self, Sentiment(sentiment).name.lower())

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral

    def as_dict(self) -> dict[Sentiment, int]:
        return {s: self[s] for s in SENTIMENT_ORDER}


class ChartSeries(BaseModel):
    """Chart-ready dataset shared by the bar and pie charts."""

    model_config = ConfigDict(frozen=True)

    label: str = "Sentiments Count"
    labels: tuple[str, ...] = tuple(s.value for s in SENTIMENT_ORDER)
    data: tuple[int, ...] = (0, 0, 0)
    background_colors: tuple[str, ...] = ("#4CAF50", "#F44336", "#FFC107")
