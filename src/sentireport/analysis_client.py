"""Minimal client for the remote sentiment analysis service."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from sentireport.models import Report, SentimentItem

logger = logging.getLogger(__name__)

_JSON_TYPE_NAMES: dict[type, str] = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    dict: "object",
    list: "array",
    type(None): "null",
}


class AnalysisServiceError(Exception):
    """Base class for every failure talking to the analysis service."""


class TransportError(AnalysisServiceError):
    """Raised on network failure or a non-2xx HTTP status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReportValidationError(AnalysisServiceError):
    """Raised when a successful response does not hold a usable report."""


def _json_type(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _verdict(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ReportValidationError(
            f"Sentiment report data is invalid: '{key}' must be a string, got {_json_type(value)}"
        )
    return value


def parse_report(payload: Any) -> Report:
    """Validate a decoded response body and build a :class:`Report` from it.

    ``data`` must be an array of item records; anything else is rejected
    rather than read as an empty report. A single invalid item rejects the
    whole payload.
    """
    if not isinstance(payload, dict):
        raise ReportValidationError(
            f"Sentiment report data is invalid: expected a JSON object, got {_json_type(payload)}"
        )

    if "data" not in payload:
        raise ReportValidationError("Sentiment report data is invalid: 'data' is missing")
    raw_items = payload["data"]
    if not isinstance(raw_items, list):
        raise ReportValidationError(
            f"Sentiment report data is invalid: 'data' must be an array, got {_json_type(raw_items)}"
        )

    items: list[SentimentItem] = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(SentimentItem.model_validate(raw))
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'item'}: {err['msg']}"
                for err in exc.errors()
            )
            raise ReportValidationError(
                f"Sentiment report data is invalid: item {index}: {problems}"
            ) from exc

    return Report(
        items=tuple(items),
        final_verdict=_verdict(payload, "verdict"),
        detailed_verdict=_verdict(payload, "detailed_verdict"),
    )


class AnalysisClient:
    """Thin wrapper around ``POST /generate_report``."""

    def __init__(self, service_url: str, timeout: float = 60.0) -> None:
        if not service_url:
            raise ValueError("SENTIREPORT_SERVICE_URL is required but was empty.")
        self._url = service_url
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )

    # ── public ──────────────────────────────────────────────────────────
    def generate_report(self, statement: str) -> Report:
        """Send *statement* for analysis and return the parsed report."""
        payload = self._post({"statement": statement})
        report = parse_report(payload)
        logger.info(
            "Received %d analysed segments (verdict=%r)",
            len(report.items),
            report.final_verdict,
        )
        return report

    def close(self) -> None:
        self._session.close()

    # ── private ─────────────────────────────────────────────────────────
    def _post(self, body: dict[str, Any]) -> Any:
        try:
            resp = self._session.post(self._url, json=body, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Could not reach analysis service: {exc}") from exc
        if not 200 <= resp.status_code < 300:
            logger.debug("Analysis service error body: %s", resp.text[:500])
            raise TransportError(
                f"HTTP error! status: {resp.status_code}", status_code=resp.status_code
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise ReportValidationError(
                "Sentiment report data is invalid: response body is not JSON"
            ) from exc
