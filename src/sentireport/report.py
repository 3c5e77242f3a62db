"""Render a report view as Markdown or as a standalone HTML page."""

from __future__ import annotations

import html
import re

import markdown

from sentireport.models import SENTIMENT_ORDER, SentimentFilter, SentimentItem
from sentireport.session import ReportView

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Sentiment Analysis</title></head>
<body style="margin:0; padding:24px; background-color:#f6f6f6;
             font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,
             Helvetica,Arial,sans-serif; font-size:15px; line-height:1.6;
             color:#1a1a1a;">
<div style="max-width:720px; margin:0 auto; background:#ffffff;
            border-radius:8px; border:1px solid #e0e0e0; padding:28px;">
{body}
</div>
</body>
</html>
"""

# Inline styles injected after the markdown→HTML conversion
_STYLE_OVERRIDES = {
    "h1": (
        "font-size:22px; font-weight:700; margin:0 0 8px 0; "
        "color:#111; border-bottom:2px solid #0d6efd; padding-bottom:8px;"
    ),
    "h2": "font-size:18px; font-weight:600; margin:24px 0 8px 0; color:#222;",
    "h3": "font-size:16px; font-weight:600; margin:20px 0 6px 0; color:#333;",
    "table": "border-collapse:collapse; margin:8px 0;",
    "th": "text-align:left; padding:4px 12px; border-bottom:1px solid #ddd;",
    "td": "padding:4px 12px;",
    "li": "margin-bottom:10px;",
    "p": "margin:8px 0;",
}


_INLINE_MARKUP_RE = re.compile(r"([\\`*_\[\]])")
# Block markers that only take effect at the start of a line.
_LEADING_MARKER_RE = re.compile(r"^([#>+\-])")
_LEADING_ORDINAL_RE = re.compile(r"^(\d+)\.")


def _plain(text: str) -> str:
    """Make service text display literally: one line, no HTML, no Markdown markup."""
    flat = " ".join(text.split())
    flat = html.escape(flat, quote=False)
    flat = _INLINE_MARKUP_RE.sub(r"\\\1", flat)
    flat = _LEADING_MARKER_RE.sub(r"\\\1", flat)
    return _LEADING_ORDINAL_RE.sub(r"\1\\.", flat)


def _item_block(item: SentimentItem) -> list[str]:
    return [
        f"- **{_plain(item.heading)}**",
        f"  {_plain(item.combined_text)}",
        f"  Sentiment: {item.sentiment.value} · "
        f"Polarity: {item.polarity:g} · Subjectivity: {item.subjectivity:g}",
    ]


def render_markdown(view: ReportView) -> str:
    lines: list[str] = ["# Sentiment Analysis", ""]

    if view.loading:
        lines += ["_Generating report…_", ""]
    if view.error:
        lines += [f"**Error:** {_plain(view.error)}", ""]

    if view.report is None:
        if not view.loading and not view.error:
            lines.append("_No report yet._")
        return "\n".join(lines).rstrip() + "\n"

    report = view.report
    lines += [f"## Final Verdict: {_plain(report.final_verdict)}", ""]
    if report.detailed_verdict:
        lines += [_plain(report.detailed_verdict), ""]

    lines += ["## Sentiment Counts", "", "| Sentiment | Count |", "| --- | ---: |"]
    for sentiment in SENTIMENT_ORDER:
        lines.append(f"| {sentiment.value} | {view.counts[sentiment]} |")
    lines.append("")

    heading = "## Sentiment Report"
    if view.filter is not SentimentFilter.ALL:
        heading += f" ({view.filter.value} only)"
    lines += [heading, ""]
    if not view.items and view.filter is SentimentFilter.ALL:
        lines.append("_No segments._")
    elif not view.items:
        lines.append(f"_No {view.filter.value.lower()} segments._")
    for item in view.items:
        lines += _item_block(item)
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def render_html(view: ReportView) -> str:
    """Render *view* as a self-contained HTML page with inline styles."""
    html = markdown.markdown(
        render_markdown(view),
        extensions=["tables"],
        output_format="html",
    )
    for tag, style in _STYLE_OVERRIDES.items():
        html = html.replace(f"<{tag}>", f'<{tag} style="{style}">')
        html = html.replace(f"<{tag} ", f'<{tag} style="{style}" ')
    return _HTML_TEMPLATE.format(body=html)
