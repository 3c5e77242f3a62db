"""Tests for Markdown / HTML report rendering."""

from sentireport.analysis_client import parse_report
from sentireport.models import SentimentFilter
from sentireport.report import render_html, render_markdown
from sentireport.session import build_view
from sentireport.state import Failed, Idle, Pending, Succeeded

PAYLOAD = {
    "data": [
        {
            "heading": "Opening",
            "combined_text": "I love this",
            "sentiment": "Positive",
            "polarity": 0.8,
            "subjectivity": 0.6,
        },
        {
            "heading": "Closing",
            "combined_text": "The ending was awful",
            "sentiment": "Negative",
            "polarity": -0.7,
            "subjectivity": 0.9,
        },
    ],
    "verdict": "Mixed",
    "detailed_verdict": "Starts strong, ends poorly.",
}


class TestRenderMarkdown:
    def test_idle(self) -> None:
        md = render_markdown(build_view(Idle(), SentimentFilter.ALL))
        assert md.startswith("# Sentiment Analysis")
        assert "No report yet" in md

    def test_full_report(self) -> None:
        report = parse_report(PAYLOAD)
        md = render_markdown(build_view(Succeeded(report=report), SentimentFilter.ALL))
        assert "## Final Verdict: Mixed" in md
        assert "Starts strong, ends poorly." in md
        assert "| Positive | 1 |" in md
        assert "| Negative | 1 |" in md
        assert "| Neutral | 0 |" in md
        assert "**Opening**" in md
        assert "**Closing**" in md
        assert "Polarity: -0.7" in md

    def test_filtered_report_lists_only_matches(self) -> None:
        report = parse_report(PAYLOAD)
        md = render_markdown(build_view(Succeeded(report=report), SentimentFilter.NEGATIVE))
        assert "Negative only" in md
        assert "**Closing**" in md
        assert "**Opening**" not in md
        assert "| Positive | 1 |" in md

    def test_empty_filter_result(self) -> None:
        report = parse_report(PAYLOAD)
        md = render_markdown(build_view(Succeeded(report=report), SentimentFilter.NEUTRAL))
        assert "No neutral segments" in md

    def test_error_and_loading_lines(self) -> None:
        assert "Generating report" in render_markdown(
            build_view(Pending(statement="x"), SentimentFilter.ALL)
        )
        md = render_markdown(build_view(Failed(message="HTTP error! status: 500"), SentimentFilter.ALL))
        assert "**Error:** HTTP error! status: 500" in md


class TestRenderHtml:
    def test_standalone_page(self) -> None:
        report = parse_report(PAYLOAD)
        html = render_html(build_view(Succeeded(report=report), SentimentFilter.ALL))
        assert html.startswith("<!DOCTYPE html>")
        assert "<table" in html
        assert "Final Verdict: Mixed" in html
        assert 'style="' in html


class TestEmptyReport:
    def test_empty_report_still_shows_verdict(self) -> None:
        report = parse_report({"data": [], "verdict": "Neutral", "detailed_verdict": ""})
        md = render_markdown(build_view(Succeeded(report=report), SentimentFilter.ALL))
        assert "## Final Verdict: Neutral" in md
        assert "_No segments._" in md
        assert "No report yet" not in md


def _single_item_view(heading: str, text: str, detailed: str = ""):
    report = parse_report(
        {
            "data": [
                {
                    "heading": heading,
                    "combined_text": text,
                    "sentiment": "Neutral",
                    "polarity": 0.0,
                    "subjectivity": 0.1,
                }
            ],
            "verdict": "Neutral",
            "detailed_verdict": detailed,
        }
    )
    return build_view(Succeeded(report=report), SentimentFilter.ALL)


class TestServiceTextIsShownLiterally:
    def test_html_is_escaped(self) -> None:
        html = render_html(
            _single_item_view("<img src=x onerror=alert(1)>", "<script>alert(2)</script>")
        )
        assert "<script>" not in html
        assert "<img" not in html
        assert "&lt;script&gt;alert(2)&lt;/script&gt;" in html

    def test_blank_line_and_heading_do_not_add_structure(self) -> None:
        html = render_html(_single_item_view("s1", "first line\n\n# Injected heading"))
        assert html.count("<h1") == 1
        assert "# Injected heading" in html

    def test_detailed_verdict_block_markers(self) -> None:
        for detailed in ("# Not a heading", "- not a list", "1. not ordered", "> not quoted"):
            html = render_html(_single_item_view("s1", "text", detailed=detailed))
            assert html.count("<h1") == 1
            assert "<ul" not in html.split("Sentiment Report")[0]
            assert "<ol" not in html
            assert "<blockquote" not in html

    def test_inline_markup_is_literal(self) -> None:
        html = render_html(_single_item_view("*starred* [link](http://x)", "__under__"))
        assert "<em>starred</em>" not in html
        assert "<a " not in html
        assert "*starred*" in html
        assert "__under__" in html

    def test_error_message_is_escaped(self) -> None:
        html = render_html(build_view(Failed(message="<b>boom</b>"), SentimentFilter.ALL))
        assert "<b>boom</b>" not in html
        assert "&lt;b&gt;boom&lt;/b&gt;" in html
