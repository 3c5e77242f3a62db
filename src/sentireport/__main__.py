"""CLI entry-point: ``python -m sentireport analyze "some text"``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sentireport import config
from sentireport.analysis_client import AnalysisClient
from sentireport.coordinator import RequestCoordinator
from sentireport.models import SentimentFilter
from sentireport.report import render_html, render_markdown
from sentireport.session import ReportSession
from sentireport.state import Failed

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_statement(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _analyze(args: argparse.Namespace) -> int:
    statement = _read_statement(args)
    client = AnalysisClient(service_url=args.url, timeout=config.REQUEST_TIMEOUT)
    session = ReportSession(RequestCoordinator(client), initial_filter=args.filter)
    try:
        asyncio.run(session.submit(statement))
    finally:
        client.close()

    view = session.view()
    render = render_html if args.format == "html" else render_markdown
    sys.stdout.write(render(view))

    if isinstance(view.state, Failed):
        logger.error("%s", view.state.message)
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="sentireport",
        description="Per-segment sentiment report from the remote analysis service.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── analyze ───────────────────────────────────────────────────────
    analyze_parser = sub.add_parser("analyze", help="Analyse a piece of text.")
    analyze_parser.add_argument(
        "text",
        nargs="?",
        help="Text to analyse (default: read --file or standard input).",
    )
    analyze_parser.add_argument(
        "--file",
        help="Read the text to analyse from this file.",
    )
    analyze_parser.add_argument(
        "--filter",
        type=SentimentFilter.parse,
        default=config.DEFAULT_FILTER,
        help="Only list segments with this sentiment: All, Positive, Negative or Neutral.",
    )
    analyze_parser.add_argument(
        "--format",
        choices=["markdown", "html"],
        default="markdown",
        help="Output format (default: markdown).",
    )
    analyze_parser.add_argument(
        "--url",
        default=config.ANALYSIS_SERVICE_URL,
        help="Analysis service endpoint (default: SENTIREPORT_SERVICE_URL).",
    )

    args = parser.parse_args(argv)

    if args.command == "analyze":
        _setup_logging()
        sys.exit(_analyze(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
