"""Centralised configuration loaded from environment variables and dotenv."""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# ── Analysis service ───────────────────────────────────────────────────────
ANALYSIS_SERVICE_URL: str = os.getenv(
    "SENTIREPORT_SERVICE_URL",
    "https://backendsentimentanalysis.onrender.com/generate_report",
)
REQUEST_TIMEOUT: float = float(os.getenv("SENTIREPORT_TIMEOUT", "60"))

# ── Presentation defaults (overridden at runtime by CLI) ───────────────────
DEFAULT_FILTER: str = os.getenv("SENTIREPORT_DEFAULT_FILTER", "All")
LOG_LEVEL: str = os.getenv("SENTIREPORT_LOG_LEVEL", "INFO")
