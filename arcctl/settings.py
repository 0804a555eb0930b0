"""
Goal: Centralized configuration for arcctl (target app, osascript, timeouts, logs).
Everything comes from env vars with safe defaults; bad values fall back quietly.
"""

import math
import os
import re
from pathlib import Path

# Worst case the in-app focus loop can wait: 1s settle + 9 retries * 0.5s
FOCUS_WORST_CASE_SECONDS = 5.5

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def _validate_timeout(raw: str, default: float) -> float:
    """Timeout must be a finite number larger than the focus loop's worst case."""
    try:
        value = float(raw)
    except ValueError:
        return default
    if math.isfinite(value) and value > FOCUS_WORST_CASE_SECONDS:
        return value
    return default


def _validate_app_name(raw: str, default: str) -> str:
    """Only allow plain application names; they get embedded in scripts unescaped."""
    raw = (raw or "").strip()
    if raw and re.match(r"^[A-Za-z0-9 ._-]+$", raw):
        return raw
    return default


def _validate_level(raw: str, default: str) -> str:
    level = (raw or "").strip().upper()
    return level if level in _LOG_LEVELS else default


# The scriptable application we drive
APP_NAME = _validate_app_name(os.getenv("ARCCTL_APP_NAME", "Arc"), "Arc")

# osascript binary; override for odd installs
OSASCRIPT = os.getenv("ARCCTL_OSASCRIPT") or "osascript"

# Client-side cap on one osascript round trip
SCRIPT_TIMEOUT = _validate_timeout(os.getenv("ARCCTL_SCRIPT_TIMEOUT", "30"), 30.0)

# Logs live where macOS keeps per-user logs
LOG_DIR = Path(
    os.getenv("ARCCTL_LOG_DIR") or str(Path.home() / "Library" / "Logs" / "arcctl")
)
LOG_LEVEL = _validate_level(os.getenv("ARCCTL_LOG_LEVEL", "WARNING"), "WARNING")
