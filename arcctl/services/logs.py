"""
Goal: Set up loguru logging: a console sink on stderr plus a daily log file under LOG_DIR.
Scripts can be long, so console lines get trimmed.
"""

import sys
from pathlib import Path

from loguru import logger

from arcctl.settings import LOG_DIR, LOG_LEVEL

_MAX_CONSOLE_MESSAGE = 500


def _shorten(msg: str, limit: int = _MAX_CONSOLE_MESSAGE) -> str:
    """Trim long messages (mostly AppleScript payloads) for the console."""
    if len(msg) <= limit:
        return msg
    return msg[:limit] + f"... [{len(msg) - limit} more chars]"


def _console_format(record) -> str:
    record["extra"]["short"] = _shorten(record["message"])
    return "<level>{level: <8}</level> | {extra[short]}\n{exception}"


def configure_logging(verbose: bool = False) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else LOG_LEVEL,
        format=_console_format,
        colorize=None,
        backtrace=False,
        diagnose=False,
    )
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Log directory {} unavailable: {}", LOG_DIR, exc)
        return
    logger.add(
        str(Path(LOG_DIR) / "{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="14 days",
        level="DEBUG",
        backtrace=False,
        diagnose=False,
        serialize=False,
        encoding="utf-8",
    )
