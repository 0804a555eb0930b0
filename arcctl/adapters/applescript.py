"""
Goal: Run one AppleScript payload through osascript and hand back its stdout.
- Blocking, one round trip per call; no retries here.
- Anything that stops the script from finishing becomes a TransportError.
"""

from __future__ import annotations

import subprocess  # osascript is a plain CLI
from typing import Optional

from loguru import logger

from arcctl.errors import TransportError
from arcctl.settings import OSASCRIPT, SCRIPT_TIMEOUT


def run_applescript(script: str, timeout: Optional[float] = None) -> str:
    """Execute `script` with osascript and return what it printed."""
    timeout = timeout or SCRIPT_TIMEOUT
    logger.debug("osascript payload:\n{}", script)
    try:
        proc = subprocess.run(
            [OSASCRIPT, "-e", script],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise TransportError(f"{OSASCRIPT} not found; arcctl needs macOS") from exc
    except subprocess.TimeoutExpired as exc:
        raise TransportError(f"script timed out after {timeout:g}s") from exc
    except OSError as exc:
        raise TransportError(f"could not run {OSASCRIPT}: {exc}") from exc

    if proc.returncode != 0:
        err = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
        logger.debug("osascript failed: {}", err)
        raise TransportError(err)

    logger.debug("osascript output: {!r}", proc.stdout)
    return proc.stdout
