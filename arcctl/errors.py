"""
Goal: One small exception family so the CLI can report failures without tracebacks.
"""

from __future__ import annotations

import json


class ArcError(Exception):
    """Base class for everything arcctl reports as a user-facing error."""


class TransportError(ArcError, RuntimeError):
    """osascript could not run the payload (missing binary, script fault, timeout)."""


class NotFoundError(ArcError, LookupError):
    """The focus search ran out of attempts without a matching tab title."""

    def __init__(self, search: str) -> None:
        self.search = search
        super().__init__(f"no tab found with title containing {quote(search)}")


class ParseError(ArcError, ValueError):
    """A window id on the command line is not an integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid window id {quote(value)}")


class ScriptOutputError(ArcError, ValueError):
    """A script returned output we could not decode."""


def quote(text: str) -> str:
    """Double-quote text for messages; control characters come out as JSON escapes."""
    return json.dumps(text, ensure_ascii=False)
