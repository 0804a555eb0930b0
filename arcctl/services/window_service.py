r"""
Goal
- Window operations for Arc, expressed as AppleScript payloads run through the adapter.

Implements
- create_window(url, incognito) -> None
- create_window_with_focus(search, incognito) -> None
- list_windows() -> list[Window]
- close_windows(ids) -> None

Focus protocol (create_window_with_focus)
- Probe whether Arc was already running, once, before doing anything.
- One payload makes the window, waits for it to settle, then polls its tabs a bounded
  number of times for a title containing the search text. The loop runs inside Arc;
  from here it is a single blocking call that answers "found" or "not_found".
- A cold launch makes Arc restore its startup windows next to ours, so when Arc was not
  running beforehand we close every window but the first. This happens whether or not
  the search matched, and before a "not found" error is raised.

Notes
- Search text is user input; it is escaped (backslash, then quote) before embedding.
  Newlines and other control characters pass through as-is.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from loguru import logger
from pydantic import ValidationError

from arcctl.adapters.applescript import run_applescript
from arcctl.errors import NotFoundError, ParseError, ScriptOutputError, TransportError
from arcctl.models.schemas import (
    DEFAULT_RETRY_POLICY,
    ProcessState,
    RetryPolicy,
    Sentinel,
    Window,
    WindowList,
)
from arcctl.settings import APP_NAME


def escape_applescript_string(raw: str) -> str:
    """Make `raw` safe to put between double quotes in an AppleScript literal."""
    # Backslashes first so the quote escapes below are not doubled again
    escaped = raw.replace("\\", "\\\\")
    return escaped.replace('"', '\\"')


# -----------------------
# Focus protocol
# -----------------------


def probe_process_state() -> ProcessState:
    """Ask whether Arc is running. Any doubt counts as running."""
    try:
        out = run_applescript(f'application "{APP_NAME}" is running')
    except TransportError as exc:
        logger.debug("running probe failed, assuming {} is up: {}", APP_NAME, exc)
        return ProcessState(was_running=True)
    return ProcessState(was_running=out.strip() != "false")


def _make_window_clause(incognito: bool) -> str:
    if incognito:
        return "make new window with properties {incognito:true}"
    return "make new window"


_FOCUS_SCRIPT = """tell application "%(app)s"
	%(make_window)s
	delay %(initial_delay)g
	set maxRetries to %(max_attempts)d
	repeat with attempt from 1 to maxRetries
		tell front window
			set tabIndex to 1
			repeat with aTab in every tab
				try
					set tabTitle to title of aTab
					ignoring case
						if tabTitle contains "%(search)s" then
							tell tab tabIndex to select
							activate
							return "%(found)s"
						end if
					end ignoring
				end try
				set tabIndex to tabIndex + 1
			end repeat
		end tell
		if attempt < maxRetries then delay %(retry_delay)g
	end repeat
	activate
	return "%(not_found)s"
end tell"""


def build_focus_script(
    search: str, incognito: bool = False, policy: RetryPolicy = DEFAULT_RETRY_POLICY
) -> str:
    """Payload that creates a window and polls its tabs for `search`."""
    return _FOCUS_SCRIPT % {
        "app": APP_NAME,
        "make_window": _make_window_clause(incognito),
        "initial_delay": policy.initial_delay,
        "max_attempts": policy.max_attempts,
        "retry_delay": policy.retry_delay,
        "search": escape_applescript_string(search),
        "found": Sentinel.FOUND.value,
        "not_found": Sentinel.NOT_FOUND.value,
    }


_CLOSE_EXTRA_WINDOWS_SCRIPT = """tell application "%(app)s"
	set windowCount to count of windows
	repeat with i from windowCount to 2 by -1
		close window i
	end repeat
end tell"""


def close_extra_windows() -> None:
    """Close every window except the first (the one we just made)."""
    logger.info("{} was not running; closing startup windows", APP_NAME)
    run_applescript(_CLOSE_EXTRA_WINDOWS_SCRIPT % {"app": APP_NAME})


def interpret_focus_result(output: str, search: str) -> None:
    """Raise NotFoundError on the not-found sentinel; anything else is success."""
    result = output.strip()
    if result == Sentinel.NOT_FOUND.value:
        raise NotFoundError(search)
    if result != Sentinel.FOUND.value:
        logger.warning("unexpected focus script output {!r}; treating as success", result)


def create_window_with_focus(search: str, incognito: bool = False) -> None:
    """Create a window and focus the first tab whose title contains `search`."""
    state = probe_process_state()
    logger.debug("{} was running: {}", APP_NAME, state.was_running)

    output = run_applescript(build_focus_script(search, incognito))

    if not state.was_running:
        close_extra_windows()

    interpret_focus_result(output, search)
    logger.info("focused tab matching {!r}", search)


# -----------------------
# Plain commands
# -----------------------


def create_window(url: Optional[str] = None, incognito: bool = False) -> None:
    """Make a new window, optionally open `url` in it, then bring Arc forward."""
    if incognito:
        script = f"""tell application "{APP_NAME}"
	{_make_window_clause(True)}
	activate
end tell"""
    else:
        script = f"""tell application "{APP_NAME}"
	{_make_window_clause(False)}
end tell"""
    run_applescript(script)

    if url:
        run_applescript(
            f"""tell application "{APP_NAME}"
	tell front window
		make new tab with properties {{URL:"{escape_applescript_string(url)}"}}
	end tell
end tell"""
        )

    run_applescript(f'tell application "{APP_NAME}" to activate')


_LIST_WINDOWS_SCRIPT = r"""on jsonEscape(txt)
	set out to ""
	repeat with ch in characters of txt
		set c to contents of ch
		if c is "\"" then
			set out to out & "\\\""
		else if c is "\\" then
			set out to out & "\\\\"
		else if (id of c) < 32 then
			set out to out & " "
		else
			set out to out & c
		end if
	end repeat
	return out
end jsonEscape

set output to "["
tell application "%(app)s"
	set windowCount to count of windows
	repeat with i from 1 to windowCount
		set windowTitle to ""
		try
			set windowTitle to title of window i as string
		end try
		if i > 1 then set output to output & ","
		set output to output & "{\"id\":" & i & ",\"title\":\"" & my jsonEscape(windowTitle) & "\"}"
	end repeat
end tell
return output & "]"
"""


def list_windows() -> List[Window]:
    """Return Arc's windows as (id, title) records; id is the window index."""
    output = run_applescript(_LIST_WINDOWS_SCRIPT % {"app": APP_NAME})
    try:
        return WindowList.validate_json(output.strip() or "[]")
    except ValidationError as exc:
        raise ScriptOutputError(f"could not parse window list: {exc}") from exc


_WINDOW_ID_RE = re.compile(r"[+-]?[0-9]+")


def _parse_window_id(raw: str) -> int:
    # ASCII digits only; int() alone would take "1_0", " 3 " and non-Latin digits
    if not _WINDOW_ID_RE.fullmatch(raw):
        raise ParseError(raw)
    return int(raw)


def close_windows(ids: Iterable[str] = ()) -> None:
    """
    Close windows by id, in order. No ids closes the front window.

    Stops at the first bad id or failed close; windows closed before that stay closed.
    """
    ids = list(ids)
    if not ids:
        run_applescript(f'tell application "{APP_NAME}" to tell front window to close')
        return

    for raw in ids:
        window_id = _parse_window_id(raw)
        run_applescript(
            f'tell application "{APP_NAME}" to tell window {window_id} to close'
        )
        logger.debug("closed window {}", window_id)
