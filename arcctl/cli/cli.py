r"""
Goal: Friendly CLI for driving Arc windows from the terminal.

- Export `app` (tests import this).
- Show "Arc CLI" in --help output (tests assert this).
- `window create --focus TEXT` runs the focus protocol instead of the plain create.
- Errors print one line to stderr and exit 1; no tracebacks for expected failures.
"""

from __future__ import annotations

import json
import sys
from typing import List, Optional

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.table import Table

from arcctl.errors import ArcError
from arcctl.services import window_service
from arcctl.services.logs import configure_logging

app = typer.Typer(
    help="Arc CLI",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback(help="Arc CLI")
def _root_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output")
) -> None:
    configure_logging(verbose=verbose)


def _fail(exc: ArcError) -> None:
    logger.debug("command failed: {!r}", exc)
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(1)


# -----------------------
# Window
# -----------------------
window = typer.Typer(help="Manage windows", no_args_is_help=True)
app.add_typer(window, name="window")


def window_create(
    url: Optional[str] = typer.Argument(None, help="URL to open in the new window"),
    incognito: bool = typer.Option(False, "--incognito", help="open in incognito mode"),
    focus: str = typer.Option(
        "", "--focus", help="focus the tab whose title contains this string"
    ),
) -> None:
    """Create a new window."""
    try:
        if focus:
            if url:
                logger.warning("--focus given; ignoring URL {}", url)
            window_service.create_window_with_focus(focus, incognito=incognito)
        else:
            window_service.create_window(url, incognito=incognito)
    except ArcError as exc:
        _fail(exc)


def window_close(
    ids: Optional[List[str]] = typer.Argument(
        None, help="Window ids to close; the front window if omitted"
    )
) -> None:
    """Close a window."""
    try:
        window_service.close_windows(ids or [])
    except ArcError as exc:
        _fail(exc)


def window_list(
    as_json: bool = typer.Option(False, "--json", help="output as json")
) -> None:
    """List windows."""
    try:
        windows = window_service.list_windows()
    except ArcError as exc:
        _fail(exc)
        return

    if as_json:
        typer.echo(
            json.dumps([w.model_dump() for w in windows], indent=2, ensure_ascii=False)
        )
        return

    tty = sys.stdout.isatty()
    table = Table(box=box.SIMPLE_HEAD if tty else None, show_edge=False)
    table.add_column("ID", justify="right")
    table.add_column("Title", overflow="ellipsis" if tty else "fold")
    for w in windows:
        table.add_row(str(w.id), w.title)
    Console(soft_wrap=not tty).print(table)


# typer has no aliases; register the extra names hidden
window.command("create")(window_create)
window.command("new", hidden=True)(window_create)
window.command("close")(window_close)
window.command("remove", hidden=True)(window_close)
window.command("rm", hidden=True)(window_close)
window.command("list")(window_list)
window.command("ls", hidden=True)(window_list)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
