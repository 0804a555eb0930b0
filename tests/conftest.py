"""
Goal: Shared fixtures: a fake osascript runner and quiet logging for CLI tests.
"""
from typing import Callable, List

import pytest

from arcctl.errors import TransportError
from arcctl.services import window_service


class FakeRunner:
    """Stands in for run_applescript; records payloads and answers via a callback."""

    def __init__(self, respond: Callable[[str], str]):
        self.respond = respond
        self.scripts: List[str] = []

    def __call__(self, script: str, timeout=None) -> str:
        self.scripts.append(script)
        return self.respond(script)


def _arc_host(running="true", focus_output="found", check_error=False):
    """Build a responder that behaves like Arc for the focus protocol."""

    def respond(script: str) -> str:
        if script.endswith("is running"):
            if check_error:
                raise TransportError("Application isn't running.")
            return running + "\n"
        if "maxRetries" in script:
            return focus_output + "\n"
        return ""

    return respond


@pytest.fixture
def fake_runner(monkeypatch):
    def install(respond):
        runner = FakeRunner(respond)
        monkeypatch.setattr(window_service, "run_applescript", runner)
        return runner

    return install


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    import arcctl.cli.cli as cli

    monkeypatch.setattr(cli, "configure_logging", lambda verbose=False: None)


@pytest.fixture
def arc_host():
    """Factory for fake Arc responders: arc_host(running=..., focus_output=..., check_error=...)."""
    return _arc_host
