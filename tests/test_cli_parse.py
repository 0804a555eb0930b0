"""
Goal: Quick smoke test that CLI entry parses and shows help without crashing.
"""
from typer.testing import CliRunner
from arcctl.cli.cli import app

def test_cli_help():
    r = CliRunner().invoke(app, ["--help"])
    assert r.exit_code == 0
    assert "Arc CLI" in r.stdout

def test_window_help_lists_commands():
    r = CliRunner().invoke(app, ["window", "--help"])
    assert r.exit_code == 0
    for name in ("create", "close", "list"):
        assert name in r.stdout
