"""
Goal: Error messages quote user text readably, whatever characters it holds.
"""
from arcctl.errors import NotFoundError, ParseError, quote


def test_quote_plain_and_quotes():
    assert quote("Gmail") == '"Gmail"'
    assert quote('He said "hi"') == '"He said \\"hi\\""'
    assert quote("C:\\tmp") == '"C:\\\\tmp"'


def test_quote_control_characters():
    assert quote("a\nb\tc") == '"a\\nb\\tc"'
    assert quote("\x01") == '"\\u0001"'


def test_quote_keeps_non_ascii():
    assert quote("Café – ١") == '"Café – ١"'


def test_messages():
    assert str(NotFoundError("two\nlines")) == 'no tab found with title containing "two\\nlines"'
    assert str(ParseError("1_0")) == 'invalid window id "1_0"'
