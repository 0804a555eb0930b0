"""
Goal: Config validators fall back to safe defaults on bad env values.
"""
from arcctl.settings import _validate_app_name, _validate_level, _validate_timeout


def test_timeout_must_exceed_focus_worst_case():
    assert _validate_timeout("60", 30.0) == 60.0
    assert _validate_timeout("5.5", 30.0) == 30.0
    assert _validate_timeout("soon", 30.0) == 30.0


def test_app_name_rejects_quotes():
    assert _validate_app_name("Google Chrome", "Arc") == "Google Chrome"
    assert _validate_app_name('Arc" to quit', "Arc") == "Arc"
    assert _validate_app_name("", "Arc") == "Arc"


def test_log_level():
    assert _validate_level("debug", "WARNING") == "DEBUG"
    assert _validate_level("loud", "WARNING") == "WARNING"


def test_timeout_rejects_non_finite():
    assert _validate_timeout("inf", 30.0) == 30.0
    assert _validate_timeout("-inf", 30.0) == 30.0
    assert _validate_timeout("nan", 30.0) == 30.0
