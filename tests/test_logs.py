"""
Goal: configure_logging writes a daily file and trims long console lines.
"""
from loguru import logger

from arcctl.services import logs


def test_shorten():
    assert logs._shorten("abc", limit=5) == "abc"
    assert logs._shorten("x" * 12, limit=5) == "xxxxx... [7 more chars]"


def test_file_sink(tmp_path, monkeypatch):
    monkeypatch.setattr(logs, "LOG_DIR", tmp_path / "logs")
    try:
        logs.configure_logging(verbose=True)
        logger.debug("payload sent")
    finally:
        logger.remove()
    files = list((tmp_path / "logs").glob("*.log"))
    assert len(files) == 1
    assert "payload sent" in files[0].read_text(encoding="utf-8")
