"""Test setup_logging and when the application invokes it."""
import logging
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from qualifier.api.main import create_app
from qualifier.core import logging_config
from qualifier.core.config import Settings
from qualifier.core.logging_config import daily_log_file, setup_logging

from tests.conftest import FakeAIClient


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow setup_logging to run again and detach whatever it adds."""
    monkeypatch.setattr(logging_config, "_logging_configured", False)
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers_before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level_before)


def _added_handlers(root: logging.Logger, before: list) -> list:
    return [h for h in root.handlers if h not in before]


def test_daily_log_file_name() -> None:
    assert daily_log_file("logs", date(2024, 1, 15)) == Path("logs") / "app_20240115.log"


def test_console_only_without_log_dir(fresh_logging) -> None:
    before = list(fresh_logging.handlers)
    setup_logging("WARNING", "")
    added = _added_handlers(fresh_logging, before)
    assert len(added) == 1
    assert not isinstance(added[0], logging.FileHandler)
    assert added[0].level == logging.WARNING


def test_file_handler_captures_debug(fresh_logging, tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    setup_logging("INFO", log_dir)
    logging.getLogger("qualifier.test").debug("fibonacci trace line")
    for handler in fresh_logging.handlers:
        handler.flush()
    assert "fibonacci trace line" in daily_log_file(log_dir).read_text(encoding="utf-8")


def test_only_first_call_has_effect(fresh_logging) -> None:
    setup_logging("INFO", "")
    count = len(fresh_logging.handlers)
    setup_logging("DEBUG", "")
    assert len(fresh_logging.handlers) == count


def test_noisy_loggers_quieted(fresh_logging) -> None:
    setup_logging("DEBUG", "")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("google").level == logging.WARNING


def test_logging_configured_at_startup_not_import(fresh_logging, tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    app = create_app(Settings(log_dir=str(log_dir)), ai_client=FakeAIClient())
    assert not log_dir.exists()

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200

    assert log_dir.is_dir()
