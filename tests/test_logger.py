# tests/test_logger.py

import logging
import sys

import pytest

from devhub.logger import DashboardFormatter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(name="devhub.dashboard", level=logging.ERROR, msg="Error fetching repositories"):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_plain_format_uses_component_name():
    line = DashboardFormatter(use_colors=False).format(make_record())

    assert "| ERROR |" in line
    assert "dashboard" in line
    assert line.endswith("Error fetching repositories")
    assert "\033[" not in line


def test_format_appends_traceback():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("devhub.dashboard", logging.ERROR, __file__, 1, "failed", None, None)
        record.exc_info = sys.exc_info()

    line = DashboardFormatter(use_colors=False).format(record)

    assert "RuntimeError: boom" in line


def test_setup_logging_writes_log_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "devhub.log"

    setup_logging(level="debug", log_file=str(log_file), use_colors=False)
    get_logger("devhub.test").info("hello from the dashboard")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert "hello from the dashboard" in log_file.read_text(encoding="utf-8")
