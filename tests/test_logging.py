"""
Logging utilities.
"""

import logging

import pytest

from path_engine.utils.config import Config
from path_engine.utils.logging import (
    LogFormatter, PerformanceLogger, get_default_log_file, log_exception, setup_logging,
    setup_logging_from_config,
)


@pytest.fixture
def component(request):
    name = f"test_{request.node.name}"
    yield name
    logger = logging.getLogger(f"path_engine.{name}")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_console_only(component):
    logger = setup_logging(console_level="WARNING", component=component)
    assert logger.name == f"path_engine.{component}"
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_setup_logging_is_idempotent(component):
    first = setup_logging(component=component)
    second = setup_logging(component=component)
    assert first is second
    assert len(second.handlers) == 1


def test_setup_logging_writes_file(component, tmp_path):
    log_file = tmp_path / "logs" / "engine.log"
    logger = setup_logging(log_file=str(log_file), component=component)
    logger.debug("written to file only")
    for handler in logger.handlers:
        handler.flush()
    assert "written to file only" in log_file.read_text()
    assert logger.level == logging.DEBUG


def test_setup_logging_from_config(tmp_path, monkeypatch):
    config = Config(str(tmp_path / "config.json"))
    config.set("logging.console_level", "ERROR")
    calls = {}

    def fake_setup(**kwargs):
        calls.update(kwargs)
        return logging.getLogger("path_engine")

    monkeypatch.setattr("path_engine.utils.logging.setup_logging", fake_setup)
    setup_logging_from_config(config)
    assert calls == {"log_file": None, "console_level": "ERROR", "file_level": "DEBUG"}


def test_setup_logging_from_config_default_file(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = Config(str(tmp_path / "config.json"))
    config.set("logging.to_default_file", True)
    calls = {}

    def fake_setup(**kwargs):
        calls.update(kwargs)
        return logging.getLogger("path_engine")

    monkeypatch.setattr("path_engine.utils.logging.setup_logging", fake_setup)
    setup_logging_from_config(config)
    assert calls["log_file"] == get_default_log_file()
    assert calls["log_file"].startswith(str(tmp_path / ".path_engine" / "logs"))

    config.set("logging.file", str(tmp_path / "chosen.log"))
    setup_logging_from_config(config)
    assert calls["log_file"] == str(tmp_path / "chosen.log")


def test_formatter_colors_level():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "bad", None, None)
    colored = LogFormatter(colored=True, fmt="%(levelname)s %(message)s")
    plain = LogFormatter(colored=False, fmt="%(levelname)s %(message)s")
    assert plain.format(record) == "ERROR bad"
    if colored.colored:
        assert "\033[31m" in colored.format(record)


def test_default_log_file_location(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    log_file = get_default_log_file()
    assert log_file.startswith(str(tmp_path / ".path_engine" / "logs"))
    assert log_file.endswith(".log")


def test_log_exception_includes_traceback(caplog):
    logger = logging.getLogger("path_engine.test")
    try:
        raise ValueError("broken predicate")
    except ValueError as e:
        log_exception(logger, e, "Selection aborted")

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "Selection aborted: broken predicate"
    assert record.exc_info[0] is ValueError


def test_performance_logger(caplog):
    logger = logging.getLogger("path_engine.test")
    perf = PerformanceLogger(logger, "Engine")
    with caplog.at_level(logging.DEBUG, logger="path_engine"):
        perf.start("select")
        duration = perf.end("select")
    assert duration >= 0
    assert "Engine select took" in caplog.text
    assert perf.start_times == {}


def test_performance_logger_unknown_operation(caplog):
    perf = PerformanceLogger(logging.getLogger("path_engine.test"), "Engine")
    assert perf.end("never-started") == 0.0
    assert "No start time found for never-started" in caplog.text
