"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place log files under logs/<subdir>."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )

    builder = logger_module.LoggerBuilder()
    api_logger = (
        builder.name("finance.test.api")
        .subdir("api")
        .prefix("api_logs")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert api_logger.name == "finance.test.api"
    assert api_logger.level == logging.WARNING
    assert api_logger.propagate is False
    assert len(api_logger.handlers) == 1
    handler = api_logger.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    expected_path = tmp_path / "logs" / "api" / "20240101_api_logs.log"
    assert handler.baseFilename == str(expected_path)
    # A configured logger is returned untouched on rebuild.
    assert builder.console(True).build() is api_logger
    assert len(api_logger.handlers) == 1
    handler.close()


def test_builder_uses_custom_handler_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    file_factory = MagicMock(return_value=logging.NullHandler())
    console_factory = MagicMock(return_value=logging.NullHandler())
    fmt = logging.Formatter("%(message)s")

    custom = (
        logger_module.LoggerBuilder()
        .name("finance.test.custom")
        .formatter(lambda: fmt)
        .file_handler(file_factory)
        .console_handler(console_factory)
        .build()
    )

    assert len(custom.handlers) == 2
    path, used_fmt = file_factory.call_args.args
    assert path.parent == tmp_path / "logs" / "app"
    assert used_fmt is fmt
    console_factory.assert_called_once_with(fmt)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "finance.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    file_handler.close()

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("app")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")
    logger.exception("exc")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    fake_logger.exception.assert_called_with("exc")
    assert logger_module.Logger("app") is logger


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return singletons."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()
    usage_logger_1 = logger_module.get_usage_logger()
    usage_logger_2 = logger_module.get_usage_logger()

    assert app_logger_1 is app_logger_2
    assert usage_logger_1 is usage_logger_2
    assert app_logger_1 is not usage_logger_1
    assert isinstance(app_logger_1.logger, MagicMock)
