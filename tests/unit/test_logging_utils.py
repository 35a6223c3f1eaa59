"""Unit tests for logging configuration."""

import logging

import pytest

from html2md.logging_utils import PACKAGE_LOGGER, configure_logging, resolve_log_level


@pytest.fixture
def package_logger():
    """Restore the html2md logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.unit
class TestResolveLogLevel:
    """Test level name resolution."""

    def test_names_are_case_insensitive(self):
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level(" Warning ") == logging.WARNING

    def test_numeric_level_passes_through(self):
        assert resolve_log_level(logging.ERROR) == logging.ERROR

    def test_unknown_name_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_log_level("chatty")


@pytest.mark.unit
class TestConfigureLogging:
    """Test html2md logger setup."""

    def test_configures_package_logger_only(self, package_logger):
        root_handlers = list(logging.getLogger().handlers)
        configured = configure_logging("info")
        assert configured is package_logger
        assert package_logger.level == logging.INFO
        assert package_logger.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_default_level_is_warning(self, package_logger):
        configure_logging()
        assert package_logger.level == logging.WARNING

    def test_repeated_calls_replace_handlers(self, package_logger):
        configure_logging("INFO")
        configure_logging("ERROR")
        assert sum(isinstance(h, logging.StreamHandler) for h in package_logger.handlers) == 1
        assert package_logger.level == logging.ERROR

    def test_debug_turns_on_trace_format(self, package_logger):
        configure_logging("DEBUG")
        assert "%(name)s" in package_logger.handlers[-1].formatter._fmt

    def test_trace_format_can_be_disabled(self, package_logger):
        configure_logging("DEBUG", trace_mode=False)
        assert package_logger.handlers[-1].formatter._fmt.startswith("html2md:")

    def test_console_records_are_prefixed(self, package_logger, capsys):
        configure_logging("INFO")
        logging.getLogger("html2md.converter").info("converted")
        assert "html2md: INFO: converted" in capsys.readouterr().err

    def test_log_file_handler(self, package_logger, tmp_path):
        log_file = tmp_path / "html2md.log"
        configure_logging("INFO", log_file=str(log_file))
        assert any(isinstance(handler, logging.FileHandler) for handler in package_logger.handlers)
        logging.getLogger("html2md.test").info("hello file")
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unusable_log_file_is_reported(self, package_logger, tmp_path, capsys):
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"))
        assert not any(isinstance(handler, logging.FileHandler) for handler in package_logger.handlers)
        assert "Could not open log file" in capsys.readouterr().err

    def test_unknown_level_raises(self, package_logger):
        with pytest.raises(ValueError):
            configure_logging("chatty")
