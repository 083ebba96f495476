"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from podexplorer.config.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_is_warning(self) -> None:
        logger = setup_logging()

        assert logger.name == "podexplorer"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_configured_level(self) -> None:
        logger = setup_logging(level="info")

        assert logger.level == logging.INFO

    def test_verbose_overrides_level(self) -> None:
        logger = setup_logging(verbose=True, level="ERROR")

        assert logger.level == logging.DEBUG

    def test_repeated_setup_does_not_stack_handlers(self) -> None:
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_log_file_receives_debug_records(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "podexplorer.log"
        logger = setup_logging(log_file=log_file)

        logging.getLogger("podexplorer.catalog.client").debug("GET /id/42")
        for handler in logger.handlers:
            handler.flush()

        assert logger.handlers[0].level == logging.WARNING
        assert "GET /id/42" in log_file.read_text()
