"""Tests for logging configuration."""
import logging
import logging.handlers
from pathlib import Path
from unittest.mock import patch

import pytest

from vocabprogress.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore the root logger after a test reconfigures it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


def test_setup_logging_with_file(restore_root_logger: logging.Logger, tmp_path: Path) -> None:
    """Test console and rotating file handlers."""
    log_file = tmp_path / "logs" / "vocabprogress.log"

    with patch("vocabprogress.logging_config.settings") as mock_settings:
        mock_settings.logging.file = str(log_file)
        mock_settings.logging.level = "DEBUG"
        mock_settings.logging.format = "%(levelname)s %(message)s"
        setup_logging()

    handler_types = [type(handler) for handler in restore_root_logger.handlers]
    assert logging.StreamHandler in handler_types
    assert logging.handlers.RotatingFileHandler in handler_types
    assert restore_root_logger.level == logging.DEBUG
    assert log_file.parent.exists()


def test_setup_logging_console_only(restore_root_logger: logging.Logger) -> None:
    """Test that no file handler is added without a log file."""
    with patch("vocabprogress.logging_config.settings") as mock_settings:
        mock_settings.logging.file = None
        mock_settings.logging.level = "INFO"
        mock_settings.logging.format = "%(message)s"
        setup_logging()

    assert len(restore_root_logger.handlers) == 1
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
