"""
Tests for logging setup and stdout/stderr routing.
"""
import logging
from logging.handlers import QueueHandler

import pytest

from app.core import logging_config


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    logging_config._stop_log_listener()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMaxLevelFilter:
    """Tests for MaxLevelFilter"""

    @pytest.mark.parametrize("levelno, allowed", [
        (logging.INFO, True),
        (logging.WARNING, True),
        (logging.ERROR, False),
        (logging.CRITICAL, False),
    ])
    def test_filter(self, levelno, allowed):
        record = logging.LogRecord("test", levelno, __file__, 1, "msg", None, None)
        assert logging_config.MaxLevelFilter(logging.WARNING).filter(record) is allowed


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_installs_queue_handler(self, restore_root_logger):
        logging_config.setup_logging()

        assert restore_root_logger.level == logging.INFO
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0], QueueHandler)

    def test_level_by_name(self, restore_root_logger):
        logging_config.setup_logging("debug")
        assert restore_root_logger.level == logging.DEBUG

    def test_unknown_level_name_falls_back_to_info(self, restore_root_logger):
        logging_config.setup_logging("chatty")
        assert restore_root_logger.level == logging.INFO

    def test_repeated_setup_replaces_listener(self, restore_root_logger):
        logging_config.setup_logging()
        first = logging_config._log_listener
        logging_config.setup_logging()

        assert logging_config._log_listener is not first
        assert len(restore_root_logger.handlers) == 1
