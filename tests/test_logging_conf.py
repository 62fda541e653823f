"""
Logging Configuration Tests

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- domain_quotes.shared.logging_conf (setup_logging)
- pytest (testing framework)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest  # Testing framework for writing and running tests

from domain_quotes.shared.logging_conf import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_file_logging_in_dir(self, tmp_path):
        setup_logging(level=logging.INFO, log_dir=tmp_path / "logs", log_stdout=False)
        root = logging.getLogger()
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
        assert (tmp_path / "logs" / "domain_quotes.log").exists()

    def test_console_only(self):
        setup_logging(level=logging.DEBUG, log_stdout=True)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(type(h) is logging.StreamHandler for h in root.handlers)

    def test_console_logs_to_stderr(self):
        setup_logging(log_stdout=True)
        consoles = [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]
        assert consoles and all(h.stream is sys.stderr for h in consoles)

    def test_no_destinations(self):
        setup_logging(log_stdout=False)
        assert all(isinstance(h, logging.NullHandler) for h in logging.getLogger().handlers)
