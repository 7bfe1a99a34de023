"""Tests for the shared logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from geocoin.utils.logging import setup_logging


pytestmark = pytest.mark.usefixtures("restore_logging")


class TestSetupLogging:
    def test_installs_single_handler_at_level(self):
        handler = setup_logging("debug")
        root = logging.getLogger()
        assert root.handlers == [handler]
        assert root.level == logging.DEBUG

    def test_records_go_to_given_stream(self):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        logging.getLogger("geocoin.test").info("spawned %d caches", 4)
        logging.getLogger("geocoin.test").debug("hidden")
        text = stream.getvalue()
        assert "INFO" in text
        assert "geocoin.test: spawned 4 caches" in text
        assert "hidden" not in text

    def test_repeat_setup_replaces_handler(self):
        setup_logging("INFO")
        handler = setup_logging("WARNING")
        assert logging.getLogger().handlers == [handler]

    def test_access_log_quieted_below_warning(self):
        setup_logging("DEBUG")
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_access_log_follows_stricter_level(self):
        setup_logging("ERROR")
        assert logging.getLogger("uvicorn.access").level == logging.ERROR

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
