"""Unit tests for structlog configuration."""

import io
import logging
import sys

import structlog

from infrastructure.logging import configure_logging


class TestConfigureLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_renderer_when_not_a_tty(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.setattr(sys, "stdout", io.StringIO())

        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_when_color_forced(self, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")

        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_debug_controls_minimum_level(self):
        configure_logging(debug=False)
        assert structlog.get_config()["wrapper_class"] is (
            structlog.make_filtering_bound_logger(logging.INFO)
        )

        configure_logging(debug=True)
        assert structlog.get_config()["wrapper_class"] is (
            structlog.make_filtering_bound_logger(logging.DEBUG)
        )
