# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for structured logging setup."""

import logging
from collections.abc import Generator

import pytest
import structlog

from quarto.core.config.settings import Settings
from quarto.utils.logging import bind_context, clear_context, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root handlers, levels and structlog defaults after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    root_level = root.level
    package_level = logging.getLogger("quarto").level
    yield
    root.handlers[:] = handlers
    root.setLevel(root_level)
    logging.getLogger("quarto").setLevel(package_level)
    structlog.reset_defaults()
    clear_context()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_package_level(self) -> None:
        """Test that the package logger follows the configured level."""
        setup_logging(Settings(log_level="DEBUG"))

        assert logging.getLogger("quarto").level == logging.DEBUG

    def test_json_output_outside_development(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that stdlib records are rendered as JSON in production."""
        setup_logging(Settings(environment="production", log_level="INFO"))

        logging.getLogger("quarto.test").info("Placed %s on cell %d", "DFTS", 5)

        err = capsys.readouterr().err
        assert '"event": "Placed DFTS on cell 5"' in err
        assert '"level": "info"' in err

    def test_bound_context_is_rendered(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that bound context variables reach the output."""
        setup_logging(Settings(environment="production"))

        bind_context(turn=3)
        get_logger("quarto.test").info("Turn played")

        assert '"turn": 3' in capsys.readouterr().err
