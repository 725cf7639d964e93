# topmark:header:start
#
#   project      : Colorverb
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Colorverb test suite.

Sets up TRACE diagnostics logging for test runs and isolates every test from
environment variables and process-wide writers that influence color decisions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from colorverb.config import logging
from colorverb.output.logger import set_std_logger
from colorverb.output.printer import set_std_printer

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear environment variables that would force log levels or color.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def reset_std_writers() -> Iterator[None]:
    """Drop the process-wide printer and logger before and after each test."""
    set_std_printer(None)
    set_std_logger(None)
    yield
    set_std_printer(None)
    set_std_logger(None)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure TRACE-level diagnostics logging for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
