# topmark:header:start
#
#   project      : Colorverb
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `version` command and group-level options."""

from __future__ import annotations

import json

import pytest

from colorverb.constants import COLORVERB_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_version_plain() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == COLORVERB_VERSION


def test_version_verbose() -> None:
    result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["Colorverb version:", f"    {COLORVERB_VERSION}"]


def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": COLORVERB_VERSION}


def test_version_rejects_unknown_format() -> None:
    result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code != 0


def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_invalid_color_mode() -> None:
    result = run_cli(["--color", "sometimes", "version"])
    assert result.exit_code != 0


def test_no_subcommand_prints_hint() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'colorverb render" in result.output
    assert "render" in result.output
    assert "check" in result.output
