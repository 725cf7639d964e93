# topmark:header:start
#
#   project      : Colorverb
#   file         : test_attributes.py
#   file_relpath : tests/cli/test_attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `attributes` command."""

from __future__ import annotations

import pytest

from colorverb.core.attributes import ATTRIBUTE_TABLE
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_attributes_plain() -> None:
    result = run_cli(["--color", "never", "attributes"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == len(ATTRIBUTE_TABLE)
    by_name = {line.split()[0]: line.split()[1:] for line in lines}
    assert by_name["fgRed"] == ["31", "sample"]
    assert by_name["bgBrightWhite"] == ["107", "sample"]
    assert by_name["underline"] == ["4", "sample"]
    assert "\x1b" not in result.output


def test_attributes_colored_samples() -> None:
    result = run_cli(["--color", "always", "attributes"])
    assert_SUCCESS(result)
    assert "\x1b[31msample\x1b[0m" in result.output
    assert "\x1b[1msample\x1b[0m" in result.output


def test_attributes_palette() -> None:
    result = run_cli(["--color", "always", "attributes", "--palette"])
    assert_SUCCESS(result)
    assert "\x1b[48;5;0m   0 \x1b[0m" in result.output
    assert "\x1b[48;5;255m 255 \x1b[0m" in result.output


def test_attributes_palette_plain() -> None:
    result = run_cli(["--color", "never", "attributes", "--palette"])
    assert_SUCCESS(result)
    palette = result.output.splitlines()[len(ATTRIBUTE_TABLE) + 1 :]
    assert len(palette) == 16
    assert palette[0].split() == [str(i) for i in range(16)]
    assert palette[-1].split() == [str(i) for i in range(240, 256)]
