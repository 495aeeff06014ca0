"""Tests for the real clock, token and filesystem capabilities."""

import re
from datetime import date

import pytest

from playground.options.system import (
    DiskPathChecker,
    UuidTokenSource,
    format_short_date,
)


@pytest.mark.unit
class TestFormatShortDate:

    def test_no_zero_padding_and_two_digit_year(self):
        assert format_short_date(date(2026, 3, 7)) == "3-7-26"

    def test_contains_no_slashes(self):
        assert "/" not in format_short_date(date(2026, 12, 31))


@pytest.mark.unit
def test_tokens_are_unique_uppercase_uuids():
    source = UuidTokenSource()
    first, second = source.next(), source.next()

    assert first != second
    assert re.fullmatch(r"[0-9A-F]{8}(-[0-9A-F]{4}){3}-[0-9A-F]{12}", first)


@pytest.mark.unit
def test_disk_path_checker(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    checker = DiskPathChecker()

    assert checker.is_directory(str(tmp_path))
    assert checker.exists(str(file_path))
    assert not checker.is_directory(str(file_path))
    assert not checker.exists(str(tmp_path / "missing"))
