# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for level resolution."""

import pytest

from log_radis.levels import LEVELS, resolve_level


class TestResolveLevel:
    """Tests for resolve_level."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("fatal", 1),
            ("emerg", 1),
            ("emergency", 1),
            ("alert", 2),
            ("crit", 2),
            ("critical", 3),
            ("error", 4),
            ("err", 4),
            ("warn", 5),
            ("warning", 5),
            ("note", 6),
            ("notice", 6),
            ("info", 7),
            ("debug", 8),
            ("trace", 9),
            ("core", 9),
        ],
    )
    def test_named_levels(self, name, expected):
        """Test that every level name maps to its numeric level."""
        assert resolve_level(name) == expected

    def test_lookup_is_case_insensitive(self):
        """Test that level names are matched regardless of case."""
        assert resolve_level("WARN") == 5
        assert resolve_level("Info") == 7

    def test_single_digit_is_used_directly(self):
        """Test that a single digit bypasses the table."""
        assert resolve_level("3") == 3
        assert resolve_level("0") == 0
        assert resolve_level(6) == 6

    def test_multi_digit_is_not_a_level(self):
        """Test that only single digits are taken as numeric levels."""
        assert resolve_level("12") is None
        assert resolve_level(10) is None

    def test_unknown_level_is_none(self):
        """Test that unknown names resolve to None instead of raising."""
        assert resolve_level("xxx") is None
        assert resolve_level("") is None

    def test_digit_with_trailing_newline_is_not_numeric(self):
        """Test that the digit check matches the whole token."""
        assert resolve_level("7\n") is None

    def test_table_values_in_range(self):
        """Test that all table levels are on the 1-9 scale."""
        assert all(1 <= value <= 9 for value in LEVELS.values())
