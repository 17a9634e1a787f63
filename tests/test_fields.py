# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for GELF field normalization."""

import pytest

from log_radis.exceptions import ReservedFieldWarning
from log_radis.fields import normalize_fields, sanitize_field_name


def _normalize(fields):
    return normalize_fields(fields, hostname="host.example", clock=lambda: 12.5)


class TestSanitizeFieldName:
    """Tests for sanitize_field_name."""

    def test_plain_name_is_prefixed(self):
        assert sanitize_field_name("foo") == "_foo"

    def test_vendor_name_is_lowercased(self):
        assert sanitize_field_name("_Foo.Bar-1") == "_foo.bar-1"

    def test_invalid_characters_are_stripped(self):
        assert sanitize_field_name("foo bar!baz") == "_foobarbaz"

    def test_stripped_name_keeps_case(self):
        """Test that only names already in vendor form are lowercased."""
        assert sanitize_field_name("Foo Bar") == "_FooBar"

    def test_underscore_alone_gets_another_prefix(self):
        assert sanitize_field_name("_") == "__"

    def test_vendor_name_with_invalid_characters(self):
        """Test that an underscore name with invalid chars is stripped and prefixed."""
        assert sanitize_field_name("_a b") == "__ab"

    def test_non_string_name(self):
        assert sanitize_field_name(42) == "_42"


class TestNormalizeFields:
    """Tests for normalize_fields."""

    def test_defaults(self):
        """Test that host and timestamp default to the injected values."""
        gelf = _normalize({})

        assert gelf == {"host": "host.example", "timestamp": "12.5"}

    def test_none_fields(self):
        assert _normalize(None) == {"host": "host.example", "timestamp": "12.5"}

    def test_vendor_fields(self):
        gelf = _normalize({"foo": "bar", "_Count": 3})

        assert gelf["_foo"] == "bar"
        assert gelf["_count"] == 3

    def test_none_values_are_dropped(self):
        gelf = _normalize({"foo": None, "host": None})

        assert "_foo" not in gelf
        assert gelf["host"] == "host.example"

    def test_host_override(self):
        assert _normalize({"host": "foobar"})["host"] == "foobar"

    def test_hostname_override(self):
        gelf = _normalize({"hostname": "foobar"})

        assert gelf["host"] == "foobar"
        assert "_hostname" not in gelf

    def test_host_wins_over_hostname(self):
        """Test that both aliases are consumed and host takes priority."""
        gelf = _normalize({"host": "a", "hostname": "b"})

        assert gelf["host"] == "a"
        assert "_host" not in gelf
        assert "_hostname" not in gelf

    def test_time_override_is_stringified(self):
        assert _normalize({"time": 0})["timestamp"] == "0"

    def test_timestamp_wins_over_time(self):
        gelf = _normalize({"timestamp": 2, "time": 1})

        assert gelf["timestamp"] == "2"
        assert "_time" not in gelf
        assert "_timestamp" not in gelf

    def test_message_aliases(self):
        gelf = _normalize({"message": "m", "short_message": "s"})

        assert gelf["full_message"] == "m"
        assert gelf["short_message"] == "s"
        assert "_message" not in gelf

    def test_full_message_wins_over_message(self):
        gelf = _normalize({"message": "m", "full_message": "f"})

        assert gelf["full_message"] == "f"

    def test_version_and_level_are_vendor_fields(self):
        """Test that callers cannot override version or level."""
        gelf = _normalize({"version": "2.0", "level": 1})

        assert "version" not in gelf
        assert "level" not in gelf
        assert gelf["_version"] == "2.0"
        assert gelf["_level"] == 1

    def test_id_is_dropped_with_warning(self):
        with pytest.warns(ReservedFieldWarning, match="_id"):
            gelf = _normalize({"id": 1, "foo": "bar"})

        assert "_id" not in gelf
        assert gelf["_foo"] == "bar"

    def test_sanitized_id_is_dropped(self):
        with pytest.warns(ReservedFieldWarning):
            gelf = _normalize({"_ID": 1})

        assert "_id" not in gelf

    def test_id_warning_is_logged(self, caplog):
        with pytest.warns(ReservedFieldWarning):
            _normalize({"id": 1})

        assert any("_id" in record.getMessage() for record in caplog.records)
        assert any(record.levelname == "WARNING" for record in caplog.records)

    def test_input_is_not_mutated(self):
        fields = {"host": "h"}

        _normalize(fields)

        assert fields == {"host": "h"}
