"""
Tests for scalar attribute converters.

Covers strip_quotes, get_integer, get_float, get_keyword and
get_string_option.
"""

import logging

import pytest

from xfa_attrs.converters.scalars import (
    get_float,
    get_integer,
    get_keyword,
    get_string_option,
    strip_quotes,
)


class TestStripQuotes:
    """Test cases for strip_quotes."""

    def test_double_quotes(self):
        assert strip_quotes('"abc"') == "abc"

    def test_single_quotes(self):
        assert strip_quotes("'abc'") == "abc"

    def test_unquoted_unchanged(self):
        assert strip_quotes("abc") == "abc"
        assert strip_quotes("") == ""

    def test_closing_quote_not_checked(self):
        """Mismatched closing character is dropped anyway."""
        assert strip_quotes("'abc\"") == "abc"
        assert strip_quotes('"abcd') == "abc"

    def test_lone_quote(self):
        assert strip_quotes('"') == ""


class TestGetInteger:
    """Test cases for get_integer."""

    @pytest.mark.parametrize("data,expected", [
        ("12", 12),
        ("  7 ", 7),
        ("-3", -3),
        ("+4", 4),
        ("12px", 12),
        ("3.9", 3),
    ])
    def test_valid(self, data, expected):
        assert get_integer(data, -1, lambda n: True) == expected

    @pytest.mark.parametrize("data", [None, "", "abc", "px12", "   "])
    def test_unparsable_returns_default(self, data):
        assert get_integer(data, 42, lambda n: True) == 42

    def test_rejected_by_validate(self):
        assert get_integer("5", 1, lambda n: n > 10) == 1
        assert get_integer("15", 1, lambda n: n > 10) == 15

    def test_validate_not_called_for_empty(self):
        calls = []

        def validate(n):
            calls.append(n)
            return True

        assert get_integer("", 3, validate) == 3
        assert get_integer(None, 3, validate) == 3
        assert calls == []

    def test_validate_optional(self):
        assert get_integer("8", 0) == 8

    def test_oversized_digit_run_returns_default(self):
        assert get_integer("1" * 5000, 7) == 7
        assert get_integer("-" + "9" * 5000 + "px", 7, lambda n: True) == 7

    def test_non_ascii_digits_return_default(self):
        assert get_integer("١٢", 0) == 0
        assert get_float("١٢.٥", 1.5) == 1.5

    def test_fallback_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="xfa_attrs.converters.scalars"):
            get_integer("nope", 0)
        assert "rejected" in caplog.text


class TestGetFloat:
    """Test cases for get_float."""

    @pytest.mark.parametrize("data,expected", [
        ("1.5", 1.5),
        (" -2.25 ", -2.25),
        (".5", 0.5),
        ("3.", 3.0),
        ("1e3", 1000.0),
        ("2.5mm", 2.5),
    ])
    def test_valid(self, data, expected):
        assert get_float(data, 0.0, lambda n: True) == pytest.approx(expected)

    @pytest.mark.parametrize("data", [None, "", "abc", "Infinity", "1e999"])
    def test_unparsable_or_infinite_returns_default(self, data):
        assert get_float(data, 9.5, lambda n: True) == 9.5

    def test_rejected_by_validate(self):
        assert get_float("-1", 0.0, lambda n: n >= 0) == 0.0


class TestGetKeyword:
    """Test cases for get_keyword and get_string_option."""

    def test_keyword_trimmed(self):
        assert get_keyword("  left ", "right", lambda k: k in ("left", "right")) == "left"

    def test_keyword_rejected(self):
        assert get_keyword("up", "right", lambda k: k in ("left", "right")) == "right"

    def test_keyword_empty(self):
        assert get_keyword(None, "right", lambda k: False) == "right"

    def test_string_option(self):
        options = ["visible", "hidden", "invisible"]

        assert get_string_option("hidden", options) == "hidden"
        assert get_string_option("bogus", options) == "visible"
        assert get_string_option("", options) == "visible"
        assert get_string_option(None, options) == "visible"

    def test_string_option_without_options(self):
        assert get_string_option("a", []) is None
        assert get_string_option(None, ()) is None

    def test_idempotent(self):
        options = ("tb", "lr-tb", "position")
        assert get_string_option("lr-tb", options) == get_string_option("lr-tb", options)
