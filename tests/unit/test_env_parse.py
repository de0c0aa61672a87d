"""Tests for ordstat.env_parse.

Covers:
- parse_bool: truthy/falsey values, unknown values (strict + non-strict), unset.
- parse_int: valid ints, invalid strings, minimum bound, unset, empty.
- parse_enum: canonical casing, unknown values (strict + non-strict), unset.
"""

from __future__ import annotations

import logging
from typing import ClassVar

import pytest

from ordstat.env_parse import ConfigError, parse_bool, parse_enum, parse_int


class TestParseBool:
    """Boolean parsing."""

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "On", " on "])
    def test_truthy(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("TEST_BOOL", raw)
        assert parse_bool("TEST_BOOL") is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "OFF", "", "   "])
    def test_falsey(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("TEST_BOOL", raw)
        assert parse_bool("TEST_BOOL", default=True) is False

    def test_unset_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TEST_BOOL", raising=False)
        assert parse_bool("TEST_BOOL", default=True) is True

    def test_unknown_strict_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_BOOL", "maybe")
        with pytest.raises(ConfigError, match="invalid boolean value"):
            parse_bool("TEST_BOOL")

    def test_unknown_nonstrict_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("TEST_BOOL", "garbage")
        with caplog.at_level(logging.WARNING):
            assert parse_bool("TEST_BOOL", default=True, strict=False) is True
        assert "Invalid boolean value" in caplog.text


class TestParseInt:
    """Integer parsing with a lower bound."""

    def test_valid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", " 42 ")
        assert parse_int("TEST_INT") == 42

    def test_unset_and_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TEST_INT", raising=False)
        assert parse_int("TEST_INT", default=7) == 7
        monkeypatch.setenv("TEST_INT", "")
        assert parse_int("TEST_INT", default=7) == 7

    def test_invalid_strict_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", "abc")
        with pytest.raises(ConfigError, match="invalid integer value"):
            parse_int("TEST_INT")

    def test_invalid_nonstrict_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", "abc")
        assert parse_int("TEST_INT", default=5, strict=False) == 5

    def test_below_minimum_strict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", "-1")
        with pytest.raises(ConfigError, match="below minimum"):
            parse_int("TEST_INT", min_value=0)

    def test_below_minimum_nonstrict_clamps(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_INT", "-1")
        assert parse_int("TEST_INT", min_value=0, strict=False) == 0


class TestParseEnum:
    """Enum parsing."""

    ALLOWED: ClassVar[set[str]] = {"LEFTMOST", "RANDOM"}

    def test_canonical_casing_returned(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_ENUM", " random ")
        assert parse_enum("TEST_ENUM", self.ALLOWED) == "RANDOM"

    def test_unset_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TEST_ENUM", raising=False)
        assert parse_enum("TEST_ENUM", self.ALLOWED, default="LEFTMOST") == "LEFTMOST"

    def test_unknown_strict_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEST_ENUM", "middle")
        with pytest.raises(ConfigError, match="allowed"):
            parse_enum("TEST_ENUM", self.ALLOWED)

    def test_unknown_nonstrict_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("TEST_ENUM", "middle")
        with caplog.at_level(logging.WARNING):
            value = parse_enum("TEST_ENUM", self.ALLOWED, default="LEFTMOST", strict=False)
        assert value == "LEFTMOST"
        assert "Invalid value for TEST_ENUM" in caplog.text
