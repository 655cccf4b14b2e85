# SPDX-License-Identifier: MIT
"""Unit tests for version validation."""

import pytest

from gowrap_semver import (
    InvalidVersionError,
    is_valid_semver,
    parse_components,
)


class TestIsValidSemver:
    """Tests for is_valid_semver function."""

    @pytest.mark.parametrize(
        "version",
        ["1", "21", "1.3", "1.34", "1.1.3", "1.1.34", "0.0.0", "01.2"],
    )
    def test_valid(self, version: str):
        """Test MAJOR, MAJOR.MINOR and MAJOR.MINOR.PATCH forms."""
        assert is_valid_semver(version) is True

    @pytest.mark.parametrize(
        "version",
        [
            "1.",
            "2a",
            "1.2.",
            "2.2a",
            "1.2.4.",
            "2.1.2a",
        ],
    )
    def test_trailing_dot_and_invalid_char(self, version: str):
        """Test that trailing dots and non-digit characters are rejected."""
        assert is_valid_semver(version) is False

    def test_empty_string(self):
        """Test that the empty string is invalid."""
        assert is_valid_semver("") is False

    def test_too_many_components(self):
        """Test that a fourth component is rejected."""
        assert is_valid_semver("1.2.3.4") is False

    def test_empty_segments(self):
        """Test that leading and doubled dots are rejected."""
        assert is_valid_semver(".1") is False
        assert is_valid_semver("1..2") is False
        assert is_valid_semver(".") is False

    def test_signs_rejected(self):
        """Test that signs are rejected."""
        assert is_valid_semver("-1") is False
        assert is_valid_semver("+1") is False
        assert is_valid_semver("1.-2") is False

    def test_whitespace_not_trimmed(self):
        """Test that surrounding whitespace is not accepted."""
        assert is_valid_semver(" 1.0") is False
        assert is_valid_semver("1.0 ") is False
        assert is_valid_semver("1.0\n") is False

    def test_scientific_notation(self):
        """Test that scientific notation is rejected."""
        assert is_valid_semver("1e3") is False

    def test_non_ascii_digits(self):
        """Test that non-ASCII digits are rejected."""
        assert is_valid_semver("١.2") is False

    def test_non_string_input(self):
        """Test invalid non-string input."""
        assert is_valid_semver(123) is False  # type: ignore
        assert is_valid_semver(None) is False  # type: ignore


class TestParseComponents:
    """Tests for parse_components function."""

    def test_major_only(self):
        """Test parsing a single component."""
        assert parse_components("2") == (2,)

    def test_full_version(self):
        """Test parsing all three components."""
        assert parse_components("1.20.4") == (1, 20, 4)

    def test_leading_zeros_numeric(self):
        """Test that components are converted to integers."""
        assert parse_components("01.002") == (1, 2)

    def test_invalid_raises(self):
        """Test that invalid input raises InvalidVersionError."""
        with pytest.raises(InvalidVersionError) as exc_info:
            parse_components("1.20.a")
        assert exc_info.value.version == "1.20.a"
        assert str(exc_info.value) == "invalid semantic version: 1.20.a"

    def test_empty_raises(self):
        """Test that the empty string raises InvalidVersionError."""
        with pytest.raises(InvalidVersionError):
            parse_components("")


class TestInvalidVersionError:
    """Tests for InvalidVersionError."""

    def test_default_message(self):
        """Test the default error message format."""
        err = InvalidVersionError("2a")
        assert str(err) == "invalid semantic version: 2a"
        assert err.version == "2a"

    def test_custom_message(self):
        """Test that a custom message overrides the default."""
        err = InvalidVersionError("2a", "bad version in config")
        assert str(err) == "bad version in config"
        assert err.version == "2a"
