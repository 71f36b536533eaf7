"""
Unit tests for nonempty and regular expression validators.
"""

import re

import pytest

from strvalid import (
    ConfigurationError,
    PatternError,
    RegexpValidator,
    ValidationIssue,
    compile_pattern,
    nonempty,
    regexp,
    regexp_compiled,
)


class TestNonempty:
    """Test the nonempty validator."""

    def test_empty_string_fails(self):
        assert nonempty("required").validate("") == ValidationIssue("required")

    @pytest.mark.parametrize("value", ["hello", " ", "\t\n", "0"])
    def test_any_content_passes(self, value):
        """Whitespace-only strings are not empty."""
        assert nonempty("required").validate(value) is None


class TestRegexp:
    """Test regexp and regexp_compiled."""

    def test_non_match(self):
        assert regexp("^[a-z]+$", "a").validate("nonmatch003") is not None

    def test_match(self):
        assert regexp("^[a-z]+$", "a").validate("match") is None

    def test_pattern_is_not_anchored_implicitly(self):
        """An unanchored pattern matches anywhere in the value."""
        validator = regexp("[0-9]", "needs a digit")
        assert validator.validate("abc1def") is None
        assert validator.validate("abcdef") == ValidationIssue("needs a digit")

    def test_flags_are_applied(self):
        validator = regexp("^[a-z]+$", "a", flags=re.IGNORECASE)
        assert validator.validate("MiXeD") is None

    @pytest.mark.parametrize("pattern", ["[a-z", "(abc", "*abc", "a{2,1}"])
    def test_malformed_pattern_fails_at_construction(self, pattern):
        """A bad pattern is a configuration error, not a validation failure."""
        with pytest.raises(PatternError) as exc_info:
            regexp(pattern, "a")

        assert exc_info.value.pattern == pattern
        assert isinstance(exc_info.value, ConfigurationError)
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_compiled_pattern_is_shared(self):
        """Many validators can reuse one compiled pattern."""
        matcher = re.compile(r"^\d+$")
        first = regexp_compiled(matcher, "first")
        second = regexp_compiled(matcher, "second")

        assert first.matcher is second.matcher
        assert first.validate("123") is None
        assert second.validate("12a") == ValidationIssue("second")

    def test_compiled_rejects_pattern_source(self):
        with pytest.raises(ConfigurationError):
            regexp_compiled("^[a-z]+$", "a")

    def test_repr(self):
        assert repr(regexp("^x$", "a")) == "RegexpValidator('^x$')"

    def test_regexp_returns_regexp_validator(self):
        assert isinstance(regexp("x", "a"), RegexpValidator)


class TestCompilePattern:
    """Test compile_pattern."""

    def test_valid_pattern(self):
        assert compile_pattern("^a+$").match("aaa")

    def test_invalid_pattern(self):
        with pytest.raises(PatternError, match="Invalid regular expression"):
            compile_pattern("[")

    def test_non_string_pattern(self):
        with pytest.raises(ConfigurationError):
            compile_pattern(42)
