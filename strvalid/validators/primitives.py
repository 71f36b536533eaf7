"""
Primitive Validators

This module provides the emptiness check and the regular expression
validators the format validators are built on.
"""

import re
from typing import Optional, Pattern

from ..utils.error_handler import ConfigurationError, PatternError
from .base import StringValidator, ValidationIssue


class NonemptyValidator(StringValidator):
    """Rejects only the empty string; whitespace counts as content"""

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def validate(self, value: str) -> Optional[ValidationIssue]:
        if value == "":
            return ValidationIssue(self.message)
        return None


class RegexpValidator(StringValidator):
    """
    Validator for regular expression matches.

    The value is valid when the pattern matches anywhere in it
    (Pattern.search). Anchors in the pattern decide whether the whole
    string has to match; none are added here.
    """

    def __init__(self, matcher: Pattern[str], message: str):
        """
        Initialize regexp validator

        Args:
            matcher: Compiled pattern
            message: Message returned when the value does not match
        """
        super().__init__()
        if not isinstance(matcher, re.Pattern):
            raise ConfigurationError(
                f"Expected a compiled pattern, got {type(matcher).__name__}"
            )
        self.matcher = matcher
        self.message = message

    def validate(self, value: str) -> Optional[ValidationIssue]:
        if self.matcher.search(value) is not None:
            return None
        return ValidationIssue(self.message)

    def __repr__(self) -> str:
        return f"RegexpValidator({self.matcher.pattern!r})"


def compile_pattern(pattern: str, flags: int = 0) -> Pattern[str]:
    """
    Compile a pattern, raising PatternError if it is malformed.

    Args:
        pattern: Regular expression source
        flags: re module flags

    Returns:
        Compiled pattern
    """
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e
    except TypeError as e:
        raise ConfigurationError(f"Pattern must be a string: {e}") from e


def nonempty(message: str) -> NonemptyValidator:
    """Valid when the value is not the empty string"""
    return NonemptyValidator(message)


def regexp(pattern: str, message: str, flags: int = 0) -> RegexpValidator:
    """
    Create a regular expression validator from pattern source.

    Raises:
        PatternError: if the pattern does not compile
    """
    validator = RegexpValidator(compile_pattern(pattern, flags), message)
    validator.logger.debug(f"Compiled pattern {pattern!r}")
    return validator


def regexp_compiled(matcher: Pattern[str], message: str) -> RegexpValidator:
    """Create a regular expression validator from an already compiled pattern"""
    return RegexpValidator(matcher, message)
