"""
Length Validators

Validators that bound the length of a string. Length is len(value), i.e.
the number of code points. Bounds are taken as given: a lower bound above
the upper bound simply rejects every value, and negative bounds follow the
same arithmetic.
"""

from typing import Optional

from ..utils.error_handler import ConfigurationError
from .base import StringValidator, ValidationIssue


def _check_bound(name: str, bound: Optional[int]) -> None:
    if bound is None:
        return
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise ConfigurationError(
            f"{name} must be an integer, got {type(bound).__name__}"
        )


class LengthValidator(StringValidator):
    """Validator for string length"""

    def __init__(
        self,
        message: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        strict: bool = False,
    ):
        """
        Initialize length validator

        Args:
            message: Message returned when the value fails
            min_length: Lower bound, or None for no lower bound
            max_length: Upper bound, or None for no upper bound
            strict: Whether the bounds themselves are excluded
        """
        super().__init__()
        _check_bound("min_length", min_length)
        _check_bound("max_length", max_length)
        self.message = message
        self.min_length = min_length
        self.max_length = max_length
        self.strict = strict

    def validate(self, value: str) -> Optional[ValidationIssue]:
        n = len(value)

        if self.strict:
            too_short = self.min_length is not None and n <= self.min_length
            too_long = self.max_length is not None and n >= self.max_length
        else:
            too_short = self.min_length is not None and n < self.min_length
            too_long = self.max_length is not None and n > self.max_length

        if too_short or too_long:
            return ValidationIssue(self.message)
        return None

    def __repr__(self) -> str:
        low = "(" if self.strict else "["
        high = ")" if self.strict else "]"
        return (
            f"LengthValidator({low}{self.min_length}, {self.max_length}{high})"
        )


# Factory functions
def length(min_len: int, max_len: int, message: str) -> LengthValidator:
    """Valid when min_len <= len(value) <= max_len"""
    return LengthValidator(message, min_length=min_len, max_length=max_len)


def length_strict(min_len: int, max_len: int, message: str) -> LengthValidator:
    """Valid when min_len < len(value) < max_len"""
    return LengthValidator(
        message, min_length=min_len, max_length=max_len, strict=True
    )


def min_length(min_len: int, message: str) -> LengthValidator:
    """Valid when len(value) >= min_len"""
    return LengthValidator(message, min_length=min_len)


def min_length_strict(min_len: int, message: str) -> LengthValidator:
    """Valid when len(value) > min_len"""
    return LengthValidator(message, min_length=min_len, strict=True)


def max_length(max_len: int, message: str) -> LengthValidator:
    """Valid when len(value) <= max_len"""
    return LengthValidator(message, max_length=max_len)


def max_length_strict(max_len: int, message: str) -> LengthValidator:
    """Valid when len(value) < max_len"""
    return LengthValidator(message, max_length=max_len, strict=True)
