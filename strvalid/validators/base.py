"""
Base Validation Classes

This module provides the foundation for all string validators: the
StringValidator interface, the StringFunc adapter for plain functions,
the ValidationIssue value returned on failure, and the functions that
apply a list of validators to one value.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from ..utils.error_handler import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationIssue:
    """A failed rule, carrying the message configured for it"""

    message: str

    def __str__(self) -> str:
        return self.message


class StringValidator(ABC):
    """Abstract base class for all string validators"""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def validate(self, value: str) -> Optional[ValidationIssue]:
        """
        Validate a value

        Args:
            value: String to validate

        Returns:
            None if the value satisfies the rule, otherwise a ValidationIssue
        """
        pass

    def __call__(self, value: str) -> Optional[ValidationIssue]:
        return self.validate(value)


CheckFunction = Callable[[str], Optional[Union[ValidationIssue, str]]]


class StringFunc(StringValidator):
    """
    Adapter that turns a plain function into a StringValidator.

    The function receives the value and returns None when it is valid.
    It may return either a ValidationIssue or a bare message string on
    failure; strings are wrapped into a ValidationIssue.
    """

    def __init__(self, func: CheckFunction, name: Optional[str] = None):
        super().__init__()
        if not callable(func):
            raise ConfigurationError(
                f"StringFunc needs a callable, got {type(func).__name__}"
            )
        self.func = func
        self.name = name or getattr(func, "__name__", "custom")

    def validate(self, value: str) -> Optional[ValidationIssue]:
        outcome = self.func(value)
        if outcome is None or isinstance(outcome, ValidationIssue):
            return outcome
        return ValidationIssue(str(outcome))

    def __repr__(self) -> str:
        return f"StringFunc({self.name})"


class CompositeValidator(StringValidator):
    """Validator that applies multiple validators in sequence"""

    def __init__(self, validators: Sequence[StringValidator]):
        """
        Initialize composite validator

        Args:
            validators: Validators to apply, in order
        """
        super().__init__()
        self.validators = tuple(validators)

    def validate(self, value: str) -> Optional[ValidationIssue]:
        """Return the first failure, skipping the remaining validators"""
        for validator in self.validators:
            issue = validator.validate(value)
            if issue is not None:
                return issue
        return None

    def validate_all(self, value: str) -> List[ValidationIssue]:
        """Return every failure, in validator order"""
        return validate_string(value, *self.validators)

    def __len__(self) -> int:
        return len(self.validators)


def validate_string(value: str, *validators: StringValidator) -> List[ValidationIssue]:
    """
    Apply validators to a string and collect their failures.

    Every validator runs, in the order given. The result holds one issue
    per failing validator in that same order, and is empty when the value
    passes them all.

    Args:
        value: String to validate
        *validators: Validators to apply

    Returns:
        List of ValidationIssue
    """
    issues = []
    for validator in validators:
        issue = validator.validate(value)
        if issue is not None:
            issues.append(issue)

    if issues:
        logger.debug(f"{len(issues)} of {len(validators)} validators failed")
    return issues


def ensure_valid(
    value: str, *validators: StringValidator, field_name: Optional[str] = None
) -> str:
    """
    Apply validators and raise if any of them fails.

    Args:
        value: String to validate
        *validators: Validators to apply
        field_name: Optional name used in the exception message

    Returns:
        The value, unchanged

    Raises:
        ValidationError: carrying every issue, in validator order
    """
    issues = validate_string(value, *validators)
    if issues:
        raise ValidationError(issues, field_name=field_name)
    return value
