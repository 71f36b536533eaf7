"""
strvalid - composable string validation.

Validators check one string and return None or a ValidationIssue carrying
the message they were configured with. validate_string() applies a list
of validators and collects every failure:

    issues = validate_string(
        value,
        nonempty("This field is required."),
        max_length(20, "Input is too long."),
    )

Custom rules are plain functions wrapped in StringFunc.
"""

from .utils.error_handler import (
    ConfigurationError,
    PatternError,
    StrValidError,
    ValidationError,
)
from .validators import (
    PATTERNS,
    REG_ALPHANUMERIC,
    REG_ALPHANUMERIC_PERMISSIVE,
    REG_EMAIL,
    CompositeValidator,
    EmailRFCValidator,
    LengthValidator,
    NonemptyValidator,
    RegexpValidator,
    StringFunc,
    StringValidator,
    ValidationIssue,
    alphanumeric,
    alphanumeric_permissive,
    compile_pattern,
    email,
    email_rfc,
    ensure_valid,
    get_pattern,
    length,
    length_strict,
    max_length,
    max_length_strict,
    min_length,
    min_length_strict,
    nonempty,
    regexp,
    regexp_compiled,
    validate_string,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "StrValidError",
    "ConfigurationError",
    "PatternError",
    "ValidationError",
    # Base
    "StringValidator",
    "StringFunc",
    "CompositeValidator",
    "ValidationIssue",
    "validate_string",
    "ensure_valid",
    # Validator classes
    "LengthValidator",
    "NonemptyValidator",
    "RegexpValidator",
    "EmailRFCValidator",
    # Factories
    "length",
    "length_strict",
    "min_length",
    "min_length_strict",
    "max_length",
    "max_length_strict",
    "nonempty",
    "regexp",
    "regexp_compiled",
    "compile_pattern",
    "alphanumeric",
    "alphanumeric_permissive",
    "email",
    "email_rfc",
    # Patterns
    "PATTERNS",
    "REG_ALPHANUMERIC",
    "REG_ALPHANUMERIC_PERMISSIVE",
    "REG_EMAIL",
    "get_pattern",
]
