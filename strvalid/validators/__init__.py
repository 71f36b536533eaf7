"""
Validators Package

String validators and the functions that apply them.
"""

# Base classes
from .base import (
    CompositeValidator,
    StringFunc,
    StringValidator,
    ValidationIssue,
    ensure_valid,
    validate_string,
)

# Format validators
from .formats import (
    EmailRFCValidator,
    alphanumeric,
    alphanumeric_permissive,
    email,
    email_rfc,
)

# Length validators
from .length import (
    LengthValidator,
    length,
    length_strict,
    max_length,
    max_length_strict,
    min_length,
    min_length_strict,
)

# Shared patterns
from .patterns import (
    PATTERNS,
    REG_ALPHANUMERIC,
    REG_ALPHANUMERIC_PERMISSIVE,
    REG_EMAIL,
    get_pattern,
)

# Primitive validators
from .primitives import (
    NonemptyValidator,
    RegexpValidator,
    compile_pattern,
    nonempty,
    regexp,
    regexp_compiled,
)

__all__ = [
    # Base classes
    "StringValidator",
    "StringFunc",
    "CompositeValidator",
    "ValidationIssue",
    "validate_string",
    "ensure_valid",
    # Length
    "LengthValidator",
    "length",
    "length_strict",
    "min_length",
    "min_length_strict",
    "max_length",
    "max_length_strict",
    # Primitives
    "NonemptyValidator",
    "RegexpValidator",
    "compile_pattern",
    "nonempty",
    "regexp",
    "regexp_compiled",
    # Formats
    "EmailRFCValidator",
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
