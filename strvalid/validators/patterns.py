"""
Common regular expressions used for validation.

Patterns are compiled once at import and shared by every validator that
uses them. They end with \\Z rather than $ so that a trailing newline is
not accepted.
"""

import re
from types import MappingProxyType
from typing import Pattern

from ..utils.error_handler import ConfigurationError

# Letters and digits only
REG_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]*\Z")

# Letters, digits, -, _ and .
REG_ALPHANUMERIC_PERMISSIVE = re.compile(r"^[a-zA-Z0-9\-_.]*\Z")

# W3C HTML5 e-mail input pattern
# http://www.w3.org/TR/html-markup/input.email.html#input.email.attrs.value.single
REG_EMAIL = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*\Z"
)

PATTERNS = MappingProxyType(
    {
        "alphanumeric": REG_ALPHANUMERIC,
        "alphanumeric_permissive": REG_ALPHANUMERIC_PERMISSIVE,
        "email": REG_EMAIL,
    }
)


def get_pattern(name: str) -> Pattern[str]:
    """Look up a shared pattern by name"""
    try:
        return PATTERNS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown pattern {name!r}; available: {', '.join(sorted(PATTERNS))}"
        ) from None
