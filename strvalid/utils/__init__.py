"""
Utility modules for strvalid.

This package contains the exception hierarchy and logging setup.
"""

from .error_handler import (
    ConfigurationError,
    PatternError,
    StrValidError,
    ValidationError,
)
from .logging_setup import setup_logging

__all__ = [
    "StrValidError",
    "ConfigurationError",
    "PatternError",
    "ValidationError",
    "setup_logging",
]
