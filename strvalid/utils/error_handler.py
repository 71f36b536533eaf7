"""
Error Hierarchy

This module defines the exceptions raised by strvalid. Validators never
raise for a value that fails a rule; failures are returned as
ValidationIssue values. Exceptions are reserved for misuse (bad rule
configuration) and for the explicit ensure_valid() helper.
"""

from typing import List, Optional, Sequence


# ============================================================================
# Unified Exception Hierarchy for strvalid
# ============================================================================
# Import these exceptions from strvalid.utils.error_handler or from the
# top-level strvalid package.
# ============================================================================


class StrValidError(Exception):
    """Base exception for all strvalid errors."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(StrValidError):
    """A validator or rule set was configured incorrectly."""

    pass


class PatternError(ConfigurationError):
    """A regular expression pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regular expression {pattern!r}: {reason}")


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(StrValidError):
    """Raised by ensure_valid() when a value fails one or more rules."""

    def __init__(self, issues: Sequence, field_name: Optional[str] = None):
        self.issues = list(issues)
        self.field_name = field_name
        super().__init__(self._build_message())

    @property
    def messages(self) -> List[str]:
        """Messages of all failed rules, in rule order"""
        return [issue.message for issue in self.issues]

    def _build_message(self) -> str:
        joined = "; ".join(self.messages) or "validation failed"
        if self.field_name:
            return f"{self.field_name}: {joined}"
        return joined
