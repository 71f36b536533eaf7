"""
Unit tests for the error hierarchy and logging setup.
"""

import logging

from strvalid import ValidationIssue
from strvalid.utils.error_handler import (
    ConfigurationError,
    PatternError,
    StrValidError,
    ValidationError,
)
from strvalid.utils.logging_setup import setup_logging


class TestCustomExceptions:
    """Test custom exception classes."""

    def test_configuration_error(self):
        error = ConfigurationError("bad rule")
        assert str(error) == "bad rule"
        assert isinstance(error, StrValidError)

    def test_pattern_error(self):
        error = PatternError("[a-z", "unterminated character set")
        assert error.pattern == "[a-z"
        assert error.reason == "unterminated character set"
        assert str(error) == (
            "Invalid regular expression '[a-z': unterminated character set"
        )
        assert isinstance(error, ConfigurationError)

    def test_validation_error(self):
        error = ValidationError([ValidationIssue("a"), ValidationIssue("b")])
        assert str(error) == "a; b"
        assert error.messages == ["a", "b"]
        assert error.field_name is None
        assert isinstance(error, StrValidError)

    def test_validation_error_without_issues(self):
        assert str(ValidationError([])) == "validation failed"

    def test_validation_error_with_field(self):
        error = ValidationError([ValidationIssue("required")], field_name="email")
        assert str(error) == "email: required"


class TestSetupLogging:
    """Test logging configuration."""

    def test_level_by_name(self):
        setup_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_level_by_number(self):
        setup_logging(logging.ERROR)
        assert logging.getLogger().level == logging.ERROR

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "logs" / "strvalid.log"
        setup_logging("INFO", str(log_path))

        logging.getLogger("strvalid.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_path.exists()
        assert "hello from test" in log_path.read_text(encoding="utf-8")
