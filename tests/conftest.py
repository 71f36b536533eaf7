"""
Pytest configuration and shared fixtures for strvalid tests.

This module provides common fixtures and sample data that are shared
across multiple test modules.
"""

import logging
from pathlib import Path
from typing import Callable, Generator

import pytest

# ============================================================================
# Sample Data
# ============================================================================

SAMPLE_RULES_TOML = """
log_level = "INFO"

[[rules]]
kind = "nonempty"
message = "This field is required."

[[rules]]
kind = "max_len"
max_len = 20
message = "Input is too long."

[[rules]]
kind = "regexp"
pattern = "^[a-z]+$"
message = "Lowercase letters only."
"""

SAMPLE_RULES_JSON = """
{
    "rules": [
        {"kind": "email", "message": "is not email"},
        {"kind": "max_len", "max_len": 10, "message": "this should pass"},
        {"kind": "min_len", "min_len": 5, "message": "this should fail"}
    ]
}
"""


# ============================================================================
# Logging Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo any handler or level changes made to the root logger by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)


# ============================================================================
# Configuration File Fixtures
# ============================================================================


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write configuration text to a file in a temporary directory."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def rules_toml(write_config) -> Path:
    """A TOML rule set with nonempty, max_len and regexp rules."""
    return write_config("rules.toml", SAMPLE_RULES_TOML)


@pytest.fixture
def rules_json(write_config) -> Path:
    """A JSON rule set with email, max_len and min_len rules."""
    return write_config("rules.json", SAMPLE_RULES_JSON)
