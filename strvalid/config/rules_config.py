"""
Pydantic-based rule configuration for strvalid.

A rule set is a list of rules read from a TOML or JSON file, for example:

    log_level = "INFO"

    [[rules]]
    kind = "nonempty"
    message = "This field is required."

    [[rules]]
    kind = "max_len"
    max_len = 20
    message = "Input is too long."

Each rule builds one StringValidator; the list keeps file order.
"""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, List, Literal, Optional, Union

import toml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    model_validator,
)

from ..utils.error_handler import ConfigurationError
from ..validators import (
    StringValidator,
    alphanumeric,
    alphanumeric_permissive,
    compile_pattern,
    email,
    email_rfc,
    length,
    length_strict,
    max_length,
    max_length_strict,
    min_length,
    min_length_strict,
    nonempty,
    regexp,
)

logger = logging.getLogger(__name__)

RuleKind = Literal[
    "len",
    "len_strict",
    "min_len",
    "min_len_strict",
    "max_len",
    "max_len_strict",
    "nonempty",
    "regexp",
    "alphanumeric",
    "alphanumeric_permissive",
    "email",
    "email_rfc",
]

# Parameters each kind needs besides the message
REQUIRED_PARAMS: Dict[str, tuple] = {
    "len": ("min_len", "max_len"),
    "len_strict": ("min_len", "max_len"),
    "min_len": ("min_len",),
    "min_len_strict": ("min_len",),
    "max_len": ("max_len",),
    "max_len_strict": ("max_len",),
    "regexp": ("pattern",),
}

_BUILDERS: Dict[str, Callable[["RuleConfig"], StringValidator]] = {
    "len": lambda r: length(r.min_len, r.max_len, r.message),
    "len_strict": lambda r: length_strict(r.min_len, r.max_len, r.message),
    "min_len": lambda r: min_length(r.min_len, r.message),
    "min_len_strict": lambda r: min_length_strict(r.min_len, r.message),
    "max_len": lambda r: max_length(r.max_len, r.message),
    "max_len_strict": lambda r: max_length_strict(r.max_len, r.message),
    "nonempty": lambda r: nonempty(r.message),
    "regexp": lambda r: regexp(r.pattern, r.message),
    "alphanumeric": lambda r: alphanumeric(r.message),
    "alphanumeric_permissive": lambda r: alphanumeric_permissive(r.message),
    "email": lambda r: email(r.message),
    "email_rfc": lambda r: email_rfc(r.message),
}


class RuleConfig(BaseModel):
    """One validation rule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: RuleKind = Field(description="Which validator to build")
    message: str = Field(description="Message returned when the rule fails")
    min_len: Optional[StrictInt] = Field(
        default=None, description="Lower length bound"
    )
    max_len: Optional[StrictInt] = Field(
        default=None, description="Upper length bound"
    )
    pattern: Optional[str] = Field(
        default=None, description="Regular expression for kind 'regexp'"
    )

    @model_validator(mode="after")
    def validate_parameters(self):
        """Check that the kind has the parameters it needs and no others."""
        required = REQUIRED_PARAMS.get(self.kind, ())
        missing = [name for name in required if getattr(self, name) is None]
        if missing:
            raise ValueError(
                f"Rule '{self.kind}' requires {', '.join(missing)}"
            )

        unused = [
            name
            for name in ("min_len", "max_len", "pattern")
            if name not in required and getattr(self, name) is not None
        ]
        if unused:
            raise ValueError(
                f"Rule '{self.kind}' does not take {', '.join(unused)}"
            )

        if self.pattern is not None:
            try:
                compile_pattern(self.pattern)
            except ConfigurationError as e:
                raise ValueError(str(e)) from e
        return self

    def build(self) -> StringValidator:
        """Create the validator this rule describes."""
        return _BUILDERS[self.kind](self)


class RulesConfig(BaseModel):
    """A rule set plus the logging level to run it with."""

    model_config = ConfigDict(extra="forbid")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level used by the command line"
    )
    rules: List[RuleConfig] = Field(default_factory=list)

    def build_validators(self) -> List[StringValidator]:
        """Build every rule, in order."""
        return [rule.build() for rule in self.rules]


def load_rules_config(config_path: Union[str, Path]) -> RulesConfig:
    """
    Load a rule set from a TOML or JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Validated RulesConfig

    Raises:
        ConfigurationError: if the file is missing, unreadable or invalid
    """
    config_path = Path(config_path)
    config_data = _load_config_file(config_path)

    try:
        config = RulesConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(format_config_error(e, config_path)) from e

    logger.info(f"Loaded {len(config.rules)} rules from {config_path}")
    return config


def _load_config_file(config_path: Path) -> Dict:
    """Load configuration data from TOML or JSON file."""
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in (".toml", ".json"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {config_path.suffix}"
        )

    try:
        if suffix == ".toml":
            data = toml.load(config_path)
        else:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
    except (OSError, toml.TomlDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to load configuration from {config_path}: {e}"
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in {config_path} must be a table/object"
        )
    return data


def _format_error_location(location: tuple) -> str:
    """Format the error location path."""
    if not location:
        return "configuration"

    path_parts = []
    for part in location:
        if isinstance(part, str):
            path_parts.append(part)
        else:
            path_parts.append(f"[{part}]")

    return ".".join(path_parts).replace(".[", "[")


def format_config_error(
    error: ValidationError, config_path: Optional[Path] = None
) -> str:
    """
    Convert a pydantic ValidationError into a readable message.

    Args:
        error: Pydantic ValidationError instance
        config_path: File the data came from, if any

    Returns:
        One line per problem, under a header naming the file
    """
    lines = []
    for detail in error.errors():
        location = _format_error_location(detail["loc"])
        message = detail.get("msg", "Invalid value")
        if detail["type"] == "missing":
            message = "Required field is missing"
        lines.append(f"  {location}: {message}")

    source = f" in {config_path}" if config_path else ""
    return f"Invalid rule configuration{source}:\n" + "\n".join(lines)
