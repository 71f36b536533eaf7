"""
Command-line interface for strvalid.

Checks values given as arguments (or read one per line from stdin)
against a rule set loaded from a TOML/JSON file and/or built from
command line flags.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from strvalid.config import RulesConfig, load_rules_config
from strvalid.utils.error_handler import ConfigurationError
from strvalid.utils.logging_setup import setup_logging
from strvalid.validators import (
    StringValidator,
    alphanumeric,
    alphanumeric_permissive,
    email,
    email_rfc,
    max_length,
    min_length,
    nonempty,
    regexp,
    validate_string,
)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


class CLIInterface:
    """Command line interface for validating strings."""

    def __init__(self, stdin: Optional[TextIO] = None):
        self.parser = self._create_parser()
        self.stdin = stdin

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="strvalid",
            description="Validate strings against length, pattern and e-mail rules",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  strvalid --nonempty --max-len 20 "some input"
  strvalid --email-rfc john@example.org "John <john@example.org>"
  strvalid --config rules.toml < values.txt

Rules from --config run first, followed by inline rules in the order
listed under "inline rules". Exit status is 0 when every value passes,
1 when any value fails and 2 on configuration errors.
""",
        )

        parser.add_argument(
            "values",
            nargs="*",
            help="Values to validate (default: read one per line from stdin)",
        )
        parser.add_argument(
            "-c", "--config", type=str, help="Rule set file (TOML or JSON)"
        )

        inline = parser.add_argument_group("inline rules")
        inline.add_argument(
            "--nonempty", action="store_true", help="Reject the empty string"
        )
        inline.add_argument(
            "--min-len", type=int, metavar="N", help="Require at least N characters"
        )
        inline.add_argument(
            "--max-len", type=int, metavar="N", help="Allow at most N characters"
        )
        inline.add_argument(
            "--pattern", type=str, metavar="REGEX", help="Require a regex match"
        )
        inline.add_argument(
            "--alphanumeric",
            action="store_true",
            help="Allow only letters and digits",
        )
        inline.add_argument(
            "--permissive",
            action="store_true",
            help="Allow only letters, digits, '-', '_' and '.'",
        )
        inline.add_argument(
            "--email", action="store_true", help="Require an HTML5 e-mail address"
        )
        inline.add_argument(
            "--email-rfc",
            action="store_true",
            help="Require a bare RFC 5322 e-mail address",
        )
        inline.add_argument(
            "--message",
            type=str,
            help="Message used for every failing inline rule",
        )

        output = parser.add_argument_group("output")
        output.add_argument(
            "-q", "--quiet", action="store_true", help="Only set the exit status"
        )
        output.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )
        output.add_argument("--log-file", type=str, help="Also write logs to a file")

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def build_inline_validators(
        self, parsed_args: argparse.Namespace
    ) -> List[StringValidator]:
        """Build validators from inline rule flags."""
        override = parsed_args.message

        def msg(default: str) -> str:
            return override if override is not None else default

        validators: List[StringValidator] = []
        if parsed_args.nonempty:
            validators.append(nonempty(msg("value is empty")))
        if parsed_args.min_len is not None:
            validators.append(
                min_length(
                    parsed_args.min_len,
                    msg(f"shorter than {parsed_args.min_len} characters"),
                )
            )
        if parsed_args.max_len is not None:
            validators.append(
                max_length(
                    parsed_args.max_len,
                    msg(f"longer than {parsed_args.max_len} characters"),
                )
            )
        if parsed_args.pattern is not None:
            validators.append(
                regexp(
                    parsed_args.pattern,
                    msg(f"does not match {parsed_args.pattern!r}"),
                )
            )
        if parsed_args.alphanumeric:
            validators.append(alphanumeric(msg("not alphanumeric")))
        if parsed_args.permissive:
            validators.append(
                alphanumeric_permissive(
                    msg("contains characters other than letters, digits, '-', '_', '.'")
                )
            )
        if parsed_args.email:
            validators.append(email(msg("not an e-mail address")))
        if parsed_args.email_rfc:
            validators.append(email_rfc(msg("not a bare RFC 5322 e-mail address")))
        return validators

    def _read_values(self, parsed_args: argparse.Namespace) -> List[str]:
        if parsed_args.values:
            return list(parsed_args.values)
        stream = self.stdin if self.stdin is not None else sys.stdin
        return [line.rstrip("\r\n") for line in stream]

    def run(self, args: Optional[List[str]] = None) -> int:
        """Execute CLI interface."""
        parsed_args = self.parse_args(args)

        try:
            config = (
                load_rules_config(parsed_args.config)
                if parsed_args.config
                else RulesConfig()
            )
            level = "DEBUG" if parsed_args.verbose else config.log_level
            setup_logging(level, parsed_args.log_file)

            validators = config.build_validators()
            validators.extend(self.build_inline_validators(parsed_args))
        except ConfigurationError as e:
            print(f"Configuration Error: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        except OSError as e:
            print(f"Configuration Error: cannot open log file: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

        logger = logging.getLogger(__name__)
        if not validators:
            print("Configuration Error: no rules given", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        logger.info(f"Validating with {len(validators)} rules")

        failed = 0
        values = self._read_values(parsed_args)
        for value in values:
            issues = validate_string(value, *validators)
            if not issues:
                continue
            failed += 1
            if not parsed_args.quiet:
                for issue in issues:
                    print(f"{value}: {issue}")

        logger.info(f"{failed} of {len(values)} values failed")
        return EXIT_INVALID if failed else EXIT_OK


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
