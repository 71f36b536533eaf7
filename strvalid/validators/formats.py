"""
Format Validators

Alphanumeric and e-mail validators. The regex-based ones reuse the shared
patterns from strvalid.validators.patterns; email_rfc parses the address
with the email-validator library instead of a regex.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from .base import StringValidator, ValidationIssue
from .patterns import REG_ALPHANUMERIC, REG_ALPHANUMERIC_PERMISSIVE, REG_EMAIL
from .primitives import RegexpValidator, regexp_compiled


def alphanumeric(message: str) -> RegexpValidator:
    """Valid when the value holds only a-z, A-Z and 0-9 (the empty string too)"""
    return regexp_compiled(REG_ALPHANUMERIC, message)


def alphanumeric_permissive(message: str) -> RegexpValidator:
    """
    Valid when the value holds only letters (a-z, A-Z), digits (0-9),
    underscore, minus sign and period. The empty string is valid.
    """
    return regexp_compiled(REG_ALPHANUMERIC_PERMISSIVE, message)


def email(message: str) -> RegexpValidator:
    """
    Validate e-mail addresses with the HTML5 e-mail field regexp defined
    by W3C.
    """
    return regexp_compiled(REG_EMAIL, message)


class EmailRFCValidator(StringValidator):
    """
    Validator for a single RFC 5322 mailbox without a display name.

    "john@example.org" and "<john@example.org>" pass; "John <john@example.org>"
    is rejected even though it is a well-formed mailbox. No DNS lookups are
    made.

    Surrounding whitespace and RFC 5322 comments are not accepted, so
    " john@example.org " and "john@example.org (comment)" fail.

    For checks of uniqueness, consider normalising addresses first
    ("john+tag@example.com" reaches the same inbox as "john@example.com").
    """

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def validate(self, value: str) -> Optional[ValidationIssue]:
        try:
            result = validate_email(
                value,
                allow_display_name=True,
                allow_quoted_local=True,
                allow_domain_literal=True,
                check_deliverability=False,
                globally_deliverable=False,
            )
        except EmailNotValidError as e:
            self.logger.debug(f"Rejected {value!r}: {e}")
            return ValidationIssue(self.message)

        if result.display_name:
            self.logger.debug(f"Rejected {value!r}: has display name")
            return ValidationIssue(self.message)
        return None


def email_rfc(message: str) -> EmailRFCValidator:
    """Validate e-mail addresses by parsing them as RFC 5322 mailboxes"""
    return EmailRFCValidator(message)
