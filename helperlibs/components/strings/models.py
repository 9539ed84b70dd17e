"""
Strings component models.

Rules, validation output and error types for the string helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Configuration ---


@dataclass(frozen=True)
class EmailRules:
    """Email validation rules."""

    min_tld_length: int = 2
    max_length: int = 254  # RFC 5321 path limit
    parse_address: bool = True  # Run the canonical address parser as the last stage


DEFAULT_RULES = EmailRules()


# --- Validation Output ---


@dataclass(frozen=True)
class ValidationError:
    """Validation error detail."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class ValidateEmailInput:
    """Input for email validation."""

    email: str | None
    rules: EmailRules = DEFAULT_RULES


@dataclass(frozen=True)
class ValidateEmailOutput:
    """Output from email validation."""

    is_valid: bool
    normalized_email: str | None = None  # As returned by the address parser
    errors: list[ValidationError] = field(default_factory=list)


# --- Error Types ---


class StringHelperError(Exception):
    """Base string helper error."""

    pass


class InvalidInputError(StringHelperError, ValueError):
    """Argument could not be interpreted."""

    def __init__(self, param: str, value: str, reason: str) -> None:
        self.param = param
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {param} '{value}': {reason}")
