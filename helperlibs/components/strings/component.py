"""
Strings component.

Functional core for string manipulation helpers: substring extraction,
reversal, concatenation, repetition, Base64 and email validation.

Key behaviors:
- None input is accepted everywhere and never raised on
- Non-positive counts produce empty strings
- Indexing is by code point (no grapheme-cluster awareness)
- from_base64 is the only function that raises

Email validation stages (first failure decides):
1. EMAIL_REGEX against the whole address
2. Structural checks on the domain (after the last '@')
3. Canonical parse through AddressParserPort
"""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Iterable

from helperlibs.adapters.email_address import get_address_parser
from helperlibs.components.strings.models import (
    DEFAULT_RULES,
    EmailRules,
    InvalidInputError,
    ValidateEmailInput,
    ValidateEmailOutput,
    ValidationError,
)
from helperlibs.components.strings.ports import AddressParserPort
from helperlibs.core.patterns import matches_email

logger = logging.getLogger(__name__)

_BASE64_WHITESPACE = str.maketrans("", "", " \t\r\n")


# --- Substrings ---


def left(value: str | None, n: int) -> str:
    """Return the leftmost n characters of value."""
    if not value or n <= 0:
        return ""
    return value if n >= len(value) else value[:n]


def right(value: str | None, n: int) -> str:
    """Return the rightmost n characters of value."""
    if not value or n <= 0:
        return ""
    return value if n >= len(value) else value[-n:]


def reverse(value: str | None) -> str | None:
    """
    Reverse the characters of value.

    None and "" are returned as is. Combining marks and multi-codepoint
    emoji are reversed codepoint by codepoint and may render differently.
    """
    if not value:
        return value
    return value[::-1]


# --- Concatenation ---


def build_string(values: Iterable[str | None] | None) -> str:
    """
    Concatenate values, treating None entries as empty.

    The iterable is consumed once. str.join sums the part lengths and
    allocates the result a single time.
    """
    if values is None:
        return ""
    return "".join([value or "" for value in values])


def repeat(value: str | None, count: int) -> str:
    """Return value repeated count times."""
    if not value or count <= 0:
        return ""
    return value * count


# --- Base64 ---


def to_base64(value: str | None) -> str:
    """Encode the UTF-8 bytes of value as padded standard Base64."""
    return base64.b64encode((value or "").encode("utf-8")).decode("ascii")


def from_base64(value: str | None) -> str:
    """
    Decode padded standard Base64 into a UTF-8 string.

    Whitespace between Base64 characters is ignored.

    Returns:
        The decoded text, or "" for None, empty or whitespace-only input.

    Raises:
        InvalidInputError: If value is not valid Base64 or does not decode
            to UTF-8 text.
    """
    if value is None or not value.strip():
        return ""

    payload = value.translate(_BASE64_WHITESPACE)
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:  # ValueError: non-ASCII characters
        logger.debug("Rejected Base64 payload of length %d: %s", len(value), e)
        raise InvalidInputError("base64 string", value, "not valid Base64") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("Base64 payload decoded to non UTF-8 bytes: %s", e)
        raise InvalidInputError("base64 string", value, "does not decode to UTF-8 text") from e


# --- Email Validation ---


def _reject(code: str, message: str) -> ValidateEmailOutput:
    logger.debug("Email rejected: %s", code)
    return ValidateEmailOutput(
        is_valid=False,
        normalized_email=None,
        errors=[ValidationError(code, message, "email")],
    )


def _check_domain(domain: str, rules: EmailRules) -> ValidateEmailOutput | None:
    """Structural domain checks the pattern does not fully cover."""
    if ".." in domain:
        return _reject("DOMAIN_CONSECUTIVE_DOTS", "Domain cannot contain consecutive dots")

    if domain.startswith("-"):
        return _reject("DOMAIN_LEADING_HYPHEN", "Domain cannot start with a hyphen")

    if domain.endswith("-"):
        return _reject("DOMAIN_TRAILING_HYPHEN", "Domain cannot end with a hyphen")

    if "." not in domain:
        return _reject("DOMAIN_MISSING_DOT", "Domain must contain a period")

    if domain.endswith("."):
        return _reject("DOMAIN_TRAILING_DOT", "Domain cannot end with a period")

    tld = domain[domain.rindex(".") + 1 :]
    if len(tld) < rules.min_tld_length:
        return _reject(
            "TLD_TOO_SHORT",
            f"Top-level domain must be at least {rules.min_tld_length} characters",
        )

    return None


def validate_email(
    email: str | None,
    rules: EmailRules = DEFAULT_RULES,
    parser: AddressParserPort | None = None,
) -> ValidateEmailOutput:
    """
    Validate an email address format.

    No trimming or case folding is applied before validation, so
    surrounding whitespace makes an address invalid.

    Args:
        email: Address to validate
        rules: Length and TLD rules
        parser: Canonical address parser (defaults to the EmailStr adapter)

    Returns:
        ValidateEmailOutput with the first failing check, if any
    """
    if email is None or not email.strip():
        return _reject("EMPTY_EMAIL", "Email address is required")

    if len(email) > rules.max_length:
        return _reject("EMAIL_TOO_LONG", "Email address is too long")

    if email.count("@") > 1:
        return _reject("MULTIPLE_AT", "Email address must contain a single '@'")

    at_index = email.rfind("@")
    if at_index == -1 or at_index == len(email) - 1:
        return _reject("MISSING_DOMAIN", "Email address must have a domain")

    # Stage 1: pattern
    if not matches_email(email):
        return _reject("INVALID_FORMAT", "Invalid email format")

    # Stage 2: domain structure
    failure = _check_domain(email[at_index + 1 :], rules)
    if failure is not None:
        return failure

    if not rules.parse_address:
        return ValidateEmailOutput(is_valid=True, normalized_email=email)

    # Stage 3: canonical parse
    address_parser = parser or get_address_parser()
    try:
        normalized = address_parser.parse(email)
    except ValueError as e:
        logger.debug("Address parser rejected email: %s", e)
        return _reject("UNPARSEABLE_ADDRESS", "Email address could not be parsed")

    return ValidateEmailOutput(is_valid=True, normalized_email=normalized)


def is_valid_email(email: str | None) -> bool:
    """Check whether email is a well-formed address."""
    return validate_email(email).is_valid


# --- Component Entry Point ---


def run_validate(
    inp: ValidateEmailInput,
    *,
    parser: AddressParserPort | None = None,
) -> ValidateEmailOutput:
    """Validate the email carried by inp under its rules."""
    return validate_email(inp.email, rules=inp.rules, parser=parser)
