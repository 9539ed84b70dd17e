"""
helperlibs - string and collection helper functions.

All helpers are pure functions that accept None in place of a value.
"""

from helperlibs.components.collection import is_empty_or_null
from helperlibs.components.strings import (
    DEFAULT_RULES,
    AddressParserPort,
    EmailRules,
    InvalidInputError,
    StringHelperError,
    ValidateEmailInput,
    ValidateEmailOutput,
    ValidationError,
    build_string,
    from_base64,
    is_valid_email,
    left,
    repeat,
    reverse,
    right,
    run_validate,
    to_base64,
    validate_email,
)
from helperlibs.core.patterns import EMAIL_REGEX

__version__ = "0.1.0"

__all__ = [
    # Strings
    "left",
    "right",
    "reverse",
    "build_string",
    "repeat",
    "to_base64",
    "from_base64",
    "is_valid_email",
    "validate_email",
    "run_validate",
    # Collections
    "is_empty_or_null",
    # Patterns
    "EMAIL_REGEX",
    # Models
    "EmailRules",
    "DEFAULT_RULES",
    "ValidateEmailInput",
    "ValidateEmailOutput",
    "ValidationError",
    # Errors
    "StringHelperError",
    "InvalidInputError",
    # Ports
    "AddressParserPort",
]
