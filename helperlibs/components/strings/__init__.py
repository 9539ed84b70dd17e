"""
Strings component.

Substring extraction, reversal, concatenation, repetition, Base64
encode/decode and email format validation.
"""

from helperlibs.components.strings.component import (
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
from helperlibs.components.strings.models import (
    DEFAULT_RULES,
    EmailRules,
    InvalidInputError,
    StringHelperError,
    ValidateEmailInput,
    ValidateEmailOutput,
    ValidationError,
)
from helperlibs.components.strings.ports import AddressParserPort

__all__ = [
    # Component
    "run_validate",
    # Pure functions
    "left",
    "right",
    "reverse",
    "build_string",
    "repeat",
    "to_base64",
    "from_base64",
    "is_valid_email",
    "validate_email",
    # Models
    "EmailRules",
    "DEFAULT_RULES",
    # Input/Output
    "ValidateEmailInput",
    "ValidateEmailOutput",
    "ValidationError",
    # Errors
    "StringHelperError",
    "InvalidInputError",
    # Ports
    "AddressParserPort",
]
