"""
Address parser adapter backed by pydantic's EmailStr.

EmailStr delegates to email-validator, which implements the RFC 5322
addr-spec grammar plus IDNA handling for internationalized domains.
Deliverability (DNS) checks are never performed.
"""

from __future__ import annotations

import logging

from pydantic import EmailStr, TypeAdapter

logger = logging.getLogger(__name__)


class PydanticAddressParser:
    """Parses addresses with a shared EmailStr type adapter."""

    def __init__(self) -> None:
        self._adapter: TypeAdapter[str] = TypeAdapter(EmailStr)

    def parse(self, address: str) -> str:
        """
        Parse and normalize an address.

        Raises:
            ValueError: pydantic.ValidationError if the address is malformed.
        """
        return self._adapter.validate_python(address)


_parser_instance: PydanticAddressParser | None = None


def get_address_parser() -> PydanticAddressParser:
    """Get address parser singleton."""
    global _parser_instance
    if _parser_instance is None:
        logger.debug("Building default EmailStr address parser")
        _parser_instance = PydanticAddressParser()
    return _parser_instance
