"""
Strings component ports.

Protocol interfaces for the email validation dependencies.
"""

from __future__ import annotations

from typing import Protocol


class AddressParserPort(Protocol):
    """
    Canonical mail address parser interface.

    Final and strictest stage of email validation.
    """

    def parse(self, address: str) -> str:
        """
        Parse a single address.

        Returns:
            The normalized address.

        Raises:
            ValueError: If the address cannot be parsed.
        """
        ...
