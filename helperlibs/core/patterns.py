"""
Precompiled patterns shared by the string helpers.

Patterns are compiled once at import time and are read-only afterwards,
so they are safe to use from any thread.
"""

from __future__ import annotations

import re

# RFC 5322 "atext" characters allowed in an unquoted local part
_ATEXT_ASCII = r"A-Za-z0-9!#$%&'*+/=?^_`{|}~-"
_ATEXT_UNICODE = r"\w!#$%&'*+/=?^`{|}~-"

# --- Email Pattern ---

# Two branches: a plain ASCII address, and a broadened one that admits
# Unicode letters in the local part, the domain labels and the TLD.
# Dot and hyphen placement inside the domain is not fully covered here;
# the structural domain checks run after a pattern match.
EMAIL_REGEX = re.compile(
    # ASCII
    rf"(?!.*\.\.)[{_ATEXT_ASCII}]+(?:\.[{_ATEXT_ASCII}]+)*"
    r"@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}"
    r"|"
    # Unicode
    rf"(?!.*\.\.)[{_ATEXT_UNICODE}]+(?:\.[{_ATEXT_UNICODE}]+)*"
    r"@[\w-]+(?:\.[\w-]+)*\.[^\W\d_]+",
    re.IGNORECASE,
)


def matches_email(value: str) -> bool:
    """Return True if the whole value matches EMAIL_REGEX."""
    return EMAIL_REGEX.fullmatch(value) is not None
