"""Shared regular expressions for application field validation."""

from __future__ import annotations

import re

FULL_NAME_RE = re.compile(r"^(?:[^\W\d_]|[ '-])+$")
"""Letters from any script plus spaces, hyphens and apostrophes."""

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
"""Conservative ``local@domain.tld`` shape; deliverability is not checked."""

PHONE_RE = re.compile(r"^[\d\s+()-]+$", re.ASCII)
"""ASCII digits, whitespace, ``+``, ``-`` and parentheses."""

NON_DIGIT_RE = re.compile(r"\D", re.ASCII)

DECIMAL_RE = re.compile(r"^\d+(?:\.\d+)?$", re.ASCII)
"""Non-negative decimal numeral such as ``7`` or ``7.5``."""

PORTFOLIO_URL_RE = re.compile(
    r"""
    ^(?:https?://)?               # optional scheme
    (?:[\da-z-]+\.)+[a-z]{2,}     # dotted domain
    (?::\d{1,5})?                 # optional port
    (?:/\S*)?$                    # optional path
    """,
    re.IGNORECASE | re.VERBOSE,
)
"""Permissive portfolio URL such as ``github.com/jane`` or ``https://jane.dev``."""
