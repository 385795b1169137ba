"""
Phone Utilities
===============
Functions for phone number normalization.
"""

import re

_NON_DIGITS = re.compile(r"\D+")


def phone_digits(phone: str) -> str:
    """Return only the digits of a phone number."""
    return _NON_DIGITS.sub("", phone)


def normalize_phone(phone: str) -> str:
    """
    Normalize a phone number to the gateway's international format.

    Every non-digit character is dropped and a single '+' is prepended,
    so normalizing twice gives the same result.

    Args:
        phone: Raw phone number, e.g. "+372 5123 456"

    Returns:
        Normalized number, e.g. "+3725123456"
    """
    return f"+{phone_digits(phone)}"
