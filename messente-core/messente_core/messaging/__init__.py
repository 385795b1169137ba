"""
Message Segmentation and Encoding
==================================
Utilities for SMS charset detection, length and part calculation.
"""

from .models import EncodingType, GSM7_BASIC, GSM7_EXTENDED, GSM7_ESCAPE
from .encoding import (
    detect_encoding,
    count_characters,
    escape_gsm7,
    is_gsm7_character,
    utf16_length,
)
from .segmentation import (
    calculate_parts,
    calculate_segments,
    estimate_cost,
    UNKNOWN_PART_COUNT,
)
from .phone_utils import normalize_phone, phone_digits

__all__ = [
    # Models
    "EncodingType",
    "GSM7_BASIC",
    "GSM7_EXTENDED",
    "GSM7_ESCAPE",
    # Encoding
    "detect_encoding",
    "count_characters",
    "escape_gsm7",
    "is_gsm7_character",
    "utf16_length",
    # Segmentation
    "calculate_parts",
    "calculate_segments",
    "estimate_cost",
    "UNKNOWN_PART_COUNT",
    # Phone
    "normalize_phone",
    "phone_digits",
]
