"""
Message Segmentation
====================
Functions for SMS part calculation.
"""

import math
from typing import Tuple

from .models import EncodingType, GSM7_ESCAPE
from .encoding import detect_encoding, count_characters, escape_gsm7, utf16_length

GSM7_SINGLE_LIMIT = 160
GSM7_PART_SIZE = 153
UCS2_SINGLE_LIMIT = 70
UCS2_PART_SIZE = 67

# Returned when the charset of a message cannot be determined
UNKNOWN_PART_COUNT = -1


def _count_gsm7_parts(text: str) -> int:
    """
    Count parts of a GSM-7 message.

    An escape character must not be the last unit of a part, so a part
    whose 153rd unit is an escape is cut one unit short.
    """
    escaped = escape_gsm7(text)
    length = len(escaped)

    if length <= GSM7_SINGLE_LIMIT:
        return 1

    parts = math.ceil(length / GSM7_PART_SIZE)
    free_chars = length - (length // GSM7_PART_SIZE) * GSM7_PART_SIZE

    # Enough slack in the last part to absorb one shifted unit per boundary
    if free_chars >= parts - 1:
        return parts

    parts = 0
    offset = 0
    while offset < length:
        parts += 1
        boundary = offset + GSM7_PART_SIZE - 1
        if length - offset > GSM7_PART_SIZE - 1 and escaped[boundary] == GSM7_ESCAPE:
            offset += GSM7_PART_SIZE - 1
        else:
            offset += GSM7_PART_SIZE
    return parts


def calculate_parts(text: str) -> int:
    """
    Calculate the number of SMS parts a message is split into.

    Part limits:
    - GSM-7: 160 units (single), 153 units (concatenated)
    - UCS-2: 70 chars (single), 67 chars (concatenated)

    Args:
        text: Message content

    Returns:
        Number of parts, or UNKNOWN_PART_COUNT if the charset is unknown
    """
    encoding = detect_encoding(text)

    if encoding == EncodingType.GSM7:
        return _count_gsm7_parts(text)

    if encoding == EncodingType.UCS2:
        length = utf16_length(text)
        if length <= UCS2_SINGLE_LIMIT:
            return 1
        return math.ceil(length / UCS2_PART_SIZE)

    return UNKNOWN_PART_COUNT


def calculate_segments(text: str) -> Tuple[int, EncodingType, int]:
    """
    Calculate parts, encoding and billable characters in one go.

    Args:
        text: Message content

    Returns:
        Tuple of (parts, encoding, char_count)
    """
    return calculate_parts(text), detect_encoding(text), count_characters(text)


def estimate_cost(text: str, cost_per_part: float) -> float:
    """
    Estimate the cost to send a message.

    Args:
        text: Message content
        cost_per_part: Price of a single SMS part for the destination

    Returns:
        Estimated cost
    """
    return calculate_parts(text) * cost_per_part
