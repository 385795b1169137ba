"""
Encoding Detection
==================
Functions for SMS charset detection and billable character counting.
"""

from .models import EncodingType, GSM7_BASIC, GSM7_EXTENDED, GSM7_ESCAPE


def is_gsm7_character(char: str) -> bool:
    """Return True if the character can be sent in the GSM 7-bit alphabet."""
    return char in GSM7_BASIC or char in GSM7_EXTENDED


def detect_encoding(text: str) -> EncodingType:
    """
    Detect the required encoding for a message.

    A single character outside the basic and extended GSM alphabets
    forces the whole message to UCS-2.

    Args:
        text: Message content

    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    for char in text:
        if not is_gsm7_character(char):
            return EncodingType.UCS2
    return EncodingType.GSM7


def utf16_length(text: str) -> int:
    """Length of the text in UTF-16 code units, as carried by UCS-2 transport."""
    return len(text.encode("utf-16-le")) // 2


def escape_gsm7(text: str) -> str:
    """Insert the escape character in front of every extended character."""
    return "".join(
        GSM7_ESCAPE + char if char in GSM7_EXTENDED else char
        for char in text
    )


def count_characters(text: str) -> int:
    """
    Count billable characters of a message.

    Basic characters count as 1 and extended characters as 2. If the text
    contains anything outside the GSM alphabet, the whole text is counted
    by its UTF-16 length instead.

    Args:
        text: Message content

    Returns:
        Character count used for billing and segmentation
    """
    count = 0
    for char in text:
        if char in GSM7_BASIC:
            count += 1
        elif char in GSM7_EXTENDED:
            count += 2
        else:
            return utf16_length(text)
    return count
