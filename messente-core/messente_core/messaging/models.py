"""
Messaging Models
================
Character sets used for SMS charset detection and length calculation.
"""

from enum import Enum


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"


# Escape character that precedes every extended character on the wire
GSM7_ESCAPE = "\x1b"

# GSM 03.38 default alphabet (the escape character itself included)
GSM7_BASIC = frozenset(
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ !'#¤%&\"()*+,-./"
    "0123456789:;<=>?¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

# GSM-7 extended characters (escaped, count as 2)
GSM7_EXTENDED = frozenset("\f^{}\\[~]|€")
