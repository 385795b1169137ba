"""
Gateway Responses
=================
Response models, code tables and decoding.
"""

from .models import RawResponse, DecodedResult, DeliveryOutcome, DeliveryState
from .decoder import decode, decode_delivery_status, is_success, explain
from . import codes

__all__ = [
    # Models
    "RawResponse",
    "DecodedResult",
    "DeliveryOutcome",
    "DeliveryState",
    # Decoding
    "decode",
    "decode_delivery_status",
    "is_success",
    "explain",
    # Tables
    "codes",
]
