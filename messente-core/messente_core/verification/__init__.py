"""
Verification Widget
===================
Signature computation and checking of widget callbacks.
"""

from .signature import (
    compute_signature,
    verify_signature,
    canonical_string,
    SIGNED_PARAMS,
    SECRET_PARAM,
    SIGNATURE_PARAM,
    SIGNATURE_ALGORITHM,
)
from .widget import verify_callback, CallbackVerdict, RejectReason, VERIFIED_STATUS

__all__ = [
    # Signature
    "compute_signature",
    "verify_signature",
    "canonical_string",
    "SIGNED_PARAMS",
    "SECRET_PARAM",
    "SIGNATURE_PARAM",
    "SIGNATURE_ALGORITHM",
    # Widget
    "verify_callback",
    "CallbackVerdict",
    "RejectReason",
    "VERIFIED_STATUS",
]
