"""
Verification Widget Callbacks
=============================
Checks an inbound widget callback before the user is trusted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

import structlog

from ..messaging.phone_utils import normalize_phone
from .signature import verify_signature

logger = structlog.get_logger(__name__)

VERIFIED_STATUS = "VERIFIED"


class RejectReason(str, Enum):
    """Reasons for rejecting a callback."""
    NOT_VERIFIED = "not_verified"
    PHONE_MISMATCH = "phone_mismatch"
    INVALID_SIGNATURE = "invalid_signature"


@dataclass(frozen=True)
class CallbackVerdict:
    """Result of a callback check."""
    verified: bool
    reason: Optional[RejectReason] = None


def verify_callback(params: Mapping[str, str], secret: str, expected_phone: str) -> CallbackVerdict:
    """
    Check a verification widget callback.

    The status must be VERIFIED, the phone must match the number the
    session was started for and the signature must be valid.

    Raises:
        MissingParameterError: If parameters needed for the signature are absent
    """
    status = params.get("status") or ""
    if status.upper() != VERIFIED_STATUS:
        logger.info("Verification callback not verified", status=status)
        return CallbackVerdict(verified=False, reason=RejectReason.NOT_VERIFIED)

    if normalize_phone(params.get("phone") or "") != normalize_phone(expected_phone):
        logger.warning("Verification callback phone mismatch")
        return CallbackVerdict(verified=False, reason=RejectReason.PHONE_MISMATCH)

    if not verify_signature(params, secret):
        logger.warning("Verification callback signature invalid", user=params.get("user"))
        return CallbackVerdict(verified=False, reason=RejectReason.INVALID_SIGNATURE)

    return CallbackVerdict(verified=True)
