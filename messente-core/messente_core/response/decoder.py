"""
Response Decoding
=================
Decoding of "OK <payload>" / "ERROR <code>" / "FAILED <code>" bodies.
"""

from types import MappingProxyType
from typing import Optional

from .codes import (
    DLR_MESSAGES,
    ERROR_PREFIX,
    FAILED_PREFIX,
    FAILURE_MESSAGES,
    NO_DLR_YET,
    OK_PREFIX,
)
from .models import DecodedResult, DeliveryOutcome, DeliveryState, RawResponse

_DELIVERY_STATES = MappingProxyType({
    "OK SENT": DeliveryState.SENT,
    "OK DELIVERED": DeliveryState.DELIVERED,
    "OK FAILED": DeliveryState.FAILED,
    NO_DLR_YET: DeliveryState.NOT_YET_AVAILABLE,
})


def is_success(body: Optional[str]) -> bool:
    """True if the body is non-blank and not an ERROR or FAILED response."""
    return (
        body is not None
        and bool(body.strip())
        and not body.startswith(ERROR_PREFIX)
        and not body.startswith(FAILED_PREFIX)
    )


def content_after_prefix(body: Optional[str], prefix: str) -> Optional[str]:
    """Return the body without the prefix, or None if it does not start with it."""
    if body is not None and body.startswith(prefix):
        return body[len(prefix):]
    return None


def _payload(body: str) -> str:
    payload = content_after_prefix(body, OK_PREFIX)
    return payload if payload is not None else body


def explain(body: str, success: bool) -> str:
    """Look up the explanation of a body, falling back to the body itself."""
    table = DLR_MESSAGES if success else FAILURE_MESSAGES
    return table.get(body, body)


def decode(raw: RawResponse) -> DecodedResult:
    """Decode a raw gateway response."""
    body = raw.body or ""
    success = is_success(body)
    return DecodedResult(
        success=success,
        result=_payload(body) if success else None,
        message=explain(body, success),
        raw=raw,
    )


def decode_delivery_status(raw: RawResponse) -> DeliveryOutcome:
    """
    Decode a delivery report response.

    Differs from decode() in one case: "FAILED 102" (no report yet) is a
    success and is returned verbatim as the result.
    """
    body = raw.body or ""
    no_report_yet = body == NO_DLR_YET
    success = is_success(body) or no_report_yet

    if no_report_yet:
        result = NO_DLR_YET
    elif success:
        result = _payload(body)
    else:
        result = None

    return DeliveryOutcome(
        success=success,
        result=result,
        message=explain(body, success),
        raw=raw,
        state=_DELIVERY_STATES.get(body),
    )
