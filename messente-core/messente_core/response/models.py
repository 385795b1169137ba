"""
Response Models
===============
Raw and decoded gateway responses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import GatewayError


@dataclass(frozen=True)
class RawResponse:
    """Unmodified response body and HTTP status of a single exchange."""
    body: str
    status_code: int
    host: Optional[str] = None


def _raise_for_error(success: bool, message: str, raw: RawResponse) -> None:
    if not success:
        raise GatewayError(message, code=raw.body, status_code=raw.status_code)


@dataclass(frozen=True)
class DecodedResult:
    """
    Decoded response of an API call.

    Attributes:
        success: False for ERROR/FAILED bodies and empty responses
        result: Payload after "OK ", the raw body if no prefix matched,
            None on failure
        message: Human-readable explanation of the body
        raw: Response the result was decoded from
    """
    success: bool
    result: Optional[str]
    message: str
    raw: RawResponse

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    def raise_for_error(self) -> "DecodedResult":
        """Raise GatewayError if the call was not successful."""
        _raise_for_error(self.success, self.message, self.raw)
        return self


class DeliveryState(str, Enum):
    """Delivery report states."""
    SENT = "SENT"
    DELIVERED = "DELIVERED"
    FAILED = "FAILED"
    NOT_YET_AVAILABLE = "NOT_YET_AVAILABLE"


@dataclass(frozen=True)
class DeliveryOutcome:
    """
    Decoded delivery report.

    A missing report ("FAILED 102") counts as success, since polling
    again later is the expected reaction. state is None for error bodies.
    """
    success: bool
    result: Optional[str]
    message: str
    raw: RawResponse
    state: Optional[DeliveryState] = None

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    def raise_for_error(self) -> "DeliveryOutcome":
        """Raise GatewayError if the report could not be fetched."""
        _raise_for_error(self.success, self.message, self.raw)
        return self
