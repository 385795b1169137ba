from ..exceptions import (
    MessenteError,
    RequestError,
    ValidationError,
    EncodingError,
    UrlBuildError,
    TransportError,
    GatewayError,
    SignatureError,
    MissingParameterError,
)
from .client import Dispatcher, needs_failover, USER_AGENT, FORM_CONTENT_TYPE

__all__ = [
    "Dispatcher",
    "needs_failover",
    "USER_AGENT",
    "FORM_CONTENT_TYPE",
    "MessenteError",
    "RequestError",
    "ValidationError",
    "EncodingError",
    "UrlBuildError",
    "TransportError",
    "GatewayError",
    "SignatureError",
    "MissingParameterError",
]
