"""
Messente Core Library
=====================
Client-side protocol layer for the Messente SMS gateway API.
"""

__version__ = "1.0.0"

# Errors
from messente_core.exceptions import (
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

# Messaging
from messente_core.messaging import (
    EncodingType,
    detect_encoding,
    count_characters,
    calculate_parts,
    calculate_segments,
    estimate_cost,
    normalize_phone,
    UNKNOWN_PART_COUNT,
)

# Protocol
from messente_core.protocol import (
    ApiMethod,
    ApiRequest,
    Autoconvert,
    Credentials,
    HttpMethod,
    HttpProtocol,
    Message,
    MessenteOptions,
    ResponseFormat,
    build_url,
    encode_params,
)

# Responses
from messente_core.response import (
    RawResponse,
    DecodedResult,
    DeliveryOutcome,
    DeliveryState,
    decode,
    decode_delivery_status,
)

# Transport
from messente_core.http import Dispatcher, needs_failover

# Verification widget
from messente_core.verification import (
    compute_signature,
    verify_signature,
    verify_callback,
    CallbackVerdict,
)

# Client
from messente_core.config import MessenteConfig
from messente_core.client import MessenteClient
from messente_core.logging_setup import setup_logging

__all__ = [
    # Errors
    "MessenteError",
    "RequestError",
    "ValidationError",
    "EncodingError",
    "UrlBuildError",
    "TransportError",
    "GatewayError",
    "SignatureError",
    "MissingParameterError",
    # Messaging
    "EncodingType",
    "detect_encoding",
    "count_characters",
    "calculate_parts",
    "calculate_segments",
    "estimate_cost",
    "normalize_phone",
    "UNKNOWN_PART_COUNT",
    # Protocol
    "ApiMethod",
    "ApiRequest",
    "Autoconvert",
    "Credentials",
    "HttpMethod",
    "HttpProtocol",
    "Message",
    "MessenteOptions",
    "ResponseFormat",
    "build_url",
    "encode_params",
    # Responses
    "RawResponse",
    "DecodedResult",
    "DeliveryOutcome",
    "DeliveryState",
    "decode",
    "decode_delivery_status",
    # Transport
    "Dispatcher",
    "needs_failover",
    # Verification widget
    "compute_signature",
    "verify_signature",
    "verify_callback",
    "CallbackVerdict",
    # Client
    "MessenteConfig",
    "MessenteClient",
    "setup_logging",
]
