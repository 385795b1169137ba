"""
Request Protocol
================
Parameter encoding, options, URL assembly and request builders.
"""

from .params import Param, encode_params, encode_value, DEFAULT_ENCODING
from .options import (
    Autoconvert,
    HttpMethod,
    HttpProtocol,
    MessenteOptions,
    ResponseFormat,
)
from .models import Credentials, Message, compose_message
from .urls import ApiMethod, ApiRequest, build_url
from .builders import (
    PIN_PLACEHOLDER,
    balance_request,
    delivery_status_request,
    pin_verification_request,
    pricing_request,
    sms_request,
    start_verification_request,
)

__all__ = [
    # Params
    "Param",
    "encode_params",
    "encode_value",
    "DEFAULT_ENCODING",
    # Options
    "Autoconvert",
    "HttpMethod",
    "HttpProtocol",
    "MessenteOptions",
    "ResponseFormat",
    # Models
    "Credentials",
    "Message",
    "compose_message",
    # URLs
    "ApiMethod",
    "ApiRequest",
    "build_url",
    # Builders
    "PIN_PLACEHOLDER",
    "balance_request",
    "delivery_status_request",
    "pin_verification_request",
    "pricing_request",
    "sms_request",
    "start_verification_request",
]
