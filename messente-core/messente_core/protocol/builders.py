"""
API Requests
============
Validated, encoded requests for every Messente API method.

All checks happen here, before any network I/O.
"""

from typing import List, Optional, Union

from ..exceptions import ValidationError
from ..messaging.phone_utils import normalize_phone, phone_digits
from .models import Message
from .options import HttpMethod, HttpProtocol, MessenteOptions, ResponseFormat
from .params import Param, encode_params, DEFAULT_ENCODING
from .urls import ApiMethod, ApiRequest

PIN_PLACEHOLDER = "<PIN>"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _require(value: Optional[str], error: str) -> str:
    if _is_blank(value):
        raise ValidationError(error)
    return value


def _check_cookie(cookie: Optional[str]) -> None:
    # None means "no cookie", an empty string is a caller mistake
    if cookie is not None and not cookie.strip():
        raise ValidationError("Invalid cookie")


def _request(api_method: ApiMethod, params: List[Param], options: MessenteOptions) -> ApiRequest:
    try:
        protocol = HttpProtocol(options.protocol)
    except ValueError as e:
        raise ValidationError(f"Unsupported protocol {options.protocol!r}, only http or https is allowed") from e
    try:
        http_method = HttpMethod(options.http_method)
    except ValueError as e:
        raise ValidationError(f"Unsupported HTTP method {options.http_method!r}, only GET or POST is allowed") from e

    return ApiRequest(
        api_method=api_method,
        params=encode_params(params) or None,
        protocol=protocol,
        http_method=http_method,
    )


def sms_request(message: Message, options: Optional[MessenteOptions] = None) -> ApiRequest:
    """Request for sending an SMS."""
    options = options or MessenteOptions()
    charset = options.text_charset

    params = []
    if not _is_blank(message.sender):
        params.append(Param("from", message.sender, charset))
    params.append(Param("to", normalize_phone(message.recipient), DEFAULT_ENCODING))
    params.append(Param("text", message.text, charset))
    params.extend(options.sms_params())

    return _request(ApiMethod.SEND_SMS, params, options)


def delivery_status_request(message_id: Optional[str], options: Optional[MessenteOptions] = None) -> ApiRequest:
    """Request for the delivery report of a sent message."""
    options = options or MessenteOptions()
    _require(message_id, "Message ID not specified")
    return _request(ApiMethod.GET_DLR_RESPONSE, [Param("sms_unique_id", message_id)], options)


def pricing_request(
    country: Optional[str],
    response_format: Optional[Union[ResponseFormat, str]] = None,
    options: Optional[MessenteOptions] = None,
) -> ApiRequest:
    """Request for the price list of a country (ISO 3166-1 alpha-2 code)."""
    options = options or MessenteOptions()
    _require(country, "Country code not provided")

    params = [Param("country", country.strip().upper())]
    if response_format is not None:
        try:
            params.append(Param("format", ResponseFormat(response_format).value))
        except ValueError as e:
            raise ValidationError(f"Invalid format {response_format!r}, only json or xml is allowed") from e

    return _request(ApiMethod.PRICES, params, options)


def balance_request(options: Optional[MessenteOptions] = None) -> ApiRequest:
    """Request for the account balance."""
    options = options or MessenteOptions()
    return _request(ApiMethod.GET_BALANCE, [], options)


def start_verification_request(
    to: Optional[str],
    sender: Optional[str] = None,
    template: Optional[str] = None,
    cookie: Optional[str] = None,
    options: Optional[MessenteOptions] = None,
) -> ApiRequest:
    """
    Request for starting a PIN verification session.

    Args:
        to: Phone number the PIN is sent to
        sender: Optional sender ID of the PIN message
        template: Optional message template, must contain <PIN>
        cookie: Optional session cookie, must not be blank if given
        options: Verification and transport options
    """
    options = options or MessenteOptions()

    if not _is_blank(template) and PIN_PLACEHOLDER not in template:
        raise ValidationError(f"Verification message template is missing '{PIN_PLACEHOLDER}' placeholder")
    if _is_blank(to) or not phone_digits(to):
        raise ValidationError("Invalid recipient's phone number")
    _check_cookie(cookie)

    params = options.verification_params()
    if not _is_blank(sender):
        params.append(Param("from", sender, options.text_charset))
    if not _is_blank(template):
        params.append(Param("template", template))
    if cookie is not None:
        params.append(Param("cookie", cookie))
    params.append(Param("to", normalize_phone(to)))

    return _request(ApiMethod.VERIFY_START, params, options)


def pin_verification_request(
    verification_id: Optional[str],
    pin: Optional[str],
    cookie: Optional[str] = None,
    options: Optional[MessenteOptions] = None,
) -> ApiRequest:
    """Request for checking a PIN entered by the user."""
    options = options or MessenteOptions()

    _require(verification_id, "Missing verification ID")
    _require(pin, "PIN missing")
    _check_cookie(cookie)

    params = []
    if cookie is not None:
        params.append(Param("cookie", cookie))
    params.append(Param("pin", pin))
    params.append(Param("verification_id", verification_id))

    return _request(ApiMethod.VERIFY_PIN, params, options)
