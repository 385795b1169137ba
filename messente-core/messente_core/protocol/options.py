"""
Request Options
===============
Transport, delivery and verification options for API calls.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .params import Param, DEFAULT_ENCODING


class HttpProtocol(str, Enum):
    HTTP = "http"
    HTTPS = "https"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class Autoconvert(str, Enum):
    """Character replacement applied by the gateway to the SMS text."""
    ON = "on"
    FULL = "full"
    OFF = "off"


class ResponseFormat(str, Enum):
    """Price list formats."""
    JSON = "json"
    XML = "xml"


OptionValue = Optional[Union[str, int, Enum]]


def _option_text(value: OptionValue) -> Optional[str]:
    """Return the option as text, or None when it is unset or blank."""
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    text = str(value)
    return text if text.strip() else None


def _collect(*pairs) -> List[Param]:
    params = []
    for name, value in pairs:
        text = _option_text(value)
        if text is not None:
            params.append(Param(name, text))
    return params


@dataclass(frozen=True)
class MessenteOptions:
    """
    Options shared by all API calls.

    Only GET and POST are supported as http_method; anything else is
    rejected with ValidationError when a request is built. Use
    dataclasses.replace() to derive a variant.
    """
    # General
    protocol: HttpProtocol = HttpProtocol.HTTPS
    http_method: HttpMethod = HttpMethod.POST
    charset: str = DEFAULT_ENCODING

    # SMS messaging
    dlr_url: Optional[str] = None
    validity: OptionValue = None
    autoconvert: OptionValue = None
    time_to_send: OptionValue = None
    udh: Optional[str] = None

    # Verification
    ip: Optional[str] = None
    browser: Optional[str] = None
    verify_max_tries: OptionValue = None
    verify_retry_delay: OptionValue = None
    verify_validity: OptionValue = None

    @property
    def text_charset(self) -> str:
        """Charset of the SMS text and sender ID."""
        return _option_text(self.charset) or DEFAULT_ENCODING

    def sms_params(self) -> List[Param]:
        """SMS sending options that are set, in wire order."""
        return _collect(
            ("charset", self.charset),
            ("autoconvert", self.autoconvert),
            ("time_to_send", self.time_to_send),
            ("dlr-url", self.dlr_url),
            ("validity", self.validity),
            ("udh", self.udh),
        )

    def verification_params(self) -> List[Param]:
        """Verification session options that are set, in wire order."""
        return _collect(
            ("ip", self.ip),
            ("browser", self.browser),
            ("max_tries", self.verify_max_tries),
            ("retry_delay", self.verify_retry_delay),
            ("validity", self.verify_validity),
        )
