"""
Endpoint URLs
=============
Assembly of fully qualified, authenticated API URLs.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import httpx

from ..exceptions import UrlBuildError
from .models import Credentials
from .options import HttpMethod, HttpProtocol
from .params import encode_params


class ApiMethod(str, Enum):
    """Messente API method paths."""
    SEND_SMS = "/send_sms/"
    GET_DLR_RESPONSE = "/get_dlr_response/"
    PRICES = "/prices/"
    GET_BALANCE = "/get_balance/"
    VERIFY_START = "/verify/start/"
    VERIFY_PIN = "/verify/pin/"


# Bare hostname with an optional port, no scheme or path
_HOST_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9.-]*[A-Za-z0-9])?(?::\d{1,5})?$")


def build_url(
    protocol: HttpProtocol,
    api_method: ApiMethod,
    host: str,
    credentials: Credentials,
    params: Optional[str] = None,
) -> str:
    """
    Build the URL of an API call.

    Credentials always come first, username before password.

    Args:
        protocol: http or https
        api_method: API method path
        host: Bare hostname, e.g. "api2.messente.com"
        credentials: API credentials
        params: Already encoded parameters

    Returns:
        URL string like https://host/path/?username=...&password=...&params

    Raises:
        UrlBuildError: If the host or the resulting URL is malformed
    """
    if not host or not _HOST_PATTERN.match(host):
        raise UrlBuildError(f"Building URL failed: invalid host {host!r}")

    query = encode_params([
        ("username", credentials.username),
        ("password", credentials.password),
    ])
    if params:
        query = f"{query}&{params}"

    url = f"{HttpProtocol(protocol).value}://{host}{ApiMethod(api_method).value}?{query}"

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise UrlBuildError(f"Building URL failed: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise UrlBuildError(f"Building URL failed: {url.split('?', 1)[0]} is not absolute")

    return url


@dataclass(frozen=True)
class ApiRequest:
    """An API call that can be rendered against any host."""
    api_method: ApiMethod
    params: Optional[str] = None
    protocol: HttpProtocol = HttpProtocol.HTTPS
    http_method: HttpMethod = HttpMethod.POST

    def url_for(self, host: str, credentials: Credentials) -> str:
        return build_url(self.protocol, self.api_method, host, credentials, self.params)
