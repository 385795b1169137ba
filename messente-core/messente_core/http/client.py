import logging
import httpx
from typing import Optional, Union
from tenacity import (
    Retrying,
    RetryCallState,
    before_sleep_log,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
)

from ..exceptions import TransportError
from ..protocol.options import HttpMethod
from ..protocol.models import Credentials
from ..protocol.urls import ApiRequest
from ..response.codes import SERVER_FAILURE
from ..response.decoder import decode
from ..response.models import RawResponse

USER_AGENT = "Messente-SDK"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

logger = logging.getLogger(__name__)


def needs_failover(response: RawResponse) -> bool:
    """
    True if a response should be repeated against the backup host.

    Any non-200 status qualifies, whatever the body says. A 200 answer
    qualifies only when it carries the server failure code.
    """
    if response.status_code != httpx.codes.OK:
        return True
    decoded = decode(response)
    return not decoded.success and decoded.message == SERVER_FAILURE


def _last_outcome(retry_state: RetryCallState) -> RawResponse:
    # Hand back the final attempt as-is: its response, or its exception
    return retry_state.outcome.result()


class Dispatcher:
    """
    Blocking HTTP transport for Messente API calls.

    Features:
    - One short-lived connection per exchange, always closed.
    - Form-encoded POST bodies or plain GET query strings.
    - Single failover to a backup host on transport or server failure.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self._transport = transport
        self._headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": FORM_CONTENT_TYPE,
        }

    def _map_exception(self, exc: httpx.HTTPError, host: Optional[str]) -> TransportError:
        """Map httpx exceptions to TransportError."""
        if isinstance(exc, httpx.TimeoutException):
            return TransportError("Request timed out", host=host, details=str(exc))
        if isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
            return TransportError(f"Failed to connect: {exc}", host=host, details=str(exc))
        return TransportError(f"Unable to read server response: {exc}", host=host, details=str(exc))

    def send(self, url: str, http_method: Union[HttpMethod, str] = HttpMethod.POST) -> RawResponse:
        """
        Perform a single HTTP exchange.

        For methods other than GET the query string is sent as the
        request body instead.

        Args:
            url: Fully built URL including the query string
            http_method: GET or POST

        Returns:
            RawResponse with the body (line breaks removed) and status code

        Raises:
            TransportError: Connection or read failure
        """
        method = HttpMethod(http_method)
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid URL: {e}") from e

        host = parsed.host
        endpoint, _, query = url.partition("?")

        with httpx.Client(transport=self._transport, headers=self._headers) as client:
            try:
                if method == HttpMethod.GET:
                    response = client.get(url)
                else:
                    response = client.request(method.value, endpoint, content=query.encode("ascii"))
                body = "".join(response.text.splitlines())
            except httpx.HTTPError as e:
                raise self._map_exception(e, host) from e

        logger.debug("%s %s%s -> HTTP %s", method.value, host, parsed.path, response.status_code)
        return RawResponse(body=body, status_code=response.status_code, host=host)

    def dispatch(
        self,
        request: ApiRequest,
        credentials: Credentials,
        primary_host: str,
        backup_host: Optional[str] = None,
    ) -> RawResponse:
        """
        Send a request to the primary host, failing over to the backup once.

        The request is repeated against the backup host when the primary
        raises TransportError, or answers unsuccessfully with the server
        failure code or a non-200 status. Whatever the backup returns or
        raises is passed through unchanged.

        Args:
            request: Request to send
            credentials: API credentials
            primary_host: Main API host
            backup_host: Optional backup API host

        Returns:
            RawResponse of the last attempt
        """
        hosts = iter([primary_host] + ([backup_host] if backup_host else []))
        attempts = 2 if backup_host else 1

        retrying = Retrying(
            retry=retry_if_exception_type(TransportError) | retry_if_result(needs_failover),
            stop=stop_after_attempt(attempts),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            retry_error_callback=_last_outcome,
        )
        return retrying(
            lambda: self.send(request.url_for(next(hosts), credentials), request.http_method)
        )
