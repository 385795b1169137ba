"""
Messente API Client
===================
Sends SMS, polls delivery reports, fetches prices and balance and runs
PIN verification sessions against the Messente gateway.
"""

from typing import Optional, Union

import httpx
import structlog

from .config import DEFAULT_BACKUP_HOST, DEFAULT_HOST, MessenteConfig
from .exceptions import TransportError
from .http.client import Dispatcher
from .protocol.builders import (
    balance_request,
    delivery_status_request,
    pin_verification_request,
    pricing_request,
    sms_request,
    start_verification_request,
)
from .protocol.models import Credentials, compose_message
from .protocol.options import HttpMethod, MessenteOptions, ResponseFormat
from .protocol.urls import ApiRequest
from .response.decoder import decode, decode_delivery_status
from .response.models import DecodedResult, DeliveryOutcome, RawResponse

logger = structlog.get_logger(__name__)

# Public service echoing the caller's address, for API IP whitelisting
IP_LOOKUP_URL = "https://api.ipify.org"


class MessenteClient:
    """
    Client for the Messente SMS gateway API.

    Every call is validated locally first, sent to the main host and
    repeated once on the backup host if the main host fails. Gateway
    rejections are returned as unsuccessful results, not raised.
    """

    def __init__(
        self,
        credentials: Credentials,
        host: str = DEFAULT_HOST,
        backup_host: Optional[str] = DEFAULT_BACKUP_HOST,
        dispatcher: Optional[Dispatcher] = None,
    ):
        self.credentials = credentials
        self.host = host
        self.backup_host = backup_host
        self.dispatcher = dispatcher or Dispatcher()

    @classmethod
    def from_config(
        cls,
        config: Optional[MessenteConfig] = None,
        dispatcher: Optional[Dispatcher] = None,
    ) -> "MessenteClient":
        """Create a client from MessenteConfig (environment by default)."""
        config = config or MessenteConfig()
        return cls(
            credentials=config.credentials(),
            host=config.host,
            backup_host=config.backup_host,
            dispatcher=dispatcher,
        )

    def __repr__(self) -> str:
        return (
            f"MessenteClient(username={self.credentials.username!r}, "
            f"host={self.host!r}, backup_host={self.backup_host!r})"
        )

    def _execute(self, request: ApiRequest) -> RawResponse:
        log = logger.bind(api_method=request.api_method.value, host=self.host)
        try:
            response = self.dispatcher.dispatch(
                request, self.credentials, self.host, self.backup_host
            )
        except TransportError as e:
            log.error("Messente API unreachable", error=e.message)
            raise
        log.debug("Messente API responded", status_code=response.status_code, answered_by=response.host)
        return response

    def _call(self, request: ApiRequest) -> DecodedResult:
        result = decode(self._execute(request))
        if not result.success:
            logger.warning(
                "Messente API call rejected",
                api_method=request.api_method.value,
                response=result.raw.body,
                status_code=result.status_code,
            )
        return result

    def _url(self, request: ApiRequest) -> str:
        return request.url_for(self.host, self.credentials)

    # Messaging

    def send_sms(
        self,
        to: str,
        text: str,
        sender: Optional[str] = None,
        options: Optional[MessenteOptions] = None,
    ) -> DecodedResult:
        """
        Send an SMS.

        Args:
            to: Recipient phone number
            text: Message text
            sender: Optional sender ID registered on messente.com
            options: Delivery and transport options

        Returns:
            DecodedResult whose result is the unique message ID on success
        """
        request = sms_request(compose_message(to, text, sender), options)
        return self._call(request)

    def messaging_url(
        self,
        to: str,
        text: str,
        sender: Optional[str] = None,
        options: Optional[MessenteOptions] = None,
    ) -> str:
        return self._url(sms_request(compose_message(to, text, sender), options))

    # Delivery reports

    def get_delivery_status(self, message_id: str, options: Optional[MessenteOptions] = None) -> DeliveryOutcome:
        """
        Fetch the delivery report of a sent message.

        A missing report is a successful outcome in state NOT_YET_AVAILABLE.
        """
        request = delivery_status_request(message_id, options)
        return decode_delivery_status(self._execute(request))

    def delivery_status_url(self, message_id: str, options: Optional[MessenteOptions] = None) -> str:
        return self._url(delivery_status_request(message_id, options))

    # Pricing

    def get_price_list(
        self,
        country: str,
        response_format: Optional[Union[ResponseFormat, str]] = None,
        options: Optional[MessenteOptions] = None,
    ) -> DecodedResult:
        """Fetch the price list of a country, e.g. "EE", as json or xml."""
        return self._call(pricing_request(country, response_format, options))

    def pricing_url(
        self,
        country: str,
        response_format: Optional[Union[ResponseFormat, str]] = None,
        options: Optional[MessenteOptions] = None,
    ) -> str:
        return self._url(pricing_request(country, response_format, options))

    # Balance

    def get_balance(self, options: Optional[MessenteOptions] = None) -> DecodedResult:
        """Fetch the account balance."""
        return self._call(balance_request(options))

    def balance_url(self, options: Optional[MessenteOptions] = None) -> str:
        return self._url(balance_request(options))

    # Verification

    def start_verification(
        self,
        to: str,
        sender: Optional[str] = None,
        template: Optional[str] = None,
        cookie: Optional[str] = None,
        options: Optional[MessenteOptions] = None,
    ) -> DecodedResult:
        """
        Start a PIN verification session.

        Returns:
            DecodedResult whose result is the verification ID on success
        """
        return self._call(start_verification_request(to, sender, template, cookie, options))

    def start_verification_url(
        self,
        to: str,
        sender: Optional[str] = None,
        template: Optional[str] = None,
        cookie: Optional[str] = None,
        options: Optional[MessenteOptions] = None,
    ) -> str:
        return self._url(start_verification_request(to, sender, template, cookie, options))

    def verify_pin(
        self,
        verification_id: str,
        pin: str,
        cookie: Optional[str] = None,
        options: Optional[MessenteOptions] = None,
    ) -> DecodedResult:
        """Check the PIN the user entered for a verification session."""
        return self._call(pin_verification_request(verification_id, pin, cookie, options))

    def pin_verification_url(
        self,
        verification_id: str,
        pin: str,
        cookie: Optional[str] = None,
        options: Optional[MessenteOptions] = None,
    ) -> str:
        return self._url(pin_verification_request(verification_id, pin, cookie, options))

    # Utilities

    def get_my_ip(self) -> str:
        """
        Public IP address of this machine, as seen from the internet.

        Raises:
            TransportError: If the lookup service cannot be reached or fails
        """
        response = self.dispatcher.send(IP_LOOKUP_URL, HttpMethod.GET)
        if response.status_code != httpx.codes.OK:
            raise TransportError(
                f"Retrieving IP failed with response code {response.status_code}",
                host=response.host,
                status_code=response.status_code,
            )
        return response.body.strip()
