"""
Unit Tests for Response Decoding
================================
Tests for generic and delivery report decoding.
"""

import pytest

from messente_core.exceptions import GatewayError
from messente_core.response import (
    DeliveryState,
    RawResponse,
    codes,
    decode,
    decode_delivery_status,
    is_success,
)


def raw(body, status_code=200):
    return RawResponse(body=body, status_code=status_code, host="api2.messente.com")


class TestDecode:
    """Tests for generic response decoding."""

    def test_ok_payload(self):
        """Should strip the OK prefix from the payload."""
        result = decode(raw("OK 23i42o35hl3hh352"))

        assert result.success is True
        assert result.result == "23i42o35hl3hh352"
        assert result.message == "OK 23i42o35hl3hh352"

    def test_unprefixed_success(self):
        """A body without a known prefix is returned as-is."""
        result = decode(raw('{"EE": {"price": "0.05"}}'))

        assert result.success is True
        assert result.result == '{"EE": {"price": "0.05"}}'

    @pytest.mark.parametrize("body,message", [
        ("ERROR 101", codes.ACCESS_RESTRICTED),
        ("ERROR 102", codes.PARAMETERS_WRONG_OR_MISSING),
        ("ERROR 103", codes.INVALID_IP),
        ("ERROR 104", codes.UNKNOWN_COUNTRY),
        ("ERROR 105", codes.COUNTRY_NOT_SUPPORTED),
        ("ERROR 106", codes.INVALID_FORMAT),
        ("ERROR 107", codes.UNKNOWN_MESSAGE_ID),
        ("ERROR 108", codes.BLACKLISTED_NR),
        ("ERROR 111", codes.INVALID_SENDER),
        ("FAILED 209", codes.SERVER_FAILURE),
    ])
    def test_known_failures(self, body, message):
        result = decode(raw(body))

        assert result.success is False
        assert result.result is None
        assert result.message == message

    def test_unknown_failure_falls_back_to_body(self):
        result = decode(raw("ERROR 999"))

        assert result.success is False
        assert result.message == "ERROR 999"

    @pytest.mark.parametrize("body", ["", "   "])
    def test_blank_body_is_failure(self, body):
        assert decode(raw(body)).success is False

    def test_generic_decode_treats_no_report_as_failure(self):
        result = decode(raw(codes.NO_DLR_YET))

        assert result.success is False
        assert result.message == codes.NO_DLR

    def test_status_code_exposed(self):
        assert decode(raw("OK 1", 201)).status_code == 201

    def test_raise_for_error(self):
        """Should raise GatewayError carrying the body and status."""
        with pytest.raises(GatewayError) as exc:
            decode(raw("ERROR 101", 200)).raise_for_error()

        assert exc.value.code == "ERROR 101"
        assert exc.value.status_code == 200
        assert exc.value.message == codes.ACCESS_RESTRICTED

    def test_raise_for_error_passes_success(self):
        result = decode(raw("OK 1"))
        assert result.raise_for_error() is result

    def test_is_success(self):
        assert is_success("OK 1")
        assert not is_success(None)
        assert not is_success("FAILED 102")


class TestDecodeDeliveryStatus:
    """Tests for delivery report decoding."""

    @pytest.mark.parametrize("body,state,message", [
        ("OK SENT", DeliveryState.SENT, codes.DLR_SENT),
        ("OK DELIVERED", DeliveryState.DELIVERED, codes.DLR_DELIVERED),
        ("OK FAILED", DeliveryState.FAILED, codes.DLR_FAILED),
    ])
    def test_reports(self, body, state, message):
        outcome = decode_delivery_status(raw(body))

        assert outcome.success is True
        assert outcome.result == body[len("OK "):]
        assert outcome.state == state
        assert outcome.message == message

    def test_no_report_yet_is_success(self):
        """A missing report is successful and keeps the body as result."""
        outcome = decode_delivery_status(raw("FAILED 102"))

        assert outcome.success is True
        assert outcome.result == "FAILED 102"
        assert outcome.state == DeliveryState.NOT_YET_AVAILABLE
        assert outcome.message == codes.NO_DLR

    def test_unknown_message_id(self):
        outcome = decode_delivery_status(raw("ERROR 107"))

        assert outcome.success is False
        assert outcome.result is None
        assert outcome.state is None
        assert outcome.message == codes.UNKNOWN_MESSAGE_ID

    def test_server_failure(self):
        outcome = decode_delivery_status(raw("FAILED 209"))

        assert outcome.success is False
        assert outcome.message == codes.SERVER_FAILURE
        with pytest.raises(GatewayError):
            outcome.raise_for_error()
