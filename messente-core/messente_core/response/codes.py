"""
Response Codes
==============
Fixed explanations for gateway response bodies.
"""

from types import MappingProxyType

OK_PREFIX = "OK "
ERROR_PREFIX = "ERROR "
FAILED_PREFIX = "FAILED "

NO_DLR_YET = "FAILED 102"

ACCESS_RESTRICTED = (
    "Access is restricted, wrong credentials. "
    "Check the username and password values."
)
PARAMETERS_WRONG_OR_MISSING = (
    "Parameters are wrong or missing. "
    "Check that all the required parameters are present."
)
INVALID_IP = (
    "Invalid IP address. The IP address you made the request from, "
    "is not in the API settings whitelist."
)
UNKNOWN_COUNTRY = "Country was not found."
COUNTRY_NOT_SUPPORTED = "This country is not supported"
INVALID_FORMAT = "Invalid format provided - only json or xml is allowed."
UNKNOWN_MESSAGE_ID = "Could not find the message with sms_unique_id"
BLACKLISTED_NR = "Number is in blacklist."
INVALID_SENDER = (
    "Sender parameter \"from\" is invalid. "
    "You have not activated this sender name on messente.com"
)
NO_DLR = "No Delivery report yet, try again later."
SERVER_FAILURE = (
    "Server failure. Try again after a few seconds "
    "or try the api3.messente.com backup server."
)

DLR_SENT = "Message has been submitted but does not yet have any delivery information"
DLR_FAILED = "Message delivery failed!"
DLR_DELIVERED = "SMS was successfully delivered to recipient"

# Explanations of successful delivery report bodies
DLR_MESSAGES = MappingProxyType({
    "OK SENT": DLR_SENT,
    "OK FAILED": DLR_FAILED,
    "OK DELIVERED": DLR_DELIVERED,
    NO_DLR_YET: NO_DLR,
})

# Explanations of failure bodies
FAILURE_MESSAGES = MappingProxyType({
    "ERROR 101": ACCESS_RESTRICTED,
    "ERROR 102": PARAMETERS_WRONG_OR_MISSING,
    "ERROR 103": INVALID_IP,
    "ERROR 104": UNKNOWN_COUNTRY,
    "ERROR 105": COUNTRY_NOT_SUPPORTED,
    "ERROR 106": INVALID_FORMAT,
    "ERROR 107": UNKNOWN_MESSAGE_ID,
    "ERROR 108": BLACKLISTED_NR,
    "ERROR 111": INVALID_SENDER,
    NO_DLR_YET: NO_DLR,
    "FAILED 209": SERVER_FAILURE,
})
