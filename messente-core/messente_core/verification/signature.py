"""
Signature Functions
===================
MD5 signatures of verification widget callbacks.
"""

import hmac
import hashlib
from typing import Mapping, Optional

from ..exceptions import MissingParameterError

# Parameters covered by the signature
SIGNED_PARAMS = frozenset({"user", "phone", "version", "callback_url", "status"})

# Reserved key the shared secret is signed under
SECRET_PARAM = "pass"

# Parameter carrying the signature in a callback
SIGNATURE_PARAM = "sig"

SIGNATURE_ALGORITHM = "md5"


def _require(params: Mapping[str, str], name: str, action: str) -> str:
    value = params.get(name)
    if value is None or not str(value).strip():
        raise MissingParameterError(f"'{name}' parameter is missing - can't {action}")
    return str(value)


def _require_secret(secret: Optional[str], action: str) -> str:
    if secret is None or not secret.strip():
        raise MissingParameterError(f"Password not set - can't {action}")
    return secret


def canonical_string(params: Mapping[str, str], secret: str) -> str:
    """
    Build the string that is hashed into a signature.

    Only whitelisted parameters and the secret take part. Entries are
    sorted by key and concatenated as key followed by value, without
    separators.
    """
    signed = {key: str(value) for key, value in params.items() if key in SIGNED_PARAMS}
    signed[SECRET_PARAM] = secret
    return "".join(f"{key}{value}" for key, value in sorted(signed.items()))


def compute_signature(params: Mapping[str, str], secret: str) -> str:
    """
    Compute the signature of callback parameters.

    Args:
        params: Callback parameters; the mapping is not modified
        secret: Messente API password

    Returns:
        Lowercase hex-encoded MD5 digest

    Raises:
        MissingParameterError: If 'user', 'version' or the secret is missing
    """
    action = "generate signature"
    _require(params, "user", action)
    _require_secret(secret, action)
    _require(params, "version", action)

    message = canonical_string(params, secret)
    return hashlib.md5(message.encode("utf-8")).hexdigest()


def verify_signature(params: Mapping[str, str], secret: str) -> bool:
    """
    Verify the 'sig' parameter of a callback using constant-time comparison.

    Args:
        params: Callback parameters including 'sig'
        secret: Messente API password

    Returns:
        True if the signature is valid

    Raises:
        MissingParameterError: If 'sig', 'user', 'version' or the secret is missing
    """
    action = "compare signatures"
    provided_signature = _require(params, SIGNATURE_PARAM, action)
    _require_secret(secret, action)

    expected_signature = compute_signature(params, secret)
    return hmac.compare_digest(
        expected_signature.encode("utf-8"),
        provided_signature.encode("utf-8"),
    )
