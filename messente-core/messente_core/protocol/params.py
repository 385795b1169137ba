"""
Request Parameter Encoding
==========================
Ordered, form-encoded query strings for the Messente API.
"""

from typing import Iterable, NamedTuple, Optional, Tuple, Union
from urllib.parse import quote_plus

from ..exceptions import EncodingError

DEFAULT_ENCODING = "UTF-8"


class Param(NamedTuple):
    """A single request parameter with an optional value charset."""
    name: str
    value: str
    encoding: Optional[str] = None


ParamLike = Union[Param, Tuple[str, str], Tuple[str, str, Optional[str]]]


def encode_value(value: str, encoding: Optional[str] = None) -> str:
    """
    Form-encode a parameter value.

    Spaces become '+', letters, digits and ". - * _" are kept and
    everything else is percent-encoded from the bytes of the charset.

    Args:
        value: Raw parameter value
        encoding: Charset name, UTF-8 when not given

    Returns:
        Encoded value

    Raises:
        EncodingError: Unknown charset or value not representable in it
    """
    charset = encoding or DEFAULT_ENCODING
    try:
        encoded = quote_plus(value, safe="*", encoding=charset, errors="strict")
    except (LookupError, UnicodeEncodeError) as e:
        raise EncodingError(f"'{value}' can't be encoded to {charset}", details=str(e)) from e
    # quote_plus keeps '~' bare, form encoding escapes it
    return encoded.replace("~", "%7E")


def encode_params(params: Iterable[ParamLike]) -> str:
    """
    Join parameters into an '&'-separated query string, keeping their order.

    Args:
        params: Param tuples of (name, value[, encoding])

    Returns:
        Encoded query string without a leading '?'
    """
    pairs = []
    for item in params:
        param = Param(*item)
        pairs.append(f"{param.name}={encode_value(str(param.value), param.encoding)}")
    return "&".join(pairs)
