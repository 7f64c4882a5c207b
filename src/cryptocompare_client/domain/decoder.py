# src/cryptocompare_client/domain/decoder.py
"""Decoding of the ``data/price`` JSON object into sorted prices.

The endpoint answers with ``{"USD": 50000.0, "EUR": 46000.0}`` on success and
with ``{"Response": "Error", "Message": "..."}`` on failure, so the reserved
keys are checked first and everything else is treated as data.
"""

from operator import attrgetter
from typing import Any, List

from cryptocompare_client.domain.errors import APIError, DecodeError
from cryptocompare_client.domain.types import (
    NumericValue,
    OtherValue,
    Price,
    RawResponseObject,
    StringValue,
    classify,
)

RESPONSE_KEY = "Response"
MESSAGE_KEY = "Message"
ERROR_RESPONSE = "Error"
RESERVED_KEYS = frozenset({RESPONSE_KEY, MESSAGE_KEY})

GENERIC_API_ERROR = "CryptoCompare API returned an error response"


def check_error(raw: RawResponseObject) -> None:
    """Raise APIError if the body carries the embedded error tag."""
    if raw.get(RESPONSE_KEY) != ERROR_RESPONSE:
        return
    message = raw.get(MESSAGE_KEY)
    if isinstance(message, str) and message:
        raise APIError(message)
    raise APIError(GENERIC_API_ERROR)


def extract_prices(raw: RawResponseObject) -> List[Price]:
    prices: List[Price] = []
    for key, value in raw.items():
        if key in RESERVED_KEYS:
            continue
        tagged = classify(value)
        if isinstance(tagged, NumericValue):
            prices.append(Price(name=key, value=tagged.value))
        elif isinstance(tagged, StringValue):
            raise DecodeError(
                f"price for {key!r} is a string, expected a number: {tagged.value!r}",
                key=key,
                value=tagged.value,
            )
        elif isinstance(tagged, OtherValue):
            raise DecodeError(
                f"price for {key!r} has unsupported type {type(tagged.value).__name__}",
                key=key,
                value=tagged.value,
            )
    return prices


def sort_prices(prices: List[Price]) -> List[Price]:
    """Sort by name, ascending. Stable, so already sorted input is unchanged."""
    return sorted(prices, key=attrgetter("name"))


def decode_prices(raw: Any) -> List[Price]:
    """Turn a raw JSON body into name-sorted prices.

    Raises:
        APIError: the body reports ``Response: "Error"``.
        DecodeError: the body is not an object or a value is not numeric.
    """
    if not isinstance(raw, dict):
        raise DecodeError(
            f"expected a JSON object, got {type(raw).__name__}", value=raw
        )
    check_error(raw)
    return sort_prices(extract_prices(raw))
