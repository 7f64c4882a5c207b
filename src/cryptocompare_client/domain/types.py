"""Data types and structures for the CryptoCompare client.

This module defines the request model sent to the ``data/price`` endpoint,
the decoded price record, the transport metadata returned alongside it, and
the tagged value types used while decoding the raw JSON object.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EXCHANGE = "CCCAGG"


class PriceRequest(BaseModel):
    """Query parameters for a single price call."""

    model_config = ConfigDict(frozen=True)

    fsym: str = Field(..., description="Base currency symbol, e.g. BTC")
    tsyms: Tuple[str, ...] = Field(
        default=(), description="Target currency symbols, order preserved"
    )
    e: str = Field(default=DEFAULT_EXCHANGE, description="Exchange identifier")
    extra_params: str = Field(default="", description="Free-form app name sent as extraParams")
    sign: bool = Field(default=False, description="Ask the server to sign the response")
    try_conversion: bool = Field(
        default=True, description="Allow conversion through BTC when no direct pair exists"
    )

    @classmethod
    def new(cls, fsym: str, tsyms: List[str]) -> "PriceRequest":
        """Build a request with the API defaults (CCCAGG, unsigned, conversion on)."""
        return cls(fsym=fsym, tsyms=tuple(tsyms))

    def formatted_query_string(self, base_path: str) -> str:
        from cryptocompare_client.domain.query import format_query_string

        return format_query_string(base_path, self)


@dataclass(frozen=True)
class Price:
    """A single (symbol, value) quote."""

    name: str
    value: float


@dataclass(frozen=True)
class ResponseMeta:
    """Transport-level metadata of a completed HTTP exchange."""

    status_code: int
    url: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)


# Raw JSON values are classified into one of these before extraction


@dataclass(frozen=True)
class NumericValue:
    value: float


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class OtherValue:
    value: Any


RawValue = Union[NumericValue, StringValue, OtherValue]

RawResponseObject = Dict[str, Any]


def classify(value: Any) -> RawValue:
    """Tag a decoded JSON value. Booleans are not prices."""
    if isinstance(value, bool):
        return OtherValue(value)
    if isinstance(value, (int, float)):
        return NumericValue(float(value))
    if isinstance(value, str):
        return StringValue(value)
    return OtherValue(value)
