"""Async client for the CryptoCompare ``data/price`` endpoint."""

from cryptocompare_client.client import CryptoCompareClient
from cryptocompare_client.domain.errors import (
    APIError,
    CryptoCompareError,
    DecodeError,
    TransportError,
)
from cryptocompare_client.domain.types import Price, PriceRequest, ResponseMeta

__all__ = [
    "CryptoCompareClient",
    "PriceRequest",
    "Price",
    "ResponseMeta",
    "CryptoCompareError",
    "TransportError",
    "APIError",
    "DecodeError",
]
