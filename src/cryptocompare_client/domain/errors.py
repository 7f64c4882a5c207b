# src/cryptocompare_client/domain/errors.py
"""Error hierarchy for the CryptoCompare client.

Every failure of a price call is terminal: callers get one of these
exceptions and no prices.
"""

from __future__ import annotations

from typing import Any, Optional

from cryptocompare_client.domain.types import ResponseMeta


class CryptoCompareError(Exception):
    """Base error for the CryptoCompare client."""

    def __init__(self, message: str, *, meta: Optional[ResponseMeta] = None) -> None:
        super().__init__(message)
        self.message = message
        self.meta = meta


class TransportError(CryptoCompareError):
    """Raised when the HTTP call itself fails (network, timeout, non-2xx)."""


class APIError(CryptoCompareError):
    """Raised when the JSON body reports ``Response: "Error"``."""


class DecodeError(CryptoCompareError):
    """Raised when the response body cannot be decoded into prices."""

    def __init__(
        self,
        message: str,
        *,
        key: Optional[str] = None,
        value: Any = None,
        meta: Optional[ResponseMeta] = None,
    ) -> None:
        super().__init__(message, meta=meta)
        self.key = key
        self.value = value
