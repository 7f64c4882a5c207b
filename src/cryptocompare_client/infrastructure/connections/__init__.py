# src/cryptocompare_client/infrastructure/connections/__init__.py
"""Data source connections."""

from .base import AsyncDataSourceConnection
from .cryptocompare_connection import CryptoCompareConnection

__all__ = [
    "AsyncDataSourceConnection",
    "CryptoCompareConnection",
]
