# src/cryptocompare_client/client.py
"""CryptoCompare client facade.

    async with CryptoCompareClient() as client:
        prices, meta = await client.price.list(PriceRequest.new("BTC", ["USD", "EUR"]))
"""

from typing import Optional

import httpx

from cryptocompare_client.config.settings import Settings, get_settings
from cryptocompare_client.domain.services.price_service import PriceService
from cryptocompare_client.infrastructure.connections.cryptocompare_connection import (
    CryptoCompareConnection,
)
from cryptocompare_client.utils.logger import configure_logging


class CryptoCompareClient:
    """Owns one connection and the services that share it."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        configure_logging(self.settings.logging.level)
        self.connection = CryptoCompareConnection(
            self.settings.cryptocompare.model_dump(), transport=transport
        )
        self.price = PriceService(self.connection)

    async def close(self) -> None:
        await self.connection.disconnect()

    async def __aenter__(self):
        await self.connection.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
