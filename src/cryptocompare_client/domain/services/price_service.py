# src/cryptocompare_client/domain/services/price_service.py
"""Price service: single-symbol price lookup against ``data/price``.

Builds the query string, performs the GET through the connection, decodes
the body and returns prices sorted by name together with response metadata.
"""

from typing import List, Optional, Tuple

from cryptocompare_client.domain.decoder import decode_prices
from cryptocompare_client.domain.errors import CryptoCompareError
from cryptocompare_client.domain.query import format_query_string
from cryptocompare_client.domain.types import Price, PriceRequest, ResponseMeta
from cryptocompare_client.infrastructure.connections.cryptocompare_connection import (
    CryptoCompareConnection,
)
from cryptocompare_client.utils.logger import logger

PRICE_BASE_PATH = "data/price"


class PriceService:
    """Service for the ``data/price`` endpoint."""

    def __init__(self, connection: CryptoCompareConnection):
        self.connection = connection
        self.logger = logger

    async def list(
        self, request: Optional[PriceRequest] = None
    ) -> Tuple[List[Price], ResponseMeta]:
        """Fetch current prices of ``request.fsym`` in every ``request.tsyms``.

        Args:
            request: query parameters; without one the bare path is requested

        Returns:
            (prices sorted by name, response metadata)

        Raises:
            TransportError, APIError, DecodeError. No partial results.
        """
        path = PRICE_BASE_PATH
        if request is not None:
            path = format_query_string(PRICE_BASE_PATH, request)

        payload, meta = await self.connection.get_json(path)

        try:
            prices = decode_prices(payload)
        except CryptoCompareError as e:
            e.meta = meta
            self.logger.warning(
                "Price decode failed",
                path=path,
                error_type=type(e).__name__,
                error=e.message,
            )
            raise

        self.logger.info("Prices fetched", path=path, count=len(prices))
        return prices, meta
