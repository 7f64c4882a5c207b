# src/cryptocompare_client/infrastructure/connections/cryptocompare_connection.py
"""Async CryptoCompare connection wrapper.

Owns the httpx client: API root, auth header and timeout are applied here so
the domain layer only deals with relative paths and decoded JSON.
"""

from typing import Any, Dict, Optional, Tuple

import httpx

from cryptocompare_client.config.settings import DEFAULT_API_ROOT
from cryptocompare_client.domain.errors import DecodeError, TransportError
from cryptocompare_client.domain.types import ResponseMeta
from cryptocompare_client.utils.logger import logger

from .base import AsyncDataSourceConnection


def _meta(response: httpx.Response) -> ResponseMeta:
    return ResponseMeta(
        status_code=response.status_code,
        url=str(response.request.url),
        headers=httpx.Headers(response.headers),
    )


class CryptoCompareConnection(AsyncDataSourceConnection):
    """CryptoCompare REST connection (min-api)."""

    def __init__(
        self,
        config: Dict[str, Any],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(config)
        self._api_key = config.get("api_key")
        self._base_url = config.get("api_root") or DEFAULT_API_ROOT
        self._timeout = config.get("timeout", 10.0)
        self._user_agent = config.get("user_agent", "cryptocompare-client")
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self._user_agent, "Accept": "application/json"}
        if self._api_key:
            headers["authorization"] = f"Apikey {self._api_key}"
        return headers

    async def connect(self) -> bool:
        """Create the httpx client. No network round trip is made."""
        if self._client is None:
            if not self._api_key:
                logger.warning("CryptoCompare API key not configured, using anonymous access")
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers(),
                timeout=self._timeout,
                transport=self._transport,
            )
        self._connected = True
        logger.info("CryptoCompare connected", base_url=self._base_url)
        return True

    async def is_healthy(self) -> bool:
        return self._connected and self._client is not None and not self._client.is_closed

    async def get_json(self, path: str) -> Tuple[Any, ResponseMeta]:
        """GET ``path`` relative to the API root and return (json body, meta).

        Raises:
            TransportError: network failure, timeout or non-2xx status.
            DecodeError: the body is not valid JSON.
        """
        if self._client is None:
            await self.connect()

        try:
            response = await self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            meta = _meta(e.response)
            logger.warning(
                "CryptoCompare HTTP error", path=path, status=meta.status_code
            )
            raise TransportError(
                f"HTTP {meta.status_code} for {path}", meta=meta
            ) from e
        except httpx.HTTPError as e:
            logger.warning("CryptoCompare request failed", path=path, error=str(e))
            raise TransportError(f"request to {path} failed: {e}") from e

        meta = _meta(response)
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(
                f"response body for {path} is not valid JSON", meta=meta
            ) from e

        logger.debug("CryptoCompare response", path=path, status=meta.status_code)
        return payload, meta

    def get_api_key(self) -> Optional[str]:
        return self._api_key

    def get_base_url(self) -> str:
        return self._base_url
