# src/cryptocompare_client/infrastructure/connections/base.py
"""
Abstract async connection base class. Concrete HTTP connections inherit from it
and share the connect / disconnect / is_healthy / get_client interface.
"""

import abc
from typing import Any, Dict

from cryptocompare_client.utils.logger import logger


class AsyncDataSourceConnection(abc.ABC):
    """Async connection base class for external APIs"""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self._connected: bool = False
        self._client: Any = None

    @abc.abstractmethod
    async def connect(self) -> bool:
        """Open the connection, True on success"""

    async def disconnect(self) -> bool:
        """Close the underlying client; subclasses may override"""
        if self._client is not None and hasattr(self._client, "aclose"):
            await self._client.aclose()
        self._client = None
        self._connected = False
        logger.info("connection closed", connection=self.__class__.__name__)
        return True

    async def is_healthy(self) -> bool:
        """Default health check only looks at connection state"""
        return self._connected

    @property
    def connected(self) -> bool:
        return self._connected

    def get_client(self) -> Any:
        """Underlying client instance, None until connected"""
        return self._client

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.disconnect()
