# src/cryptocompare_client/core/dependencies.py
"""Dependency injection container for the client.
Settings, the CryptoCompare connection and services are registered here.
Callers can obtain instances via `Container.xxx()`.
"""

from dependency_injector import containers, providers
from cryptocompare_client.config.settings import get_settings
from cryptocompare_client.infrastructure.connections.cryptocompare_connection import (
    CryptoCompareConnection,
)
from cryptocompare_client.domain.services.price_service import PriceService


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(get_settings)

    # Connections
    cryptocompare = providers.Singleton(
        CryptoCompareConnection,
        config=providers.Callable(lambda cfg: cfg.cryptocompare.model_dump(), config),
    )

    # Services
    price_service = providers.Factory(PriceService, connection=cryptocompare)
