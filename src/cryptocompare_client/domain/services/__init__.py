"""Domain services."""

from .price_service import PRICE_BASE_PATH, PriceService

__all__ = ["PRICE_BASE_PATH", "PriceService"]
