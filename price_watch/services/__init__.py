"""Business logic services."""

from price_watch.services.price_watch_service import PriceWatchService

__all__ = ["PriceWatchService"]
