"""Data access layer repositories."""

from price_watch.repositories.price_snapshot import PriceSnapshotRepository
from price_watch.repositories.watch_item import WatchItemRepository

__all__ = [
    "PriceSnapshotRepository",
    "WatchItemRepository",
]
