"""Database models for the Price Watch server.

Models:
    WatchItem: A product a user is watching, with an optional target price
    PriceSnapshot: One recorded price observation for a watch item
"""

from .price_snapshot import PriceSnapshot
from .watch_item import WatchItem

__all__ = [
    "WatchItem",
    "PriceSnapshot",
]
