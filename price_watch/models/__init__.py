"""Pydantic request and response models."""

from price_watch.models.common import (
    ActionResponse,
    ErrorResponse,
    HealthResponse,
    InfoResponse,
)
from price_watch.models.price_snapshot import (
    PriceSnapshotCreate,
    PriceSnapshotData,
    PriceSnapshotListData,
    PriceSnapshotListQuery,
    PriceSnapshotResponse,
)
from price_watch.models.watch_item import (
    WatchItemCreate,
    WatchItemData,
    WatchItemListData,
    WatchItemListQuery,
    WatchItemResponse,
    WatchItemUpdate,
)

__all__ = [
    # Common models
    "ActionResponse",
    "HealthResponse",
    "InfoResponse",
    "ErrorResponse",
    # Watch item models
    "WatchItemCreate",
    "WatchItemUpdate",
    "WatchItemListQuery",
    "WatchItemResponse",
    "WatchItemData",
    "WatchItemListData",
    # Snapshot models
    "PriceSnapshotCreate",
    "PriceSnapshotListQuery",
    "PriceSnapshotResponse",
    "PriceSnapshotData",
    "PriceSnapshotListData",
]
