"""Service layer for watch items and their price history.

Every operation is performed on behalf of an authenticated user. Items
and snapshots belonging to other users are reported as not found.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from price_watch.database.models.price_snapshot import PriceSnapshot
from price_watch.database.models.watch_item import WatchItem
from price_watch.exceptions import NotFoundError
from price_watch.models.price_snapshot import PriceSnapshotCreate
from price_watch.models.watch_item import WatchItemCreate, WatchItemUpdate
from price_watch.repositories.price_snapshot import PriceSnapshotRepository
from price_watch.repositories.watch_item import WatchItemRepository

logger = logging.getLogger(__name__)


class PriceWatchService:
    """Service for watch item CRUD and price snapshots.

    Attributes:
        db: SQLAlchemy database session
        item_repo: Watch item data access
        snapshot_repo: Price snapshot data access
    """

    def __init__(self, db: Session):
        self.db = db
        self.item_repo = WatchItemRepository(db)
        self.snapshot_repo = PriceSnapshotRepository(db)

    # --- Ownership ---

    def get_owned_item(self, item_id: str, user_id: str) -> WatchItem:
        """Get a watch item owned by ``user_id``.

        Args:
            item_id: Watch item identifier
            user_id: Identity of the requesting user

        Returns:
            The matching watch item

        Raises:
            NotFoundError: If the item does not exist or belongs to
                another user
        """
        item = self.item_repo.get_owned_item(item_id, user_id)
        if item is None:
            logger.warning(f"Watch item {item_id} not found for user {user_id}")
            raise NotFoundError()
        return item

    # --- Watch items ---

    def create_item(self, user_id: str, item_data: WatchItemCreate) -> WatchItem:
        """Create a watch item owned by the caller."""
        return self.item_repo.create_item(user_id, item_data)

    def update_item(self, user_id: str, item_data: WatchItemUpdate) -> WatchItem:
        """Apply a partial update to one of the caller's items.

        Raises:
            NotFoundError: If the item is missing or not owned by the caller
        """
        item = self.get_owned_item(item_data.id, user_id)
        return self.item_repo.update_item(item, item_data.changes())

    def list_items(self, user_id: str, include_inactive: bool = False) -> List[WatchItem]:
        """List the caller's items, active ones only unless asked otherwise."""
        return self.item_repo.list_for_user(user_id, include_inactive=include_inactive)

    # --- Price snapshots ---

    def add_snapshot(
        self, user_id: str, snapshot_data: PriceSnapshotCreate
    ) -> PriceSnapshot:
        """Record a price snapshot for one of the caller's items.

        Raises:
            NotFoundError: If the item is missing or not owned by the caller
        """
        self.get_owned_item(snapshot_data.item_id, user_id)
        return self.snapshot_repo.create_snapshot(snapshot_data)

    def list_snapshots(self, user_id: str, item_id: str) -> List[PriceSnapshot]:
        """List the price history of one of the caller's items.

        Raises:
            NotFoundError: If the item is missing or not owned by the caller
        """
        self.get_owned_item(item_id, user_id)
        return self.snapshot_repo.list_for_item(item_id)
