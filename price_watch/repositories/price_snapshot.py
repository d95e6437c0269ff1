"""Repository for price snapshot data access operations."""

import logging
import uuid
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from price_watch.database.models.price_snapshot import PriceSnapshot
from price_watch.models.price_snapshot import PriceSnapshotCreate

logger = logging.getLogger(__name__)


class PriceSnapshotRepository:
    """Repository for price snapshot inserts and history queries.

    Snapshots are never updated, so there is no update method.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_snapshot(self, snapshot_data: PriceSnapshotCreate) -> PriceSnapshot:
        """Record a price snapshot.

        Args:
            snapshot_data: Snapshot creation data; ``fetched_at`` defaults to now

        Returns:
            Created PriceSnapshot
        """
        snapshot = PriceSnapshot(
            id=str(uuid.uuid4()),
            item_id=snapshot_data.item_id,
            fetched_at=snapshot_data.fetched_at or datetime.utcnow(),
            price=snapshot_data.price,
            currency=snapshot_data.currency,
            source=snapshot_data.source,
            success=snapshot_data.success,
            message=snapshot_data.message,
        )
        self.db.add(snapshot)
        self.db.commit()
        self.db.refresh(snapshot)
        logger.info(
            f"Recorded price {snapshot.price} for item {snapshot.item_id}"
        )
        return snapshot

    def list_for_item(self, item_id: str) -> List[PriceSnapshot]:
        """List all snapshots of an item, ordered by fetched_at."""
        return (
            self.db.query(PriceSnapshot)
            .filter(PriceSnapshot.item_id == item_id)
            .order_by(PriceSnapshot.fetched_at)
            .all()
        )
