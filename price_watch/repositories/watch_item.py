"""Repository for watch item data access operations.

This module provides data access methods for watch items. Every query
that reads a single item is scoped to its owner.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from price_watch.database.models.watch_item import WatchItem
from price_watch.models.watch_item import WatchItemCreate

logger = logging.getLogger(__name__)


class WatchItemRepository:
    """Repository for watch item data access.

    Attributes:
        db: SQLAlchemy database session
    """

    def __init__(self, db: Session):
        """Initialize watch item repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create_item(self, user_id: str, item_data: WatchItemCreate) -> WatchItem:
        """Create a new watch item owned by ``user_id``.

        Args:
            user_id: Identity of the owning user
            item_data: Watch item creation data

        Returns:
            Created watch item instance

        Example:
            >>> repo = WatchItemRepository(db)
            >>> item = repo.create_item("user-1", WatchItemCreate(productName="Widget"))
        """
        now = datetime.utcnow()

        item = WatchItem(
            id=str(uuid.uuid4()),
            user_id=user_id,
            product_name=item_data.product_name,
            target_price=item_data.target_price,
            currency=item_data.currency,
            product_url=item_data.product_url,
            notes=item_data.notes,
            is_active=item_data.is_active,
            created_at=now,
            updated_at=now,
        )

        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)

        logger.info(f"Created watch item: {item.id} - {item.product_name}")
        return item

    def get_owned_item(self, item_id: str, user_id: str) -> Optional[WatchItem]:
        """Get a watch item by ID, only if it belongs to ``user_id``.

        Args:
            item_id: Watch item identifier
            user_id: Identity of the requesting user

        Returns:
            Watch item if it exists and is owned by the user, None otherwise
        """
        return (
            self.db.query(WatchItem)
            .filter(WatchItem.id == item_id, WatchItem.user_id == user_id)
            .first()
        )

    def list_for_user(
        self, user_id: str, include_inactive: bool = False
    ) -> List[WatchItem]:
        """List a user's watch items, oldest first.

        Args:
            user_id: Identity of the owning user
            include_inactive: Also return deactivated items

        Returns:
            List of watch item instances
        """
        query = self.db.query(WatchItem).filter(WatchItem.user_id == user_id)
        if not include_inactive:
            query = query.filter(WatchItem.is_active == True)  # noqa: E712
        return query.order_by(WatchItem.created_at).all()

    def update_item(self, item: WatchItem, changes: Dict[str, Any]) -> WatchItem:
        """Apply ``changes`` to an item and refresh its update timestamp.

        Args:
            item: Watch item instance loaded in this session
            changes: Column name to new value, only for provided fields

        Returns:
            Updated watch item instance
        """
        for field, value in changes.items():
            setattr(item, field, value)

        item.updated_at = datetime.utcnow()

        self.db.commit()
        self.db.refresh(item)

        logger.info(f"Updated watch item: {item.id} ({', '.join(changes)})")
        return item
