"""Watch item database model.

A watch item is a product a user tracks, optionally with a target price
that recorded snapshots are compared against.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, DateTime, Float, String, Text
from sqlalchemy.orm import relationship

from price_watch.database.session import Base

if TYPE_CHECKING:
    from .price_snapshot import PriceSnapshot


class WatchItem(Base):
    """Watch item model.

    Items are never removed; setting ``is_active`` to False is the soft
    delete.

    Attributes:
        id: Unique identifier (UUID as string)
        user_id: Identity of the owning user
        product_name: Name of the watched product
        target_price: Optional price threshold
        currency: Optional currency code
        product_url: Optional link to the product page
        notes: Optional user notes
        is_active: Whether the item is still being watched
        created_at: Timestamp when item was created
        updated_at: Timestamp when item was last modified
        snapshots: Relationship to recorded PriceSnapshot rows
    """

    __tablename__ = "price_watch_items"

    # Columns
    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    product_name = Column(String, nullable=False)
    target_price = Column(Float, nullable=True)
    currency = Column(String, nullable=True)
    product_url = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )

    # Relationships
    snapshots = relationship(
        "PriceSnapshot",
        back_populates="item",
        lazy="select"
    )

    def __repr__(self) -> str:
        return (
            f"<WatchItem(id={self.id}, user_id={self.user_id}, "
            f"product_name={self.product_name})>"
        )
