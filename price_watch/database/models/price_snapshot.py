"""Price snapshot database model.

Records a single observed price for a watch item. Snapshots are written
once and never modified.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from price_watch.database.session import Base

if TYPE_CHECKING:
    from .watch_item import WatchItem


class PriceSnapshot(Base):
    """Price snapshot model for price history.

    Attributes:
        id: Unique identifier (UUID as string)
        item_id: Foreign key to WatchItem
        fetched_at: When the price was observed
        price: Observed price
        currency: Optional currency code of the observed price
        source: Optional name of the source the price came from
        success: Whether the fetch that produced this snapshot succeeded
        message: Optional free-form message from the fetcher
        item: Relationship to WatchItem
    """

    __tablename__ = "price_snapshots"

    # Columns
    id = Column(String, primary_key=True)
    item_id = Column(
        String,
        ForeignKey("price_watch_items.id"),
        nullable=False,
        index=True
    )
    fetched_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    price = Column(Float, nullable=False)
    currency = Column(String, nullable=True)
    source = Column(String, nullable=True)
    success = Column(Boolean, default=True, nullable=False)
    message = Column(Text, nullable=True)

    # Relationships
    item = relationship("WatchItem", back_populates="snapshots", lazy="select")

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            Formatted string with snapshot details
        """
        return (
            f"<PriceSnapshot(id={self.id}, item_id={self.item_id}, "
            f"price={self.price}, fetched_at={self.fetched_at})>"
        )
