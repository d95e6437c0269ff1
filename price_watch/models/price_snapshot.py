"""Pydantic models for price snapshot actions."""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import Field, StrictBool, field_validator

from price_watch.models.common import Amount, CamelModel


class PriceSnapshotCreate(CamelModel):
    """Input schema for addPriceSnapshot.

    Example:
        >>> PriceSnapshotCreate(itemId="123e4567-e89b-12d3-a456-426614174000", price=12.5)
    """

    item_id: str = Field(..., min_length=1, description="Watch item identifier")
    price: Amount = Field(..., description="Observed price")
    fetched_at: Optional[datetime] = Field(
        None, description="When the price was observed (defaults to now)"
    )
    currency: Optional[str] = Field(None, description="Currency code")
    source: Optional[str] = Field(None, description="Where the price came from")
    success: StrictBool = Field(True, description="Whether the fetch succeeded")
    message: Optional[str] = Field(None, description="Fetcher message")

    @field_validator("fetched_at")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store timestamps as naive UTC, like every other column."""
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class PriceSnapshotListQuery(CamelModel):
    """Input schema for listPriceSnapshots."""

    item_id: str = Field(..., min_length=1, description="Watch item identifier")


class PriceSnapshotResponse(CamelModel):
    """Response schema for a price snapshot."""

    id: str
    item_id: str
    fetched_at: datetime
    price: float
    currency: Optional[str] = None
    source: Optional[str] = None
    success: bool
    message: Optional[str] = None

    model_config = {"from_attributes": True}


class PriceSnapshotData(CamelModel):
    """Payload of addPriceSnapshot."""

    snapshot: PriceSnapshotResponse


class PriceSnapshotListData(CamelModel):
    """Payload of listPriceSnapshots."""

    items: List[PriceSnapshotResponse]
    total: int
