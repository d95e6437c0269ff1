"""Pydantic models for watch item actions.

This module contains the input schemas for creating, updating and
listing watch items, and the item response schema.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, StrictBool, field_validator, model_validator

from price_watch.models.common import Amount, CamelModel

# Fields of WatchItemUpdate that change the stored item
MUTABLE_FIELDS = (
    "product_name",
    "target_price",
    "currency",
    "product_url",
    "notes",
    "is_active",
)


def _strip_product_name(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Product name cannot be blank")
    return v.strip()


class WatchItemCreate(CamelModel):
    """Input schema for createPriceWatchItem.

    The owner is always the authenticated caller; a ``userId`` in the
    body is ignored.

    Example:
        >>> WatchItemCreate(productName="Widget", targetPrice=9.99)
    """

    product_name: str = Field(..., min_length=1, description="Product name")
    target_price: Optional[Amount] = Field(None, description="Target price")
    currency: Optional[str] = Field(None, description="Currency code")
    product_url: Optional[str] = Field(None, description="Product page URL")
    notes: Optional[str] = Field(None, description="User notes")
    is_active: StrictBool = Field(True, description="Whether the item is watched")

    @field_validator("product_name")
    @classmethod
    def product_name_must_not_be_blank(cls, v: str) -> str:
        return _strip_product_name(v)

    model_config = {
        "json_schema_extra": {
            "example": {
                "productName": "Widget",
                "targetPrice": 9.99,
                "currency": "USD",
                "productUrl": "https://example.com/widget",
            }
        }
    }


class WatchItemUpdate(CamelModel):
    """Input schema for updatePriceWatchItem.

    Only fields present in the input are applied. ``targetPrice``,
    ``currency``, ``productUrl`` and ``notes`` may be sent as null to
    clear them; ``productName`` and ``isActive`` may not. At least one
    field besides ``id`` must be provided.

    Example:
        >>> WatchItemUpdate(id="123e4567-e89b-12d3-a456-426614174000", targetPrice=9.99)
    """

    id: str = Field(..., min_length=1, description="Watch item identifier")
    product_name: Optional[str] = Field(None, min_length=1, description="Product name")
    target_price: Optional[Amount] = Field(None, description="Target price")
    currency: Optional[str] = Field(None, description="Currency code")
    product_url: Optional[str] = Field(None, description="Product page URL")
    notes: Optional[str] = Field(None, description="User notes")
    is_active: Optional[StrictBool] = Field(None, description="Whether the item is watched")

    @field_validator("product_name")
    @classmethod
    def product_name_must_not_be_blank(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Product name cannot be null")
        return _strip_product_name(v)

    @field_validator("is_active")
    @classmethod
    def is_active_must_not_be_null(cls, v: Optional[bool]) -> bool:
        if v is None:
            raise ValueError("isActive cannot be null")
        return v

    @model_validator(mode="after")
    def at_least_one_field(self) -> "WatchItemUpdate":
        """Reject updates that would change nothing."""
        if not self.changes():
            raise ValueError("At least one field must be provided to update.")
        return self

    def changes(self) -> dict:
        """Return the explicitly provided fields, keyed by column name."""
        provided = self.model_fields_set.intersection(MUTABLE_FIELDS)
        return {field: getattr(self, field) for field in MUTABLE_FIELDS if field in provided}


class WatchItemListQuery(CamelModel):
    """Input schema for listPriceWatchItems."""

    include_inactive: StrictBool = Field(False, description="Include deactivated items")


class WatchItemResponse(CamelModel):
    """Response schema for a watch item."""

    id: str
    user_id: str
    product_name: str
    target_price: Optional[float] = None
    currency: Optional[str] = None
    product_url: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class WatchItemData(CamelModel):
    """Payload of createPriceWatchItem and updatePriceWatchItem."""

    item: WatchItemResponse


class WatchItemListData(CamelModel):
    """Payload of listPriceWatchItems."""

    items: List[WatchItemResponse]
    total: int
