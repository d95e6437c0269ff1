"""Action endpoints for watch items and price snapshots.

Each action is a ``POST`` taking a single JSON input object and returning
``{"success": true, "data": {...}}``. Failures are reported as
``ErrorResponse`` bodies with a stable error code.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from price_watch.api.deps import (
    AuthenticatedUser,
    get_price_watch_service,
    require_user,
)
from price_watch.models.common import ActionResponse, ErrorResponse
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
from price_watch.services.price_watch_service import PriceWatchService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/actions",
    tags=["actions"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    },
)

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post(
    "/createPriceWatchItem",
    response_model=ActionResponse[WatchItemData],
    status_code=status.HTTP_200_OK,
    summary="Create a watch item",
)
def create_price_watch_item(
    item: WatchItemCreate,
    user: AuthenticatedUser = Depends(require_user),
    service: PriceWatchService = Depends(get_price_watch_service),
) -> ActionResponse[WatchItemData]:
    """Create a watch item owned by the caller.

    Example:
        >>> POST /api/v1/actions/createPriceWatchItem
        >>> {"productName": "Widget", "targetPrice": 9.99}
    """
    created = service.create_item(user.id, item)
    return ActionResponse(
        data=WatchItemData(item=WatchItemResponse.model_validate(created))
    )


@router.post(
    "/updatePriceWatchItem",
    response_model=ActionResponse[WatchItemData],
    status_code=status.HTTP_200_OK,
    summary="Update a watch item",
    responses=_NOT_FOUND,
)
def update_price_watch_item(
    item: WatchItemUpdate,
    user: AuthenticatedUser = Depends(require_user),
    service: PriceWatchService = Depends(get_price_watch_service),
) -> ActionResponse[WatchItemData]:
    """Apply a partial update to one of the caller's watch items.

    Example:
        >>> POST /api/v1/actions/updatePriceWatchItem
        >>> {"id": "123e4567-e89b-12d3-a456-426614174000", "targetPrice": 9.99}
    """
    updated = service.update_item(user.id, item)
    return ActionResponse(
        data=WatchItemData(item=WatchItemResponse.model_validate(updated))
    )


@router.post(
    "/listPriceWatchItems",
    response_model=ActionResponse[WatchItemListData],
    status_code=status.HTTP_200_OK,
    summary="List watch items",
)
def list_price_watch_items(
    query: Optional[WatchItemListQuery] = None,
    user: AuthenticatedUser = Depends(require_user),
    service: PriceWatchService = Depends(get_price_watch_service),
) -> ActionResponse[WatchItemListData]:
    """List the caller's watch items (active only unless includeInactive)."""
    query = query or WatchItemListQuery()
    items = service.list_items(user.id, include_inactive=query.include_inactive)
    return ActionResponse(
        data=WatchItemListData(
            items=[WatchItemResponse.model_validate(i) for i in items],
            total=len(items),
        )
    )


@router.post(
    "/addPriceSnapshot",
    response_model=ActionResponse[PriceSnapshotData],
    status_code=status.HTTP_200_OK,
    summary="Record a price snapshot",
    responses=_NOT_FOUND,
)
def add_price_snapshot(
    snapshot: PriceSnapshotCreate,
    user: AuthenticatedUser = Depends(require_user),
    service: PriceWatchService = Depends(get_price_watch_service),
) -> ActionResponse[PriceSnapshotData]:
    """Record a price observation for one of the caller's watch items.

    Example:
        >>> POST /api/v1/actions/addPriceSnapshot
        >>> {"itemId": "123e4567-e89b-12d3-a456-426614174000", "price": 12.5}
    """
    created = service.add_snapshot(user.id, snapshot)
    return ActionResponse(
        data=PriceSnapshotData(snapshot=PriceSnapshotResponse.model_validate(created))
    )


@router.post(
    "/listPriceSnapshots",
    response_model=ActionResponse[PriceSnapshotListData],
    status_code=status.HTTP_200_OK,
    summary="List price snapshots",
    responses=_NOT_FOUND,
)
def list_price_snapshots(
    query: PriceSnapshotListQuery,
    user: AuthenticatedUser = Depends(require_user),
    service: PriceWatchService = Depends(get_price_watch_service),
) -> ActionResponse[PriceSnapshotListData]:
    """List the price history of one of the caller's watch items."""
    snapshots = service.list_snapshots(user.id, query.item_id)
    return ActionResponse(
        data=PriceSnapshotListData(
            items=[PriceSnapshotResponse.model_validate(s) for s in snapshots],
            total=len(snapshots),
        )
    )
