"""API v1 router.

This module mounts the action endpoints and the system information
endpoint under ``/api/v1``.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from price_watch.api.v1 import actions
from price_watch.config import settings
from price_watch.database.session import check_database_connection, get_db
from price_watch.models.common import InfoResponse

logger = logging.getLogger(__name__)

# Create v1 router
router = APIRouter(
    prefix="/api/v1",
    tags=["v1"],
)

# Include sub-routers
router.include_router(actions.router)


@router.get(
    "/info",
    response_model=InfoResponse,
    status_code=status.HTTP_200_OK,
    summary="Get system information",
    description="Returns system information including version and database status",
)
def get_info(db: Session = Depends(get_db)) -> InfoResponse:
    """Get system information endpoint.

    Returns:
        System information including database connection status

    Example:
        >>> GET /api/v1/info
        >>> {
        >>>     "app_name": "Price Watch API",
        >>>     "version": "1.0.0",
        >>>     "status": "running",
        >>>     "database_connected": true,
        >>>     "timestamp": "2026-01-31T10:00:00"
        >>> }
    """
    return InfoResponse(
        app_name=settings.app_name,
        version=settings.version,
        status="running",
        database_connected=check_database_connection(db),
        timestamp=datetime.utcnow(),
    )
