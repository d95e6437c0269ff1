"""FastAPI dependencies shared by the action endpoints."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from price_watch.config import settings
from price_watch.database.session import get_db
from price_watch.exceptions import UnauthorizedError
from price_watch.services.price_watch_service import PriceWatchService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """The user a request is made on behalf of."""

    id: str


def require_user(request: Request) -> AuthenticatedUser:
    """Resolve the authenticated user or fail closed.

    The user is taken from ``request.state.user`` when an authentication
    middleware has placed one there, otherwise from the header set by the
    identity proxy in front of the server (``settings.user_header``).
    The state user may be an object with an ``id`` attribute or a mapping
    with an ``"id"`` key. A state user without an id is rejected; the
    header is not consulted in that case.

    Args:
        request: Incoming request

    Returns:
        The authenticated user

    Raises:
        UnauthorizedError: If no user is attached to the request
    """
    user = getattr(request.state, "user", None)
    if user is not None:
        raw_id = user.get("id") if isinstance(user, Mapping) else getattr(user, "id", None)
        user_id = "" if raw_id is None else str(raw_id)
    else:
        user_id = request.headers.get(settings.user_header, "")

    user_id = user_id.strip()
    if not user_id:
        logger.warning(f"Rejected unauthenticated request to {request.url.path}")
        raise UnauthorizedError()

    return AuthenticatedUser(id=user_id)


def get_price_watch_service(db: Session = Depends(get_db)) -> PriceWatchService:
    """Build the service on the request's database session."""
    return PriceWatchService(db)
