"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, HTTPException, Request, status

from meal_calendar.containers import AppContainer
from meal_calendar.domain.models import CatalogOwner

_BEARER_PREFIX = "bearer "


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def current_owner(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> CatalogOwner:
    """Resolve the catalog owner from an optional bearer token."""
    token = _bearer_token(authorization)
    owner = container.auth_service.resolve_owner(token)
    if owner is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access token",
        )
    return owner


def _bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    if not header.lower().startswith(_BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header must use the Bearer scheme",
        )
    return header[len(_BEARER_PREFIX) :].strip() or None
