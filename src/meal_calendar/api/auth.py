"""Authentication endpoints."""

from fastapi import APIRouter, Depends, status

from meal_calendar.api.dependencies import get_container
from meal_calendar.api.models import AuthSessionResponse, CredentialsRequest
from meal_calendar.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/sign-up",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthSessionResponse,
)
def sign_up(
    payload: CredentialsRequest, container: AppContainer = Depends(get_container)
) -> AuthSessionResponse:
    """Create an account."""
    session = container.auth_service.sign_up(payload.email, payload.password)
    return AuthSessionResponse.from_domain(session)


@router.post("/sign-in", response_model=AuthSessionResponse)
def sign_in(
    payload: CredentialsRequest, container: AppContainer = Depends(get_container)
) -> AuthSessionResponse:
    """Sign in and return an access token."""
    session = container.auth_service.sign_in(payload.email, payload.password)
    return AuthSessionResponse.from_domain(session)
