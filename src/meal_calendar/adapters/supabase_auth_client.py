"""Supabase auth adapter."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from meal_calendar.domain.errors import AuthenticationError
from meal_calendar.domain.models import AuthSession
from meal_calendar.services.auth import AuthClient

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Identity provider backed by Supabase auth."""

    client: Client

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Register a new account."""
        try:
            response = self.client.auth.sign_up(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(str(exc)) from exc
        return _to_session(response)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password."""
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(str(exc)) from exc
        return _to_session(response)

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError:
            logger.info("Rejected access token")
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))


def _to_session(response) -> AuthSession:  # type: ignore[no-untyped-def]
    """Convert a Supabase auth response into a domain session."""
    if response.user is None:
        raise AuthenticationError("Supabase returned no user")
    session = response.session
    return AuthSession(
        user_id=UUID(str(response.user.id)),
        email=response.user.email,
        access_token=session.access_token if session is not None else None,
    )
