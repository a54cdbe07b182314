"""Authentication service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_calendar.domain.models import AuthSession, CatalogOwner


class AuthClient(Protocol):
    """Interface for the hosted identity provider."""

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Register a new account."""

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for an access token."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token."""


@dataclass
class AuthService:
    """Application service for sign-up, sign-in and token lookup."""

    client: AuthClient

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Create an account; the token is empty until the email is confirmed."""
        return self.client.sign_up(email.strip(), password)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password."""
        return self.client.sign_in(email.strip(), password)

    def resolve_owner(self, access_token: str | None) -> CatalogOwner | None:
        """Map an access token to a catalog owner.

        No token addresses the local slot; an invalid token returns ``None``.
        """
        if not access_token:
            return CatalogOwner()
        user_id = self.client.get_user_id(access_token)
        if user_id is None:
            return None
        return CatalogOwner(user_id=user_id)
