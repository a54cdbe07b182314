"""Domain models for identity and ownership."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CatalogOwner:
    """Identifies whose food catalog an operation targets.

    A missing user id addresses the single local slot used before sign-in.
    """

    user_id: UUID | None = None

    @property
    def is_local(self) -> bool:
        return self.user_id is None


LOCAL_OWNER = CatalogOwner()


@dataclass(frozen=True)
class AuthSession:
    """Result of a successful sign-up or sign-in."""

    user_id: UUID
    email: str | None
    access_token: str | None
