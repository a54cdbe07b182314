"""Supabase-backed storage for food catalogs."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from meal_calendar.domain.catalog import FoodCatalog
from meal_calendar.domain.errors import PersistenceError
from meal_calendar.domain.models import CatalogOwner
from meal_calendar.services.catalog import CatalogRepository


@dataclass
class SupabaseProfileRepository(CatalogRepository):
    """Stores each user's catalog in the ``foods`` column of their profile row."""

    client: Client
    table: str = "profiles"

    def load(self, owner: CatalogOwner) -> FoodCatalog | None:
        """Return the catalog stored on the user's profile, if present."""
        user_id = _require_user(owner)
        try:
            response = (
                self.client.table(self.table)
                .select("foods")
                .eq("id", str(user_id))
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise PersistenceError(f"Failed to load profile {user_id}") from exc
        if not response.data:
            return None
        foods = response.data[0].get("foods")
        if foods is None:
            return None
        if not isinstance(foods, Mapping):
            raise PersistenceError(f"Malformed food lists on profile {user_id}")
        return FoodCatalog.from_payload(foods)

    def save(self, owner: CatalogOwner, catalog: FoodCatalog) -> None:
        """Upsert the user's profile row with the full catalog."""
        user_id = _require_user(owner)
        try:
            response = (
                self.client.table(self.table)
                .upsert(
                    {
                        "id": str(user_id),
                        "foods": catalog.to_payload(),
                        "updated_at": datetime.now(tz=UTC).isoformat(),
                    }
                )
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise PersistenceError(f"Failed to save profile {user_id}") from exc
        if not response.data:
            raise PersistenceError(f"Supabase did not acknowledge profile {user_id}")


def _require_user(owner: CatalogOwner) -> UUID:
    if owner.user_id is None:
        raise PersistenceError("Profile storage requires a signed-in user")
    return owner.user_id
