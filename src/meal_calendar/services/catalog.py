"""Services for managing a user's food catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_calendar.domain.catalog import DEFAULT_CATALOG, Category, FoodCatalog
from meal_calendar.domain.errors import PersistenceError
from meal_calendar.domain.models import CatalogOwner

logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Persistence interface for food catalogs."""

    def load(self, owner: CatalogOwner) -> FoodCatalog | None:
        """Return the stored catalog for an owner, if any."""

    def save(self, owner: CatalogOwner, catalog: FoodCatalog) -> None:
        """Replace the stored catalog for an owner."""


@dataclass
class CatalogService:
    """Application service for catalog reads and edits.

    Every edit writes the whole snapshot and only returns it once the
    repository has accepted it. Concurrent edits for the same owner are not
    merged; the last write wins.
    """

    repository: CatalogRepository
    default_catalog: FoodCatalog = DEFAULT_CATALOG

    def get_catalog(self, owner: CatalogOwner) -> FoodCatalog:
        """Return the owner's catalog, or the defaults when nothing is stored."""
        stored = self.repository.load(owner)
        if stored is None:
            return self.default_catalog
        return stored

    def add_food(
        self, owner: CatalogOwner, category: Category | str, label: str
    ) -> FoodCatalog:
        """Append a food to a category and persist the new catalog."""
        current = self.get_catalog(owner)
        return self._commit(owner, current, current.add(category, label))

    def remove_food(
        self, owner: CatalogOwner, category: Category | str, label: str
    ) -> FoodCatalog:
        """Remove a food from a category and persist the new catalog."""
        current = self.get_catalog(owner)
        return self._commit(owner, current, current.remove(category, label))

    def reset(self, owner: CatalogOwner) -> FoodCatalog:
        """Replace the owner's catalog with the defaults."""
        self._save(owner, self.default_catalog)
        return self.default_catalog

    def _commit(
        self, owner: CatalogOwner, current: FoodCatalog, updated: FoodCatalog
    ) -> FoodCatalog:
        if updated == current:
            return current
        self._save(owner, updated)
        return updated

    def _save(self, owner: CatalogOwner, catalog: FoodCatalog) -> None:
        try:
            self.repository.save(owner, catalog)
        except PersistenceError:
            logger.exception(
                "Failed to persist food catalog", extra={"user_id": owner.user_id}
            )
            raise
