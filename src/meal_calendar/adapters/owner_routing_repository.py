"""Catalog repository that picks a store by owner."""

from dataclasses import dataclass

from meal_calendar.domain.catalog import FoodCatalog
from meal_calendar.domain.models import CatalogOwner
from meal_calendar.services.catalog import CatalogRepository


@dataclass
class OwnerRoutingCatalogRepository(CatalogRepository):
    """Sends signed-in owners to the remote store and everyone else to local."""

    remote: CatalogRepository
    local: CatalogRepository

    def load(self, owner: CatalogOwner) -> FoodCatalog | None:
        return self._select(owner).load(owner)

    def save(self, owner: CatalogOwner, catalog: FoodCatalog) -> None:
        self._select(owner).save(owner, catalog)

    def _select(self, owner: CatalogOwner) -> CatalogRepository:
        return self.local if owner.is_local else self.remote
