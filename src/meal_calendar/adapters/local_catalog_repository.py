"""File-backed storage for the local, signed-out catalog."""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from meal_calendar.domain.catalog import FoodCatalog
from meal_calendar.domain.errors import PersistenceError
from meal_calendar.domain.models import CatalogOwner
from meal_calendar.services.catalog import CatalogRepository

STORAGE_KEY = "foods"


@dataclass
class LocalCatalogRepository(CatalogRepository):
    """Keeps a single catalog under the ``foods`` key of a JSON file."""

    path: Path

    def load(self, owner: CatalogOwner) -> FoodCatalog | None:
        """Return the locally stored catalog, if the file holds one."""
        if not self.path.exists():
            return None
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Failed to read {self.path}") from exc
        if not isinstance(document, dict) or document.get(STORAGE_KEY) is None:
            return None
        foods = document[STORAGE_KEY]
        if not isinstance(foods, Mapping):
            raise PersistenceError(f"Malformed food lists in {self.path}")
        return FoodCatalog.from_payload(foods)

    def save(self, owner: CatalogOwner, catalog: FoodCatalog) -> None:
        """Overwrite the local file with the full catalog."""
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps({STORAGE_KEY: catalog.to_payload()}, ensure_ascii=False),
                encoding="utf-8",
            )
            tmp_path.replace(self.path)
        except OSError as exc:
            raise PersistenceError(f"Failed to write {self.path}") from exc
