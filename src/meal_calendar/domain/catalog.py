"""Domain models for the food catalog."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import Enum

from meal_calendar.domain.errors import UnknownCategoryError


class Category(Enum):
    """Meal categories in the order they are planned."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SUPPER = "supper"
    FRUITS = "fruits"

    @property
    def plan_key(self) -> str:
        """Name of the matching field on a day plan."""
        return "fruit" if self is Category.FRUITS else self.value

    @property
    def seed_multiplier(self) -> int:
        return _SEED_MULTIPLIERS[self]

    @classmethod
    def parse(cls, name: str) -> "Category":
        """Return the category for a name, accepting the singular ``fruit``."""
        cleaned = name.strip().lower()
        if cleaned == "fruit":
            return cls.FRUITS
        try:
            return cls(cleaned)
        except ValueError:
            raise UnknownCategoryError(name) from None


_SEED_MULTIPLIERS = {
    Category.BREAKFAST: 1,
    Category.LUNCH: 2,
    Category.SUPPER: 3,
    Category.FRUITS: 4,
}


@dataclass(frozen=True)
class FoodCatalog:
    """Immutable snapshot of selectable foods per category.

    Mutations return a new snapshot and leave the receiver untouched.
    """

    breakfast: tuple[str, ...] = ()
    lunch: tuple[str, ...] = ()
    supper: tuple[str, ...] = ()
    fruits: tuple[str, ...] = ()

    def foods(self, category: Category | str) -> tuple[str, ...]:
        """Return the labels stored for a category."""
        return getattr(self, _resolve(category).value)

    def add(self, category: Category | str, label: str) -> "FoodCatalog":
        """Append a trimmed label; blank labels leave the catalog unchanged."""
        resolved = _resolve(category)
        name = label.strip()
        if not name:
            return self
        return replace(self, **{resolved.value: (*self.foods(resolved), name)})

    def remove(self, category: Category | str, label: str) -> "FoodCatalog":
        """Drop the first label equal to ``label``; absent labels are ignored."""
        resolved = _resolve(category)
        current = self.foods(resolved)
        if label not in current:
            return self
        index = current.index(label)
        return replace(
            self, **{resolved.value: current[:index] + current[index + 1 :]}
        )

    def empty_categories(self) -> tuple[Category, ...]:
        return tuple(category for category in Category if not self.foods(category))

    def to_payload(self) -> dict[str, list[str]]:
        """Serialize to the stored JSON shape."""
        return {category.value: list(self.foods(category)) for category in Category}

    @classmethod
    def from_payload(cls, payload: Mapping[str, object] | None) -> "FoodCatalog":
        """Build a catalog from stored JSON, treating missing categories as empty."""
        payload = payload or {}
        values: dict[str, tuple[str, ...]] = {}
        for category in Category:
            raw = payload.get(category.value)
            values[category.value] = _as_labels(raw)
        return cls(**values)


def _resolve(category: Category | str) -> Category:
    if isinstance(category, Category):
        return category
    return Category.parse(category)


def _as_labels(raw: object) -> tuple[str, ...]:
    if raw is None or isinstance(raw, str):
        return ()
    if not isinstance(raw, Iterable):
        return ()
    return tuple(str(item) for item in raw)


DEFAULT_CATALOG = FoodCatalog(
    breakfast=(
        "Chai & Mandazi",
        "Porridge",
        "Bread & Eggs",
        "Pancakes",
        "Uji",
        "Chapati & Beans",
    ),
    lunch=(
        "Rice & Beans",
        "Ugali & Sukuma",
        "Pilau",
        "Githeri",
        "Rice & Beef Stew",
        "Ugali & Fish",
        "Chapati & Chicken",
    ),
    supper=(
        "Ugali & Sukuma",
        "Rice & Vegetables",
        "Chapati & Stew",
        "Ugali & Beans",
        "Rice & Chicken",
        "Mukimo",
        "Ugali & Beef",
    ),
    fruits=(
        "Banana",
        "Mango",
        "Watermelon",
        "Pineapple",
        "Papaya",
        "Orange",
        "Avocado",
    ),
)
