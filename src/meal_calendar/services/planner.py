"""Deterministic month plan generation."""

import calendar
import math
from types import MappingProxyType

from meal_calendar.domain.catalog import Category, FoodCatalog
from meal_calendar.domain.errors import InvalidMonthError
from meal_calendar.domain.plan import DayPlan, MonthPlan

LAST_MONTH = 11


def seeded_random(seed: int) -> float:
    """Return a reproducible value in [0, 1) derived from ``seed``.

    Not uniform and not suitable for anything beyond picking menu items; the
    arithmetic is kept exactly so previously shown plans do not change.
    """
    value = math.sin(seed) * 10000
    return value - math.floor(value)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a zero-based month."""
    _validate_month(month)
    return calendar.monthrange(year, month + 1)[1]


def day_seed(year: int, month: int, day: int) -> int:
    return year * 10000 + month * 100 + day


def pick(foods: tuple[str, ...], seed: int) -> str | None:
    """Pick a food for ``seed``, or ``None`` when there is nothing to pick."""
    if not foods:
        return None
    return foods[math.floor(seeded_random(seed) * len(foods))]


def generate_month_plan(year: int, month: int, catalog: FoodCatalog) -> MonthPlan:
    """Assign one food per category to every day of ``month`` (zero-based).

    The result depends only on the arguments, including the order of each
    category's foods.
    """
    total_days = days_in_month(year, month)
    days: dict[int, DayPlan] = {}
    for day in range(1, total_days + 1):
        seed = day_seed(year, month, day)
        picks = {
            category.plan_key: pick(
                catalog.foods(category), seed * category.seed_multiplier
            )
            for category in Category
        }
        days[day] = DayPlan(day=day, **picks)
    return MonthPlan(
        year=year,
        month=month,
        days=MappingProxyType(days),
        empty_categories=catalog.empty_categories(),
    )


def _validate_month(month: int) -> None:
    if not 0 <= month <= LAST_MONTH:
        raise InvalidMonthError(month)
