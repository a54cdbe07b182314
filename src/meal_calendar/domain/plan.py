"""Domain models for generated meal plans."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

from meal_calendar.domain.catalog import Category
from meal_calendar.domain.errors import EmptyCategoryError


@dataclass(frozen=True)
class DayPlan:
    """Foods assigned to a single calendar day.

    A ``None`` label marks a category that had no foods to choose from.
    """

    day: int
    breakfast: str | None
    lunch: str | None
    supper: str | None
    fruit: str | None

    def label(self, category: Category) -> str | None:
        return getattr(self, category.plan_key)


@dataclass(frozen=True)
class MonthPlan:
    """Day plans for every day of a month, keyed by day number."""

    year: int
    month: int
    days: Mapping[int, DayPlan]
    empty_categories: tuple[Category, ...] = ()

    def __getitem__(self, day: int) -> DayPlan:
        return self.days[day]

    def __len__(self) -> int:
        return len(self.days)

    def get(self, day: int) -> DayPlan | None:
        return self.days.get(day)

    def ensure_complete(self) -> "MonthPlan":
        """Return the plan, raising if any category could not be planned."""
        if self.empty_categories:
            raise EmptyCategoryError(self.empty_categories[0].value)
        return self


@dataclass(frozen=True)
class CalendarCell:
    """One populated cell of the calendar grid."""

    day: int
    plan: DayPlan
    is_today: bool


@dataclass(frozen=True)
class MonthCalendar:
    """A month plan laid out as Sunday-first weeks."""

    year: int
    month: int
    leading_blanks: int
    weeks: tuple[tuple[CalendarCell | None, ...], ...]
    today: date | None
    todays_plan: DayPlan | None
