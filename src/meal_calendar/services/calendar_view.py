"""Calendar layout for generated month plans."""

import calendar
from datetime import date

from meal_calendar.domain.plan import CalendarCell, MonthCalendar, MonthPlan

DAYS_PER_WEEK = 7


def first_weekday(year: int, month: int) -> int:
    """Weekday of the first of a zero-based month, with Sunday as 0."""
    return (calendar.weekday(year, month + 1, 1) + 1) % DAYS_PER_WEEK


def build_month_calendar(plan: MonthPlan, today: date | None = None) -> MonthCalendar:
    """Lay out ``plan`` as Sunday-first weeks and mark ``today`` if it falls inside."""
    blanks = first_weekday(plan.year, plan.month)
    in_month = (
        today is not None
        and today.year == plan.year
        and today.month == plan.month + 1
    )
    today_day = today.day if in_month and today is not None else None

    cells: list[CalendarCell | None] = [None] * blanks
    for day in sorted(plan.days):
        cells.append(
            CalendarCell(day=day, plan=plan[day], is_today=day == today_day)
        )
    remainder = len(cells) % DAYS_PER_WEEK
    if remainder:
        cells.extend([None] * (DAYS_PER_WEEK - remainder))
    weeks = tuple(
        tuple(cells[start : start + DAYS_PER_WEEK])
        for start in range(0, len(cells), DAYS_PER_WEEK)
    )

    return MonthCalendar(
        year=plan.year,
        month=plan.month,
        leading_blanks=blanks,
        weeks=weeks,
        today=today if in_month else None,
        todays_plan=plan.get(today_day) if today_day is not None else None,
    )
