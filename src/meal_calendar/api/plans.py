"""Meal plan and calendar endpoints."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Path, Query

from meal_calendar.api.dependencies import current_owner, get_container
from meal_calendar.api.models import MonthCalendarResponse, MonthPlanResponse
from meal_calendar.containers import AppContainer
from meal_calendar.domain.models import CatalogOwner

router = APIRouter(tags=["plans"])


@router.get("/plans/{year}/{month}", response_model=MonthPlanResponse)
def month_plan(
    year: int = Path(ge=1),
    month: int = Path(ge=1, le=12),
    owner: CatalogOwner = Depends(current_owner),
    container: AppContainer = Depends(get_container),
) -> MonthPlanResponse:
    """Return the meal plan for every day of a month (1-based)."""
    plan = container.plan_service.month_plan(owner, year, month - 1)
    return MonthPlanResponse.from_domain(plan)


@router.get("/calendar", response_model=MonthCalendarResponse)
def month_calendar(
    year: int | None = Query(default=None, ge=1),
    month: int | None = Query(default=None, ge=1, le=12),
    owner: CatalogOwner = Depends(current_owner),
    container: AppContainer = Depends(get_container),
) -> MonthCalendarResponse:
    """Return the calendar grid, defaulting to the current month."""
    today = _today(container.settings.timezone)
    view = container.plan_service.month_calendar(
        owner,
        year if year is not None else today.year,
        (month if month is not None else today.month) - 1,
        today,
    )
    return MonthCalendarResponse.from_domain(view)


def _today(timezone_name: str) -> date:
    return datetime.now(tz=ZoneInfo(timezone_name)).date()
