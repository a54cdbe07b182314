"""Pydantic models for API requests and responses."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from meal_calendar.domain.catalog import Category, FoodCatalog
from meal_calendar.domain.models import AuthSession
from meal_calendar.domain.plan import DayPlan, MonthCalendar, MonthPlan


class CredentialsRequest(BaseModel):
    """Email and password payload."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=6)


class AuthSessionResponse(BaseModel):
    """Session returned after sign-up or sign-in."""

    user_id: UUID
    email: str | None = None
    access_token: str | None = None

    @classmethod
    def from_domain(cls, session: AuthSession) -> "AuthSessionResponse":
        return cls(
            user_id=session.user_id,
            email=session.email,
            access_token=session.access_token,
        )


class AddFoodRequest(BaseModel):
    """A food to append to a category."""

    category: str = Category.BREAKFAST.value
    name: str


class CatalogResponse(BaseModel):
    """Food catalog as returned to clients."""

    breakfast: list[str]
    lunch: list[str]
    supper: list[str]
    fruits: list[str]

    @classmethod
    def from_domain(cls, catalog: FoodCatalog) -> "CatalogResponse":
        return cls(**catalog.to_payload())


class DayPlanResponse(BaseModel):
    """Foods planned for one day."""

    day: int
    breakfast: str | None
    lunch: str | None
    supper: str | None
    fruit: str | None

    @classmethod
    def from_domain(cls, plan: DayPlan) -> "DayPlanResponse":
        return cls(
            day=plan.day,
            breakfast=plan.breakfast,
            lunch=plan.lunch,
            supper=plan.supper,
            fruit=plan.fruit,
        )


class MonthPlanResponse(BaseModel):
    """Plans for every day of a month; ``month`` is 1-based."""

    year: int
    month: int
    days: dict[int, DayPlanResponse]
    empty_categories: list[str]

    @classmethod
    def from_domain(cls, plan: MonthPlan) -> "MonthPlanResponse":
        return cls(
            year=plan.year,
            month=plan.month + 1,
            days={
                day: DayPlanResponse.from_domain(entry)
                for day, entry in plan.days.items()
            },
            empty_categories=[category.value for category in plan.empty_categories],
        )


class CalendarCellResponse(BaseModel):
    """One day cell in the calendar grid."""

    day: int
    is_today: bool
    plan: DayPlanResponse


class MonthCalendarResponse(BaseModel):
    """Calendar grid for a month; ``month`` is 1-based."""

    year: int
    month: int
    leading_blanks: int
    weeks: list[list[CalendarCellResponse | None]]
    today: date | None
    todays_plan: DayPlanResponse | None

    @classmethod
    def from_domain(cls, view: MonthCalendar) -> "MonthCalendarResponse":
        return cls(
            year=view.year,
            month=view.month + 1,
            leading_blanks=view.leading_blanks,
            weeks=[
                [
                    CalendarCellResponse(
                        day=cell.day,
                        is_today=cell.is_today,
                        plan=DayPlanResponse.from_domain(cell.plan),
                    )
                    if cell is not None
                    else None
                    for cell in week
                ]
                for week in view.weeks
            ],
            today=view.today,
            todays_plan=(
                DayPlanResponse.from_domain(view.todays_plan)
                if view.todays_plan is not None
                else None
            ),
        )
