"""Plan service combining stored catalogs with the generator."""

from dataclasses import dataclass
from datetime import date

from meal_calendar.domain.models import CatalogOwner
from meal_calendar.domain.plan import MonthCalendar, MonthPlan
from meal_calendar.services.calendar_view import build_month_calendar
from meal_calendar.services.catalog import CatalogService
from meal_calendar.services.planner import generate_month_plan


@dataclass
class PlanService:
    """Service for producing month plans for an owner."""

    catalog_service: CatalogService

    def month_plan(self, owner: CatalogOwner, year: int, month: int) -> MonthPlan:
        """Generate the plan for a zero-based month from the owner's catalog."""
        catalog = self.catalog_service.get_catalog(owner)
        return generate_month_plan(year, month, catalog)

    def month_calendar(
        self, owner: CatalogOwner, year: int, month: int, today: date | None
    ) -> MonthCalendar:
        """Generate the plan and lay it out as a calendar grid."""
        return build_month_calendar(self.month_plan(owner, year, month), today)
