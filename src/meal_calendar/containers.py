"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import ClientOptions, create_client

from meal_calendar.adapters.local_catalog_repository import LocalCatalogRepository
from meal_calendar.adapters.owner_routing_repository import (
    OwnerRoutingCatalogRepository,
)
from meal_calendar.adapters.supabase_auth_client import SupabaseAuthClient
from meal_calendar.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from meal_calendar.config import Settings
from meal_calendar.services.auth import AuthService
from meal_calendar.services.catalog import CatalogService
from meal_calendar.services.plans import PlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    catalog_service: CatalogService
    plan_service: PlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    database_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    # Sign-in rewrites the Authorization header of the client that performed it.
    auth_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_key,
        options=ClientOptions(persist_session=False, auto_refresh_token=False),
    )
    catalog_repository = OwnerRoutingCatalogRepository(
        remote=SupabaseProfileRepository(
            database_client, table=resolved_settings.profiles_table
        ),
        local=LocalCatalogRepository(resolved_settings.local_store_path),
    )
    catalog_service = CatalogService(catalog_repository)
    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(SupabaseAuthClient(auth_client)),
        catalog_service=catalog_service,
        plan_service=PlanService(catalog_service),
    )
