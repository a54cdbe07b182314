"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path
from uuid import UUID, uuid4

import pytest

from meal_calendar.config import Settings
from meal_calendar.containers import AppContainer
from meal_calendar.domain.catalog import FoodCatalog
from meal_calendar.domain.errors import AuthenticationError, PersistenceError
from meal_calendar.domain.models import AuthSession, CatalogOwner
from meal_calendar.services.auth import AuthClient, AuthService
from meal_calendar.services.catalog import CatalogRepository, CatalogService
from meal_calendar.services.plans import PlanService


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory catalog repository for tests."""

    catalogs: dict[CatalogOwner, FoodCatalog] = field(default_factory=dict)
    saves: list[tuple[CatalogOwner, FoodCatalog]] = field(default_factory=list)
    fail_saves: bool = False

    def load(self, owner: CatalogOwner) -> FoodCatalog | None:
        return self.catalogs.get(owner)

    def save(self, owner: CatalogOwner, catalog: FoodCatalog) -> None:
        if self.fail_saves:
            raise PersistenceError("store offline")
        self.saves.append((owner, catalog))
        self.catalogs[owner] = catalog


@dataclass
class FakeAuthClient(AuthClient):
    """Fake identity provider keyed by email and token."""

    accounts: dict[str, tuple[UUID, str]] = field(default_factory=dict)
    tokens: dict[str, UUID] = field(default_factory=dict)

    def sign_up(self, email: str, password: str) -> AuthSession:
        if email in self.accounts:
            raise AuthenticationError("User already registered")
        user_id = uuid4()
        self.accounts[email] = (user_id, password)
        return AuthSession(user_id=user_id, email=email, access_token=None)

    def sign_in(self, email: str, password: str) -> AuthSession:
        account = self.accounts.get(email)
        if account is None or account[1] != password:
            raise AuthenticationError("Invalid login credentials")
        token = f"token-{account[0]}"
        self.tokens[token] = account[0]
        return AuthSession(user_id=account[0], email=email, access_token=token)

    def get_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_key="header.payload.signature",
        local_store_path=tmp_path / "foods.json",
    )


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository()


@pytest.fixture
def auth_client() -> FakeAuthClient:
    return FakeAuthClient()


@pytest.fixture
def container(
    settings: Settings,
    catalog_repository: InMemoryCatalogRepository,
    auth_client: FakeAuthClient,
) -> AppContainer:
    catalog_service = CatalogService(catalog_repository)
    return AppContainer(
        settings=settings,
        auth_service=AuthService(auth_client),
        catalog_service=catalog_service,
        plan_service=PlanService(catalog_service),
    )
