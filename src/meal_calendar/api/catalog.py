"""Food catalog endpoints."""

from fastapi import APIRouter, Depends, Query

from meal_calendar.api.dependencies import current_owner, get_container
from meal_calendar.api.models import AddFoodRequest, CatalogResponse
from meal_calendar.containers import AppContainer
from meal_calendar.domain.models import CatalogOwner

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
def get_catalog(
    owner: CatalogOwner = Depends(current_owner),
    container: AppContainer = Depends(get_container),
) -> CatalogResponse:
    """Return the caller's food catalog."""
    return CatalogResponse.from_domain(container.catalog_service.get_catalog(owner))


@router.post("/foods", response_model=CatalogResponse)
def add_food(
    payload: AddFoodRequest,
    owner: CatalogOwner = Depends(current_owner),
    container: AppContainer = Depends(get_container),
) -> CatalogResponse:
    """Append a food to a category."""
    catalog = container.catalog_service.add_food(owner, payload.category, payload.name)
    return CatalogResponse.from_domain(catalog)


@router.delete("/foods/{category}", response_model=CatalogResponse)
def remove_food(
    category: str,
    name: str = Query(),
    owner: CatalogOwner = Depends(current_owner),
    container: AppContainer = Depends(get_container),
) -> CatalogResponse:
    """Remove the first matching food from a category."""
    catalog = container.catalog_service.remove_food(owner, category, name)
    return CatalogResponse.from_domain(catalog)


@router.post("/reset", response_model=CatalogResponse)
def reset_catalog(
    owner: CatalogOwner = Depends(current_owner),
    container: AppContainer = Depends(get_container),
) -> CatalogResponse:
    """Restore the built-in food lists."""
    return CatalogResponse.from_domain(container.catalog_service.reset(owner))
