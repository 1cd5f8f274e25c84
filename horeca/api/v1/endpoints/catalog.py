# horeca/api/v1/endpoints/catalog.py
from fastapi import APIRouter, Depends
from typing import List

from horeca.schemas.catalog import (
    CatalogProductView,
    CategoryResponseSchema,
    ProductResponseSchema,
    SubcategoryResponseSchema
)
from horeca.schemas.business import TenantContext
from horeca.services.catalog_service import CatalogService
from horeca.api.v1.dependencies.auth import get_tenant

router = APIRouter(tags=["catalog"])


@router.get("/products", response_model=List[ProductResponseSchema])
async def get_products(_: TenantContext = Depends(get_tenant)) -> List[ProductResponseSchema]:
    """All catalog products, sorted by name."""
    return await CatalogService.list_products()


@router.get("/categories", response_model=List[CategoryResponseSchema])
async def get_categories(_: TenantContext = Depends(get_tenant)) -> List[CategoryResponseSchema]:
    """All categories, sorted by name."""
    return await CatalogService.list_categories()


@router.get("/subcategories", response_model=List[SubcategoryResponseSchema])
async def get_subcategories(
        _: TenantContext = Depends(get_tenant)
) -> List[SubcategoryResponseSchema]:
    """All subcategories, sorted by name."""
    return await CatalogService.list_subcategories()


@router.get("/items-not-on-menu", response_model=List[CatalogProductView])
async def get_items_not_on_menu(
        tenant: TenantContext = Depends(get_tenant)
) -> List[CatalogProductView]:
    """Catalog products the logged-in business doesn't offer yet."""
    return await CatalogService.items_not_on_menu(tenant.business_id)
