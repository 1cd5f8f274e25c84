# horeca/api/v1/endpoints/sales.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from horeca.schemas.menu import SalesStatView, CategoryCountView
from horeca.schemas.business import TenantContext
from horeca.services.sales_service import SalesService
from horeca.api.v1.dependencies.auth import get_tenant
from horeca.core.config import settings

router = APIRouter(tags=["sales"])


@router.get("/sales", response_model=List[SalesStatView])
async def get_sales(
        year: Optional[int] = Query(None, ge=1900, le=9999, description="Reference year"),
        tenant: TenantContext = Depends(get_tenant)
) -> List[SalesStatView]:
    """
    Sales per menu item for the reference year and the year before.

    Without ``year`` the configured SALES_REFERENCE_YEAR is used.
    """
    reference_year = year if year is not None else settings.SALES_REFERENCE_YEAR
    return await SalesService.sales_stats(tenant.business_id, reference_year)


@router.get("/sales/last-year", response_model=List[SalesStatView])
async def get_last_year_sales(
        tenant: TenantContext = Depends(get_tenant)
) -> List[SalesStatView]:
    """Sales per menu item for last year and the year before, sorted by id."""
    return await SalesService.last_year_stats(tenant.business_id)


@router.get("/menu-counts", response_model=List[CategoryCountView])
async def get_menu_counts(
        tenant: TenantContext = Depends(get_tenant)
) -> List[CategoryCountView]:
    """Number of menu items per category."""
    return await SalesService.menu_counts(tenant.business_id)
