# horeca/api/v1/endpoints/menu_items.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List

from horeca.schemas.menu import (
    MenuItemCreateSchema,
    MenuItemView,
    PriceUpdateBatchSchema
)
from horeca.schemas.business import TenantContext
from horeca.services.menu_service import MenuService
from horeca.api.v1.dependencies.auth import get_tenant
from horeca.exceptions.menu_exceptions import (
    MenuItemNotFoundError,
    ProductNotFoundError,
    MenuItemUpdateError
)

router = APIRouter(prefix="/menu-items", tags=["menu items"])


@router.get("", response_model=List[MenuItemView])
async def get_menu_items(tenant: TenantContext = Depends(get_tenant)) -> List[MenuItemView]:
    """List the menu of the logged-in business."""
    return await MenuService.list_menu_items(tenant.business_id)


@router.post("")
async def create_menu_item(
        data: MenuItemCreateSchema,
        tenant: TenantContext = Depends(get_tenant)
) -> dict:
    """
    Add a catalog product to the menu.

    Raises:
        HTTPException: 404 if product not found
    """
    try:
        menu_item = await MenuService.add_menu_item(tenant.business_id, data)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return {"success": True, "insertId": menu_item.id}


@router.patch("")
async def update_menu_item_prices(
        data: PriceUpdateBatchSchema,
        tenant: TenantContext = Depends(get_tenant)
) -> dict:
    """
    Update several prices at once. All or nothing.

    Raises:
        HTTPException: 500 if any update fails, nothing is written then
    """
    try:
        await MenuService.update_prices(tenant.business_id, data.updates)
    except MenuItemUpdateError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed updating prices"
        )

    return {"success": True}


@router.delete("/{menu_item_id}")
async def delete_menu_item(
        menu_item_id: str,
        tenant: TenantContext = Depends(get_tenant)
) -> dict:
    """
    Delete a menu item together with its sales.

    A non-numeric id can match no row and is answered like an unknown one.

    Raises:
        HTTPException: 404 if item not found or owned by another business
    """
    try:
        if not menu_item_id.isdecimal():
            raise MenuItemNotFoundError(menu_item_id)
        await MenuService.delete_menu_item(tenant.business_id, int(menu_item_id))
    except MenuItemNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return {"success": True}
