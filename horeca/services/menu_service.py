# horeca/services/menu_service.py
import logging
from typing import List
from uuid import UUID

from tortoise.exceptions import BaseORMException
from tortoise.transactions import in_transaction

from horeca.models.catalog import Product
from horeca.models.menu import MenuItem, Sale
from horeca.schemas.rows import MenuItemRow
from horeca.schemas.menu import MenuItemCreateSchema, MenuItemView, PriceUpdateSchema
from horeca.services.aggregation import shape_menu_item
from horeca.exceptions.menu_exceptions import (
    MenuItemNotFoundError,
    ProductNotFoundError,
    MenuItemUpdateError,
    InvalidPriceError
)

logger = logging.getLogger(__name__)


class MenuService:
    """Service for a business's menu items. Every query is scoped by business id."""

    @staticmethod
    async def fetch_menu_rows(business_id: UUID, with_sales: bool = False) -> List[MenuItemRow]:
        """
        Load the business's menu items joined to product, category and
        subcategory, decoded into rows.

        Args:
            business_id: Owning business
            with_sales: Also load the sale dates of every item

        Returns:
            List of MenuItemRow
        """
        relations = ["product__category", "product__subcategory"]
        if with_sales:
            relations.append("sales")

        menu_items = await MenuItem.filter(
            business_id=business_id
        ).prefetch_related(*relations)

        return [
            MenuItemRow.from_orm_menu_item(menu_item, with_sales=with_sales)
            for menu_item in menu_items
        ]

    @staticmethod
    async def list_menu_items(business_id: UUID) -> List[MenuItemView]:
        """List the business's menu in flattened form."""
        rows = await MenuService.fetch_menu_rows(business_id)
        return [shape_menu_item(row) for row in rows]

    @staticmethod
    async def add_menu_item(business_id: UUID, data: MenuItemCreateSchema) -> MenuItem:
        """
        Put a catalog product on the business's menu.

        Args:
            business_id: Owning business
            data: Product id and price

        Returns:
            Created menu item

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        if not await Product.exists(id=data.product_id):
            raise ProductNotFoundError(data.product_id)

        menu_item = await MenuItem.create(
            business_id=business_id,
            product_id=data.product_id,
            price=data.price
        )

        logger.info(f"Menu item {menu_item.id} added for business {business_id}")

        return menu_item

    @staticmethod
    async def update_prices(business_id: UUID, updates: List[PriceUpdateSchema]) -> None:
        """
        Apply a batch of price changes atomically.

        Either all updates are written or none. Ids that don't belong to
        the business match no row and are skipped.

        Args:
            business_id: Owning business
            updates: New price per menu item id

        Raises:
            InvalidPriceError: If a price is negative
            MenuItemUpdateError: If the store rejects an update
        """
        try:
            async with in_transaction() as connection:
                for update in updates:
                    if update.price < 0:
                        raise InvalidPriceError(update.id_menu_item)

                    await MenuItem.filter(
                        id=update.id_menu_item,
                        business_id=business_id
                    ).using_db(connection).update(price=update.price)
        except InvalidPriceError as e:
            logger.warning(f"Price batch rolled back for business {business_id}: {e}")
            raise
        except BaseORMException as e:
            logger.error(f"Price batch failed for business {business_id}: {e}", exc_info=True)
            raise MenuItemUpdateError() from e

    @staticmethod
    async def delete_menu_item(business_id: UUID, menu_item_id: int) -> None:
        """
        Delete a menu item and its sales.

        Args:
            business_id: Owning business
            menu_item_id: Menu item to delete

        Raises:
            MenuItemNotFoundError: If the item doesn't exist or belongs to another business
        """
        menu_item = await MenuItem.get_or_none(id=menu_item_id, business_id=business_id)
        if not menu_item:
            raise MenuItemNotFoundError(menu_item_id)

        async with in_transaction() as connection:
            await Sale.filter(menu_item_id=menu_item.id).using_db(connection).delete()
            await menu_item.delete(using_db=connection)

        logger.info(f"Menu item {menu_item_id} deleted for business {business_id}")
