# horeca/services/catalog_service.py
from typing import List
from uuid import UUID

from horeca.models.catalog import Category, Product, Subcategory
from horeca.models.menu import MenuItem
from horeca.schemas.rows import ProductRow
from horeca.schemas.catalog import (
    CatalogProductView,
    CategoryResponseSchema,
    ProductResponseSchema,
    SubcategoryResponseSchema
)
from horeca.services.aggregation import diff_catalog


class CatalogService:
    """Read-only access to the shared product catalog."""

    @staticmethod
    async def list_products() -> List[ProductResponseSchema]:
        products = await Product.all().order_by("name")
        return [ProductResponseSchema.from_orm_product(product) for product in products]

    @staticmethod
    async def list_categories() -> List[CategoryResponseSchema]:
        categories = await Category.all().order_by("category_name")
        return [CategoryResponseSchema.from_orm_category(category) for category in categories]

    @staticmethod
    async def list_subcategories() -> List[SubcategoryResponseSchema]:
        subcategories = await Subcategory.all().order_by("subcat_name")
        return [
            SubcategoryResponseSchema.from_orm_subcategory(subcategory)
            for subcategory in subcategories
        ]

    @staticmethod
    async def items_not_on_menu(business_id: UUID) -> List[CatalogProductView]:
        """
        Catalog products the business does not offer yet, sorted by name.

        The exclusion is applied in Python so a business without menu
        items simply gets the whole catalog.

        Args:
            business_id: Business whose menu is checked

        Returns:
            List of CatalogProductView
        """
        taken_ids = await MenuItem.filter(
            business_id=business_id
        ).values_list("product_id", flat=True)

        products = await Product.all().prefetch_related("category", "subcategory")
        rows = [ProductRow.from_orm_product(product) for product in products]

        return diff_catalog(rows, taken_ids)
