# horeca/schemas/rows.py
"""
Typed rows decoded from ORM results before they reach the aggregation
engine. Only the subcategory relation may be absent.
"""
from pydantic import BaseModel, Field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

CENTS = Decimal("0.01")


class CategoryRow(BaseModel):
    id: int
    category_name: str


class SubcategoryRow(BaseModel):
    id: int
    subcat_name: str


class ProductRow(BaseModel):
    id: int
    name: str
    brand: str
    category: CategoryRow
    subcategory: Optional[SubcategoryRow] = None
    production_city: Optional[str] = None
    production_country: Optional[str] = None
    is_trending: bool = False
    is_high_margin: bool = False
    eco_friendly: bool = False
    season: Optional[str] = None

    @classmethod
    def from_orm_product(cls, product) -> "ProductRow":
        """
        Decode a Product with its category and subcategory fetched.

        Args:
            product: Product ORM model

        Returns:
            ProductRow instance
        """
        subcategory = None
        if product.subcategory_id is not None and product.subcategory is not None:
            subcategory = SubcategoryRow(
                id=product.subcategory.id,
                subcat_name=product.subcategory.subcat_name
            )

        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            category=CategoryRow(
                id=product.category.id,
                category_name=product.category.category_name
            ),
            subcategory=subcategory,
            production_city=product.production_city,
            production_country=product.production_country,
            is_trending=product.is_trending,
            is_high_margin=product.is_high_margin,
            eco_friendly=product.eco_friendly,
            season=product.season
        )


class MenuItemRow(BaseModel):
    id_menu_item: int
    price: Decimal
    created_at: datetime
    product: ProductRow
    sales: List[date] = Field(default_factory=list)

    @classmethod
    def from_orm_menu_item(cls, menu_item, with_sales: bool = False) -> "MenuItemRow":
        """
        Decode a MenuItem with product, category, subcategory and
        optionally sales prefetched.

        Args:
            menu_item: MenuItem ORM model
            with_sales: Read the prefetched sales relation

        Returns:
            MenuItemRow instance
        """
        sales = [sale.sold_at for sale in menu_item.sales] if with_sales else []

        return cls(
            id_menu_item=menu_item.id,
            price=Decimal(menu_item.price).quantize(CENTS),
            created_at=menu_item.created_at,
            product=ProductRow.from_orm_product(menu_item.product),
            sales=sales
        )
