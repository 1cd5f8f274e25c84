# horeca/schemas/menu.py
from pydantic import BaseModel, Field, PlainSerializer
from decimal import Decimal
from typing import Annotated, List, Optional

# Prices are kept exact internally and rendered as JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float)]


class MenuItemCreateSchema(BaseModel):
    """Schema for adding a catalog product to the menu."""

    product_id: int = Field(..., description="Catalog product id")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class PriceUpdateSchema(BaseModel):
    """Single entry of a batch price update."""

    id_menu_item: int
    price: Decimal


class PriceUpdateBatchSchema(BaseModel):
    """Schema for PATCH /menu-items."""

    updates: List[PriceUpdateSchema]


class MenuItemView(BaseModel):
    """Flattened menu item as listed on the menu page."""

    id_menu_item: int
    price: Price
    created_at: str
    item_name: str
    producent: str
    category: str
    subcategory: str


class SalesStatView(BaseModel):
    """Menu item with its sales counts for two consecutive years."""

    id_menu_item: int
    id_category: int
    item_name: str
    producent: str
    category: str
    subcategory: str
    price: Price
    created_at: str
    total_sold: int
    last_year_sold: int
    is_trending: bool
    is_high_margin: bool
    eco_friendly: bool
    season: Optional[str]
    prodCity: Optional[str]
    prodCountry: Optional[str]


class CategoryCountView(BaseModel):
    """Number of menu items in one category."""

    category: str
    count_on_menu: int
