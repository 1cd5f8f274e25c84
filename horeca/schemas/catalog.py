# horeca/schemas/catalog.py
from pydantic import BaseModel
from typing import Optional


class ProductResponseSchema(BaseModel):
    """Product as offered for autocomplete."""

    id_product: int
    name: str
    brand: str
    id_category: int
    id_subcategory: Optional[int]

    @classmethod
    def from_orm_product(cls, product) -> "ProductResponseSchema":
        return cls(
            id_product=product.id,
            name=product.name,
            brand=product.brand,
            id_category=product.category_id,
            id_subcategory=product.subcategory_id
        )


class CategoryResponseSchema(BaseModel):
    id_category: int
    category_name: str

    @classmethod
    def from_orm_category(cls, category) -> "CategoryResponseSchema":
        return cls(id_category=category.id, category_name=category.category_name)


class SubcategoryResponseSchema(BaseModel):
    id_subcat: int
    id_category: Optional[int]
    subcat_name: str

    @classmethod
    def from_orm_subcategory(cls, subcategory) -> "SubcategoryResponseSchema":
        return cls(
            id_subcat=subcategory.id,
            id_category=subcategory.category_id,
            subcat_name=subcategory.subcat_name
        )


class CatalogProductView(BaseModel):
    """Product that a business does not offer yet."""

    id: int
    name: str
    brand: str
    category: str
    prodCity: Optional[str]
    prodCountry: Optional[str]
    is_trending: bool
    is_high_margin: bool
    eco_friendly: bool
    season: Optional[str]
