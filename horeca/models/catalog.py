# horeca/models/catalog.py
from tortoise import Model, fields


class Category(Model):
    """Top-level product category shared by all businesses."""

    id = fields.IntField(pk=True)
    category_name = fields.CharField(max_length=100, unique=True)

    products: fields.ReverseRelation["Product"]
    subcategories: fields.ReverseRelation["Subcategory"]

    class Meta:
        table = "categories"

    def __str__(self) -> str:
        return self.category_name


class Subcategory(Model):
    """Optional refinement of a category."""

    id = fields.IntField(pk=True)
    category = fields.ForeignKeyField(
        "models.Category",
        related_name="subcategories",
        null=True
    )
    subcat_name = fields.CharField(max_length=100)

    class Meta:
        table = "subcategories"

    def __str__(self) -> str:
        return self.subcat_name


class Product(Model):
    """
    Catalog product. Reference data, never mutated by the API.
    """

    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255, index=True)
    brand = fields.CharField(max_length=255)
    category = fields.ForeignKeyField("models.Category", related_name="products")
    subcategory = fields.ForeignKeyField(
        "models.Subcategory",
        related_name="products",
        null=True
    )
    production_city = fields.CharField(max_length=100, null=True)
    production_country = fields.CharField(max_length=100, null=True)
    is_trending = fields.BooleanField(default=False)
    is_high_margin = fields.BooleanField(default=False)
    eco_friendly = fields.BooleanField(default=False)
    season = fields.CharField(max_length=50, null=True)

    class Meta:
        table = "products"

    def __str__(self) -> str:
        return f"{self.name} ({self.brand})"
