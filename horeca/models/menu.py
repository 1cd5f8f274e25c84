# horeca/models/menu.py
from tortoise import Model, fields


class MenuItem(Model):
    """
    A catalog product offered by one business at its own price.
    """

    id = fields.IntField(pk=True)
    business = fields.ForeignKeyField("models.Business", related_name="menu_items")
    product = fields.ForeignKeyField("models.Product", related_name="menu_items")
    price = fields.DecimalField(max_digits=10, decimal_places=2)
    created_at = fields.DatetimeField(auto_now_add=True)

    sales: fields.ReverseRelation["Sale"]

    class Meta:
        table = "menu_items"

    def __str__(self) -> str:
        return f"Menu item {self.id} - {self.price}"


class Sale(Model):
    """Single sale of a menu item. Append-only."""

    id = fields.IntField(pk=True)
    menu_item = fields.ForeignKeyField("models.MenuItem", related_name="sales")
    sold_at = fields.DateField(index=True)

    class Meta:
        table = "sales"
