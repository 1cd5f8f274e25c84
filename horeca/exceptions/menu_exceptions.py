# horeca/exceptions/menu_exceptions.py
class MenuItemException(Exception):
    """Base exception for menu item errors."""
    pass


class MenuItemNotFoundError(MenuItemException):
    """Raised when a menu item is absent or owned by another business."""

    def __init__(self, menu_item_id: int | str):
        self.menu_item_id = menu_item_id
        super().__init__("Item not found or no rights")


class ProductNotFoundError(MenuItemException):
    """Raised when a menu item references an unknown product."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with id {product_id} not found")


class MenuItemUpdateError(MenuItemException):
    """Raised when a batch price update fails and is rolled back."""

    def __init__(self, message: str = "Failed updating prices"):
        super().__init__(message)


class InvalidPriceError(MenuItemUpdateError):
    """Raised when a price in a batch update is negative."""

    def __init__(self, menu_item_id: int):
        self.menu_item_id = menu_item_id
        super().__init__(f"Invalid price for menu item {menu_item_id}")
