__version__ = "0.1.0"

# Package metadata
__description__ = "Shopping cart with discount rules and fixed-width text receipts"

# Public API
from .cart import ShoppingCart, Item, ItemType
from .discount import calculate_discount
from .formatter import TicketFormatter, TicketRow, Align, format_cell, format_money
from .exceptions import ShopTicketError, InvalidArgument

__all__ = [
    # Version
    "__version__",

    # Main classes
    "ShoppingCart",
    "TicketFormatter",

    # Discount rule
    "calculate_discount",

    # Data classes
    "Item",
    "ItemType",
    "TicketRow",
    "Align",

    # Formatting helpers
    "format_cell",
    "format_money",

    # Exceptions
    "ShopTicketError",
    "InvalidArgument"
]
