"""
Discount rule for cart items
"""

from .cart import ItemType
from .exceptions import InvalidArgument

MAX_DISCOUNT = 80
BULK_STEP = 10


def calculate_discount(item_type: ItemType, quantity: int) -> int:
    """
    Calculate an item's discount in percent.

    NEW items never get a discount. SECOND_FREE items get 50% when more than
    one is bought, SALE items get 70%. Every item except NEW gets an extra 1%
    for each full 10 units, but never more than 80% in total.
    """
    if quantity < 1:
        raise InvalidArgument(f"Illegal quantity: {quantity}")

    if item_type == ItemType.NEW:
        return 0

    if item_type == ItemType.SECOND_FREE:
        discount = 50 if quantity > 1 else 0
    elif item_type == ItemType.SALE:
        discount = 70
    elif item_type == ItemType.REGULAR:
        discount = 0
    else:
        raise InvalidArgument(f"Unknown item type: {item_type!r}")

    discount += quantity // BULK_STEP
    return min(discount, MAX_DISCOUNT)
