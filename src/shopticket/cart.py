"""
Shopping cart holding validated line items
"""

import logging
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)


class ItemType(Enum):
    """Item categories, each with its own discount policy"""
    NEW = "new"
    SECOND_FREE = "second_free"
    SALE = "sale"
    REGULAR = "regular"


@dataclass(frozen=True)
class Item:
    """
    A single line item of the cart

    Attributes:
        title: item title, 1 to 32 characters
        unit_price: price of one unit in USD
        quantity: number of units, from 1
        item_type: category that drives the discount
    """
    title: str
    unit_price: float
    quantity: int
    item_type: ItemType


def _is_number(value) -> bool:
    """Check for a real number that is not a bool"""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class ShoppingCart:
    """
    Ordered container of items; insertion order is the ticket order
    """

    MAX_TITLE_LENGTH = 32
    MIN_PRICE = 0.01

    def __init__(self):
        self._items = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Tuple[Item, ...]:
        """Snapshot of the items in insertion order"""
        return tuple(self._items)

    def add_item(
        self,
        title: str,
        unit_price: float,
        quantity: int,
        item_type: ItemType
    ) -> Item:
        """
        Validate and append a new item

        Args:
            title: item title, 1 to 32 characters
            unit_price: item price in USD, at least 0.01
            quantity: item quantity, from 1
            item_type: item type

        Returns the appended Item

        Raises:
            InvalidArgument: if some value is wrong
        """
        if not isinstance(title, str) or not title or len(title) > self.MAX_TITLE_LENGTH:
            raise InvalidArgument("Illegal title")
        # Negated comparison so NaN is rejected too
        if not _is_number(unit_price) or not unit_price >= self.MIN_PRICE:
            raise InvalidArgument("Illegal price")
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise InvalidArgument("Illegal quantity")
        if not isinstance(item_type, ItemType):
            raise InvalidArgument("Illegal item type")

        item = Item(title, unit_price, quantity, item_type)
        self._items.append(item)
        logger.debug(f"Added item #{len(self._items)}: {title} x{quantity} ({item_type.value})")
        return item

    def format_ticket(self) -> str:
        """
        Render the ticket for the items currently in the cart
        """
        from .formatter import TicketFormatter

        return TicketFormatter().format_ticket(self._items)
