"""
Plain text formatter for shopping tickets
"""

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .cart import Item
from .discount import calculate_discount

logger = logging.getLogger(__name__)


class Align(Enum):
    """Cell alignment inside a column"""
    LEFT = -1
    CENTER = 0
    RIGHT = 1


class TicketRow(NamedTuple):
    """
    Display values of one ticket line, derived from an Item

    Attributes:
        index: 1-based position of the item in the cart
        title: item title as entered
        price: unit price formatted as money
        quantity: quantity as text
        discount: discount percent, or None when there is no discount
        total: line total formatted as money
    """
    index: int
    title: str
    price: str
    quantity: str
    discount: Optional[int]
    total: str

    def cells(self) -> List[str]:
        """Return the six column values of this row"""
        discount = "-" if not self.discount else f"{self.discount}%"
        return [str(self.index), self.title, self.price, self.quantity, discount, self.total]


def format_money(value: float, symbol: str = "$") -> str:
    """
    Format an amount with the currency symbol and exactly two decimals,
    always using "." as the decimal separator
    """
    return f"{symbol}{value:.2f}"


def format_cell(value: str, align: Align, width: int) -> str:
    """
    Fit a value into a column of the given width.

    Values longer than the width are cut. The padding goes before the value
    for RIGHT, after it for LEFT, and is split for CENTER with the odd space
    placed after. One separator space is always appended.
    """
    if len(value) > width:
        value = value[:width]

    if align == Align.CENTER:
        before = (width - len(value)) // 2
    elif align == Align.RIGHT:
        before = width - len(value)
    else:
        before = 0
    after = width - len(value) - before

    return " " * before + value + " " * after + " "


def build_column_widths(widths: List[int], values: Sequence[str]) -> None:
    """Grow widths in place so every column fits the given values"""
    for i, value in enumerate(values):
        widths[i] = max(widths[i], len(value))


def build_separator(length: int) -> str:
    """Return a newline-terminated line of dashes"""
    return "-" * max(0, length) + "\n"


class TicketFormatter:
    """
    Formatter for the cart ticket as a fixed-width text table
    """

    HEADER = ["#", "Item", "Price", "Quan.", "Discount", "Total"]
    ALIGNMENTS = [Align.RIGHT, Align.LEFT, Align.RIGHT, Align.RIGHT, Align.RIGHT, Align.RIGHT]
    EMPTY_TICKET = "No items."

    def __init__(self, currency_symbol: str = "$"):
        """
        Initialize the formatter
        """
        self.currency_symbol = currency_symbol

    def format_ticket(self, items: Sequence[Item]) -> str:
        """
        Format the items as a ticket.

        Every line ends with a newline: the header, a dashed separator, one
        line per item in cart order, another separator, and a footer with the
        item count and the grand total.

        Returns "No items." when there is nothing to show
        """
        if not items:
            return self.EMPTY_TICKET

        rows, total = self.build_rows(items)
        lines = [row.cells() for row in rows]
        footer = [str(len(rows)), "", "", "", "", self._money(total)]

        # First pass: every column fits header, lines and footer
        widths = [0] * len(self.HEADER)
        build_column_widths(widths, self.HEADER)
        for line in lines:
            build_column_widths(widths, line)
        build_column_widths(widths, footer)

        line_length = sum(widths) + len(widths) - 1
        separator = build_separator(line_length)

        # Second pass: render
        parts = [self._format_row(self.HEADER, widths), separator]
        parts.extend(self._format_row(line, widths) for line in lines)
        parts.append(separator)
        parts.append(self._format_row(footer, widths))

        logger.debug(f"Formatted ticket with {len(rows)} item(s), total {self._money(total)}")
        return "".join(parts)

    def build_rows(self, items: Sequence[Item]) -> Tuple[List[TicketRow], float]:
        """
        Compute discounts and line totals for the items
        Returns the ticket rows and the grand total
        """
        rows = []
        total = 0.0

        for index, item in enumerate(items, 1):
            discount = calculate_discount(item.item_type, item.quantity)
            item_total = item.unit_price * item.quantity * (100 - discount) / 100
            rows.append(TicketRow(
                index=index,
                title=item.title,
                price=self._money(item.unit_price),
                quantity=str(item.quantity),
                discount=discount or None,
                total=self._money(item_total)
            ))
            total += item_total

        return rows, total

    def _format_row(self, values: Sequence[str], widths: List[int]) -> str:
        """Render one table row, newline-terminated"""
        cells = [
            format_cell(value, align, width)
            for value, align, width in zip(values, self.ALIGNMENTS, widths)
        ]
        return "".join(cells) + "\n"

    def _money(self, value: float) -> str:
        return format_money(value, self.currency_symbol)
