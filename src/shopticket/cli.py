"""
Command Line Interface for ShopTicket
"""

import logging
from typing import Optional, List, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler

from .cart import ShoppingCart, ItemType
from .exceptions import ShopTicketError, InvalidArgument

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("shopticket")

app = typer.Typer(
    name="shopticket",
    help="Build a shopping cart and print its ticket",
)
console = Console()

DEMO_ITEMS = [
    ("Apple", 0.99, 5, ItemType.NEW),
    ("Banana", 20.00, 4, ItemType.SECOND_FREE),
    ("A long piece of toilet paper", 17.20, 1, ItemType.SALE),
    ("Nails", 2.00, 500, ItemType.REGULAR),
]


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"ShopTicket version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    items: Optional[List[str]] = typer.Option(
        None,
        "--item",
        "-i",
        help="Item as TITLE:PRICE:QUANTITY:TYPE (can be used multiple times)"
    ),
    demo: bool = typer.Option(
        False,
        "--demo",
        help="Print the ticket of a sample cart"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:

    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    try:
        cart = ShoppingCart()
        if demo:
            _add_demo_items(cart)
        for spec in items or []:
            cart.add_item(*parse_item(spec))

        ticket = cart.format_ticket()
        # Titles may contain "[", keep rich from reading them as markup
        console.print(ticket.rstrip("\n"), markup=False, highlight=False, soft_wrap=True)

    except ShopTicketError as e:
        logger.error(f"ShopTicket error: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Full traceback:")
        raise typer.Exit(code=1)


def _add_demo_items(cart: ShoppingCart) -> None:
    """Fill the cart with the sample items"""
    logger.debug("Adding demo items")
    for title, price, quantity, item_type in DEMO_ITEMS:
        cart.add_item(title, price, quantity, item_type)


def parse_item(spec: str) -> Tuple[str, float, int, ItemType]:
    """
    Parse a TITLE:PRICE:QUANTITY:TYPE option value

    The title may contain ":" itself, so fields are split from the right.
    Returns a (title, price, quantity, item_type) tuple
    """
    parts = spec.rsplit(":", 3)
    if len(parts) != 4:
        raise InvalidArgument(f"Expected TITLE:PRICE:QUANTITY:TYPE, got '{spec}'")

    title, price, quantity, type_name = parts
    try:
        price_value = float(price)
    except ValueError:
        raise InvalidArgument(f"Illegal price: '{price}'")
    try:
        quantity_value = int(quantity)
    except ValueError:
        raise InvalidArgument(f"Illegal quantity: '{quantity}'")
    try:
        item_type = ItemType(type_name.strip().lower().replace("-", "_"))
    except ValueError:
        choices = ", ".join(t.value for t in ItemType)
        raise InvalidArgument(f"Unknown item type '{type_name}' (choose from {choices})")

    return title, price_value, quantity_value, item_type
