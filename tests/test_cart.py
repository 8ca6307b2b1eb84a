"""
Tests for the shopping cart
"""

import pytest

from shopticket.cart import ShoppingCart, Item, ItemType
from shopticket.exceptions import InvalidArgument, ShopTicketError


class TestShoppingCart:
    """Test cases for ShoppingCart class"""

    def setup_method(self):
        """Set up test fixtures"""
        self.cart = ShoppingCart()

    def test_new_cart_is_empty(self):
        """Test that a new cart has no items"""
        assert len(self.cart) == 0
        assert self.cart.items == ()

    def test_add_item(self):
        """Test adding a valid item"""
        item = self.cart.add_item("Apple", 0.99, 5, ItemType.NEW)

        assert item == Item("Apple", 0.99, 5, ItemType.NEW)
        assert self.cart.items == (item,)

    def test_insertion_order(self):
        """Test that items keep the order they were added in"""
        self.cart.add_item("First", 1.00, 1, ItemType.REGULAR)
        self.cart.add_item("Second", 2.00, 2, ItemType.SALE)
        self.cart.add_item("Third", 3.00, 3, ItemType.NEW)

        assert [item.title for item in self.cart.items] == ["First", "Second", "Third"]
        assert len(self.cart) == 3

    def test_items_is_a_snapshot(self):
        """Test that the exposed items do not change with later appends"""
        self.cart.add_item("Apple", 0.99, 5, ItemType.NEW)
        snapshot = self.cart.items
        self.cart.add_item("Banana", 20.00, 4, ItemType.SECOND_FREE)

        assert len(snapshot) == 1
        assert len(self.cart.items) == 2

    def test_item_is_immutable(self):
        """Test that an added item cannot be changed"""
        item = self.cart.add_item("Apple", 0.99, 5, ItemType.NEW)
        with pytest.raises(AttributeError):
            item.quantity = 10

    @pytest.mark.parametrize("title", ["", "x" * 33, None])
    def test_rejects_bad_title(self, title):
        """Test title validation"""
        with pytest.raises(InvalidArgument, match="Illegal title"):
            self.cart.add_item(title, 1.00, 1, ItemType.REGULAR)
        assert len(self.cart) == 0

    @pytest.mark.parametrize("price", [0.0, 0.009, -1.0, float("nan")])
    def test_rejects_bad_price(self, price):
        """Test price validation"""
        with pytest.raises(InvalidArgument, match="Illegal price"):
            self.cart.add_item("Apple", price, 1, ItemType.REGULAR)
        assert len(self.cart) == 0

    @pytest.mark.parametrize("quantity", [0, -1, -100])
    def test_rejects_bad_quantity(self, quantity):
        """Test quantity validation"""
        with pytest.raises(InvalidArgument, match="Illegal quantity"):
            self.cart.add_item("Apple", 1.00, quantity, ItemType.REGULAR)
        assert len(self.cart) == 0

    @pytest.mark.parametrize("quantity", [2.5, None, True, "3"])
    def test_rejects_non_integer_quantity(self, quantity):
        """Test that only plain integers are accepted as quantity"""
        with pytest.raises(InvalidArgument, match="Illegal quantity"):
            self.cart.add_item("Banana", 20.00, quantity, ItemType.SECOND_FREE)
        assert len(self.cart) == 0

    @pytest.mark.parametrize("price", [None, "5", True])
    def test_rejects_non_numeric_price(self, price):
        """Test that the price must be a real number"""
        with pytest.raises(InvalidArgument, match="Illegal price"):
            self.cart.add_item("Apple", price, 1, ItemType.NEW)
        assert len(self.cart) == 0

    def test_accepts_integer_price(self):
        """Test that a whole-number price is accepted"""
        item = self.cart.add_item("Nails", 2, 500, ItemType.REGULAR)
        assert item.unit_price == 2

    def test_rejects_bad_type(self):
        """Test item type validation"""
        with pytest.raises(InvalidArgument, match="Illegal item type"):
            self.cart.add_item("Apple", 1.00, 1, "new")

    def test_accepts_boundary_values(self):
        """Test the smallest and largest accepted values"""
        self.cart.add_item("x" * 32, 0.01, 1, ItemType.REGULAR)
        self.cart.add_item("y", 0.01, 1, ItemType.NEW)
        assert len(self.cart) == 2

    def test_error_hierarchy(self):
        """Test that validation errors are package and value errors"""
        with pytest.raises(ShopTicketError):
            self.cart.add_item("", 1.00, 1, ItemType.REGULAR)
        with pytest.raises(ValueError):
            self.cart.add_item("", 1.00, 1, ItemType.REGULAR)

    def test_format_empty_cart(self):
        """Test ticket of an empty cart"""
        assert self.cart.format_ticket() == "No items."

    def test_format_ticket(self):
        """Test that the cart renders its own items"""
        self.cart.add_item("Apple", 0.99, 5, ItemType.NEW)
        ticket = self.cart.format_ticket()

        assert "Apple" in ticket
        assert "$4.95" in ticket
