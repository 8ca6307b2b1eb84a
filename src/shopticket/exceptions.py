"""
Custom exceptions
"""


class ShopTicketError(Exception):
    """Base exception"""
    pass


class InvalidArgument(ShopTicketError, ValueError):
    """A value rejected by the cart or the discount rule"""
    pass
