"""
Exception taxonomy for the bagel shop.

A full basket is not an error: Basket.add_item() reports it by returning
False. Everything here signals a caller mistake and leaves state untouched.
"""


class BagelShopError(Exception):
    """Base class for all bagel shop errors."""


class UnknownCodeError(BagelShopError, ValueError):
    """Raised when an item or filling is built from a code the catalog does not know."""

    def __init__(self, value, kind: str = "item"):
        self.value = value
        self.kind = kind
        super().__init__(f"Unknown {kind} code: {value!r}")


class InvalidArgumentError(BagelShopError, ValueError):
    """Raised for out-of-range arguments such as a negative basket capacity."""


class NotFoundError(BagelShopError, KeyError):
    """Raised when an order lookup misses."""

    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")

    def __str__(self):
        # KeyError would otherwise render the message with quotes
        return self.args[0]
