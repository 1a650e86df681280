"""
Customer basket.

A Basket is an ordered, capacity-bounded list of items. Running out of room
is an expected condition and is reported through add_item()'s return value;
invalid capacities are caller errors and raise InvalidArgumentError.
"""

from decimal import Decimal
from typing import List, Optional, Tuple, Union

from .catalog import FillingCode, available_fillings
from .config import BasketConfig
from .errors import InvalidArgumentError
from .items import Filling, Item
from ..utils.logger_setup import get_logger
from ..utils.money import sum_money

logger = get_logger(__name__)


def _check_capacity(capacity):
    # bool is an int subclass but never a meaningful capacity
    if not isinstance(capacity, int) or isinstance(capacity, bool):
        raise InvalidArgumentError(f"Capacity must be an integer: {capacity!r}")
    if capacity < 0:
        raise InvalidArgumentError(f"Capacity cannot be negative: {capacity}")


class Basket:
    """Mutable collection of items, never holding more than `capacity` of them."""

    def __init__(self, capacity: Optional[int] = None):
        """
        Initialize Basket.

        Args:
            capacity: Maximum number of items. If None, uses the configured
                default (BasketConfig, which honours BAGEL_SHOP_BASKET_CAPACITY).

        Raises:
            InvalidArgumentError: If capacity is not an int or is negative
        """
        if capacity is None:
            capacity = BasketConfig().default_capacity
        _check_capacity(capacity)

        self._capacity = capacity
        self._items: List[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item) -> bool:
        return self.is_in_basket(item)

    def __repr__(self) -> str:
        return f"Basket(items={len(self._items)}, capacity={self._capacity})"

    @property
    def items(self) -> Tuple[Item, ...]:
        """Items in insertion order (read-only view)."""
        return tuple(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add_item(self, item: Item) -> bool:
        """
        Add an item if there is room.

        Args:
            item: Bagel or Coffee to add

        Returns:
            True if the item was added, False if the basket is full

        Raises:
            InvalidArgumentError: If item is not a Bagel or Coffee
        """
        if not isinstance(item, Item):
            raise InvalidArgumentError(f"Only bagels and coffee can go in a basket, got {item!r}")

        if self.is_full():
            logger.warning(f"Basket full ({self._capacity}), rejected {item.label}")
            return False

        self._items.append(item)
        logger.debug(f"Added {item.label} ({len(self._items)}/{self._capacity})")
        return True

    def remove_item(self, item: Item) -> bool:
        """
        Remove the first item equal to `item`.

        Returns:
            True if an item was removed, False if none matched
        """
        try:
            self._items.remove(item)
        except ValueError:
            return False

        logger.debug(f"Removed {item.label} ({len(self._items)}/{self._capacity})")
        return True

    def is_in_basket(self, item: Item) -> bool:
        """Check whether an item equal to `item` is in the basket."""
        return item in self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def set_capacity(self, capacity: int):
        """
        Change the capacity.

        Args:
            capacity: New capacity

        Raises:
            InvalidArgumentError: If capacity is not an int, is negative or is below
                the current item count
        """
        _check_capacity(capacity)
        if capacity < len(self._items):
            raise InvalidArgumentError(
                f"Capacity {capacity} is below the current item count {len(self._items)}"
            )

        self._capacity = capacity

    def total_price(self) -> Decimal:
        """Sum of unit prices of all items, filling surcharges included."""
        return sum_money(item.price for item in self._items)

    @staticmethod
    def check_price(item: Union[Item, Filling]) -> Decimal:
        """Price of a single item or filling."""
        return item.price

    @staticmethod
    def available_fillings() -> List[FillingCode]:
        return available_fillings()
