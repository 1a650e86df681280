"""
Store and orders.

The Store tracks active baskets and turns them into immutable Orders. Pricing
happens exactly once, when the order is placed; the totals are stored on the
Order and never recomputed.
"""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from .basket import Basket
from .discounts import DiscountBreakdown, discount_items
from .errors import NotFoundError
from .items import Item
from ..utils.logger_setup import get_logger
from ..utils.money import format_amount

logger = get_logger(__name__)


@dataclass(frozen=True)
class Order:
    """Snapshot of a submitted basket with its computed totals."""
    id: uuid.UUID
    items: Tuple[Item, ...]
    total_price: Decimal
    discount: DiscountBreakdown
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def total_discount(self) -> Decimal:
        return self.discount.total_discount

    @property
    def total_price_after_discount(self) -> Decimal:
        return self.total_price - self.discount.total_discount


class Store:
    """Keeps the active baskets and the placed orders."""

    def __init__(self):
        self._baskets: List[Basket] = []
        self._orders: Dict[uuid.UUID, Order] = {}
        # place_order is check-then-act over both tables
        self._lock = threading.RLock()

    @property
    def baskets(self) -> Tuple[Basket, ...]:
        """Active baskets, in registration order."""
        with self._lock:
            return tuple(self._baskets)

    @property
    def orders(self) -> Tuple[Order, ...]:
        """Placed orders, oldest first."""
        with self._lock:
            return tuple(self._orders.values())

    def add_basket(self, basket: Basket):
        """Register a basket as active. Registering the same basket twice is a no-op."""
        with self._lock:
            if not self._is_active(basket):
                self._baskets.append(basket)

    def place_order(self, basket: Basket) -> Optional[uuid.UUID]:
        """
        Submit a basket as an order.

        Args:
            basket: Basket to submit (normally registered with add_basket first)

        Returns:
            ID of the new order, or None if the basket is empty
        """
        with self._lock:
            if basket.is_empty():
                logger.warning("Refusing to place an order for an empty basket")
                return None

            self._remove_basket(basket)

            items = basket.items
            order = Order(
                id=uuid.uuid4(),
                items=items,
                total_price=basket.total_price(),
                discount=discount_items(items),
            )
            self._orders[order.id] = order

        logger.info(
            f"Order {order.id} placed: {len(items)} item(s), "
            f"total {format_amount(order.total_price)}, "
            f"after discount {format_amount(order.total_price_after_discount)}"
        )
        return order.id

    def get_order(self, order_id: uuid.UUID) -> Order:
        """
        Look up an order.

        Raises:
            NotFoundError: If no order has this ID
        """
        with self._lock:
            try:
                return self._orders[order_id]
            except KeyError:
                raise NotFoundError(order_id) from None

    def remove_order(self, order_id: uuid.UUID) -> Order:
        """
        Remove an order and return it.

        Raises:
            NotFoundError: If no order has this ID
        """
        with self._lock:
            try:
                order = self._orders.pop(order_id)
            except KeyError:
                raise NotFoundError(order_id) from None

        logger.debug(f"Order {order_id} removed")
        return order

    def _is_active(self, basket: Basket) -> bool:
        # Baskets are mutable, so identity rather than equality
        return any(active is basket for active in self._baskets)

    def _remove_basket(self, basket: Basket):
        self._baskets = [active for active in self._baskets if active is not basket]
