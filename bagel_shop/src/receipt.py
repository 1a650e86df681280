"""
Receipts for placed orders.

A Receipt is a read-only view over an Order. It groups identical items into
lines, lists the applied offers and renders everything as text or JSON.
"""

from typing import Dict, Optional

from .constants import DEFAULT_SHOP_NAME
from .store import Order
from ..utils.logger_setup import get_logger
from ..utils.receipt_formatter import format_receipt
from ..utils.receipt_schemas import ReceiptData, ReceiptLine, ReceiptOffer

logger = get_logger(__name__)


class Receipt:
    """Text and structured rendering of an Order."""

    def __init__(self, order: Order, shop_name: str = DEFAULT_SHOP_NAME,
                 width: int = 40, show_timestamp: bool = True):
        """
        Initialize Receipt.

        Args:
            order: Order to render
            shop_name: Name printed in the header
            width: Line width of the text receipt
            show_timestamp: Whether to print the order timestamp
        """
        self.order = order
        self.shop_name = shop_name
        self.width = width
        self.show_timestamp = show_timestamp

    def to_schema(self) -> ReceiptData:
        """Build the structured receipt for this order."""
        grouped: Dict[str, ReceiptLine] = {}
        for item in self.order.items:
            line = grouped.get(item.label)
            if line is None:
                grouped[item.label] = ReceiptLine(label=item.label, quantity=1, amount=item.price)
            else:
                grouped[item.label] = ReceiptLine(
                    label=line.label,
                    quantity=line.quantity + 1,
                    amount=line.amount + item.price,
                )

        offers = [
            ReceiptOffer(description=offer.description, times=offer.times, discount=offer.discount)
            for offer in self.order.discount.offers
        ]

        return ReceiptData(
            shop_name=self.shop_name,
            order_id=str(self.order.id),
            created_at=self.order.created_at if self.show_timestamp else None,
            lines=list(grouped.values()),
            offers=offers,
            total_price=self.order.total_price,
            total_discount=self.order.total_discount,
            total_price_after_discount=self.order.total_price_after_discount,
        )

    def render(self) -> str:
        """Render the receipt as fixed-width text."""
        return format_receipt(self.to_schema(), width=self.width)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Render the receipt as JSON (money values as strings)."""
        return self.to_schema().model_dump_json(indent=indent)

    def print_receipt(self) -> str:
        """
        Log the rendered receipt and return it.

        Returns:
            The receipt text
        """
        text = self.render()
        logger.info(f"Receipt for order {self.order.id}:\n{text}")
        return text
