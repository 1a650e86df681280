"""
Receipt schema definitions.

Pydantic schemas describing a rendered receipt. They are the single source of
truth for both the text receipt and the JSON output of the CLI, so both views
always show the same numbers.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from bagel_shop.utils.money import to_money


# ============================================================================
# Auxiliary schemas (reusable components)
# ============================================================================

class ReceiptLine(BaseModel):
    """One product line: identical items grouped together."""
    label: str = Field(..., description="Product label, e.g. 'Onion Bagel with Bacon'")
    quantity: int = Field(..., ge=1, description="Number of identical items")
    amount: Decimal = Field(..., description="Quantity times unit price, before discounts")

    @field_validator('amount')
    @classmethod
    def round_to_cents(cls, v: Decimal) -> Decimal:
        """Normalize money to two decimal places."""
        return to_money(v)


class ReceiptOffer(BaseModel):
    """An offer applied to the order."""
    description: str = Field(..., description="Offer label")
    times: int = Field(..., ge=1, description="How many times the offer was applied")
    discount: Decimal = Field(..., description="Money saved by this offer")

    @field_validator('discount')
    @classmethod
    def round_to_cents(cls, v: Decimal) -> Decimal:
        """Normalize money to two decimal places."""
        return to_money(v)


# ============================================================================
# Main schema
# ============================================================================

class ReceiptData(BaseModel):
    """
    Everything printed on a receipt.

    Totals are copied from the order, never recomputed from the lines.
    """
    shop_name: str
    order_id: str
    created_at: Optional[datetime] = Field(
        None,
        description="Order timestamp; None when timestamps are disabled"
    )
    lines: List[ReceiptLine] = Field(default_factory=list)
    offers: List[ReceiptOffer] = Field(default_factory=list)
    total_price: Decimal
    total_discount: Decimal
    total_price_after_discount: Decimal

    @field_validator('total_price', 'total_discount', 'total_price_after_discount')
    @classmethod
    def round_to_cents(cls, v: Decimal) -> Decimal:
        """Normalize money to two decimal places."""
        return to_money(v)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
