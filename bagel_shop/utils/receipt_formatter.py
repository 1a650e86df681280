"""
Receipt formatter utilities.

Formats a ReceiptData schema into fixed-width text. Pure functions; nothing
here touches orders or the catalog.
"""

import textwrap
from typing import List

from .money import format_amount
from .receipt_schemas import ReceiptData

MIN_WIDTH = 32
QTY_WIDTH = 4
AMOUNT_WIDTH = 8


def _row(label: str, quantity: str, amount: str, width: int) -> str:
    """Left-aligned label, right-aligned quantity and amount columns."""
    label_width = width - QTY_WIDTH - AMOUNT_WIDTH - 2
    if len(label) > label_width:
        label = label[:label_width - 1] + '…'
    return f"{label:<{label_width}} {quantity:>{QTY_WIDTH}} {amount:>{AMOUNT_WIDTH}}"


def _total_row(label: str, amount: str, width: int) -> str:
    return f"{label:<{width - AMOUNT_WIDTH - 1}} {amount:>{AMOUNT_WIDTH}}"


def format_receipt(receipt: ReceiptData, width: int = 40) -> str:
    """
    Format a receipt for display.

    Layout: centered header, one row per product line, applied offers, then
    subtotal, discount and total.

    Args:
        receipt: ReceiptData to render
        width: Line width in characters (at least MIN_WIDTH)

    Returns:
        Receipt text without a trailing newline
    """
    width = max(width, MIN_WIDTH)
    rule = '-' * width
    lines: List[str] = []

    lines.append(f"~~~ {receipt.shop_name} ~~~".center(width).rstrip())
    lines.append("")
    if receipt.created_at is not None:
        lines.append(receipt.created_at.strftime('%Y-%m-%d %H:%M:%S').center(width).rstrip())
        lines.append("")
    lines.append(rule)

    for line in receipt.lines:
        lines.append(_row(line.label, str(line.quantity), format_amount(line.amount), width))

    lines.append(rule)
    lines.append(_total_row("Subtotal", format_amount(receipt.total_price), width))

    if receipt.offers:
        lines.append("")
        lines.append("Offers:")
        for offer in receipt.offers:
            lines.extend(f"  {text}" for text in textwrap.wrap(offer.description, width - 2))
            lines.append(_row("", f"x{offer.times}", f"-{format_amount(offer.discount)}", width))
        lines.append("")
        lines.append(_total_row("Discount", f"-{format_amount(receipt.total_discount)}", width))

    lines.append(_total_row("Total", format_amount(receipt.total_price_after_discount), width))
    lines.append(rule)

    if receipt.offers:
        lines.append(f"You saved a total of {format_amount(receipt.total_discount)}".center(width).rstrip())
        lines.append("on this shop".center(width).rstrip())
    lines.append("Thank you for your order!".center(width).rstrip())

    return '\n'.join(lines)
