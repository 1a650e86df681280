"""Utility modules."""

from .logger_setup import get_logger, LoggerManager
from .money import format_amount, sum_money, to_money
from .receipt_formatter import format_receipt
from .receipt_schemas import ReceiptData, ReceiptLine, ReceiptOffer

__all__ = [
    # Logging utilities
    "get_logger",
    "LoggerManager",
    # Money
    "format_amount",
    "sum_money",
    "to_money",
    # Receipt rendering
    "format_receipt",
    "ReceiptData",
    "ReceiptLine",
    "ReceiptOffer",
]
