"""Core functionality modules."""

from .basket import Basket
from .catalog import (
    BagelCode,
    CatalogEntry,
    Category,
    CoffeeCode,
    FillingCode,
    available_fillings,
    menu,
    parse_code,
    price_of,
)
from .cli import cli, main
from .config import BasketConfig, Config, ConfigManager, LoggingConfig, ReceiptConfig
from .discounts import AppliedOffer, DiscountBreakdown, calculate_discount, count_codes, discount_items
from .errors import BagelShopError, InvalidArgumentError, NotFoundError, UnknownCodeError
from .items import Bagel, Coffee, Filling, Item, make_item, parse_item_spec
from .receipt import Receipt
from .store import Order, Store

__all__ = [
    # Basket
    "Basket",
    # Catalog
    "BagelCode",
    "CatalogEntry",
    "Category",
    "CoffeeCode",
    "FillingCode",
    "available_fillings",
    "menu",
    "parse_code",
    "price_of",
    # CLI
    "cli",
    "main",
    # Config
    "BasketConfig",
    "Config",
    "ConfigManager",
    "LoggingConfig",
    "ReceiptConfig",
    # Discounts
    "AppliedOffer",
    "DiscountBreakdown",
    "calculate_discount",
    "count_codes",
    "discount_items",
    # Errors
    "BagelShopError",
    "InvalidArgumentError",
    "NotFoundError",
    "UnknownCodeError",
    # Items
    "Bagel",
    "Coffee",
    "Filling",
    "Item",
    "make_item",
    "parse_item_spec",
    # Receipt
    "Receipt",
    # Store
    "Order",
    "Store",
]
