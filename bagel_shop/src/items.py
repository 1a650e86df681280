"""
Purchasable items: bagels, coffee and bagel fillings.

Items are immutable value objects. Two items are equal when they carry the
same codes, which is what Basket membership and removal rely on. Every
constructor accepts an enum member, a code string or a display name and
resolves it against the catalog immediately.

Typical usage example:

bagel = Bagel(BagelCode.BGLO, Filling("Bacon"))
bagel.price  # Decimal('0.61')
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from .catalog import BagelCode, CoffeeCode, FillingCode, Category, entry_of, parse_code
from .errors import InvalidArgumentError, UnknownCodeError


class Item(ABC):
    """Something a basket can hold."""

    category: Category

    @property
    @abstractmethod
    def price(self) -> Decimal:
        """Unit price including any surcharge."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Display label used on receipts."""


@dataclass(frozen=True)
class Filling:
    """A bagel filling. Only meaningful when attached to a Bagel."""
    code: FillingCode

    def __post_init__(self):
        object.__setattr__(self, 'code', parse_code(self.code, FillingCode))

    @property
    def price(self) -> Decimal:
        return entry_of(self.code).price

    @property
    def label(self) -> str:
        return entry_of(self.code).name


@dataclass(frozen=True)
class Bagel(Item):
    """
    A bagel, optionally with one filling.

    Attributes:
        code: Bagel variety
        filling: Filling owned by this bagel, or None
    """
    code: BagelCode
    filling: Optional[Filling] = None

    category = Category.BAGEL

    def __post_init__(self):
        object.__setattr__(self, 'code', parse_code(self.code, BagelCode))
        if self.filling is not None and not isinstance(self.filling, Filling):
            object.__setattr__(self, 'filling', Filling(self.filling))

    @property
    def base_price(self) -> Decimal:
        """Price of the bagel alone, without the filling."""
        return entry_of(self.code).price

    @property
    def price(self) -> Decimal:
        if self.filling is None:
            return self.base_price
        return self.base_price + self.filling.price

    @property
    def label(self) -> str:
        label = entry_of(self.code).label
        if self.filling is not None:
            label += f" with {self.filling.label}"
        return label


@dataclass(frozen=True)
class Coffee(Item):
    """A cup of coffee."""
    code: CoffeeCode

    category = Category.COFFEE

    def __post_init__(self):
        object.__setattr__(self, 'code', parse_code(self.code, CoffeeCode))

    @property
    def price(self) -> Decimal:
        return entry_of(self.code).price

    @property
    def label(self) -> str:
        return entry_of(self.code).label


# [QTYx]CODE_OR_NAME[+FILLING], e.g. "12xBGLP", "Onion+Bacon", "2 x BGLO + FILB"
_ITEM_SPEC_PATTERN = re.compile(
    r'^\s*(?:(?P<qty>\d+)\s*[xX*]\s*)?(?P<item>[^+]+?)\s*(?:\+\s*(?P<filling>[^+]+?)\s*)?$'
)


def make_item(value: str, filling: Optional[str] = None) -> Item:
    """
    Build a Bagel or Coffee from a code or display name.

    Args:
        value: Bagel or coffee code/name, e.g. 'BGLO', 'Latte'
        filling: Optional filling code/name (bagels only)

    Returns:
        The constructed item

    Raises:
        UnknownCodeError: If value names neither a bagel nor a coffee
        InvalidArgumentError: If a filling is given for a coffee
    """
    try:
        return Bagel(value, filling)
    except UnknownCodeError as bagel_error:
        # The filling may be the culprit; only fall through to coffee for the item itself
        if bagel_error.kind != Category.BAGEL.value.lower():
            raise

    try:
        coffee = Coffee(value)
    except UnknownCodeError:
        raise UnknownCodeError(value) from None

    if filling is not None:
        raise InvalidArgumentError(f"Coffee cannot have a filling: {value!r} + {filling!r}")
    return coffee


def parse_item_spec(spec: str) -> Tuple[int, Item]:
    """
    Parse a command-line item spec.

    Args:
        spec: String of the form [QTYx]CODE_OR_NAME[+FILLING]

    Returns:
        Tuple of (quantity, item)

    Raises:
        InvalidArgumentError: If the item spec is malformed or the quantity is zero
        UnknownCodeError: If the item or filling is unknown
    """
    match = _ITEM_SPEC_PATTERN.match(spec or "")
    if not match:
        raise InvalidArgumentError(f"Invalid item spec: {spec!r}")

    quantity = int(match.group('qty')) if match.group('qty') else 1
    if quantity < 1:
        raise InvalidArgumentError(f"Quantity must be at least 1: {spec!r}")

    return quantity, make_item(match.group('item'), match.group('filling'))
