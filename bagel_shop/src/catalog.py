"""
Product catalog for the bagel shop.

Codes are closed enumerations, one per product category. The catalog table is
built once at import time and never mutated afterwards; every code of every
enumeration must have an entry, which is checked when the module loads.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Type, Union

from .errors import UnknownCodeError
from ..utils.money import to_money


class Category(Enum):
    """Product category of a catalog entry."""
    BAGEL = "Bagel"
    COFFEE = "Coffee"
    FILLING = "Filling"


class BagelCode(Enum):
    """Bagel varieties."""
    BGLO = "BGLO"
    BGLP = "BGLP"
    BGLE = "BGLE"
    BGLS = "BGLS"


class CoffeeCode(Enum):
    """Coffee varieties."""
    COFB = "COFB"
    COFW = "COFW"
    COFC = "COFC"
    COFL = "COFL"


class FillingCode(Enum):
    """Filling varieties."""
    FILB = "FILB"
    FILE = "FILE"
    FILC = "FILC"
    FILX = "FILX"
    FILS = "FILS"
    FILH = "FILH"


Code = Union[BagelCode, CoffeeCode, FillingCode]

CODE_CATEGORIES: Dict[Type[Enum], Category] = {
    BagelCode: Category.BAGEL,
    CoffeeCode: Category.COFFEE,
    FillingCode: Category.FILLING,
}


@dataclass(frozen=True)
class CatalogEntry:
    """A single product of the catalog."""
    code: Code
    name: str
    category: Category
    price: Decimal

    @property
    def label(self) -> str:
        """Human-readable product label, e.g. 'Onion Bagel'."""
        return f"{self.name} {self.category.value}"


# code -> (display name, unit price); table order is menu order
_CATALOG_TABLE = [
    (BagelCode.BGLO, "Onion", "0.49"),
    (BagelCode.BGLP, "Plain", "0.39"),
    (BagelCode.BGLE, "Everything", "0.49"),
    (BagelCode.BGLS, "Sesame", "0.49"),
    (CoffeeCode.COFB, "Black", "0.99"),
    (CoffeeCode.COFW, "White", "1.19"),
    (CoffeeCode.COFC, "Cappuccino", "1.29"),
    (CoffeeCode.COFL, "Latte", "1.29"),
    (FillingCode.FILB, "Bacon", "0.12"),
    (FillingCode.FILE, "Egg", "0.12"),
    (FillingCode.FILC, "Cheese", "0.12"),
    (FillingCode.FILX, "Cream Cheese", "0.12"),
    (FillingCode.FILS, "Smoked Salmon", "0.12"),
    (FillingCode.FILH, "Ham", "0.12"),
]


def _build_catalog() -> Mapping[Code, CatalogEntry]:
    entries = {}
    for code, name, price in _CATALOG_TABLE:
        entries[code] = CatalogEntry(
            code=code,
            name=name,
            category=CODE_CATEGORIES[type(code)],
            price=to_money(price),
        )

    missing = [code for enum_cls in CODE_CATEGORIES for code in enum_cls if code not in entries]
    if missing:
        raise RuntimeError(f"Catalog has no price for: {', '.join(c.value for c in missing)}")

    return MappingProxyType(entries)


CATALOG: Mapping[Code, CatalogEntry] = _build_catalog()


def entry_of(code: Code) -> CatalogEntry:
    """
    Look up the catalog entry for a code.

    Args:
        code: Bagel, coffee or filling code

    Returns:
        The matching CatalogEntry

    Raises:
        UnknownCodeError: If the code is not registered
    """
    try:
        return CATALOG[code]
    except (KeyError, TypeError):
        raise UnknownCodeError(code) from None


def price_of(code: Code) -> Decimal:
    """
    Get the unit price of a code.

    Args:
        code: Bagel, coffee or filling code

    Returns:
        Unit price as a two-decimal Decimal

    Raises:
        UnknownCodeError: If the code is not registered
    """
    return entry_of(code).price


def parse_code(value, kind: Type[Enum]) -> Code:
    """
    Resolve a code of the given enumeration from user input.

    Accepts an enum member, a code string ('BGLO') or a display name
    ('Onion'), both case-insensitive.

    Args:
        value: Enum member or string
        kind: BagelCode, CoffeeCode or FillingCode

    Returns:
        The matching enum member

    Raises:
        UnknownCodeError: If value does not name a code of this kind
    """
    category = CODE_CATEGORIES.get(kind)
    if category is None:
        raise TypeError(f"Not a catalog code enumeration: {kind!r}")

    if isinstance(value, kind):
        return value

    if isinstance(value, str):
        text = value.strip().upper()
        for code in kind:
            if code.value == text or CATALOG[code].name.upper() == text:
                return code

    raise UnknownCodeError(value, kind=category.value.lower())


def available_fillings() -> List[FillingCode]:
    """Return every filling code, in menu order."""
    return [entry.code for entry in CATALOG.values() if entry.category is Category.FILLING]


def menu() -> List[CatalogEntry]:
    """Return every catalog entry, in menu order."""
    return list(CATALOG.values())
