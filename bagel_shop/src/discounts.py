"""
Discount engine.

Computes the promotional discount for a finalized set of items. The engine
only looks at how many items of each code were bought, never at the order in
which they were added, so the same multiset of codes always yields the same
discount.

Offers, evaluated in this order:

1. Multi-bagel bundles (BAGEL_BUNDLE_OFFERS), per bagel variety, largest
   bundle first. Bagels left after the last complete bundle keep their price.
2. Coffee & bagel combo (COFFEE_BAGEL_COMBO): each qualifying coffee pairs
   with one left-over bagel, most expensive bagel first.

Fillings are never discounted. Each offer's discount is the unit prices it
replaces minus the offer price; offers that would not save money are skipped.
"""

from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Tuple

from .catalog import BagelCode, Code, entry_of, price_of
from .constants import (
    BAGEL_BUNDLE_OFFERS,
    BAGEL_PAIRING_ORDER,
    COFFEE_BAGEL_COMBO,
    OFFER_LABELS,
)
from .errors import InvalidArgumentError
from .items import Item
from ..utils.logger_setup import get_logger
from ..utils.money import ZERO, format_amount, sum_money, to_money

logger = get_logger(__name__)


@dataclass(frozen=True)
class AppliedOffer:
    """One offer applied `times` times to an order."""
    kind: str  # bundle, combo
    description: str
    codes: Tuple[Code, ...]
    times: int
    item_count: int
    discount: Decimal


@dataclass(frozen=True)
class DiscountBreakdown:
    """Result of the discount engine for one order."""
    offers: Tuple[AppliedOffer, ...] = field(default_factory=tuple)
    total_discount: Decimal = ZERO

    def __bool__(self) -> bool:
        return bool(self.offers)


def count_codes(items: Iterable[Item]) -> Counter:
    """
    Count items per bagel/coffee code. Fillings are not counted.

    Args:
        items: Bagels and coffees of an order

    Returns:
        Counter mapping code -> quantity
    """
    return Counter(item.code for item in items)


def _validate_counts(counts: Mapping[Code, int]) -> Dict[Code, int]:
    validated = {}
    for code, quantity in counts.items():
        entry_of(code)
        if quantity < 0:
            raise InvalidArgumentError(f"Negative quantity for {code.value}: {quantity}")
        if quantity:
            validated[code] = quantity
    return validated


def _apply_bundles(counts: Dict[Code, int]) -> Tuple[List[AppliedOffer], Dict[BagelCode, int]]:
    """Apply multi-bagel bundles; return the offers and the left-over bagel counts."""
    offers = []
    leftovers = {}

    for code in BagelCode:
        remaining = counts.get(code, 0)
        if not remaining:
            continue

        unit_price = price_of(code)
        for bundle in BAGEL_BUNDLE_OFFERS:
            times = remaining // bundle.size
            saving = unit_price * bundle.size - bundle.price
            if times == 0 or saving <= 0:
                continue

            remaining -= times * bundle.size
            offers.append(AppliedOffer(
                kind='bundle',
                description=f"{entry_of(code).label}: "
                            + OFFER_LABELS['bundle'].format(size=bundle.size,
                                                            price=format_amount(bundle.price)),
                codes=(code,),
                times=times,
                item_count=times * bundle.size,
                discount=to_money(saving * times),
            ))

        if remaining:
            leftovers[code] = remaining

    return offers, leftovers


def _apply_combo(counts: Dict[Code, int], leftovers: Dict[BagelCode, int]) -> List[AppliedOffer]:
    """Pair qualifying coffees with left-over bagels."""
    combo = COFFEE_BAGEL_COMBO
    coffees = counts.get(combo.coffee, 0)
    if not coffees or not leftovers:
        return []

    coffee_price = price_of(combo.coffee)
    ranked = sorted(leftovers, key=lambda c: (-price_of(c), BAGEL_PAIRING_ORDER.index(c)))

    offers = []
    for code in ranked:
        if coffees == 0:
            break

        saving = price_of(code) + coffee_price - combo.price
        if saving <= 0:
            continue

        times = min(coffees, leftovers[code])
        coffees -= times
        offers.append(AppliedOffer(
            kind='combo',
            description=f"{entry_of(combo.coffee).label} & {entry_of(code).label}: "
                        + OFFER_LABELS['combo'].format(price=format_amount(combo.price)),
            codes=(combo.coffee, code),
            times=times,
            item_count=times * 2,
            discount=to_money(saving * times),
        ))

    return offers


def calculate_discount(counts: Mapping[Code, int]) -> DiscountBreakdown:
    """
    Compute the discount for a multiset of codes.

    Args:
        counts: Mapping of bagel/coffee code -> quantity

    Returns:
        DiscountBreakdown with the applied offers and their summed discount

    Raises:
        UnknownCodeError: If a key is not a catalog code
        InvalidArgumentError: If a quantity is negative
    """
    validated = _validate_counts(counts)

    bundle_offers, leftovers = _apply_bundles(validated)
    combo_offers = _apply_combo(validated, leftovers)

    offers = tuple(bundle_offers + combo_offers)
    total = sum_money(offer.discount for offer in offers)

    logger.debug(f"Applied {len(offers)} offer(s), total discount {format_amount(total)}")
    return DiscountBreakdown(offers=offers, total_discount=total)


def discount_items(items: Iterable[Item]) -> DiscountBreakdown:
    """Compute the discount for a list of items (see calculate_discount)."""
    return calculate_discount(count_codes(items))
