"""
Shared constants for the bagel shop.

Centralizes the promotional offers and the defaults used across modules.
"""

from collections import namedtuple

from .catalog import BagelCode, CoffeeCode
from ..utils.money import to_money

DEFAULT_BASKET_CAPACITY = 25

DEFAULT_SHOP_NAME = "Bob's Bagels"

# Multi-bagel bundle: `size` bagels of one variety sold together for `price`
BundleOffer = namedtuple("BundleOffer", ["size", "price"])

# Coffee & bagel combo: one coffee of `coffee` plus any left-over bagel for `price`
ComboOffer = namedtuple("ComboOffer", ["coffee", "price"])

# Bundles apply to every bagel variety. Largest bundle MUST come first so a
# count of 12 becomes one 12-bundle and not two 6-bundles.
BAGEL_BUNDLE_OFFERS = (
    BundleOffer(size=12, price=to_money("3.99")),
    BundleOffer(size=6, price=to_money("2.49")),
)

COFFEE_BAGEL_COMBO = ComboOffer(coffee=CoffeeCode.COFB, price=to_money("1.25"))

# Tie-break order for combo pairing when two left-over bagels cost the same
BAGEL_PAIRING_ORDER = [code for code in BagelCode]

# Labels for offers (used on receipts and in the CLI menu)
OFFER_LABELS = {
    'bundle': '{size} bagels for {price}',
    'combo': 'Coffee & Bagel for {price}',
}

ENV_BASKET_CAPACITY = "BAGEL_SHOP_BASKET_CAPACITY"
ENV_LOG_LEVEL = "BAGEL_SHOP_LOG_LEVEL"

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
