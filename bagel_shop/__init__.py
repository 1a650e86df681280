"""
Retail ordering simulation for a bagel and coffee shop.

Customers fill a capacity-bounded basket with bagels (optionally filled) and
coffee, the store turns the basket into an immutable order and the discount
engine prices it with the shop's bundle and combo offers.

Typical usage example:

from bagel_shop.src import Basket, Bagel, Coffee, Store
store = Store()
basket = Basket()
store.add_basket(basket)
basket.add_item(Bagel("BGLO"))
order_id = store.place_order(basket)
"""

__version__ = "0.1.0"
__author__ = "Bob's Bagels"
