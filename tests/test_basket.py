"""Test basket capacity, membership and totals."""

import random
from decimal import Decimal

import pytest

from bagel_shop.src.basket import Basket
from bagel_shop.src.catalog import BagelCode, CoffeeCode, FillingCode
from bagel_shop.src.constants import DEFAULT_BASKET_CAPACITY, ENV_BASKET_CAPACITY
from bagel_shop.src.errors import InvalidArgumentError
from bagel_shop.src.items import Bagel, Coffee, Filling


def test_adding_items():
    """Items are appended in order."""
    basket = Basket()

    assert basket.add_item(Bagel(BagelCode.BGLO))
    assert basket.add_item(Bagel(BagelCode.BGLO, Filling(FillingCode.FILB)))
    assert basket.add_item(Coffee(CoffeeCode.COFB))

    assert len(basket) == 3
    assert basket.items[1].filling == Filling(FillingCode.FILB)
    assert basket.capacity == DEFAULT_BASKET_CAPACITY


def test_full_basket_rejects_items():
    """A full basket returns False and stays unchanged."""
    print("=" * 70)
    print("TEST: Basket Capacity")
    print("=" * 70)

    basket = Basket(2)
    basket.add_item(Bagel(BagelCode.BGLO))
    assert not basket.is_full()

    basket.add_item(Bagel(BagelCode.BGLO))
    assert basket.is_full()

    assert basket.add_item(Bagel(BagelCode.BGLE)) is False
    assert len(basket) == 2
    assert Bagel(BagelCode.BGLE) not in basket
    print(f"  {basket!r}")
    print("\n[PASS] Full basket rejected the third item")


def test_zero_capacity_basket():
    basket = Basket(0)
    assert basket.is_full()
    assert not basket.add_item(Coffee(CoffeeCode.COFB))


def test_negative_initial_capacity():
    with pytest.raises(InvalidArgumentError):
        Basket(-1)


def test_removing_items():
    """The first equal item is removed; absent items leave the basket alone."""
    basket = Basket()
    bagel = Bagel(BagelCode.BGLO)
    basket.add_item(bagel)
    basket.add_item(Coffee(CoffeeCode.COFB))
    basket.add_item(Bagel(BagelCode.BGLO))

    # Structural equality: a fresh but equal bagel removes the first match
    assert basket.remove_item(Bagel(BagelCode.BGLO))
    assert basket.items == (Coffee(CoffeeCode.COFB), Bagel(BagelCode.BGLO))

    before = basket.items
    assert basket.remove_item(Bagel(BagelCode.BGLS)) is False
    assert basket.items == before


def test_removing_from_empty_basket():
    basket = Basket()
    assert basket.remove_item(Bagel(BagelCode.BGLO)) is False
    assert basket.is_empty()


def test_membership():
    """Membership compares codes, fillings included."""
    basket = Basket()
    bagel = Bagel(BagelCode.BGLO)

    assert not basket.is_in_basket(bagel)
    basket.add_item(bagel)
    assert basket.is_in_basket(Bagel("Onion"))
    assert not basket.is_in_basket(Bagel(BagelCode.BGLO, Filling(FillingCode.FILH)))


def test_changing_capacity():
    """Capacity can grow, but not go negative or below the item count."""
    print("=" * 70)
    print("TEST: Changing Capacity")
    print("=" * 70)

    basket = Basket(2)
    basket.set_capacity(3)
    assert basket.capacity == 3

    with pytest.raises(InvalidArgumentError):
        basket.set_capacity(-1)
    assert basket.capacity == 3

    basket.add_item(Bagel(BagelCode.BGLO))
    basket.add_item(Bagel(BagelCode.BGLO))
    with pytest.raises(InvalidArgumentError):
        basket.set_capacity(1)
    assert basket.capacity == 3

    # Shrinking to exactly the item count is allowed
    basket.set_capacity(2)
    assert basket.is_full()
    print("\n[PASS] Capacity changes validated")


def test_capacity_never_exceeded():
    """Random add/remove/resize sequences never overfill the basket."""
    rng = random.Random(1234)
    items = [Bagel(code) for code in BagelCode] + [Coffee(code) for code in CoffeeCode]
    basket = Basket(5)

    for _ in range(500):
        action = rng.choice(["add", "add", "remove", "resize"])
        if action == "add":
            basket.add_item(rng.choice(items))
        elif action == "remove":
            basket.remove_item(rng.choice(items))
        else:
            try:
                basket.set_capacity(rng.randint(-2, 8))
            except InvalidArgumentError:
                pass
        assert len(basket) <= basket.capacity


def test_total_price():
    """Totals are exact decimals."""
    basket = Basket()
    basket.add_item(Bagel(BagelCode.BGLO))
    basket.add_item(Bagel(BagelCode.BGLO))

    assert basket.total_price() == Decimal("0.98")

    basket.add_item(Bagel(BagelCode.BGLP, Filling(FillingCode.FILS)))
    basket.add_item(Coffee(CoffeeCode.COFW))
    assert basket.total_price() == Decimal("2.68")


def test_total_price_has_no_float_drift():
    """A hundred 0.39 bagels cost exactly 39.00."""
    basket = Basket(100)
    for _ in range(100):
        basket.add_item(Bagel(BagelCode.BGLP))

    assert basket.total_price() == Decimal("39.00")
    assert str(basket.total_price()) == "39.00"


def test_empty_basket_total():
    assert Basket().total_price() == Decimal("0.00")


def test_static_helpers():
    """check_price and available_fillings work without a basket instance."""
    assert Basket.check_price(Bagel(BagelCode.BGLO)) == Decimal("0.49")
    assert Basket.check_price(Bagel(BagelCode.BGLO, Filling(FillingCode.FILB))) == Decimal("0.61")
    assert Basket.check_price(Filling(FillingCode.FILB)) == Decimal("0.12")
    assert len(Basket.available_fillings()) == 6


def test_items_view_is_read_only():
    """The items property is a snapshot, not the internal list."""
    basket = Basket()
    basket.add_item(Coffee(CoffeeCode.COFB))

    view = basket.items
    assert isinstance(view, tuple)
    basket.add_item(Coffee(CoffeeCode.COFB))
    assert len(view) == 1


def test_non_items_are_rejected_before_any_change():
    """None and bare fillings raise and leave the basket untouched."""
    print("=" * 70)
    print("Basket: only bagels and coffee are accepted")
    print("=" * 70)

    basket = Basket(3)
    basket.add_item(Bagel(BagelCode.BGLO))

    with pytest.raises(InvalidArgumentError):
        basket.add_item(None)
    assert len(basket) == 1

    with pytest.raises(InvalidArgumentError):
        basket.add_item(Filling(FillingCode.FILB))
    assert len(basket) == 1
    assert basket.items == (Bagel(BagelCode.BGLO),)
    assert basket.total_price() == Decimal("0.49")

    print("[PASS] Non-items raise InvalidArgumentError without mutating the basket")


def test_default_capacity_follows_environment(monkeypatch):
    """Basket() picks up BAGEL_SHOP_BASKET_CAPACITY."""
    monkeypatch.setenv(ENV_BASKET_CAPACITY, "3")

    basket = Basket()
    assert basket.capacity == 3
    for _ in range(3):
        assert basket.add_item(Coffee(CoffeeCode.COFB))
    assert not basket.add_item(Coffee(CoffeeCode.COFB))


def test_non_integer_capacity():
    with pytest.raises(InvalidArgumentError):
        Basket("5")
    with pytest.raises(InvalidArgumentError):
        Basket(True)

    basket = Basket(2)
    with pytest.raises(InvalidArgumentError):
        basket.set_capacity(2.5)
    assert basket.capacity == 2
