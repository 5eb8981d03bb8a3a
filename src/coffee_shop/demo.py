"""
Console demo — two shops, two payment methods, two orders.

Usage:
    coffee-shop
    python -m coffee_shop.demo

Takes no arguments and always exits with status 0. Customer-facing text
goes to stdout; log records (WARNING and above) go to stderr.
"""

import logging
from decimal import Decimal

from coffee_shop.domain.beverages import Espresso, Latte
from coffee_shop.services.payment import CardPayment, CashPayment
from coffee_shop.shop import OrderService

OLD_SHOP_NAME = "Ye Olde Coffee"
NEW_SHOP_NAME = "Ye New Coffee"
ESPRESSO_BASE_PRICE = Decimal("2.00")
LATTE_BASE_PRICE = Decimal("3.00")
DEMO_CARD_NUMBER = "1277448787638764"


def run_demo() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    espresso = Espresso(base_price=ESPRESSO_BASE_PRICE)
    latte = Latte(base_price=LATTE_BASE_PRICE)

    # Each shop is bound to one payment method for its lifetime.
    old_shop = OrderService(OLD_SHOP_NAME, CashPayment())
    new_shop = OrderService(NEW_SHOP_NAME, CardPayment(card_number=DEMO_CARD_NUMBER))

    old_shop.place_order(espresso)
    print()
    new_shop.place_order(latte)
    print()


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()
