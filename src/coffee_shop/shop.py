"""
OrderService — runs one order from greeting to thank-you.

The service is bound to exactly one `PaymentMethod` for its whole lifetime
and processes beverages one at a time. It only talks to the `Beverage` and
`PaymentMethod` abstractions, so new drinks or payment types plug in
without changes here.

Execution flow of `place_order()`:
    1. Welcome line with the shop name
    2. Order summary (size, name, price)
    3. beverage.prepare()  → the drink's own steps
    4. payment.settle()    → the payment's own confirmation
    5. Thank-you line

There is no error handling: anything raised by the beverage or the payment
method propagates to the caller. No order history is kept.
"""

import logging

from coffee_shop.domain.beverages import Beverage
from coffee_shop.domain.models import OrderReceipt
from coffee_shop.domain.pricing import format_amount
from coffee_shop.services.notify import Emit, console_emit
from coffee_shop.services.payment import PaymentMethod

logger = logging.getLogger(__name__)


class OrderService:
    """Takes orders for a single shop and charges them to its payment method.

    Not safe to share across threads if the bound payment method ever holds
    mutable state; neither built-in payment method does.
    """

    def __init__(self, shop_name: str, payment: PaymentMethod, emit: Emit = console_emit) -> None:
        self.shop_name = shop_name
        self.payment = payment
        self._emit = emit

    def place_order(self, beverage: Beverage) -> OrderReceipt:
        price = beverage.compute_price()
        logger.info("Order at %s: %s %s for %s", self.shop_name, beverage.size.label, beverage.name, format_amount(price))

        self._emit(f"Welcome to {self.shop_name}!")
        self._emit(f"Order: {beverage.size.label} {beverage.name} - ${format_amount(price)}")
        beverage.prepare(self._emit)
        self.payment.settle(price, self._emit)
        self._emit("Thank you for your purchase!")

        return OrderReceipt(
            shop_name=self.shop_name,
            beverage=beverage.name,
            size=beverage.size,
            amount=price,
            payment=type(self.payment).__name__,
        )
