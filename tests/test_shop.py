"""Tests for OrderService."""

from decimal import Decimal

import pytest

from coffee_shop.domain.beverages import Beverage, Espresso, Latte
from coffee_shop.domain.models import Size
from coffee_shop.services.payment import CardPayment, CashPayment
from coffee_shop.shop import OrderService


class Mocha(Beverage):
    """A drink defined outside the package, with no changes to it."""

    name: str = "Mocha"
    size: Size = Size.LARGE

    def preparation_steps(self) -> list[str]:
        return ["Melting chocolate...", "Brewing a shot of espresso...", "Topping with cream."]


class TestPlaceOrder:
    """Tests for OrderService.place_order()."""

    def test_espresso_with_cash(self, lines):
        shop = OrderService("Ye Olde Coffee", CashPayment(), emit=lines.append)
        shop.place_order(Espresso(base_price=Decimal("2.00")))
        assert lines == [
            "Welcome to Ye Olde Coffee!",
            "Order: Small Espresso - $2.00",
            "Grinding coffee beans...",
            "Brewing a shot of espresso...",
            "Pouring into a small cup.",
            "Paid $2.00 in cash",
            "Thank you for your purchase!",
        ]

    def test_latte_with_card(self, lines):
        shop = OrderService("Ye New Coffee", CardPayment(card_number="1277448787638764"), emit=lines.append)
        receipt = shop.place_order(Latte(base_price=Decimal("3.00")))
        assert lines == [
            "Welcome to Ye New Coffee!",
            "Order: Medium Latte - $4.05",
            "Steaming milk...",
            "Grinding coffee beans...",
            "Brewing a shot of espresso...",
            "Combining espresso with milk and adding foam.",
            "Pouring into a Medium cup.",
            "Charged $4.05 to card ending with 8764",
            "Thank you for your purchase!",
        ]
        assert receipt.amount == Decimal("4.05")
        assert receipt.payment == "CardPayment"
        assert receipt.size == Size.MEDIUM

    @pytest.mark.parametrize(
        "payment",
        [CashPayment(), CardPayment(card_number="0000111122223333")],
    )
    @pytest.mark.parametrize(
        "beverage",
        [
            Espresso(base_price=Decimal("2.00")),
            Latte(base_price=Decimal("3.00"), size=Size.SMALL),
            Mocha(base_price=Decimal("3.50")),
        ],
    )
    def test_line_order_for_every_combination(self, beverage, payment, lines):
        OrderService("Shop", payment, emit=lines.append).place_order(beverage)
        steps = beverage.preparation_steps()
        assert lines[0] == "Welcome to Shop!"
        assert lines[1].startswith("Order: ")
        assert lines[2 : 2 + len(steps)] == steps
        assert lines[-2] == payment.confirmation(beverage.compute_price())
        assert lines[-1] == "Thank you for your purchase!"
        assert len(lines) == len(steps) + 4

    def test_new_variant_needs_no_changes(self, lines):
        receipt = OrderService("Shop", CashPayment(), emit=lines.append).place_order(
            Mocha(base_price=Decimal("4.00"))
        )
        assert lines[1] == "Order: Large Mocha - $6.00"
        assert "Topping with cream." in lines
        assert receipt.beverage == "Mocha"

    def test_one_payment_method_for_many_orders(self, lines):
        payment = CashPayment()
        shop = OrderService("Shop", payment, emit=lines.append)
        shop.place_order(Espresso(base_price=Decimal("2.00")))
        shop.place_order(Latte(base_price=Decimal("3.00")))
        assert shop.payment is payment
        assert lines.count("Thank you for your purchase!") == 2
