"""
Size-based pricing.

Every beverage is priced the same way: its base price times the multiplier
for its size. New beverage variants only choose a base price and a size;
they never touch this table.

Multipliers are Decimal so that e.g. 3.00 x 1.35 is exactly 4.05. Base
prices are validated by the Beverage model, not here.
"""

from decimal import ROUND_HALF_UP, Decimal

from coffee_shop.domain.models import Size

SIZE_MULTIPLIERS: dict[Size, Decimal] = {
    Size.SMALL: Decimal("1.0"),
    Size.MEDIUM: Decimal("1.35"),
    Size.LARGE: Decimal("1.5"),
}

CENT = Decimal("0.01")


def price_for(base_price: Decimal, size: Size) -> Decimal:
    """Return `base_price` scaled by the multiplier for `size`.

    Examples:
        - Small espresso, base 2.00:  2.00
        - Medium latte,   base 3.00:  4.05
        - Large latte,    base 3.00:  4.50
    """
    return base_price * SIZE_MULTIPLIERS[size]


def format_amount(amount: Decimal) -> str:
    # Half cents round up: 0.405 -> "0.41".
    return f"{amount.quantize(CENT, rounding=ROUND_HALF_UP):.2f}"
