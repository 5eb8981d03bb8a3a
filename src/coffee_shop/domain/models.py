"""
Domain models for the coffee shop.

Beverages and payment methods are Pydantic v2 models (see beverages.py and
services/payment.py) so construction-time validation happens in one place.
This module holds the small shared types they build on.

Enums inherit from (str, Enum) so the value doubles as the display label
(e.g. "Medium" in "Order: Medium Latte - $4.05").
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Size(str, Enum):
    """Available drink sizes — mapped to price multipliers in pricing.py."""

    SMALL = "Small"    # x1.0
    MEDIUM = "Medium"  # x1.35
    LARGE = "Large"    # x1.5

    @property
    def label(self) -> str:
        return self.value


class OrderReceipt(BaseModel):
    """Snapshot of a completed order, returned by `OrderService.place_order()`.

    Not persisted anywhere; the shop keeps no order history.
    """

    model_config = ConfigDict(frozen=True)

    shop_name: str
    beverage: str
    size: Size
    amount: Decimal = Field(..., ge=0)
    payment: str  # Payment variant class name, e.g. "CardPayment"
