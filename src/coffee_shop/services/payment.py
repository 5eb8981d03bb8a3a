"""
Payment methods.

The shop depends on the `PaymentMethod` abstraction only, never on a
concrete payment type. Each variant decides what "settling" an amount
means; here that is just a confirmation line. In a real system
`CardPayment` would call Stripe, Square, etc.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coffee_shop.domain.errors import InvalidCardIdentifier, InvalidPrice
from coffee_shop.domain.pricing import format_amount
from coffee_shop.services.notify import Emit, console_emit

logger = logging.getLogger(__name__)


class PaymentMethod(BaseModel, ABC):
    """A way to settle the amount due for an order."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def confirmation(self, amount: Decimal) -> str:
        """Customer-facing confirmation text for settling `amount`."""

    def settle(self, amount: Decimal, emit: Emit = console_emit) -> None:
        if amount < 0:
            raise InvalidPrice(amount)
        logger.info("Settling %s via %s", format_amount(amount), type(self).__name__)
        emit(self.confirmation(amount))


class CashPayment(PaymentMethod):
    """Stateless cash payment."""

    def confirmation(self, amount: Decimal) -> str:
        return f"Paid ${format_amount(amount)} in cash"


class CardPayment(PaymentMethod):
    """Card payment; only the last four characters are ever shown.

    No card validation and no real transaction take place.
    """

    # Kept out of repr() so the full number never lands in logs or tracebacks.
    card_number: str = Field(..., repr=False)

    @field_validator("card_number")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) < 4:
            raise InvalidCardIdentifier(len(value))
        return value

    @property
    def last_four(self) -> str:
        return self.card_number[-4:]

    def confirmation(self, amount: Decimal) -> str:
        return f"Charged ${format_amount(amount)} to card ending with {self.last_four}"
