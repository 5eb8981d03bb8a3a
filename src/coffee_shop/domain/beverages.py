"""
Beverage hierarchy.

`Beverage` is the abstraction the shop works against: it knows its name,
size and base price, computes its own price, and knows how to prepare
itself. Concrete drinks only supply a fixed name, their sizing rule and
their own `preparation_steps()`.

Adding a drink (say, a Mocha) means writing one more subclass. Nothing
here, in pricing.py, or in the shop has to change.

Beverages are frozen Pydantic models: created once per order, never
mutated, then discarded.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from coffee_shop.domain.errors import InvalidPrice
from coffee_shop.domain.models import Size
from coffee_shop.domain.pricing import price_for
from coffee_shop.services.notify import Emit, console_emit

logger = logging.getLogger(__name__)


class Beverage(BaseModel, ABC):
    """An orderable drink.

    Subclasses implement `preparation_steps()`; pricing and emitting the
    steps are shared.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    base_price: Decimal
    size: Size = Size.MEDIUM

    @field_validator("base_price")
    @classmethod
    def check_base_price(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise InvalidPrice(value)
        return value

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "Beverage":
        """Copy through full validation, so `update` obeys the same rules as the constructor."""
        return type(self).model_validate({**self.model_dump(), **(update or {})})

    def compute_price(self) -> Decimal:
        return price_for(self.base_price, self.size)

    @abstractmethod
    def preparation_steps(self) -> list[str]:
        """Ordered, human-readable steps for making this drink."""

    def prepare(self, emit: Emit = console_emit) -> list[str]:
        """Emit each preparation step and return them."""
        steps = self.preparation_steps()
        for step in steps:
            emit(step)
        logger.debug("Prepared %s %s in %d steps", self.size.label, self.name, len(steps))
        return steps


class Espresso(Beverage):
    """Always a small espresso; the constructor only takes a base price."""

    @model_validator(mode="before")
    @classmethod
    def pin_name_and_size(cls, data: Any) -> Any:
        if isinstance(data, dict):
            pinned = {"name": "Espresso", "size": Size.SMALL}
            ignored = sorted(key for key, value in pinned.items() if key in data and data[key] != value)
            if ignored:
                logger.warning("Espresso ignores %s; it is always a Small Espresso", ", ".join(ignored))
            data = {**data, **pinned}
        return data

    def preparation_steps(self) -> list[str]:
        return [
            "Grinding coffee beans...",
            "Brewing a shot of espresso...",
            "Pouring into a small cup.",
        ]


class Latte(Beverage):
    """A latte, Medium unless the caller asks for another size."""

    @model_validator(mode="before")
    @classmethod
    def pin_name(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = {**data, "name": "Latte"}
        return data

    def preparation_steps(self) -> list[str]:
        return [
            "Steaming milk...",
            "Grinding coffee beans...",
            "Brewing a shot of espresso...",
            "Combining espresso with milk and adding foam.",
            f"Pouring into a {self.size.label} cup.",
        ]
