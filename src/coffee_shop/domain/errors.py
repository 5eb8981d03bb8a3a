"""
Domain errors.

These do not inherit from ValueError: Pydantic wraps ValueError
raised inside a validator into a ValidationError, but lets any other
exception propagate untouched. Raising them from validators means callers
get the domain type itself at construction time.
"""


class CoffeeShopError(Exception):
    """Base class for all coffee shop errors."""


class InvalidPrice(CoffeeShopError):
    """A price or amount was negative."""

    def __init__(self, amount: object) -> None:
        super().__init__(f"Price must be non-negative, got {amount}")
        self.amount = amount


class InvalidCardIdentifier(CoffeeShopError):
    """A card identifier is too short to show its last four characters."""

    def __init__(self, length: int) -> None:
        # Only the length is kept so the identifier never ends up in tracebacks.
        super().__init__(f"Card identifier must have at least 4 characters, got {length}")
        self.length = length
