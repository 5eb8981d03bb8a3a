"""
Output sink for customer-facing text.

Everything the shop "says" (welcome line, preparation steps, payment
confirmations) goes through an `Emit` callable instead of calling print()
directly. The console program uses `console_emit`; tests pass a list's
`append` to capture the exact line sequence.

Diagnostics go through `logging`, never through the sink.
"""

from collections.abc import Callable

Emit = Callable[[str], None]


def console_emit(line: str) -> None:
    """Write one line of customer-facing text to stdout."""
    print(line)
