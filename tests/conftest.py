import pytest


@pytest.fixture
def lines() -> list[str]:
    """Recording output sink: pass `lines.append` wherever an Emit is expected."""
    return []
