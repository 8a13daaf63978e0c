import pytest


@pytest.fixture
def lines() -> list[str]:
    """Collects trace output instead of sending it to raylib."""
    return []
