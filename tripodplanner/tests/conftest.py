"""Shared fixtures for tripodplanner unit tests.

The bundled sorceress catalog is real data (75 items, 53 tripods). It is too
large to search exhaustively in a test, so tests that use it cap max_steps.
Hand-built catalogs cover everything that needs an exact answer.
"""
import pytest

from tripodplanner import Item, PlannerConfig, load_config
from tripodplanner.constants import DEFAULT_CONFIG_PATH


@pytest.fixture(scope="session")
def sorceress() -> PlannerConfig:
    """Bundled catalog. Loaded once per run."""
    return load_config(DEFAULT_CONFIG_PATH)


@pytest.fixture
def two_row_items() -> list[Item]:
    """One priority item per row, free."""
    return [
        Item(category=0, cost=0, features=(1,)),
        Item(category=1, cost=0, features=(2,)),
    ]
