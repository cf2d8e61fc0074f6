"""
Shared pytest fixtures for the Baccarat EV engine tests.

Provides a helper for building small, exactly-known shoes from rank labels
and session-scoped results for the full 8-deck shoe (computed once).
"""

from __future__ import annotations

from collections import Counter

import pytest

from src.engine.cards import str_to_rank
from src.engine.payouts import DEFAULT_PAYOUTS
from src.engine.shoe import ShoeComposition, create_shoe
from src.solvers.ev import CalculationResult, compute


def shoe_of(*labels: str) -> ShoeComposition:
    """Build a shoe containing exactly the given cards.

    Examples:
        >>> shoe_of('A', 'A', 'K').total
        3
        >>> shoe_of('9', '9', '9', '9', '9', '9').count(9)
        6
    """
    return ShoeComposition.from_mapping(Counter(str_to_rank(s) for s in labels))


@pytest.fixture
def fresh_shoe() -> ShoeComposition:
    """Return an undealt 8-deck shoe (416 cards)."""
    return create_shoe()


@pytest.fixture(scope="session")
def full_shoe_result() -> CalculationResult:
    """Standard payouts on an undealt 8-deck shoe (computed once per session)."""
    return compute(create_shoe(), DEFAULT_PAYOUTS)


@pytest.fixture
def s():
    """Expose the shoe_of() helper as a fixture for convenience."""
    return shoe_of
