"""
Shoe composition: remaining card counts by rank.

A ShoeComposition is an immutable snapshot of a depleting Baccarat shoe.
Editing helpers (remove_card, adjust) return a new snapshot; the engine
only ever reads a shoe, and reduces it to a 10-bucket value histogram
(numpy int64, index = point value 0–9) before enumerating deals.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np

from .cards import (
    CARDS_PER_RANK_PER_DECK,
    DECKS_PER_SHOE,
    NUM_RANKS,
    NUM_VALUES,
    RANKS,
    card_value,
    str_to_rank,
)


@dataclass(frozen=True)
class ShoeComposition:
    """Remaining card counts for ranks 1–13.

    Attributes:
        counts: 13-tuple; counts[i] is the number of cards of rank i + 1.

    Raises:
        ValueError: If there are not exactly 13 counts or any count is
                    negative or non-integral.
    """

    counts: tuple[int, ...]

    def __post_init__(self) -> None:
        counts = tuple(self.counts)
        if len(counts) != NUM_RANKS:
            raise ValueError(f"Expected {NUM_RANKS} rank counts, got {len(counts)}.")
        for rank, c in zip(RANKS, counts):
            if isinstance(c, bool) or not isinstance(c, (int, np.integer)):
                raise ValueError(f"Count for rank {rank} must be an integer, got {c!r}.")
            if c < 0:
                raise ValueError(f"Count for rank {rank} must be non-negative, got {c}.")
        object.__setattr__(self, "counts", tuple(int(c) for c in counts))

    @classmethod
    def from_mapping(cls, counts: Mapping[int, int]) -> ShoeComposition:
        """Build a shoe from a {rank: count} mapping. Missing ranks count as 0.

        Examples:
            >>> ShoeComposition.from_mapping({1: 2, 13: 1}).total
            3
        """
        unknown = set(counts) - set(RANKS)
        if unknown:
            raise ValueError(f"Unknown ranks in shoe mapping: {sorted(unknown)}.")
        return cls(tuple(counts.get(rank, 0) for rank in RANKS))

    @property
    def total(self) -> int:
        """Total number of cards remaining."""
        return sum(self.counts)

    def count(self, rank: int) -> int:
        card_value(rank)  # validates rank
        return self.counts[rank - 1]

    def as_dict(self) -> dict[int, int]:
        return {rank: c for rank, c in zip(RANKS, self.counts)}

    def value_histogram(self) -> np.ndarray:
        """Collapse rank counts into point-value buckets.

        Returns:
            np.ndarray: int64 array of shape (10,); index v holds the number
            of remaining cards worth v points. Ranks 10/J/Q/K all land in 0.

        Examples:
            >>> create_shoe().value_histogram().tolist()
            [128, 32, 32, 32, 32, 32, 32, 32, 32, 32]
        """
        hist = np.zeros(NUM_VALUES, dtype=np.int64)
        for rank, c in zip(RANKS, self.counts):
            hist[card_value(rank)] += c
        return hist

    def remove_card(self, rank: int) -> ShoeComposition:
        """Return a new shoe with one card of ``rank`` removed.

        Raises:
            ValueError: If no card of that rank remains.
        """
        if self.count(rank) == 0:
            raise ValueError(f"No cards of rank {rank} remain in the shoe.")
        return self.adjust(rank, -1)

    def adjust(self, rank: int, delta: int) -> ShoeComposition:
        """Return a new shoe with ``delta`` added to a rank's count, floored at 0.

        Examples:
            >>> create_shoe().adjust(5, -40).count(5)
            0
        """
        card_value(rank)
        counts = list(self.counts)
        counts[rank - 1] = max(0, counts[rank - 1] + delta)
        return ShoeComposition(tuple(counts))


def create_shoe(num_decks: int = DECKS_PER_SHOE) -> ShoeComposition:
    """Create a fresh, undealt shoe of ``num_decks`` standard decks.

    Examples:
        >>> create_shoe().total
        416
        >>> create_shoe(1).count(13)
        4
    """
    if num_decks < 0:
        raise ValueError(f"num_decks must be non-negative, got {num_decks}.")
    return ShoeComposition((num_decks * CARDS_PER_RANK_PER_DECK,) * NUM_RANKS)


def shoe_from_dealt(
    dealt: Iterable[str],
    num_decks: int = DECKS_PER_SHOE,
) -> ShoeComposition:
    """Create a fresh shoe with the given cards (rank labels) already removed.

    Useful for tracking a live shoe from the cards seen so far.

    Raises:
        ValueError: If a label is unknown or more cards of a rank were dealt
                    than the shoe holds.

    Examples:
        >>> shoe_from_dealt(['A', 'K', 'K'], num_decks=1).total
        49
    """
    shoe = create_shoe(num_decks)
    for label in dealt:
        shoe = shoe.remove_card(str_to_rank(label))
    return shoe
