"""
Rank constants, Baccarat point values, and human-readable I/O helpers.

Rank encoding (integer 1–13):
    1=A, 2..10 as printed, 11=J, 12=Q, 13=K

Baccarat only cares about point values (0–9): tens and court cards count 0,
every other rank counts its face value. Suits never matter, so a card is
fully described by its rank. String labels are used exclusively at I/O
boundaries.
"""

from __future__ import annotations

NUM_RANKS: int = 13
NUM_VALUES: int = 10

RANKS: tuple[int, ...] = tuple(range(1, NUM_RANKS + 1))

RANK_NAMES: dict[int, str] = {
    1: 'A',
    2: '2',
    3: '3',
    4: '4',
    5: '5',
    6: '6',
    7: '7',
    8: '8',
    9: '9',
    10: '10',
    11: 'J',
    12: 'Q',
    13: 'K',
}

# A standard Baccarat shoe: 8 decks, 4 suits per rank -> 32 of each rank.
DECKS_PER_SHOE: int = 8
CARDS_PER_RANK_PER_DECK: int = 4

# Ranks that count as 0 points
ZERO_VALUE_RANKS: frozenset[int] = frozenset({10, 11, 12, 13})

_LABEL_TO_RANK: dict[str, int] = {name: rank for rank, name in RANK_NAMES.items()}
_LABEL_TO_RANK['T'] = 10
_LABEL_TO_RANK['1'] = 1


def card_value(rank: int) -> int:
    """Return the Baccarat point value (0–9) of a rank.

    Raises:
        ValueError: If rank is outside 1–13.

    Examples:
        >>> card_value(1)    # Ace
        1
        >>> card_value(9)
        9
        >>> card_value(12)   # Queen
        0
    """
    if rank not in RANK_NAMES:
        raise ValueError(f"Rank must be in 1..{NUM_RANKS}, got {rank!r}.")
    return 0 if rank in ZERO_VALUE_RANKS else rank


def rank_to_str(rank: int) -> str:
    """Convert a rank integer to its label.

    Examples:
        >>> rank_to_str(1)
        'A'
        >>> rank_to_str(10)
        '10'
        >>> rank_to_str(13)
        'K'
    """
    if rank not in RANK_NAMES:
        raise ValueError(f"Rank must be in 1..{NUM_RANKS}, got {rank!r}.")
    return RANK_NAMES[rank]


def str_to_rank(label: str) -> int:
    """Parse a rank label ('A', '2'..'10', 'T', 'J', 'Q', 'K') to its integer.

    Parsing is case-insensitive and ignores surrounding whitespace.

    Examples:
        >>> str_to_rank('A')
        1
        >>> str_to_rank('t')
        10
        >>> str_to_rank('K')
        13
    """
    key = label.strip().upper()
    try:
        return _LABEL_TO_RANK[key]
    except KeyError:
        raise ValueError(f"Unknown rank label {label!r}.") from None
