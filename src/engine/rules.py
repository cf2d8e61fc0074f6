"""
Baccarat drawing rules and hand settlement (Punto Banco tableau).

Deal order: Player1, Banker1, Player2, Banker2, then at most one third card
each for Player and Banker.

Drawing rules, applied in order:
    1. Natural: either two-card point is 8 or 9 → both hands stand.
    2. Player draws on 0–5, stands on 6–7.
    3. Player stood → Banker draws on 0–5, stands on 6–7.
    4. Player drew → Banker acts on its point and the player's third card:

        Banker point | Banker draws when player's third card is
        -------------|-----------------------------------------
        0, 1, 2      | anything
        3            | anything but 8
        4            | 2–7
        5            | 4–7
        6            | 6–7
        7            | never

Settlement: higher point wins; equal points tie (at that shared point).
"""

from __future__ import annotations

from enum import Enum, auto

import numpy as np

from .cards import NUM_VALUES


class Outcome(Enum):
    PLAYER = auto()
    BANKER = auto()
    TIE = auto()


# Column of BANKER_DRAW_TABLE used when the player stood (no third card).
PLAYER_STOOD: int = NUM_VALUES


def hand_point(*values: int) -> int:
    """Return the Baccarat point of a hand: sum of card values mod 10.

    Examples:
        >>> hand_point(7, 6)
        3
        >>> hand_point(9, 0)
        9
    """
    return sum(values) % 10


def is_natural(point: int) -> bool:
    """Return True if a two-card point is a natural (8 or 9)."""
    return point >= 8


def player_draws(player_point: int) -> bool:
    """Return True if the Player draws a third card on this two-card point."""
    return player_point <= 5


def banker_draws(banker_point: int, player_third: int | None) -> bool:
    """Return True if the Banker draws a third card.

    Args:
        banker_point: Banker's two-card point (0–7; naturals never reach here).
        player_third: Value (0–9) of the Player's third card, or None if the
                      Player stood.

    Examples:
        >>> banker_draws(3, 8)
        False
        >>> banker_draws(6, 7)
        True
        >>> banker_draws(5, None)
        True
    """
    if banker_point >= 7:
        return False
    if player_third is None:
        return banker_point <= 5
    if banker_point <= 2:
        return True
    if banker_point == 3:
        return player_third != 8
    if banker_point == 4:
        return 2 <= player_third <= 7
    if banker_point == 5:
        return 4 <= player_third <= 7
    # banker_point == 6
    return player_third in (6, 7)


def build_banker_draw_table() -> np.ndarray:
    """Precompute banker_draws() as a (10, 11) bool lookup table.

    Row = Banker two-card point, column = Player third-card value, with
    column PLAYER_STOOD (10) for "Player stood". Rows 8 and 9 are all False.
    """
    table = np.zeros((NUM_VALUES, NUM_VALUES + 1), dtype=np.bool_)
    for b in range(NUM_VALUES):
        if is_natural(b):
            continue
        for p3 in range(NUM_VALUES):
            table[b, p3] = banker_draws(b, p3)
        table[b, PLAYER_STOOD] = banker_draws(b, None)
    return table


BANKER_DRAW_TABLE: np.ndarray = build_banker_draw_table()


def settle(player_point: int, banker_point: int) -> Outcome:
    """Return the winner of a completed coup.

    Examples:
        >>> settle(7, 5)
        <Outcome.PLAYER: 1>
        >>> settle(4, 4)
        <Outcome.TIE: 3>
    """
    if player_point > banker_point:
        return Outcome.PLAYER
    if banker_point > player_point:
        return Outcome.BANKER
    return Outcome.TIE
