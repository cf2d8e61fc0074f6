"""
Payout schedule for every Baccarat wager.

Payouts are quoted "to one" (net profit per unit staked): 0.95 on Banker
means a winning 1-unit Banker bet profits 0.95 after commission. Negative
payouts are accepted as-is and simply produce negative EVs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from .cards import NUM_VALUES


@dataclass(frozen=True)
class PayoutSchedule:
    """Immutable payout table supplied with every calculation.

    Attributes:
        banker:      Banker win payout (typically < 1.0 to encode commission).
        player:      Player win payout.
        tie:         Tie payout.
        player_pair: Player Pair payout.
        banker_pair: Banker Pair payout.
        tie_bonus:   10-tuple; tie_bonus[i] pays a tie at point i.
    """

    banker: float
    player: float
    tie: float
    player_pair: float
    banker_pair: float
    tie_bonus: tuple[float, ...]

    def __post_init__(self) -> None:
        bonus = tuple(float(x) for x in self.tie_bonus)
        if len(bonus) != NUM_VALUES:
            raise ValueError(f"tie_bonus needs {NUM_VALUES} entries, got {len(bonus)}.")
        object.__setattr__(self, "tie_bonus", bonus)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PayoutSchedule:
        """Build a schedule from a dict using snake_case or camelCase keys.

        ``tieBonus`` / ``tie_bonus`` may be a sequence of 10 values or a
        {point: payout} mapping with int or numeric-string keys; points
        absent from a mapping pay 0, and points outside 0..9 raise ValueError.

        Examples:
            >>> s = PayoutSchedule.from_mapping({
            ...     'banker': 0.95, 'player': 1, 'tie': 8,
            ...     'playerPair': 11, 'bankerPair': 11, 'tieBonus': {0: 140},
            ... })
            >>> s.tie_bonus[0], s.tie_bonus[9]
            (140.0, 0.0)
        """

        def pick(snake: str, camel: str) -> Any:
            if snake in data:
                return data[snake]
            return data[camel]

        bonus = pick("tie_bonus", "tieBonus")
        if isinstance(bonus, Mapping):
            # JSON objects arrive with string keys ("0".."9").
            by_point = {int(k): v for k, v in bonus.items()}
            stray = sorted(k for k in by_point if not 0 <= k < NUM_VALUES)
            if stray:
                raise ValueError(f"Tie points must be in 0..9, got {stray}.")
            bonus = tuple(by_point.get(i, 0.0) for i in range(NUM_VALUES))

        return cls(
            banker=float(data["banker"]),
            player=float(data["player"]),
            tie=float(data["tie"]),
            player_pair=float(pick("player_pair", "playerPair")),
            banker_pair=float(pick("banker_pair", "bankerPair")),
            tie_bonus=tuple(bonus),
        )

    def with_tie_bonus(self, point: int, payout: float) -> PayoutSchedule:
        """Return a copy with the tie-bonus payout for ``point`` replaced."""
        if not 0 <= point < NUM_VALUES:
            raise ValueError(f"Tie point must be in 0..9, got {point}.")
        bonus = list(self.tie_bonus)
        bonus[point] = float(payout)
        return replace(self, tie_bonus=tuple(bonus))


DEFAULT_PAYOUTS: PayoutSchedule = PayoutSchedule(
    banker=0.95,  # 5% commission
    player=1.0,
    tie=8.0,
    player_pair=11.0,
    banker_pair=11.0,
    tie_bonus=(140.0, 200.0, 210.0, 190.0, 110.0, 100.0, 40.0, 40.0, 70.0, 70.0),
)
