"""Expected-value projection for every Baccarat wager.

Combines the exact outcome distribution (enumerator) and the pair
probability with a payout schedule. All EVs are per 1-unit stake, from the
bettor's perspective (positive = bettor advantage):

    Player      P(player) × payout_player − P(banker)        (tie pushes)
    Banker      P(banker) × payout_banker − P(player)        (tie pushes)
    Tie         P(tie) × (payout_tie + 1) − 1
    Pair        P(pair) × (payout_pair + 1) − 1
    Tie at p    P(tie at p) × (payout_tie_bonus[p] + 1) − 1

compute() is the single entry point used by callers: it snapshots nothing,
holds no state, and returns a fresh immutable CalculationResult per call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from src.engine.cards import NUM_VALUES
from src.engine.payouts import PayoutSchedule
from src.engine.shoe import ShoeComposition
from src.solvers.enumerator import MIN_CARDS_TO_DEAL, OutcomeProbabilities, enumerate_outcomes
from src.solvers.pairs import pair_probability

LABEL_PLAYER: str = "Player"
LABEL_BANKER: str = "Banker"
LABEL_TIE: str = "Tie"
LABEL_PLAYER_PAIR: str = "Player Pair"
LABEL_BANKER_PAIR: str = "Banker Pair"


def tie_point_label(point: int) -> str:
    return f"Tie {point}"


# ─── Result types ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class EVResult:
    """One wager's probability and expected value.

    Attributes:
        label:       Display name of the wager.
        probability: Probability the wager wins (0.0–1.0).
        payout:      Payout multiplier used ("to one").
        ev:          Expected profit per unit staked.
    """

    label: str
    probability: float
    payout: float
    ev: float


@dataclass(frozen=True)
class CalculationResult:
    """Full EV table for one shoe snapshot and payout schedule.

    Attributes:
        player, banker, tie, player_pair, banker_pair: Main wagers.
        tie_bonuses: 10 EVResults ordered by tie point 0–9.
        total_cards: Cards remaining in the shoe.
    """

    player: EVResult
    banker: EVResult
    tie: EVResult
    player_pair: EVResult
    banker_pair: EVResult
    tie_bonuses: tuple[EVResult, ...]
    total_cards: int

    @property
    def main_bets(self) -> tuple[EVResult, ...]:
        return (self.player, self.banker, self.tie, self.player_pair, self.banker_pair)

    @property
    def all_bets(self) -> tuple[EVResult, ...]:
        """Main wagers followed by the ten tie-point wagers."""
        return self.main_bets + self.tie_bonuses


# ─── Projection ───────────────────────────────────────────────────────────────


def project(
    probabilities: OutcomeProbabilities,
    pair_prob: float,
    payouts: PayoutSchedule,
    total_cards: int,
) -> CalculationResult:
    """Turn raw probabilities into per-wager EVs. Pure; never raises."""
    pw = probabilities.player
    bw = probabilities.banker

    tie_bonuses = tuple(
        EVResult(
            label=tie_point_label(i),
            probability=probabilities.tie_points[i],
            payout=payouts.tie_bonus[i],
            ev=probabilities.tie_points[i] * (payouts.tie_bonus[i] + 1) - 1,
        )
        for i in range(NUM_VALUES)
    )

    return CalculationResult(
        player=EVResult(LABEL_PLAYER, pw, payouts.player, pw * payouts.player - bw),
        banker=EVResult(LABEL_BANKER, bw, payouts.banker, bw * payouts.banker - pw),
        tie=EVResult(
            LABEL_TIE,
            probabilities.tie,
            payouts.tie,
            probabilities.tie * (payouts.tie + 1) - 1,
        ),
        player_pair=EVResult(
            LABEL_PLAYER_PAIR,
            pair_prob,
            payouts.player_pair,
            pair_prob * (payouts.player_pair + 1) - 1,
        ),
        banker_pair=EVResult(
            LABEL_BANKER_PAIR,
            pair_prob,
            payouts.banker_pair,
            pair_prob * (payouts.banker_pair + 1) - 1,
        ),
        tie_bonuses=tie_bonuses,
        total_cards=total_cards,
    )


def _degenerate_result(payouts: PayoutSchedule, total_cards: int) -> CalculationResult:
    """All-zero table for a shoe too small to deal a full coup."""

    def zero(label: str, payout: float) -> EVResult:
        return EVResult(label=label, probability=0.0, payout=payout, ev=0.0)

    return CalculationResult(
        player=zero(LABEL_PLAYER, payouts.player),
        banker=zero(LABEL_BANKER, payouts.banker),
        tie=zero(LABEL_TIE, payouts.tie),
        player_pair=zero(LABEL_PLAYER_PAIR, payouts.player_pair),
        banker_pair=zero(LABEL_BANKER_PAIR, payouts.banker_pair),
        tie_bonuses=tuple(zero(tie_point_label(i), payouts.tie_bonus[i]) for i in range(NUM_VALUES)),
        total_cards=total_cards,
    )


def compute(
    shoe: ShoeComposition | Mapping[int, int],
    payouts: PayoutSchedule | Mapping,
    use_numba: bool = True,
) -> CalculationResult:
    """Compute probabilities and EVs for every wager on the next coup.

    Args:
        shoe:      ShoeComposition, or a {rank 1–13: count} mapping.
        payouts:   PayoutSchedule, or a mapping accepted by
                   PayoutSchedule.from_mapping.
        use_numba: Passed through to enumerate_outcomes().

    Returns:
        CalculationResult. When fewer than 6 cards remain every probability
        and EV is exactly 0 (payouts are still reported).

    Examples:
        >>> from src.engine.payouts import DEFAULT_PAYOUTS
        >>> from src.engine.shoe import create_shoe
        >>> result = compute(create_shoe(), DEFAULT_PAYOUTS)
        >>> result.total_cards
        416
        >>> result.banker.ev < 0 and result.player.ev < 0
        True
    """
    if not isinstance(shoe, ShoeComposition):
        shoe = ShoeComposition.from_mapping(shoe)
    if not isinstance(payouts, PayoutSchedule):
        payouts = PayoutSchedule.from_mapping(payouts)

    total = shoe.total
    if total < MIN_CARDS_TO_DEAL:
        return _degenerate_result(payouts, total)

    probabilities = enumerate_outcomes(shoe.value_histogram(), total, use_numba=use_numba)
    return project(probabilities, pair_probability(shoe), payouts, total)
