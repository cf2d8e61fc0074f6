"""Kelly stake sizing and positive-EV bet selection.

For a wager paying ``b`` to one with expected profit ``ev`` per unit, the
Kelly-optimal fraction of bankroll is approximated as

    f = ev / b          (ev > 0 and b > 0, otherwise 0)

which is exact for a two-outcome bet (win b / lose 1) and a close
approximation for Player/Banker where ties push.

Usage (standalone report for a fresh 8-deck shoe):
    PYTHONPATH=. python -m src.analysis.kelly 100000
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.solvers.ev import CalculationResult, EVResult

DEFAULT_BANKROLL: float = 100_000.0


@dataclass(frozen=True)
class StakeRecommendation:
    """A positive-EV wager and the Kelly stake for it.

    Attributes:
        bet:      The wager's EVResult.
        fraction: Kelly fraction of bankroll (0 when the bet is not +EV).
        stake:    floor(bankroll × fraction), in bankroll units.
    """

    bet: EVResult
    fraction: float
    stake: int


def kelly_fraction(bet: EVResult) -> float:
    """Return the Kelly fraction ev / payout, or 0.0 for non-positive EV or payout.

    Examples:
        >>> round(kelly_fraction(EVResult('Tie 2', 0.006, 210.0, 0.266)), 6)
        0.001267
        >>> kelly_fraction(EVResult('Banker', 0.4586, 0.95, -0.0106))
        0.0
    """
    if bet.ev <= 0 or bet.payout <= 0:
        return 0.0
    return bet.ev / bet.payout


def kelly_bet(bet: EVResult, bankroll: float = DEFAULT_BANKROLL) -> int:
    """Return the whole-unit Kelly stake for ``bet`` given ``bankroll``."""
    return int(math.floor(bankroll * kelly_fraction(bet)))


def positive_ev_bets(result: CalculationResult) -> list[EVResult]:
    """Return every wager with EV > 0, best EV first.

    Covers the five main wagers and all ten tie-point wagers. Ties in EV keep
    their table order (Player, Banker, Tie, pairs, then tie points 0–9).
    """
    return sorted(
        (bet for bet in result.all_bets if bet.ev > 0),
        key=lambda bet: bet.ev,
        reverse=True,
    )


def recommend_stakes(
    result: CalculationResult,
    bankroll: float = DEFAULT_BANKROLL,
) -> list[StakeRecommendation]:
    """Kelly stake for each positive-EV wager, best EV first."""
    return [
        StakeRecommendation(bet=bet, fraction=kelly_fraction(bet), stake=kelly_bet(bet, bankroll))
        for bet in positive_ev_bets(result)
    ]


def print_recommendations(recs: list[StakeRecommendation], bankroll: float) -> None:
    """Print the recommended stakes as a fixed-width table."""
    print("=" * 56)
    print(f"Positive-EV Bets  (bankroll {bankroll:,.0f})")
    print("=" * 56)
    if not recs:
        print("  No positive-EV bets in this shoe.")
        print()
        return
    print(f"  {'Bet':<12}  {'EV':>8}  {'Payout':>7}  {'Kelly f':>8}  {'Stake':>9}")
    print(f"  {'---':<12}  {'--':>8}  {'------':>7}  {'-------':>8}  {'-----':>9}")
    for rec in recs:
        print(
            f"  {rec.bet.label:<12}  {rec.bet.ev:>+8.4f}  {rec.bet.payout:>7g}  "
            f"{rec.fraction:>8.5f}  {rec.stake:>9,d}"
        )
    print()


# ─── __main__ ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import sys

    from src.engine.payouts import DEFAULT_PAYOUTS
    from src.engine.shoe import create_shoe
    from src.solvers.ev import compute

    bankroll = float(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_BANKROLL
    result = compute(create_shoe(), DEFAULT_PAYOUTS)
    print_recommendations(recommend_stakes(result, bankroll), bankroll)
