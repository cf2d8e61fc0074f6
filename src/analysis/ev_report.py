"""Text report for a Baccarat EV calculation.

Three public functions format shoe state and results into fixed-width
tables on stdout:

    print_shoe(shoe)                   — remaining cards by rank and value
    print_ev_report(result)            — main wagers and tie-point wagers
    print_full_report(shoe, payouts)   — compute + all tables + Kelly stakes

Usage (fresh 8-deck shoe minus the cards already seen):
    PYTHONPATH=. python -m src.analysis.ev_report 9 9 8 K Q 5
"""

from __future__ import annotations

from src.analysis.kelly import DEFAULT_BANKROLL, print_recommendations, recommend_stakes
from src.engine.cards import (
    CARDS_PER_RANK_PER_DECK,
    DECKS_PER_SHOE,
    NUM_RANKS,
    RANKS,
    rank_to_str,
)
from src.engine.payouts import DEFAULT_PAYOUTS, PayoutSchedule
from src.engine.shoe import ShoeComposition
from src.solvers.enumerator import MIN_CARDS_TO_DEAL
from src.solvers.ev import CalculationResult, EVResult, compute

# Full 8-deck shoe, standard payouts (exact enumeration).
_FULL_SHOE_BANKER: float = 0.4586
_FULL_SHOE_PLAYER: float = 0.4462
_FULL_SHOE_TIE: float = 0.0952
_FULL_SHOE_CARDS: int = DECKS_PER_SHOE * CARDS_PER_RANK_PER_DECK * NUM_RANKS


def _row(bet: EVResult) -> str:
    flag = "  +EV" if bet.ev > 0 else ""
    return (
        f"  {bet.label:<12}  {bet.probability:>9.6f}  {bet.payout:>7g}  "
        f"{bet.ev:>+8.4f}  ({bet.ev * 100:+6.2f}%){flag}"
    )


def print_shoe(shoe: ShoeComposition) -> None:
    """Print remaining counts per rank and the derived value histogram."""
    print("=" * 56)
    print(f"Shoe  ({shoe.total} cards remaining)")
    print("=" * 56)
    print("  " + "  ".join(f"{rank_to_str(r):>3}" for r in RANKS))
    print("  " + "  ".join(f"{shoe.count(r):>3}" for r in RANKS))
    hist = shoe.value_histogram()
    print()
    print("  Value  " + "  ".join(f"{v:>3}" for v in range(len(hist))))
    print("  Count  " + "  ".join(f"{int(c):>3}" for c in hist))
    print()


def print_ev_report(result: CalculationResult) -> None:
    """Print probability, payout and EV for every wager.

    Args:
        result: CalculationResult returned by ev.compute().
    """
    header = f"  {'Bet':<12}  {'Prob':>9}  {'Payout':>7}  {'EV':>8}"
    divider = f"  {'---':<12}  {'----':>9}  {'------':>7}  {'--':>8}"

    print("=" * 56)
    print("Main Bets")
    print("=" * 56)
    print(header)
    print(divider)
    for bet in result.main_bets:
        print(_row(bet))
    print()

    print("=" * 56)
    print("Tie Point Bets")
    print("=" * 56)
    print(header)
    print(divider)
    for bet in result.tie_bonuses:
        print(_row(bet))
    print()

    if result.total_cards < MIN_CARDS_TO_DEAL:
        print(f"  Only {result.total_cards} cards remain: too few to deal a coup.")
        print()
        return

    if result.total_cards == _FULL_SHOE_CARDS:
        print("  Fresh 8-deck shoe baseline:")
    else:
        print("  Fixed baseline, fresh 8-deck shoe (not the shoe above):")
    print(
        f"    Banker {_FULL_SHOE_BANKER:.4f}  Player {_FULL_SHOE_PLAYER:.4f}  "
        f"Tie {_FULL_SHOE_TIE:.4f}"
    )
    print()


def print_full_report(
    shoe: ShoeComposition,
    payouts: PayoutSchedule = DEFAULT_PAYOUTS,
    bankroll: float = DEFAULT_BANKROLL,
) -> CalculationResult:
    """Compute EVs for ``shoe`` and print shoe, EV and stake tables.

    Returns:
        The CalculationResult that was printed.
    """
    result = compute(shoe, payouts)
    print_shoe(shoe)
    print_ev_report(result)
    print_recommendations(recommend_stakes(result, bankroll), bankroll)
    return result


# ─── __main__ ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import sys

    from src.engine.shoe import shoe_from_dealt

    print_full_report(shoe_from_dealt(sys.argv[1:]))
