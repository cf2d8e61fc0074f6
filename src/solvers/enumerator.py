"""Exact outcome enumerator for a single Baccarat coup.

Walks every ordered sequence of card *values* (0–9) that can be dealt from
the current shoe — Player1, Banker1, Player2, Banker2 and up to one third
card each — applying the Punto Banco tableau from src.engine.rules. Each
path is weighted by its exact without-replacement probability:

    P(path) = Π  count[v_k] / (total − k)      k = 0 .. cards_dealt − 1

where count[] is a scratch copy of the value histogram, decremented when a
card is drawn and restored once its subtree is exhausted. Empty buckets are
pruned before any division, which also guarantees the divisor is ≥ 1.

Cost is bounded by the rules, not the shoe: at most 10^4 initial deals, each
expanding into at most 10^2 third-card leaves.

Two backends share the same loop order and arithmetic:

    Numba JIT kernel   (default)          — ~1e6 leaves in milliseconds
    Pure-Python walk   (use_numba=False)  — reference implementation

Accumulator layout (float64[13], owned by one call):
    [0] Player win   [1] Banker win   [2] Tie   [3 + p] Tie at point p
"""

from __future__ import annotations

from dataclasses import dataclass

import numba
import numpy as np

from src.engine.cards import NUM_VALUES
from src.engine.rules import BANKER_DRAW_TABLE, PLAYER_STOOD

# Two two-card hands plus two third cards.
MIN_CARDS_TO_DEAL: int = 6

_ACC_PLAYER: int = 0
_ACC_BANKER: int = 1
_ACC_TIE: int = 2
_ACC_TIE_POINTS: int = 3
_ACC_SIZE: int = _ACC_TIE_POINTS + NUM_VALUES


# ─── Result type ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class OutcomeProbabilities:
    """Exact outcome distribution for the next coup.

    Attributes:
        player:     P(Player wins).
        banker:     P(Banker wins).
        tie:        P(Tie).
        tie_points: 10-tuple; tie_points[p] = P(Tie with both hands on p).
                    Sums to ``tie``.
    """

    player: float
    banker: float
    tie: float
    tie_points: tuple[float, ...]

    @property
    def total(self) -> float:
        """player + banker + tie; 1.0 for any dealable shoe, 0.0 otherwise."""
        return self.player + self.banker + self.tie

    @classmethod
    def zero(cls) -> OutcomeProbabilities:
        return cls(0.0, 0.0, 0.0, (0.0,) * NUM_VALUES)

    @classmethod
    def _from_accumulator(cls, acc: np.ndarray) -> OutcomeProbabilities:
        return cls(
            player=float(acc[_ACC_PLAYER]),
            banker=float(acc[_ACC_BANKER]),
            tie=float(acc[_ACC_TIE]),
            tie_points=tuple(float(x) for x in acc[_ACC_TIE_POINTS:]),
        )


# ─── Pure-Python reference walk ───────────────────────────────────────────────


def _tally(acc: list[float], p: int, b: int, prob: float) -> None:
    """Credit a finished coup (Player point p, Banker point b) with prob."""
    if p > b:
        acc[_ACC_PLAYER] += prob
    elif b > p:
        acc[_ACC_BANKER] += prob
    else:
        acc[_ACC_TIE] += prob
        acc[_ACC_TIE_POINTS + p] += prob


def _banker_third_card(
    counts: list[int],
    remaining: int,
    p_final: int,
    b_init: int,
    prob: float,
    acc: list[float],
) -> None:
    """Expand the Banker's third card. Leaf level: the scratch is not touched."""
    for b3 in range(NUM_VALUES):
        c = counts[b3]
        if c <= 0:
            continue
        _tally(acc, p_final, (b_init + b3) % 10, prob * (c / remaining))


def _enumerate_python(counts: list[int], total: int, draw: list[list[bool]]) -> list[float]:
    """Reference implementation of the enumeration (mutates then restores counts)."""
    acc = [0.0] * _ACC_SIZE

    for p1 in range(NUM_VALUES):
        c = counts[p1]
        if c <= 0:
            continue
        prob1 = c / total
        counts[p1] -= 1

        for b1 in range(NUM_VALUES):
            c = counts[b1]
            if c <= 0:
                continue
            prob2 = prob1 * (c / (total - 1))
            counts[b1] -= 1

            for p2 in range(NUM_VALUES):
                c = counts[p2]
                if c <= 0:
                    continue
                prob3 = prob2 * (c / (total - 2))
                counts[p2] -= 1

                for b2 in range(NUM_VALUES):
                    c = counts[b2]
                    if c <= 0:
                        continue
                    prob4 = prob3 * (c / (total - 3))
                    counts[b2] -= 1

                    p_init = (p1 + p2) % 10
                    b_init = (b1 + b2) % 10

                    if p_init >= 8 or b_init >= 8:
                        _tally(acc, p_init, b_init, prob4)
                    elif p_init <= 5:
                        for p3 in range(NUM_VALUES):
                            c = counts[p3]
                            if c <= 0:
                                continue
                            prob5 = prob4 * (c / (total - 4))
                            counts[p3] -= 1
                            p_final = (p_init + p3) % 10
                            if draw[b_init][p3]:
                                _banker_third_card(counts, total - 5, p_final, b_init, prob5, acc)
                            else:
                                _tally(acc, p_final, b_init, prob5)
                            counts[p3] += 1
                    elif draw[b_init][PLAYER_STOOD]:
                        _banker_third_card(counts, total - 4, p_init, b_init, prob4, acc)
                    else:
                        _tally(acc, p_init, b_init, prob4)

                    counts[b2] += 1
                counts[p2] += 1
            counts[b1] += 1
        counts[p1] += 1

    return acc


# ─── Numba JIT kernel ─────────────────────────────────────────────────────────
# Mirrors _enumerate_python line for line so both backends sum the same
# products in the same order.


@numba.njit(cache=True)
def _nb_tally(acc, p, b, prob):
    if p > b:
        acc[0] += prob
    elif b > p:
        acc[1] += prob
    else:
        acc[2] += prob
        acc[3 + p] += prob


@numba.njit(cache=True)
def _nb_banker_third_card(counts, remaining, p_final, b_init, prob, acc):
    for b3 in range(10):
        c = counts[b3]
        if c <= 0:
            continue
        _nb_tally(acc, p_final, (b_init + b3) % 10, prob * (c / remaining))


@numba.njit(cache=True)
def _nb_enumerate(
    counts,  # int64[10]      — scratch histogram, restored on return
    total,  # int64
    draw,  # bool[10, 11]    — BANKER_DRAW_TABLE
    acc,  # float64[13]     — accumulators, updated in-place
):
    stood = 10  # == PLAYER_STOOD

    for p1 in range(10):
        c = counts[p1]
        if c <= 0:
            continue
        prob1 = c / total
        counts[p1] -= 1

        for b1 in range(10):
            c = counts[b1]
            if c <= 0:
                continue
            prob2 = prob1 * (c / (total - 1))
            counts[b1] -= 1

            for p2 in range(10):
                c = counts[p2]
                if c <= 0:
                    continue
                prob3 = prob2 * (c / (total - 2))
                counts[p2] -= 1

                for b2 in range(10):
                    c = counts[b2]
                    if c <= 0:
                        continue
                    prob4 = prob3 * (c / (total - 3))
                    counts[b2] -= 1

                    p_init = (p1 + p2) % 10
                    b_init = (b1 + b2) % 10

                    if p_init >= 8 or b_init >= 8:
                        _nb_tally(acc, p_init, b_init, prob4)
                    elif p_init <= 5:
                        for p3 in range(10):
                            c = counts[p3]
                            if c <= 0:
                                continue
                            prob5 = prob4 * (c / (total - 4))
                            counts[p3] -= 1
                            p_final = (p_init + p3) % 10
                            if draw[b_init, p3]:
                                _nb_banker_third_card(counts, total - 5, p_final, b_init, prob5, acc)
                            else:
                                _nb_tally(acc, p_final, b_init, prob5)
                            counts[p3] += 1
                    elif draw[b_init, stood]:
                        _nb_banker_third_card(counts, total - 4, p_init, b_init, prob4, acc)
                    else:
                        _nb_tally(acc, p_init, b_init, prob4)

                    counts[b2] += 1
                counts[p2] += 1
            counts[b1] += 1
        counts[p1] += 1


# ─── Public API ───────────────────────────────────────────────────────────────


def enumerate_outcomes(
    histogram: np.ndarray,
    total_cards: int,
    use_numba: bool = True,
) -> OutcomeProbabilities:
    """Compute the exact Player / Banker / Tie distribution for the next coup.

    Args:
        histogram:   Length-10 sequence of remaining cards per point value.
                     Never modified; enumeration runs on a private copy.
        total_cards: Number of cards remaining (sum of the histogram).
        use_numba:   Run the JIT kernel (default) or the pure-Python walk.

    Returns:
        OutcomeProbabilities. All zeros when fewer than 6 cards remain,
        since a full coup cannot be guaranteed.

    Examples:
        >>> from src.engine.shoe import create_shoe
        >>> shoe = create_shoe()
        >>> probs = enumerate_outcomes(shoe.value_histogram(), shoe.total)
        >>> round(probs.banker, 4), round(probs.player, 4), round(probs.tie, 4)
        (0.4586, 0.4462, 0.0952)
    """
    if total_cards < MIN_CARDS_TO_DEAL:
        return OutcomeProbabilities.zero()

    counts = np.array(histogram, dtype=np.int64)
    if counts.shape != (NUM_VALUES,):
        raise ValueError(f"Histogram must have {NUM_VALUES} buckets, got shape {counts.shape}.")

    if use_numba:
        acc = np.zeros(_ACC_SIZE, dtype=np.float64)
        _nb_enumerate(counts, int(total_cards), BANKER_DRAW_TABLE, acc)
    else:
        acc = np.array(
            _enumerate_python(counts.tolist(), int(total_cards), BANKER_DRAW_TABLE.tolist())
        )

    return OutcomeProbabilities._from_accumulator(acc)
