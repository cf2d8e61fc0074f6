"""Pair side-bet probability.

P(pair) is the probability that the first two cards drawn from the shoe
share a rank (suits are ignored, so 10-J is not a pair but 10-10 is):

    P(pair) = Σ_rank  c/N × (c − 1)/(N − 1)     over ranks with c ≥ 2

The same figure is used for both Player Pair and Banker Pair. This treats
each side's two cards as "the first two cards of the shoe" rather than the
interleaved positions P1/P2 and B1/B2; on a shuffled shoe the marginal
probability is identical, but the two pair bets are not independent.
"""

from __future__ import annotations

from src.engine.shoe import ShoeComposition


def pair_probability(shoe: ShoeComposition) -> float:
    """Return P(the next two cards share a rank), or 0.0 if fewer than 2 remain.

    Examples:
        >>> from src.engine.shoe import ShoeComposition, create_shoe
        >>> round(pair_probability(create_shoe()), 6)   # 13 × 32·31 / (416·415)
        0.074699
        >>> pair_probability(ShoeComposition.from_mapping({7: 2}))
        1.0
    """
    total = shoe.total
    if total < 2:
        return 0.0

    prob = 0.0
    for c in shoe.counts:
        if c >= 2:
            prob += (c / total) * ((c - 1) / (total - 1))
    return prob
