"""Tests for src/solvers/pairs.py — pair side-bet probability."""

from __future__ import annotations

import pytest

from src.engine.shoe import ShoeComposition, create_shoe
from src.solvers.pairs import pair_probability
from tests.conftest import shoe_of


class TestBoundaries:
    def test_empty_shoe(self):
        assert pair_probability(ShoeComposition((0,) * 13)) == 0.0

    def test_single_card(self):
        assert pair_probability(shoe_of('K')) == 0.0

    def test_two_of_same_rank_is_certain(self):
        assert pair_probability(shoe_of('7', '7')) == 1.0

    def test_two_different_ranks_never_pair(self):
        assert pair_probability(shoe_of('7', '8')) == 0.0

    def test_same_value_different_rank_is_not_a_pair(self):
        # 10 and K are both worth 0 but are different ranks.
        assert pair_probability(shoe_of('10', 'K', 'Q', 'J')) == 0.0


class TestExactValues:
    def test_full_eight_deck_shoe(self):
        expected = 13 * (32 / 416) * (31 / 415)
        assert pair_probability(create_shoe()) == pytest.approx(expected, rel=1e-12)

    def test_single_deck(self):
        # 13 ranks × C(4,2) pairs / C(52,2) = 78 / 1326 = 1/17
        assert pair_probability(create_shoe(1)) == pytest.approx(1 / 17, rel=1e-12)

    def test_three_cards_two_matching(self):
        # AAK: P(first two share rank) = 2/3 × 1/2
        assert pair_probability(shoe_of('A', 'A', 'K')) == pytest.approx(1 / 3)

    def test_in_unit_interval(self):
        shoe = shoe_of('A', 'A', 'A', '2', '2', '9', 'Q', 'Q', 'Q', 'Q')
        assert 0.0 <= pair_probability(shoe) <= 1.0


class TestCompositionSensitivity:
    @pytest.mark.parametrize("per_rank", [2, 4, 16])
    def test_even_thinning_lowers_probability(self, per_rank):
        # k cards of each rank: 13·k(k−1) / (13k(13k−1)) = (k−1)/(13k−1)
        shoe = create_shoe()
        for rank in range(1, 14):
            shoe = shoe.adjust(rank, per_rank - 32)
        thinned = pair_probability(shoe)
        assert thinned == pytest.approx((per_rank - 1) / (13 * per_rank - 1), rel=1e-12)
        assert thinned < pair_probability(create_shoe())

    def test_concentrated_shoe_raises_probability(self):
        shoe = create_shoe()
        for rank in range(2, 14):
            shoe = shoe.adjust(rank, -24)
        assert pair_probability(shoe) > pair_probability(create_shoe())
