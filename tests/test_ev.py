"""Tests for src/solvers/ev.py — EV projection and the compute() entry point."""

from __future__ import annotations

import dataclasses

import pytest

from src.engine.payouts import DEFAULT_PAYOUTS, PayoutSchedule
from src.engine.shoe import create_shoe
from src.solvers.enumerator import OutcomeProbabilities
from src.solvers.ev import (
    LABEL_BANKER,
    LABEL_BANKER_PAIR,
    LABEL_PLAYER,
    LABEL_PLAYER_PAIR,
    LABEL_TIE,
    CalculationResult,
    EVResult,
    compute,
    project,
    tie_point_label,
)
from tests.conftest import shoe_of

TOL = 1e-9

_PROBS = OutcomeProbabilities(
    player=0.45,
    banker=0.46,
    tie=0.09,
    tie_points=(0.01, 0.005, 0.005, 0.01, 0.01, 0.01, 0.015, 0.015, 0.005, 0.005),
)


# ─── project() ────────────────────────────────────────────────────────────────


class TestProject:
    @pytest.fixture
    def result(self) -> CalculationResult:
        return project(_PROBS, 0.07, DEFAULT_PAYOUTS, total_cards=300)

    def test_player_ev_tie_pushes(self, result):
        assert result.player.ev == pytest.approx(0.45 * 1.0 - 0.46)

    def test_banker_ev_with_commission(self, result):
        assert result.banker.ev == pytest.approx(0.46 * 0.95 - 0.45)

    def test_tie_ev(self, result):
        assert result.tie.ev == pytest.approx(0.09 * 9.0 - 1)

    def test_pair_evs_share_probability(self, result):
        assert result.player_pair.probability == result.banker_pair.probability == 0.07
        assert result.player_pair.ev == pytest.approx(0.07 * 12.0 - 1)
        assert result.banker_pair.ev == pytest.approx(0.07 * 12.0 - 1)

    def test_tie_bonuses_ordered_by_point(self, result):
        assert len(result.tie_bonuses) == 10
        for i, bet in enumerate(result.tie_bonuses):
            assert bet.label == tie_point_label(i)
            assert bet.probability == _PROBS.tie_points[i]
            assert bet.payout == DEFAULT_PAYOUTS.tie_bonus[i]
            assert bet.ev == pytest.approx(
                _PROBS.tie_points[i] * (DEFAULT_PAYOUTS.tie_bonus[i] + 1) - 1
            )

    def test_labels(self, result):
        assert [b.label for b in result.main_bets] == [
            LABEL_PLAYER,
            LABEL_BANKER,
            LABEL_TIE,
            LABEL_PLAYER_PAIR,
            LABEL_BANKER_PAIR,
        ]

    def test_payouts_reported(self, result):
        assert result.banker.payout == 0.95
        assert result.tie.payout == 8.0

    def test_total_cards_passed_through(self, result):
        assert result.total_cards == 300

    def test_all_bets_has_fifteen_entries(self, result):
        assert len(result.all_bets) == 15
        assert result.all_bets[5:] == result.tie_bonuses

    def test_negative_payouts_accepted(self):
        payouts = PayoutSchedule(-1.0, -1.0, -1.0, -1.0, -1.0, (-1.0,) * 10)
        result = project(_PROBS, 0.07, payouts, total_cards=300)
        assert result.tie.ev == pytest.approx(-1.0)
        assert result.player.ev == pytest.approx(-0.45 - 0.46)


# ─── compute() on the full shoe ───────────────────────────────────────────────


class TestComputeFullShoe:
    def test_total_cards(self, full_shoe_result):
        assert full_shoe_result.total_cards == 416

    def test_banker_ev(self, full_shoe_result):
        assert full_shoe_result.banker.ev == pytest.approx(-0.0106, abs=2e-4)

    def test_player_ev(self, full_shoe_result):
        assert full_shoe_result.player.ev == pytest.approx(-0.0124, abs=2e-4)

    def test_tie_ev(self, full_shoe_result):
        assert full_shoe_result.tie.ev == pytest.approx(-0.1436, abs=2e-4)

    def test_house_edge_on_all_main_bets(self, full_shoe_result):
        assert full_shoe_result.banker.ev < 0
        assert full_shoe_result.player.ev < 0
        assert full_shoe_result.tie.ev < 0

    def test_banker_is_best_main_bet(self, full_shoe_result):
        r = full_shoe_result
        assert r.banker.ev > r.player.ev > r.tie.ev

    def test_probability_conservation(self, full_shoe_result):
        r = full_shoe_result
        assert r.player.probability + r.banker.probability + r.tie.probability == pytest.approx(
            1.0, abs=TOL
        )

    def test_tie_point_conservation(self, full_shoe_result):
        total = sum(b.probability for b in full_shoe_result.tie_bonuses)
        assert total == pytest.approx(full_shoe_result.tie.probability, abs=TOL)

    def test_pair_probability(self, full_shoe_result):
        expected = 13 * (32 / 416) * (31 / 415)
        assert full_shoe_result.player_pair.probability == pytest.approx(expected)
        assert full_shoe_result.player_pair.ev == pytest.approx(expected * 12 - 1)

    def test_result_is_frozen(self, full_shoe_result):
        with pytest.raises(dataclasses.FrozenInstanceError):
            full_shoe_result.total_cards = 0  # type: ignore[misc]


class TestComputeInputs:
    def test_accepts_mappings(self):
        shoe = shoe_of('A', '2', '3', '4', '5', '6', '7', '8')
        payouts = {
            "banker": 0.95,
            "player": 1.0,
            "tie": 8.0,
            "playerPair": 11.0,
            "bankerPair": 11.0,
            "tieBonus": dict(enumerate(DEFAULT_PAYOUTS.tie_bonus)),
        }
        assert compute(shoe.as_dict(), payouts) == compute(shoe, DEFAULT_PAYOUTS)

    def test_idempotent(self):
        shoe = create_shoe().adjust(9, -20).adjust(1, -5)
        assert compute(shoe, DEFAULT_PAYOUTS) == compute(shoe, DEFAULT_PAYOUTS)

    def test_python_backend_matches(self):
        shoe = shoe_of('A', 'A', '3', '4', '6', '7', '9', 'K', 'Q', '2')
        a = compute(shoe, DEFAULT_PAYOUTS)
        b = compute(shoe, DEFAULT_PAYOUTS, use_numba=False)
        for x, y in zip(a.all_bets, b.all_bets):
            assert x.ev == pytest.approx(y.ev, abs=1e-12)


# ─── Degenerate shoe ──────────────────────────────────────────────────────────


class TestDegenerateShoe:
    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_all_zero(self, n):
        result = compute(shoe_of(*['7'] * n), DEFAULT_PAYOUTS)
        assert result.total_cards == n
        for bet in result.all_bets:
            assert bet.probability == 0.0
            assert bet.ev == 0.0

    def test_pair_zero_even_with_pairable_cards(self):
        # Five sevens would pair with certainty, but no coup can be dealt.
        result = compute(shoe_of(*['7'] * 5), DEFAULT_PAYOUTS)
        assert result.player_pair.probability == 0.0

    def test_tie_bonuses_keep_configured_payouts(self):
        result = compute(shoe_of('A', 'K'), DEFAULT_PAYOUTS)
        assert len(result.tie_bonuses) == 10
        assert [b.payout for b in result.tie_bonuses] == list(DEFAULT_PAYOUTS.tie_bonus)
        assert [b.label for b in result.tie_bonuses] == [tie_point_label(i) for i in range(10)]

    def test_main_bets_keep_configured_payouts(self):
        result = compute(shoe_of('A', 'K'), DEFAULT_PAYOUTS)
        assert result.banker.payout == 0.95
        assert result.player_pair.payout == 11.0


class TestEVResult:
    def test_fields(self):
        bet = EVResult(label="Tie", probability=0.1, payout=8.0, ev=-0.1)
        assert dataclasses.astuple(bet) == ("Tie", 0.1, 8.0, -0.1)
