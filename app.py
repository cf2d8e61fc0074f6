"""Baccarat Exact EV Calculator — Streamlit Dashboard.

Edit the remaining shoe and the payout schedule; every change reruns the
exact enumeration and refreshes:
  Tab 1 — Main Bets        (Player / Banker / Tie / pairs)
  Tab 2 — Tie Point Bets   (tie at 0–9)
  Tab 3 — Recommendations  (positive-EV bets with Kelly stakes)

Run:
    PYTHONPATH=. streamlit run app.py
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.analysis.kelly import DEFAULT_BANKROLL, recommend_stakes
from src.analysis.plotly_charts import build_ev_figure, build_tie_point_figure
from src.engine.cards import DECKS_PER_SHOE, CARDS_PER_RANK_PER_DECK, RANKS, rank_to_str
from src.engine.payouts import DEFAULT_PAYOUTS, PayoutSchedule
from src.engine.shoe import ShoeComposition
from src.solvers.enumerator import MIN_CARDS_TO_DEAL
from src.solvers.ev import EVResult, compute

_FULL_COUNT: int = DECKS_PER_SHOE * CARDS_PER_RANK_PER_DECK

# ─── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Baccarat Exact EV",
    page_icon="🂡",
    layout="wide",
)


def _count_key(rank: int) -> str:
    return f"count_{rank}"


def _reset_shoe() -> None:
    for rank in RANKS:
        st.session_state[_count_key(rank)] = _FULL_COUNT


def _bets_frame(bets: tuple[EVResult, ...]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Bet": b.label,
                "Probability": f"{b.probability:.6f}",
                "Payout": f"{b.payout:g}",
                "EV": f"{b.ev:+.4f}",
                "EV %": f"{b.ev * 100:+.2f}%",
            }
            for b in bets
        ]
    )


# ─── Sidebar: shoe editor and payouts ─────────────────────────────────────────

with st.sidebar:
    st.title("🂡 Baccarat Exact EV")
    st.button("Reset shoe", on_click=_reset_shoe, type="primary")

    st.subheader("Card inventory")
    for rank in RANKS:
        if _count_key(rank) not in st.session_state:
            st.session_state[_count_key(rank)] = _FULL_COUNT
    cols = st.columns(2)
    counts = []
    for i, rank in enumerate(RANKS):
        with cols[i % 2]:
            counts.append(
                int(
                    st.number_input(
                        rank_to_str(rank),
                        min_value=0,
                        step=1,
                        key=_count_key(rank),
                    )
                )
            )

    st.markdown("---")
    st.subheader("Payouts (to 1)")
    d = DEFAULT_PAYOUTS
    banker = st.number_input("Banker", value=d.banker, step=0.05, format="%.2f")
    player = st.number_input("Player", value=d.player, step=0.05, format="%.2f")
    tie = st.number_input("Tie", value=d.tie, step=1.0)
    player_pair = st.number_input("Player Pair", value=d.player_pair, step=1.0)
    banker_pair = st.number_input("Banker Pair", value=d.banker_pair, step=1.0)
    with st.expander("Tie point bonuses"):
        tie_bonus = tuple(
            st.number_input(f"Tie {i}", value=d.tie_bonus[i], step=10.0, key=f"tie_bonus_{i}")
            for i in range(len(d.tie_bonus))
        )

    st.markdown("---")
    bankroll = st.number_input("Bankroll", min_value=0.0, value=DEFAULT_BANKROLL, step=1000.0)

payouts = PayoutSchedule(
    banker=banker,
    player=player,
    tie=tie,
    player_pair=player_pair,
    banker_pair=banker_pair,
    tie_bonus=tie_bonus,
)

with st.spinner("Exact calculation …"):
    result = compute(ShoeComposition(tuple(counts)), payouts)

st.metric("Cards remaining", result.total_cards)
if result.total_cards < MIN_CARDS_TO_DEAL:
    st.warning("Fewer than 6 cards remain: a full coup cannot be dealt.")

# ─── Tabs ─────────────────────────────────────────────────────────────────────

tab1, tab2, tab3 = st.tabs(["Main Bets", "Tie Point Bets", "Recommendations"])

with tab1:
    st.header("Main Bets")
    st.dataframe(_bets_frame(result.main_bets), use_container_width=True, hide_index=True)
    st.plotly_chart(build_ev_figure(result, include_tie_points=False), use_container_width=True)

with tab2:
    st.header("Tie Point Bets")
    st.dataframe(_bets_frame(result.tie_bonuses), use_container_width=True, hide_index=True)
    st.plotly_chart(build_tie_point_figure(result), use_container_width=True)

with tab3:
    st.header("Recommendations")
    recs = recommend_stakes(result, bankroll)
    if not recs:
        st.info("No positive-EV bets in the current shoe.")
    else:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "Bet": r.bet.label,
                        "EV": f"{r.bet.ev:+.4f}",
                        "Kelly fraction": f"{r.fraction:.5f}",
                        "Stake": f"{r.stake:,d}",
                    }
                    for r in recs
                ]
            ),
            use_container_width=True,
            hide_index=True,
        )
