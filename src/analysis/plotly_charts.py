"""Interactive Plotly figures for a Baccarat EV calculation.

Three public functions:

    build_ev_figure(result)
        — Horizontal bar chart of EV per wager, green for +EV, red for −EV.
    build_tie_point_figure(result)
        — Bar chart of P(tie at point p) for p = 0..9.
    save_figure_html(fig, path)
        — Export any figure to a self-contained HTML file.

Hover over any bar to see the wager's probability, payout and EV.
"""

from __future__ import annotations

import plotly.graph_objects as go

from src.solvers.ev import CalculationResult, EVResult

_POSITIVE_COLOR: str = "#2ca02c"
_NEGATIVE_COLOR: str = "#d62728"
_NEUTRAL_COLOR: str = "#1f77b4"


def _hover(bet: EVResult) -> str:
    return (
        f"<b>{bet.label}</b><br>"
        f"P(win): {bet.probability:.6f}<br>"
        f"Payout: {bet.payout:g} to 1<br>"
        f"EV: {bet.ev:+.4f}"
    )


def build_ev_figure(result: CalculationResult, include_tie_points: bool = True) -> go.Figure:
    """Bar chart of EV per unit staked for each wager.

    Args:
        result:             CalculationResult from ev.compute().
        include_tie_points: Also plot the ten tie-point wagers.

    Returns:
        go.Figure with a single horizontal Bar trace, wagers in table order.
    """
    bets = result.all_bets if include_tie_points else result.main_bets
    labels = [b.label for b in bets]
    evs = [b.ev for b in bets]
    colors = [_POSITIVE_COLOR if ev > 0 else _NEGATIVE_COLOR for ev in evs]

    fig = go.Figure(
        go.Bar(
            x=evs,
            y=labels,
            orientation="h",
            marker_color=colors,
            hovertext=[_hover(b) for b in bets],
            hoverinfo="text",
            name="EV",
        )
    )
    fig.update_layout(
        title_text=f"Expected Value per Unit  ({result.total_cards} cards remaining)",
        xaxis_title="EV",
        yaxis={"autorange": "reversed"},
        height=max(300, 32 * len(bets)),
    )
    fig.add_vline(x=0.0, line_width=1, line_color="black")
    return fig


def build_tie_point_figure(result: CalculationResult) -> go.Figure:
    """Bar chart of the tie-point distribution (sums to P(Tie))."""
    points = list(range(len(result.tie_bonuses)))
    probs = [b.probability for b in result.tie_bonuses]

    fig = go.Figure(
        go.Bar(
            x=points,
            y=probs,
            marker_color=_NEUTRAL_COLOR,
            hovertext=[_hover(b) for b in result.tie_bonuses],
            hoverinfo="text",
            name="P(tie at point)",
        )
    )
    fig.update_layout(
        title_text=f"Tie Point Distribution  (P(Tie) = {result.tie.probability:.4f})",
        xaxis={"title": "Tie point", "tickmode": "linear", "dtick": 1},
        yaxis_title="Probability",
    )
    return fig


def save_figure_html(fig: go.Figure, path: str) -> None:
    """Save a Plotly figure to an HTML file (Plotly JS loaded from the CDN)."""
    fig.write_html(path, include_plotlyjs="cdn")


# ─── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import sys

    from src.engine.payouts import DEFAULT_PAYOUTS
    from src.engine.shoe import shoe_from_dealt
    from src.solvers.ev import compute

    result = compute(shoe_from_dealt(sys.argv[1:]), DEFAULT_PAYOUTS)
    save_figure_html(build_ev_figure(result), "ev_by_wager.html")
    save_figure_html(build_tie_point_figure(result), "tie_points.html")
    print("Saved: ev_by_wager.html, tie_points.html")
