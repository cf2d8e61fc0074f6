"""Smoke test for the Streamlit dashboard (app.py).

Uses streamlit.testing.v1.AppTest to verify the app starts without exceptions
and recomputes when the shoe is edited.
"""

import pytest

try:
    from streamlit.testing.v1 import AppTest

    _STREAMLIT_AVAILABLE = True
except ImportError:
    _STREAMLIT_AVAILABLE = False


@pytest.mark.skipif(not _STREAMLIT_AVAILABLE, reason="streamlit not installed")
def test_app_runs_without_exception():
    """App renders all three tabs without raising an exception."""
    at = AppTest.from_file("../app.py")
    at.run(timeout=120)
    assert not at.exception, f"App raised an exception: {at.exception}"


@pytest.mark.skipif(not _STREAMLIT_AVAILABLE, reason="streamlit not installed")
def test_app_has_expected_tabs():
    """App exposes the three expected tab labels."""
    at = AppTest.from_file("../app.py")
    at.run(timeout=120)
    tab_labels = [t.label for t in at.tabs]
    assert "Main Bets" in tab_labels
    assert "Tie Point Bets" in tab_labels
    assert "Recommendations" in tab_labels


@pytest.mark.skipif(not _STREAMLIT_AVAILABLE, reason="streamlit not installed")
def test_app_reports_full_shoe():
    at = AppTest.from_file("../app.py")
    at.run(timeout=120)
    assert at.metric[0].value == "416"


@pytest.mark.skipif(not _STREAMLIT_AVAILABLE, reason="streamlit not installed")
def test_app_recomputes_after_shoe_edit():
    at = AppTest.from_file("../app.py")
    at.run(timeout=120)
    at.number_input(key="count_9").set_value(0).run(timeout=120)
    assert not at.exception
    assert at.metric[0].value == "384"
