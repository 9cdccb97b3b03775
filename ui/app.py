"""
Forward Exchange Rate Calculator - Streamlit UI

Inputs, results, equation and chart/table views, all drawn from one
calculator session held in Streamlit's session state.
"""

from pathlib import Path
import logging
import sys
import streamlit as st

# Ensure project root is on sys.path to enable fxparity imports
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fxparity.io_paths import DEFAULT_SETTINGS_PATH
from fxparity.self_test import run_self_tests
from fxparity.settings import SettingsError, load_settings
from ui.state import SESSION_KEY, configure_ui_logging, get_calculator_ui
from ui.components.inputs_panel import render_inputs_panel
from ui.components.results_panel import render_results_panel
from ui.components.views_panel import render_chart_table_panel, render_equation_panel

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Forward Exchange Rate Calculator", page_icon="💱", layout="wide")


def _bootstrap():
    """Create the calculator for this browser session on its first run."""
    if SESSION_KEY in st.session_state:
        return get_calculator_ui(st.session_state)

    configure_ui_logging()
    logger.info("Forward Exchange Rate Calculator initializing...")
    settings = None
    if DEFAULT_SETTINGS_PATH.exists():
        try:
            settings = load_settings(DEFAULT_SETTINGS_PATH)
        except SettingsError as exc:
            logger.error(f"Ignoring settings file: {exc}")
            st.warning(f"Settings file ignored: {exc}")
    ui = get_calculator_ui(st.session_state, settings)
    if settings is not None:
        run_self_tests(tolerance=settings.self_test_tolerance, **settings.calculation_options())
    else:
        run_self_tests()
    logger.info("Forward Exchange Rate Calculator ready")
    return ui


def main() -> None:
    ui = _bootstrap()

    st.title("💱 Forward Exchange Rate Calculator")
    st.caption("No-arbitrage forward rate from covered interest rate parity")

    render_inputs_panel(ui)
    st.divider()
    render_results_panel(ui)
    st.divider()
    left, right = st.columns(2)
    with left:
        render_equation_panel(ui)
    with right:
        render_chart_table_panel(ui)


if __name__ == "__main__":
    main()
