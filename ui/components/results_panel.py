from __future__ import annotations

import streamlit as st

from .base_component import BaseComponent
from fxparity.views import arbitrage_status, format_currency, format_percentage


class ResultsPanel(BaseComponent):
    """Forward rate and the two investment strategies."""

    def render(self) -> None:
        st.subheader("Results")
        result = self.ui.presenter.result
        params = self.ui.presenter.parameters
        if result is None or params is None:
            st.info("Results appear once every input is valid.")
            return

        notional = self.ui.notional

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Forward Exchange Rate", f"{result.forward_rate:.4f}")
            st.caption("No-arbitrage forward rate")
            if result.no_arbitrage:
                st.success(arbitrage_status(result))
            else:
                st.warning(arbitrage_status(result))
        with col2:
            st.markdown("**Domestic Investment**")
            st.write(f"Invest {format_currency(notional)} at {format_percentage(params.domestic_rate)}")
            st.write(f"Final: {format_currency(result.domestic_ending_value)}")
        with col3:
            st.markdown("**Foreign Investment**")
            st.write(f"Convert → invest at {format_percentage(params.foreign_rate)} → convert back")
            st.caption(
                f"Foreign: {result.foreign_currency_amount:.2f} @ {format_percentage(params.foreign_rate)}"
                f" = {result.foreign_ending_value:.2f}"
            )
            st.write(f"Final: {format_currency(result.domestic_equivalent)}")


def render_results_panel(ui) -> None:
    ResultsPanel(ui).render()
