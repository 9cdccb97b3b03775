from __future__ import annotations

import streamlit as st

from .base_component import BaseComponent
from fxparity.views import comparison_table, equation_latex, format_percentage, substituted_equation_latex
from ui.state import VIEW_CHART, VIEW_TABLE
from viz.plots import plot_exchange_chart


class EquationPanel(BaseComponent):
    """Parity equation, symbolic and with the current values substituted."""

    def render(self) -> None:
        st.subheader("Covered Interest Rate Parity")
        st.latex(equation_latex())
        result = self.ui.presenter.result
        params = self.ui.presenter.parameters
        if result is None or params is None:
            return
        st.markdown("**Substituting values:**")
        st.latex(substituted_equation_latex(result, params))
        st.caption(
            f"Where: S = {params.spot_rate:.4f} (spot rate), "
            f"r_f = {format_percentage(params.foreign_rate)}, "
            f"r_d = {format_percentage(params.domestic_rate)}"
        )


class ChartTablePanel(BaseComponent):
    """Chart or table view of spot versus forward, switched by a toggle."""

    def render(self) -> None:
        result = self.ui.presenter.result
        params = self.ui.presenter.parameters
        if result is None or params is None:
            return

        options = [VIEW_CHART, VIEW_TABLE]
        self.ui.view_mode = st.radio(
            "View",
            options,
            index=options.index(self.ui.view_mode),
            horizontal=True,
            key="view_mode_toggle",
        )
        if self.ui.view_mode == VIEW_CHART:
            st.pyplot(plot_exchange_chart(params, result), clear_figure=True)
        else:
            st.dataframe(comparison_table(result, params, notional=self.ui.notional), use_container_width=True)


def render_equation_panel(ui) -> None:
    EquationPanel(ui).render()


def render_chart_table_panel(ui) -> None:
    ChartTablePanel(ui).render()
