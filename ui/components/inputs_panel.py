from __future__ import annotations

import streamlit as st

from .base_component import BaseComponent
from fxparity.ui_logic import PARAMETER_FIELDS
from fxparity.views import validation_summary
from ui.state import FIELD_SPECS


class InputsPanel(BaseComponent):
    """Spot rate and interest rate inputs with per-field error markers."""

    def _on_change(self, field_name: str, widget_key: str) -> None:
        self.ui.submit_and_settle(field_name, st.session_state[widget_key])

    def render(self) -> None:
        st.subheader("Inputs")
        cols = st.columns(len(PARAMETER_FIELDS))
        for col, field_name in zip(cols, PARAMETER_FIELDS):
            spec = FIELD_SPECS[field_name]
            widget_key = f"input_{field_name}"
            with col:
                st.text_input(
                    spec.label,
                    value=self.ui.raw_inputs.get(field_name, ""),
                    help=spec.help,
                    key=widget_key,
                    on_change=self._on_change,
                    args=(field_name, widget_key),
                )
                message = self.ui.presenter.field_errors.get(field_name)
                if message:
                    st.caption(f":red[{message}]")

        messages = validation_summary(self.ui.presenter.errors)
        if messages:
            st.error("Please correct the following:\n\n" + "\n".join(f"- {m}" for m in messages))


def render_inputs_panel(ui) -> None:
    InputsPanel(ui).render()
