from __future__ import annotations

"""Base component class for the Streamlit UI.

All panels inherit from `BaseComponent` and implement `render()`.
Components receive the per-session calculator bundle through their
constructor and never write to calculator state except by submitting
field input.
"""

from dataclasses import dataclass

from ui.state import CalculatorUI


@dataclass
class BaseComponent:
    """Base class for all UI components.

    Attributes:
        ui: Calculator session, presenter and view settings for this browser session
    """

    ui: CalculatorUI

    def render(self) -> None:
        """Render the component.

        Subclasses must override this method to draw Streamlit widgets.
        """
        raise NotImplementedError("Subclasses must implement render()")
