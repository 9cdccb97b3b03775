from __future__ import annotations

"""
UI-side state for the Streamlit GUI.

Holds one calculator session per browser session together with the
presenter that records what the pipeline last asked to show. Nothing in
this module imports Streamlit, so it is usable from tests.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, MutableMapping, Optional
import threading

from fxparity.io_paths import LOGS_DIR
from fxparity.settings import Settings
from fxparity.utils_logging import configure_logging
from fxparity.ui_logic.calculation_engine import DEFAULT_NOTIONAL
from fxparity.ui_logic import CalculationResult, CalculatorSession, Parameters, create_session
from fxparity.ui_logic.parameters import DOMESTIC_RATE, FOREIGN_RATE, SPOT_RATE

SESSION_KEY = "calculator_ui"

VIEW_CHART = "Chart"
VIEW_TABLE = "Table"

UI_LOG_FILENAME = "ui.log"

_logging_lock = threading.Lock()
_logging_configured = False


@dataclass
class FieldSpec:
    """Input widget description for one calculator field."""
    label: str
    help: str
    format: str


FIELD_SPECS: Dict[str, FieldSpec] = {
    SPOT_RATE: FieldSpec("Spot exchange rate (S)", "Domestic currency per unit of foreign currency", "{:.4f}"),
    DOMESTIC_RATE: FieldSpec("Domestic interest rate (r_d, %)", "Annualized domestic rate in percent", "{:.3f}"),
    FOREIGN_RATE: FieldSpec("Foreign interest rate (r_f, %)", "Annualized foreign rate in percent", "{:.3f}"),
}


class RecordingPresenter:
    """Presenter that keeps the latest field markers and snapshot for rendering.

    Streamlit redraws the whole page on every interaction, so instead of
    drawing immediately the presenter records what should be shown and the
    components read it during the next render.
    """

    def __init__(self) -> None:
        self.field_errors: Dict[str, str] = {}
        self.parameters: Optional[Parameters] = None
        self.result: Optional[CalculationResult] = None
        self.errors: Dict[str, str] = {}
        self.present_count = 0

    def mark_field(self, field: str, message: Optional[str]) -> None:
        if message:
            self.field_errors[field] = message
        else:
            self.field_errors.pop(field, None)

    def present(self, parameters: Parameters, result: Optional[CalculationResult], errors) -> None:
        self.parameters = parameters
        self.result = result
        self.errors = dict(errors)
        self.present_count += 1


@dataclass
class CalculatorUI:
    """Per-browser-session bundle: calculator session, presenter and view toggle."""
    session: CalculatorSession
    presenter: RecordingPresenter
    notional: float = DEFAULT_NOTIONAL
    view_mode: str = VIEW_CHART
    raw_inputs: Dict[str, str] = field(default_factory=dict)

    def submit_and_settle(self, field_name: str, raw_value: str) -> None:
        """Feed a committed widget value through the pipeline right away.

        Streamlit only reports a text input once it is committed (enter or
        blur), so there is no keystroke burst to coalesce and the field is
        settled immediately instead of waiting out the quiet period.
        """
        self.raw_inputs[field_name] = raw_value
        self.session.submit(field_name, raw_value)
        self.session.flush()


def get_calculator_ui(store: MutableMapping, settings: Optional[Settings] = None) -> CalculatorUI:
    """Return the calculator bundle kept in `store`, creating it on first use."""
    ui = store.get(SESSION_KEY)
    if ui is None:
        settings = settings if settings is not None else Settings()
        presenter = RecordingPresenter()
        session = create_session(settings, presenter=presenter)
        state = session.state
        presenter.present(state.parameters, state.exchange_calculations, state.errors)
        raw_inputs = {name: spec.format.format(getattr(state, name)) for name, spec in FIELD_SPECS.items()}
        ui = CalculatorUI(session=session, presenter=presenter, notional=settings.notional, raw_inputs=raw_inputs)
        store[SESSION_KEY] = ui
    return ui


def configure_ui_logging(log_dir: Path = LOGS_DIR) -> bool:
    """Configure logging for the Streamlit process on the first call only.

    Every browser session runs the app bootstrap, but the log file is
    shared by the whole process and must not be reset per visitor.

    Returns:
        True when this call configured logging, False when it already was
    """
    global _logging_configured
    with _logging_lock:
        if _logging_configured:
            return False
        configure_logging(log_dir, filename=UI_LOG_FILENAME)
        _logging_configured = True
        return True
