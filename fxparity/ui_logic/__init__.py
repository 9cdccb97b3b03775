"""
Framework-agnostic calculator logic.

Everything the forward exchange calculator does between a raw input
event and a state notification lives here, free of any UI framework:

- validation of single fields against fixed rules
- the covered interest-rate parity calculation
- the observable state store
- the per-field debounced update scheduler and its timer backends
"""

from .calculation_engine import CalculationResult, calculate_exchange_metrics, calculate_forward_exchange
from .parameters import PARAMETER_FIELDS, Parameters
from .presentation import NullPresenter, Presenter
from .session import CalculatorSession, create_session
from .state_manager import CalculatorState, StateManager, Subscription
from .timers import AsyncioTimerBackend, ManualClock, ThreadingTimerBackend
from .update_scheduler import UpdateScheduler
from .validation_manager import ValidationManager, has_errors, parse_field_value, validate_field

__all__ = [
    "CalculationResult",
    "calculate_exchange_metrics",
    "calculate_forward_exchange",
    "PARAMETER_FIELDS",
    "Parameters",
    "NullPresenter",
    "Presenter",
    "CalculatorSession",
    "create_session",
    "CalculatorState",
    "StateManager",
    "Subscription",
    "AsyncioTimerBackend",
    "ManualClock",
    "ThreadingTimerBackend",
    "UpdateScheduler",
    "ValidationManager",
    "has_errors",
    "parse_field_value",
    "validate_field",
]
