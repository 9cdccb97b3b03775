"""
Debounced bridge from raw field input to the validated state pipeline.

Every raw input event for a field restarts that field's quiet-period
timer. When the timer fires the field settles: its last raw value is
parsed and validated, the error map and state are updated, and the
derived result is recomputed if, and only if, no field is invalid.

Timers are independent per field: typing in one field never delays
another field's settlement. Fields that settle out of order produce
intermediate notifications carrying a None result; the last field to
settle produces the notification reflecting every field's latest value.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional
import logging
import threading

from .calculation_engine import CalculationResult, calculate_exchange_metrics
from .parameters import PARAMETER_FIELDS, Parameters
from .presentation import NullPresenter, Presenter
from .state_manager import StateManager
from .timers import TimerBackend, TimerHandle
from .validation_manager import has_errors, parse_field_value, validate_field

logger = logging.getLogger(__name__)

DEFAULT_QUIET_PERIOD = 0.3

Calculator = Callable[[Parameters], CalculationResult]


class UpdateScheduler:
    """Per-field trailing-edge debounce around validate, merge and recalculate."""

    def __init__(
        self,
        state_manager: StateManager,
        timers: TimerBackend,
        presenter: Optional[Presenter] = None,
        quiet_period: float = DEFAULT_QUIET_PERIOD,
        calculator: Calculator = calculate_exchange_metrics,
        fields: Iterable[str] = PARAMETER_FIELDS,
    ):
        """Initialize the scheduler.

        Args:
            state_manager: Store receiving every validated update
            timers: Backend used for the quiet-period timers
            presenter: Receives field markers and settled snapshots
            quiet_period: Seconds without input before a field settles
            calculator: Computes the derived result from valid parameters
            fields: Field names accepted by `submit`
        """
        self.state_manager = state_manager
        self.timers = timers
        self.presenter = presenter if presenter is not None else NullPresenter()
        self.quiet_period = quiet_period
        self.calculator = calculator
        self.fields = tuple(fields)

        self._timers_by_field: Dict[str, TimerHandle] = {}
        self._raw_by_field: Dict[str, Any] = {}
        self._generation: Dict[str, int] = {f: 0 for f in self.fields}
        self._settled_generation: Dict[str, int] = {f: 0 for f in self.fields}
        # _lock guards the timer bookkeeping only; subscribers never run under it
        self._lock = threading.RLock()
        # serializes settles so the error map read-modify-write stays atomic
        self._settle_lock = threading.RLock()

    @property
    def pending_fields(self) -> List[str]:
        """Fields with an unsettled input, in submission order."""
        with self._lock:
            return list(self._timers_by_field)

    def submit(self, field: str, raw_value: Any) -> None:
        """Record a raw input event for a field and restart its timer.

        Raises:
            ValueError: Field is not tracked by this scheduler
        """
        if field not in self._generation:
            raise ValueError(f'Unknown field "{field}"; expected one of {", ".join(self.fields)}')

        with self._lock:
            previous = self._timers_by_field.pop(field, None)
            if previous is not None:
                previous.cancel()
            self._generation[field] += 1
            generation = self._generation[field]
            self._raw_by_field[field] = raw_value
            self._timers_by_field[field] = self.timers.call_later(
                self.quiet_period, lambda: self._on_timer(field, generation)
            )

    def flush(self) -> None:
        """Settle every pending field now, in submission order."""
        with self._lock:
            due = []
            for field in list(self._timers_by_field):
                self._timers_by_field.pop(field).cancel()
                self._generation[field] += 1
                due.append((field, self._raw_by_field.pop(field, None), self._generation[field]))

        for field, raw_value, generation in due:
            self._settle(field, raw_value, generation)

    def cancel_pending(self) -> None:
        """Drop every pending input without settling it."""
        with self._lock:
            for field, handle in self._timers_by_field.items():
                handle.cancel()
                self._generation[field] += 1
                self._raw_by_field.pop(field, None)
            self._timers_by_field.clear()

    def _on_timer(self, field: str, generation: int) -> None:
        with self._lock:
            # A newer event rescheduled the field after this timer fired
            if self._generation[field] != generation:
                return
            self._timers_by_field.pop(field, None)
            raw_value = self._raw_by_field.pop(field, None)

        self._settle(field, raw_value, generation)

    def _settle(self, field: str, raw_value: Any, generation: int) -> None:
        with self._settle_lock:
            # A newer input for the field already settled on another thread
            if generation <= self._settled_generation[field]:
                return
            self._settled_generation[field] = generation

            value = parse_field_value(raw_value)
            error = validate_field(field, value)
            self.presenter.mark_field(field, error)

            errors = dict(self.state_manager.get_state().errors)
            if error:
                errors[field] = error
            else:
                errors.pop(field, None)
            logger.debug(f"Settled {field}={raw_value!r} error={error!r}")

            self.state_manager.set_state({field: value, "errors": errors})
            self.update_calculations()

            state = self.state_manager.get_state()
            self.presenter.present(state.parameters, state.exchange_calculations, state.errors)

    def update_calculations(self) -> None:
        """Recompute the derived result from the current state.

        Any invalid field clears the result. A failing calculation is
        logged and also clears it.
        """
        state = self.state_manager.get_state()
        if has_errors(state.errors):
            self.state_manager.set_state(exchange_calculations=None)
            return

        try:
            result = self.calculator(state.parameters)
        except Exception as e:
            logger.exception(f"Calculation error: {e}")
            self.state_manager.set_state(exchange_calculations=None)
            return

        self.state_manager.set_state(exchange_calculations=result)
