"""Calculator session: the context object a host constructs once.

A session owns one state store, one update scheduler and the timer
backend driving it. Hosts (the Streamlit app, the runner, tests) build
their own sessions, so independent calculators never share state.
"""

from dataclasses import dataclass
from functools import partial
from typing import Any, Optional
import logging

from .calculation_engine import calculate_exchange_metrics
from .presentation import Presenter
from .state_manager import CalculatorState, StateListener, StateManager, Subscription
from .timers import ThreadingTimerBackend, TimerBackend
from .update_scheduler import UpdateScheduler

logger = logging.getLogger(__name__)


@dataclass
class CalculatorSession:
    state_manager: StateManager
    scheduler: UpdateScheduler

    @property
    def state(self) -> CalculatorState:
        return self.state_manager.get_state()

    def subscribe(self, callback: StateListener) -> Subscription:
        return self.state_manager.subscribe(callback)

    def submit(self, field: str, raw_value: Any) -> None:
        self.scheduler.submit(field, raw_value)

    def flush(self) -> None:
        self.scheduler.flush()

    def close(self) -> None:
        """Drop pending inputs; the state stays readable."""
        self.scheduler.cancel_pending()


def create_session(
    settings: Optional[Any] = None,
    presenter: Optional[Presenter] = None,
    timers: Optional[TimerBackend] = None,
) -> CalculatorSession:
    """Build a session from settings and compute the initial result.

    Args:
        settings: `fxparity.settings.Settings`; built-in defaults when None
        presenter: Receives field markers and settled snapshots
        timers: Timer backend; daemon threading timers when None
    """
    if settings is None:
        from fxparity.settings import Settings

        settings = Settings()

    state_manager = StateManager(CalculatorState.from_parameters(settings.defaults))
    scheduler = UpdateScheduler(
        state_manager,
        timers if timers is not None else ThreadingTimerBackend(),
        presenter=presenter,
        quiet_period=settings.quiet_period,
        calculator=partial(calculate_exchange_metrics, **settings.calculation_options()),
    )
    scheduler.update_calculations()
    logger.debug(f"Calculator session created with defaults {settings.defaults}")
    return CalculatorSession(state_manager=state_manager, scheduler=scheduler)
