"""
Framework-agnostic state management for the calculator.

The store holds one canonical, immutable snapshot of the calculator
state. Updates are shallow merges that swap in a new snapshot and then
notify subscribers in registration order with the post-merge state.
"""

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional
import logging
import threading

from .calculation_engine import CalculationResult
from .parameters import DEFAULT_PARAMETERS, Parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorState:
    """Canonical calculator state.

    - spot_rate, domestic_rate, foreign_rate: last parsed input values
      (NaN when the field's raw input could not be parsed)
    - errors: field -> validation message for every currently invalid field,
      held as a read-only mapping
    - exchange_calculations: derived result, None whenever any field is invalid
    """
    spot_rate: float = DEFAULT_PARAMETERS.spot_rate
    domestic_rate: float = DEFAULT_PARAMETERS.domestic_rate
    foreign_rate: float = DEFAULT_PARAMETERS.foreign_rate
    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    exchange_calculations: Optional[CalculationResult] = None

    def __post_init__(self):
        # snapshot owns a read-only copy of the error map
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @property
    def parameters(self) -> Parameters:
        return Parameters(
            spot_rate=self.spot_rate,
            domestic_rate=self.domestic_rate,
            foreign_rate=self.foreign_rate,
        )

    @classmethod
    def from_parameters(cls, params: Parameters) -> "CalculatorState":
        return cls(
            spot_rate=params.spot_rate,
            domestic_rate=params.domestic_rate,
            foreign_rate=params.foreign_rate,
        )


STATE_KEYS = frozenset(f.name for f in fields(CalculatorState))

StateListener = Callable[[CalculatorState], None]


class Subscription:
    """Handle for one subscriber registration.

    Releasing the handle deregisters exactly this registration, even when
    the same callback was subscribed more than once.
    """

    def __init__(self, manager: "StateManager", callback: StateListener):
        self._manager = manager
        self.callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._manager._remove_subscription(self)
            self.active = False

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.unsubscribe()


class StateManager:
    """
    Single source of truth with observer notification.

    The calculator pipeline is the only writer. Writes are serialized
    by a lock and subscribers are called after the lock is released,
    so a slow subscriber never holds up the merge itself.
    """

    def __init__(self, initial: Optional[CalculatorState] = None):
        self._state = initial if initial is not None else CalculatorState()
        self._subscriptions: List[Subscription] = []
        self._lock = threading.RLock()

    def get_state(self) -> CalculatorState:
        """Get the current state snapshot."""
        return self._state

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def set_state(self, updates: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """Merge the given keys into the state and notify subscribers.

        Keys not mentioned keep their current values. The merge itself
        cannot fail, but a key outside the state schema is a programming
        error and is rejected before anything is merged.

        Raises:
            KeyError: A key that is not part of the calculator state
        """
        merged: Dict[str, Any] = dict(updates or {})
        merged.update(kwargs)
        unknown = set(merged) - STATE_KEYS
        if unknown:
            raise KeyError(f"Unknown state keys: {', '.join(sorted(unknown))}")

        with self._lock:
            self._state = replace(self._state, **merged)
            snapshot = self._state
            listeners = list(self._subscriptions)

        self._notify(listeners, snapshot)

    def subscribe(self, callback: StateListener) -> Subscription:
        """Register a callback invoked with the full state after every update."""
        subscription = Subscription(self, callback)
        with self._lock:
            self._subscriptions.append(subscription)
        return subscription

    def _remove_subscription(self, subscription: Subscription) -> None:
        with self._lock:
            try:
                self._subscriptions.remove(subscription)
            except ValueError:
                logger.debug("Subscription already removed")

    def _notify(self, listeners: List[Subscription], snapshot: CalculatorState) -> None:
        for subscription in listeners:
            if not subscription.active:
                continue
            try:
                subscription.callback(snapshot)
            except Exception as e:
                logger.exception(f"Error in state listener callback: {e}")
