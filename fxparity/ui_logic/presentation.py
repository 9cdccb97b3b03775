"""Presentation capability injected into the update scheduler.

The pipeline never renders anything itself. It reports each field's
validation outcome through `mark_field` and hands the settled snapshot
to `present` after every update cycle.
"""

from typing import Mapping, Optional, Protocol

from .calculation_engine import CalculationResult
from .parameters import Parameters


class Presenter(Protocol):
    def mark_field(self, field: str, message: Optional[str]) -> None:
        """Set or clear the invalid-state marker of one input field."""
        ...

    def present(
        self,
        parameters: Parameters,
        result: Optional[CalculationResult],
        errors: Mapping[str, str],
    ) -> None:
        """Show the current parameters, result and validation summary."""
        ...


class NullPresenter:
    """Presenter for headless use."""

    def mark_field(self, field: str, message: Optional[str]) -> None:
        pass

    def present(
        self,
        parameters: Parameters,
        result: Optional[CalculationResult],
        errors: Mapping[str, str],
    ) -> None:
        pass
