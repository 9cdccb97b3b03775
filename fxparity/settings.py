from __future__ import annotations

"""Calculator settings.

Settings are a flat YAML mapping. Every key is optional; missing keys
keep the built-in defaults. The field validation rules are fixed and are
not part of the settings.

Example (`config/settings.yaml`):

    defaults:
      spot_rate: 1.26
      domestic_rate: 2.5
      foreign_rate: 3.0
    quiet_period: 0.3
    notional: 1000
    no_arbitrage_tolerance: 0.01
    growth: continuous
    self_test_tolerance: 0.001
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import yaml

from fxparity.ui_logic.calculation_engine import (
    DEFAULT_NOTIONAL,
    DEFAULT_TOLERANCE,
    GROWTH_CONTINUOUS,
    GROWTH_CONVENTIONS,
)
from fxparity.ui_logic.parameters import PARAMETER_FIELDS, Parameters
from fxparity.ui_logic.update_scheduler import DEFAULT_QUIET_PERIOD
from fxparity.ui_logic.validation_manager import ValidationManager

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or fails validation."""


@dataclass(frozen=True)
class Settings:
    defaults: Parameters = field(default_factory=Parameters)
    quiet_period: float = DEFAULT_QUIET_PERIOD
    notional: float = DEFAULT_NOTIONAL
    no_arbitrage_tolerance: float = DEFAULT_TOLERANCE
    growth: str = GROWTH_CONTINUOUS
    self_test_tolerance: float = 0.001

    def calculation_options(self) -> Dict[str, Any]:
        """Keyword options for the calculation engine."""
        return {
            "notional": self.notional,
            "tolerance": self.no_arbitrage_tolerance,
            "growth": self.growth,
        }


_NUMERIC_KEYS = ("quiet_period", "notional", "no_arbitrage_tolerance", "self_test_tolerance")
_SETTINGS_KEYS = {f.name for f in fields(Settings)}


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise SettingsError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise SettingsError(f"{key} must be a number, got {value!r}") from None


def _parse_defaults(raw: Any) -> Parameters:
    if not isinstance(raw, dict):
        raise SettingsError("defaults must be a mapping of field name to number")
    unknown = set(raw) - set(PARAMETER_FIELDS)
    if unknown:
        raise SettingsError(f"Unknown default fields: {', '.join(sorted(map(str, unknown)))}")

    base = Parameters()
    params = Parameters(**{
        name: _as_float(f"defaults.{name}", raw.get(name, getattr(base, name)))
        for name in PARAMETER_FIELDS
    })

    result = ValidationManager().validate_parameters(params)
    if not result.is_valid:
        raise SettingsError("Invalid defaults: " + "; ".join(e.message for e in result.errors))
    return params


def settings_from_dict(data: Dict[str, Any]) -> Settings:
    """Build settings from a plain mapping, validating every entry."""
    if not isinstance(data, dict):
        raise SettingsError("Settings must be a mapping")

    unknown = set(data) - _SETTINGS_KEYS
    if unknown:
        raise SettingsError(f"Unknown settings keys: {', '.join(sorted(map(str, unknown)))}")

    values: Dict[str, Any] = {}
    if "defaults" in data:
        values["defaults"] = _parse_defaults(data["defaults"])

    for key in _NUMERIC_KEYS:
        if key in data:
            number = _as_float(key, data[key])
            if number < 0:
                raise SettingsError(f"{key} must be non-negative")
            values[key] = number

    if "growth" in data:
        growth = str(data["growth"]).strip().lower()
        if growth not in GROWTH_CONVENTIONS:
            raise SettingsError(f"growth must be one of {', '.join(GROWTH_CONVENTIONS)}, got {data['growth']!r}")
        values["growth"] = growth

    return Settings(**values)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file, or return the defaults when no path is given."""
    if path is None:
        return Settings()

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise SettingsError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e

    settings = settings_from_dict(data)
    logger.info(f"Loaded settings from {path}")
    return settings
