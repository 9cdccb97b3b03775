"""
Framework-agnostic validation for the calculator inputs.

Field rules are fixed: each input has a required check and a closed
numeric range. Validation of a single field is pure and returns the
first failing rule's message, or None when the value is acceptable.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
import logging
import math

from .parameters import DOMESTIC_RATE, FOREIGN_RATE, PARAMETER_FIELDS, SPOT_RATE, Parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRule:
    """Bounds and display metadata for one input field."""
    label: str
    min: Optional[float] = None
    max: Optional[float] = None
    required: bool = True
    unit: str = ""


VALIDATION_RULES: Mapping[str, FieldRule] = {
    SPOT_RATE: FieldRule(label="Spot exchange rate", min=0.1, max=10),
    DOMESTIC_RATE: FieldRule(label="Domestic interest rate", min=-99, max=50, unit="%"),
    FOREIGN_RATE: FieldRule(label="Foreign interest rate", min=-99, max=50, unit="%"),
}


def _format_bound(bound: float) -> str:
    return f"{bound:g}"


def _is_missing(value: Any) -> bool:
    if value is None or value == "":
        return True
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return True
    return math.isnan(value)


def parse_field_value(raw: Any) -> float:
    """Parse a raw input value into a float.

    Empty, missing or unparsable input becomes NaN, which the required
    rule then reports.
    """
    if raw is None:
        return math.nan
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        logger.debug(f"Unparsable input value {raw!r}")
        return math.nan


def validate_field(field: str, value: Any) -> Optional[str]:
    """Validate one field value against the fixed rule table.

    Rules run in order required, minimum, maximum; the first failure wins.
    Fields without rules are always valid.
    """
    rule = VALIDATION_RULES.get(field)
    if rule is None:
        return None

    if rule.required and _is_missing(value):
        return f"{rule.label} is required"

    if rule.min is not None and value < rule.min:
        return f"{rule.label} must be at least {_format_bound(rule.min)}{rule.unit}"

    if rule.max is not None and value > rule.max:
        return f"{rule.label} cannot exceed {_format_bound(rule.max)}{rule.unit}"

    return None


def has_errors(errors: Mapping[str, str]) -> bool:
    return len(errors) > 0


class ValidationError:
    """Represents a validation error for one field."""

    def __init__(self, field: str, message: str, context: Optional[Dict] = None):
        """Initialize a validation error.

        Args:
            field: The field that failed validation
            message: Error message
            context: Additional context information
        """
        self.field = field
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationResult:
    """Represents the result of a validation operation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: ValidationError) -> None:
        """Add an error to the result."""
        self.errors.append(error)
        self.is_valid = False


class ValidationManager:
    """
    Whole-parameter-set validation.

    Runs the fixed per-field rules over every input and gathers the
    failures. Used where a complete parameter set arrives at once, such
    as the defaults in a settings file, rather than one field at a time.
    """

    def validate_parameters(self, params: Parameters) -> ValidationResult:
        """Validate every field of a parameter set.

        Returns:
            ValidationResult with one error per failing field
        """
        result = ValidationResult()
        for field in PARAMETER_FIELDS:
            value = getattr(params, field)
            message = validate_field(field, value)
            if message:
                result.add_error(ValidationError(field, message, context={'value': value}))
        return result
