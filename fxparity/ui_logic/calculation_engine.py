"""Covered interest-rate parity calculation.

The forward rate follows continuous-compounding parity,
F = S * exp(r_f - r_d), with rates given in percent. Alongside it two
one-period strategies are valued on a fixed notional: investing at home,
and converting at spot, investing abroad and converting back at the
forward rate. Their difference is a consistency check on the result.

Growth conventions for the two strategies:

- "continuous": grow by exp(r), matching the parity formula. The
  strategies agree up to floating-point rounding.
- "simple": grow by (1 + r). The strategies then differ by the gap
  between simple and continuous compounding.
"""

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict
import math

from .parameters import Parameters

DEFAULT_NOTIONAL = 1000.0
DEFAULT_TOLERANCE = 0.01

GROWTH_CONTINUOUS = "continuous"
GROWTH_SIMPLE = "simple"

_GROWTH_FACTORS: Dict[str, Callable[[float], float]] = {
    GROWTH_CONTINUOUS: math.exp,
    GROWTH_SIMPLE: lambda r: 1.0 + r,
}

GROWTH_CONVENTIONS = tuple(_GROWTH_FACTORS)


@dataclass(frozen=True)
class CalculationResult:
    """Derived snapshot for one valid parameter set."""
    forward_rate: float
    domestic_ending_value: float
    foreign_currency_amount: float
    foreign_ending_value: float
    domestic_equivalent: float
    arbitrage_diff: float
    no_arbitrage: bool
    is_valid: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_forward_exchange(
    spot_rate: float,
    domestic_rate: float,
    foreign_rate: float,
    *,
    notional: float = DEFAULT_NOTIONAL,
    tolerance: float = DEFAULT_TOLERANCE,
    growth: str = GROWTH_CONTINUOUS,
) -> CalculationResult:
    """Compute the no-arbitrage forward rate and both strategy outcomes.

    Args:
        spot_rate: Domestic currency per unit of foreign currency
        domestic_rate: Domestic annualized rate in percent
        foreign_rate: Foreign annualized rate in percent
        notional: Amount invested by each strategy
        tolerance: Absolute tolerance for the no-arbitrage check
        growth: Strategy growth convention ("continuous" or "simple")

    Raises:
        ValueError: Unknown growth convention
        OverflowError: Rate differential too large for exp()
    """
    try:
        grow = _GROWTH_FACTORS[growth]
    except KeyError:
        raise ValueError(
            f"Unknown growth convention {growth!r}; expected one of {', '.join(GROWTH_CONVENTIONS)}"
        ) from None

    r_d = domestic_rate / 100.0
    r_f = foreign_rate / 100.0

    forward_rate = spot_rate * math.exp(r_f - r_d)

    domestic_ending_value = notional * grow(r_d)

    foreign_currency_amount = notional * spot_rate
    foreign_ending_value = foreign_currency_amount * grow(r_f)
    # Zero forward only arises from a zero spot, which is outside the valid domain
    domestic_equivalent = foreign_ending_value / forward_rate if forward_rate != 0 else math.nan

    arbitrage_diff = abs(domestic_ending_value - domestic_equivalent)
    no_arbitrage = arbitrage_diff < tolerance

    return CalculationResult(
        forward_rate=forward_rate,
        domestic_ending_value=domestic_ending_value,
        foreign_currency_amount=foreign_currency_amount,
        foreign_ending_value=foreign_ending_value,
        domestic_equivalent=domestic_equivalent,
        arbitrage_diff=arbitrage_diff,
        no_arbitrage=no_arbitrage,
        is_valid=spot_rate > 0 and r_d > -1 and r_f > -1,
    )


def calculate_exchange_metrics(params: Parameters, **options: Any) -> CalculationResult:
    """Calculate from a `Parameters` instance; options pass through."""
    return calculate_forward_exchange(
        params.spot_rate,
        params.domestic_rate,
        params.foreign_rate,
        **options,
    )
