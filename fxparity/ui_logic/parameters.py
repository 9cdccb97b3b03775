"""Input parameters of the forward exchange calculation."""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple

SPOT_RATE = "spot_rate"
DOMESTIC_RATE = "domestic_rate"
FOREIGN_RATE = "foreign_rate"

# Order in which the inputs are presented and validated
PARAMETER_FIELDS: Tuple[str, ...] = (SPOT_RATE, DOMESTIC_RATE, FOREIGN_RATE)


@dataclass(frozen=True)
class Parameters:
    """Spot rate and annualized interest rates.

    - spot_rate: domestic currency per unit of foreign currency
    - domestic_rate, foreign_rate: annualized rates in percent (2.5 == 2.5%)
    """
    spot_rate: float = 1.26
    domestic_rate: float = 2.5
    foreign_rate: float = 3.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_PARAMETERS = Parameters()
