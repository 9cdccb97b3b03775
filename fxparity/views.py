from __future__ import annotations

"""Read-only renderings of a calculation for display surfaces.

These helpers turn `(Parameters, CalculationResult)` into the strings and
tables shown by the Streamlit app and the runner. They hold no state and
never touch the pipeline.
"""

from typing import List, Mapping, Optional

import pandas as pd

from fxparity.ui_logic.calculation_engine import DEFAULT_NOTIONAL, CalculationResult
from fxparity.ui_logic.parameters import Parameters

CURRENCY = "USD"


def format_currency(amount: float, currency: str = CURRENCY) -> str:
    return f"{currency} {amount:,.2f}"


def format_percentage(rate_pct: float) -> str:
    return f"{rate_pct:.3f}%"


def arbitrage_status(result: CalculationResult, currency: str = CURRENCY) -> str:
    if result.no_arbitrage:
        return "✓ No arbitrage condition satisfied"
    return f"⚠ Arbitrage difference: {currency} {result.arbitrage_diff:.2f}"


def results_lines(result: CalculationResult, params: Parameters, notional: float = DEFAULT_NOTIONAL) -> List[str]:
    """Plain-text results block: forward rate followed by both strategies."""
    return [
        f"Forward Exchange Rate: {result.forward_rate:.4f}",
        "Formula: F = S × e^(r_f − r_d)",
        arbitrage_status(result),
        "",
        "Domestic Investment",
        f"  Invest {format_currency(notional)} at {format_percentage(params.domestic_rate)}",
        f"  Final: {format_currency(result.domestic_ending_value)}",
        "",
        "Foreign Investment",
        f"  Convert → invest at {format_percentage(params.foreign_rate)} → convert back",
        f"  Foreign: {result.foreign_currency_amount:.2f} @ {format_percentage(params.foreign_rate)}"
        f" = {result.foreign_ending_value:.2f}",
        f"  Final: {format_currency(result.domestic_equivalent)}",
    ]


def equation_latex() -> str:
    return r"F = S \times e^{(r_f - r_d)}"


def substituted_equation_latex(result: CalculationResult, params: Parameters) -> str:
    """The parity equation with the current values substituted in."""
    rd = params.domestic_rate / 100
    rf = params.foreign_rate / 100
    return (
        rf"F = {params.spot_rate:.4f} \times e^{{({rf:.5f} - {rd:.5f})}}"
        rf" = {result.forward_rate:.4f}"
    )


def comparison_table(result: CalculationResult, params: Parameters, notional: float = DEFAULT_NOTIONAL) -> pd.DataFrame:
    """Today-versus-one-period table of rates and strategy values."""
    rows = [
        ("Exchange Rate", f"{params.spot_rate:.4f}", f"{result.forward_rate:.4f}"),
        ("Domestic Rate", format_percentage(params.domestic_rate), format_percentage(params.domestic_rate)),
        ("Foreign Rate", format_percentage(params.foreign_rate), format_percentage(params.foreign_rate)),
        ("Domestic Investment", format_currency(notional), format_currency(result.domestic_ending_value)),
        ("Foreign Investment (converted)", format_currency(notional), format_currency(result.domestic_equivalent)),
    ]
    df = pd.DataFrame(rows, columns=["Item", "t = 0", "t = 1"])
    return df.set_index("Item")


def validation_summary(errors: Mapping[str, str]) -> Optional[List[str]]:
    """Messages to list in the validation summary, or None when all fields are valid."""
    if not errors:
        return None
    return list(errors.values())
