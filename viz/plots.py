from __future__ import annotations

"""
Chart of spot versus forward exchange rate with both interest rates.

Read-only plotting functions that consume the current parameters and
calculation result. Exchange rates are drawn as bars on the left axis,
the two interest rates as flat lines on a right-hand percent axis.

Usage:
    from viz.plots import plot_exchange_chart, save_chart
    fig = plot_exchange_chart(params, result)
    save_chart(fig)
"""

from pathlib import Path
from typing import Optional, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from fxparity.io_paths import OUTPUT_DIR  # noqa: E402
from fxparity.ui_logic.calculation_engine import CalculationResult  # noqa: E402
from fxparity.ui_logic.parameters import Parameters  # noqa: E402

SPOT_COLOR = "#00bbff"
FORWARD_COLOR = "#50037f"
EDGE_COLOR = "#06005a"
DOMESTIC_COLOR = "#7a46ff"
FOREIGN_COLOR = "#ea792d"
GRID_COLOR = "#e5e7eb"

PERIOD_LABELS = ["t = 0", "t = 1"]


def _ensure_plots_dir() -> Path:
    """Ensure `output/plots/` exists and return the path."""
    plots_dir = OUTPUT_DIR / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    return plots_dir


def exchange_axis_limits(params: Parameters, result: CalculationResult) -> Tuple[float, float]:
    """Exchange-rate axis range: both rates plus 30% of their spread (at least 0.1)."""
    low = min(params.spot_rate, result.forward_rate)
    high = max(params.spot_rate, result.forward_rate)
    padding = max((high - low) * 0.3, 0.1)
    return max(0.0, low - padding), high + padding


def rate_axis_limits(params: Parameters) -> Tuple[float, float]:
    """Interest-rate axis range: both rates plus half their spread (at least 0.5 points)."""
    low = min(params.domestic_rate, params.foreign_rate)
    high = max(params.domestic_rate, params.foreign_rate)
    padding = max((high - low) * 0.5, 0.5)
    return max(0.0, low - padding), high + padding


def plot_exchange_chart(params: Parameters, result: CalculationResult) -> plt.Figure:
    """Bars for spot and forward rate, lines for the domestic and foreign rates."""
    fig, ax = plt.subplots(figsize=(8, 5))
    x = range(len(PERIOD_LABELS))

    ax.bar(
        x,
        [params.spot_rate, result.forward_rate],
        color=[SPOT_COLOR, FORWARD_COLOR],
        edgecolor=EDGE_COLOR,
        linewidth=2,
        label="Exchange Rate",
        zorder=1,
    )
    ax.set_ylim(*exchange_axis_limits(params, result))
    ax.set_ylabel("Exchange Rate")
    ax.set_xticks(list(x))
    ax.set_xticklabels(PERIOD_LABELS)
    ax.grid(True, axis="y", color=GRID_COLOR)

    rate_ax = ax.twinx()
    rate_ax.plot(
        x,
        [params.domestic_rate, params.domestic_rate],
        color=DOMESTIC_COLOR,
        linewidth=3,
        marker="o",
        markersize=6,
        label="Domestic Rate",
    )
    rate_ax.plot(
        x,
        [params.foreign_rate, params.foreign_rate],
        color=FOREIGN_COLOR,
        linewidth=3,
        marker="o",
        markersize=6,
        label="Foreign Rate",
    )
    rate_ax.set_ylim(*rate_axis_limits(params))
    rate_ax.set_ylabel("Interest Rate (%)")

    ax.set_title(f"Spot {params.spot_rate:.4f} → Forward {result.forward_rate:.4f}")
    fig.tight_layout()
    return fig


def save_chart(fig: plt.Figure, filename: str = "forward_exchange.png", plots_dir: Optional[Path] = None) -> Path:
    """Write the figure as PNG, under `output/plots/` unless a directory is given."""
    if plots_dir is None:
        plots_dir = _ensure_plots_dir()
    else:
        plots_dir.mkdir(parents=True, exist_ok=True)
    out_path = plots_dir / filename
    fig.savefig(out_path, bbox_inches="tight", dpi=150)
    plt.close(fig)
    return out_path
