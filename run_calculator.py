#!/usr/bin/env python3
from __future__ import annotations

"""
Command-line runner for the forward exchange calculator.

Responsibilities:
- Configure logging to both console and `logs/run.log`
- Load settings (defaults, quiet period, growth convention) from YAML
- Run the startup self-tests against known forward rates
- Feed any given raw inputs through the same validated pipeline the UI
  uses, then print the results block and the comparison table
- Optionally save the spot/forward chart under `output/plots/`

Exit codes: 0 on a valid result, 1 on invalid inputs or a failed
self-test, 2 when the settings file is rejected.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from fxparity.io_paths import DEFAULT_SETTINGS_PATH, LOGS_DIR
from fxparity.self_test import run_self_tests, summarize
from fxparity.settings import SettingsError, load_settings
from fxparity.ui_logic import ManualClock, create_session
from fxparity.ui_logic.parameters import DOMESTIC_RATE, FOREIGN_RATE, SPOT_RATE
from fxparity.utils_logging import configure_logging
from fxparity.views import comparison_table, results_lines, validation_summary


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for the runner.

    Inputs are taken as raw strings so that they go through the same
    parsing and validation as values typed into the UI.
    """
    p = argparse.ArgumentParser(description="Forward Exchange Rate Calculator – Runner")
    p.add_argument("--spot", type=str, help="Spot exchange rate (domestic per foreign)")
    p.add_argument("--domestic", type=str, help="Domestic interest rate in percent")
    p.add_argument("--foreign", type=str, help="Foreign interest rate in percent")
    p.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Path to a settings YAML file (default: config/settings.yaml if present)",
    )
    p.add_argument("--debug", action="store_true")
    p.add_argument(
        "--visualize",
        action="store_true",
        help="Save the spot/forward chart under output/plots/",
    )
    p.add_argument(
        "--self-test-only",
        action="store_true",
        help="Run the self-tests and exit",
    )
    return p.parse_args(argv)


def _resolve_settings_path(settings: Optional[str]) -> Optional[Path]:
    if settings:
        return Path(settings)
    if DEFAULT_SETTINGS_PATH.exists():
        return DEFAULT_SETTINGS_PATH
    return None


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(LOGS_DIR, debug=args.debug)
    log = logging.getLogger("runner")

    try:
        settings = load_settings(_resolve_settings_path(args.settings))
    except SettingsError as e:
        log.error("Settings rejected: %s", e)
        return 2

    outcomes = run_self_tests(tolerance=settings.self_test_tolerance, **settings.calculation_options())
    counts = summarize(outcomes)
    if counts["failed"]:
        log.warning("%d of %d self-tests failed", counts["failed"], len(outcomes))
    if args.self_test_only:
        return 1 if counts["failed"] else 0

    session = create_session(settings, timers=ManualClock())
    for field_name, raw in ((SPOT_RATE, args.spot), (DOMESTIC_RATE, args.domestic), (FOREIGN_RATE, args.foreign)):
        if raw is not None:
            session.submit(field_name, raw)
    session.flush()

    state = session.state
    messages = validation_summary(state.errors)
    if messages:
        for m in messages:
            log.error("Invalid input: %s", m)
        print("Please correct the following:")
        for m in messages:
            print(f"  - {m}")
        return 1

    result = state.exchange_calculations
    if result is None:
        log.error("Calculation failed for %s", state.parameters)
        return 1

    params = state.parameters
    print("\n".join(results_lines(result, params, notional=settings.notional)))
    print()
    print(comparison_table(result, params, notional=settings.notional).to_string())

    if args.visualize:
        try:
            from viz.plots import plot_exchange_chart, save_chart
        except Exception as e:
            log.error("Visualization dependencies missing or import failed: %s", e)
            raise

        out_path = save_chart(plot_exchange_chart(params, result))
        log.info("Chart saved to %s", out_path)

    return 1 if counts["failed"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
