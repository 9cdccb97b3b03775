from __future__ import annotations

"""Smoke tests for the chart, the Streamlit-side state and the runner."""

from pathlib import Path

import pytest

import run_calculator
import ui.state as ui_state
from fxparity.ui_logic import Parameters, calculate_exchange_metrics
from ui.state import SESSION_KEY, VIEW_CHART, RecordingPresenter, get_calculator_ui
from viz.plots import exchange_axis_limits, plot_exchange_chart, rate_axis_limits, save_chart


class TestPlots:

    def test_axis_padding(self):
        params = Parameters(1.26, 2.5, 3.0)
        result = calculate_exchange_metrics(params)

        low, high = exchange_axis_limits(params, result)
        assert low == pytest.approx(1.16)
        assert high == pytest.approx(result.forward_rate + 0.1)

        assert rate_axis_limits(params) == pytest.approx((2.0, 3.5))

    def test_rate_axis_floor_at_zero(self):
        assert rate_axis_limits(Parameters(1.0, -5.0, 1.0))[0] == 0.0

    def test_chart_saved(self, tmp_path: Path):
        params = Parameters(1.2602, 2.36, 2.43)
        fig = plot_exchange_chart(params, calculate_exchange_metrics(params))
        out = save_chart(fig, "chart.png", plots_dir=tmp_path / "plots")

        assert out.exists()
        assert out.stat().st_size > 0


class TestUIState:

    def test_bundle_created_once(self):
        store = {}
        ui = get_calculator_ui(store)

        assert store[SESSION_KEY] is ui
        assert get_calculator_ui(store) is ui
        assert ui.view_mode == VIEW_CHART
        assert ui.raw_inputs == {"spot_rate": "1.2600", "domestic_rate": "2.500", "foreign_rate": "3.000"}
        assert ui.presenter.result is not None
        ui.session.close()

    def test_submit_and_settle_updates_presenter(self):
        ui = get_calculator_ui({})
        ui.submit_and_settle("spot_rate", "0")

        assert ui.presenter.field_errors == {"spot_rate": "Spot exchange rate must be at least 0.1"}
        assert ui.presenter.result is None
        assert ui.raw_inputs["spot_rate"] == "0"

        ui.submit_and_settle("spot_rate", "1.25")
        assert ui.presenter.field_errors == {}
        assert abs(ui.presenter.result.forward_rate - 1.2563) <= 0.001

    def test_recording_presenter(self):
        presenter = RecordingPresenter()
        presenter.mark_field("foreign_rate", "Foreign interest rate cannot exceed 50%")
        presenter.mark_field("foreign_rate", None)
        presenter.present(Parameters(), None, {"spot_rate": "x"})

        assert presenter.field_errors == {}
        assert presenter.errors == {"spot_rate": "x"}
        assert presenter.present_count == 1

    def test_ui_logging_configured_once_per_process(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(ui_state, "_logging_configured", False)
        monkeypatch.setattr(ui_state, "configure_logging", lambda log_dir, **k: calls.append((log_dir, k)))

        assert ui_state.configure_ui_logging(tmp_path) is True
        assert ui_state.configure_ui_logging(tmp_path) is False
        assert calls == [(tmp_path, {"filename": "ui.log"})]


class TestRunner:

    @pytest.fixture(autouse=True)
    def _no_log_files(self, monkeypatch):
        # keep root handlers (and pytest's capture) untouched
        calls = []
        monkeypatch.setattr(run_calculator, "configure_logging", lambda *a, **k: calls.append((a, k)))
        return calls

    def test_logging_configured_once(self, _no_log_files):
        run_calculator.main(["--self-test-only", "--debug"])
        assert len(_no_log_files) == 1
        assert _no_log_files[0][1] == {"debug": True}

    def test_valid_inputs(self, capsys):
        rc = run_calculator.main(["--spot", "1.2602", "--domestic", "2.360", "--foreign", "2.430"])
        out = capsys.readouterr().out

        assert rc == 0
        assert "Forward Exchange Rate: 1.2611" in out
        assert "Foreign Investment (converted)" in out

    def test_invalid_inputs(self, capsys):
        rc = run_calculator.main(["--spot", "-1"])
        out = capsys.readouterr().out

        assert rc == 1
        assert "Spot exchange rate must be at least 0.1" in out

    def test_self_test_only(self):
        assert run_calculator.main(["--self-test-only"]) == 0

    def test_rejected_settings(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("growth: annual\n", encoding="utf-8")
        assert run_calculator.main(["--settings", str(bad)]) == 2
