"""Tests for settings loading and calculator session wiring."""

import textwrap
from pathlib import Path

import pytest

from fxparity.io_paths import DEFAULT_SETTINGS_PATH
from fxparity.settings import Settings, SettingsError, load_settings, settings_from_dict
from fxparity.ui_logic import ManualClock, Parameters, create_session


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


class TestSettings:

    def test_no_path_gives_defaults(self):
        settings = load_settings(None)
        assert settings == Settings()
        assert settings.defaults == Parameters(1.26, 2.5, 3.0)
        assert settings.quiet_period == 0.3
        assert settings.growth == "continuous"

    def test_shipped_settings_file_matches_defaults(self):
        assert load_settings(DEFAULT_SETTINGS_PATH) == Settings()

    def test_yaml_overrides(self, tmp_path):
        path = _write(tmp_path, """
            defaults:
              spot_rate: 1.1
            quiet_period: 0.5
            growth: Simple
        """)
        settings = load_settings(path)
        assert settings.defaults == Parameters(1.1, 2.5, 3.0)
        assert settings.quiet_period == 0.5
        assert settings.growth == "simple"
        assert settings.calculation_options() == {"notional": 1000.0, "tolerance": 0.01, "growth": "simple"}

    def test_empty_file_gives_defaults(self, tmp_path):
        assert load_settings(_write(tmp_path, "")) == Settings()

    def test_unknown_key_rejected(self, tmp_path):
        with pytest.raises(SettingsError, match="Unknown settings keys: debounce"):
            load_settings(_write(tmp_path, "debounce: 0.3\n"))

    def test_invalid_default_rejected(self):
        with pytest.raises(SettingsError, match="Spot exchange rate must be at least 0.1"):
            settings_from_dict({"defaults": {"spot_rate": 0.01}})

    def test_unknown_default_field_rejected(self):
        with pytest.raises(SettingsError, match="Unknown default fields"):
            settings_from_dict({"defaults": {"volatility": 0.2}})

    def test_non_numeric_value_rejected(self):
        with pytest.raises(SettingsError, match="quiet_period must be a number"):
            settings_from_dict({"quiet_period": "soon"})

    def test_negative_value_rejected(self):
        with pytest.raises(SettingsError, match="notional must be non-negative"):
            settings_from_dict({"notional": -5})

    def test_unknown_growth_rejected(self):
        with pytest.raises(SettingsError, match="growth must be one of"):
            settings_from_dict({"growth": "annual"})

    def test_malformed_yaml(self, tmp_path):
        with pytest.raises(SettingsError, match="Invalid YAML"):
            load_settings(_write(tmp_path, "defaults: [unclosed\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(SettingsError, match="Cannot read settings file"):
            load_settings(tmp_path / "missing.yaml")

    def test_settings_error_is_value_error(self):
        assert issubclass(SettingsError, ValueError)


class TestCalculatorSession:

    def test_initial_state_has_result(self):
        session = create_session(timers=ManualClock())
        state = session.state
        assert state.parameters == Parameters(1.26, 2.5, 3.0)
        assert state.errors == {}
        assert abs(state.exchange_calculations.forward_rate - 1.2663) <= 0.001

    def test_settings_flow_into_session(self):
        clock = ManualClock()
        settings = Settings(defaults=Parameters(1.25, 2.5, 3.0), quiet_period=1.0, growth="simple")
        session = create_session(settings, timers=clock)

        assert abs(session.state.exchange_calculations.forward_rate - 1.2563) <= 0.001
        assert session.state.exchange_calculations.domestic_ending_value == pytest.approx(1025.0)

        session.submit("spot_rate", "1.3")
        clock.advance(0.5)
        assert session.state.spot_rate == 1.25
        clock.advance(0.6)
        assert session.state.spot_rate == 1.3

    def test_sessions_are_independent(self):
        first = create_session(timers=ManualClock())
        second = create_session(timers=ManualClock())

        first.submit("spot_rate", "-1")
        first.flush()

        assert "spot_rate" in first.state.errors
        assert second.state.errors == {}
        assert second.state.exchange_calculations is not None

    def test_subscribe_and_close(self):
        clock = ManualClock()
        session = create_session(timers=clock)
        seen = []
        handle = session.subscribe(seen.append)

        session.submit("foreign_rate", "3.1")
        session.flush()
        assert seen[-1].foreign_rate == 3.1

        handle.unsubscribe()
        session.submit("foreign_rate", "4")
        session.close()
        clock.advance(1.0)
        assert session.state.foreign_rate == 3.1

    def test_invalid_scenario(self):
        session = create_session(timers=ManualClock())
        session.submit("spot_rate", "-1")
        session.submit("domestic_rate", "2.5")
        session.submit("foreign_rate", "3.0")
        session.flush()

        assert "spot_rate" in session.state.errors
        assert session.state.exchange_calculations is None
