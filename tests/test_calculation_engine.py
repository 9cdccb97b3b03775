"""Tests for the covered interest-rate parity calculation."""

import math

import pytest

from fxparity.ui_logic import Parameters, calculate_exchange_metrics, calculate_forward_exchange


@pytest.mark.parametrize(
    "spot, rd, rf, expected",
    [
        (1.2602, 2.360, 2.430, 1.2611),
        (1.26, 2.5, 3.0, 1.2663),
        (1.25, 2.5, 3.0, 1.2563),
    ],
)
def test_known_forward_rates(spot, rd, rf, expected):
    result = calculate_forward_exchange(spot, rd, rf)
    assert abs(result.forward_rate - expected) <= 0.001


@pytest.mark.parametrize(
    "spot, rd, rf",
    [(0.1, -99, 50), (10, 50, -99), (1.26, 2.5, 3.0), (0.75, -1.5, 0.0), (3.3, 12.0, 12.0)],
)
def test_forward_follows_parity(spot, rd, rf):
    result = calculate_forward_exchange(spot, rd, rf)
    expected = spot * math.exp(rf / 100 - rd / 100)
    assert math.isclose(result.forward_rate, expected, rel_tol=1e-9)


@pytest.mark.parametrize(
    "spot, rd, rf",
    [(0.1, -99, -99), (0.1, 50, 50), (10, -99, 50), (10, 50, -99), (1.26, 2.5, 3.0), (4.2, 7.25, -3.1)],
)
def test_strategies_reconverge_within_field_bounds(spot, rd, rf):
    result = calculate_forward_exchange(spot, rd, rf)
    assert abs(result.domestic_equivalent - result.domestic_ending_value) < 1e-9
    assert result.no_arbitrage is True
    assert result.is_valid is True


def test_default_parameters_breakdown():
    result = calculate_exchange_metrics(Parameters())
    assert result.domestic_ending_value == pytest.approx(1000 * math.exp(0.025))
    assert result.foreign_currency_amount == pytest.approx(1260.0)
    assert result.foreign_ending_value == pytest.approx(1260.0 * math.exp(0.03))
    assert result.arbitrage_diff < 1e-9


def test_simple_growth_uses_one_plus_rate():
    result = calculate_forward_exchange(1.26, 2.5, 3.0, growth="simple")
    assert result.domestic_ending_value == pytest.approx(1025.0)
    assert result.foreign_ending_value == pytest.approx(1260.0 * 1.03)
    # Simple growth against a continuously compounded forward leaves a visible gap
    assert result.arbitrage_diff == pytest.approx(1025.0 - 1030.0 * math.exp(-0.005))
    assert result.no_arbitrage is False


def test_equal_rates_give_forward_equal_to_spot():
    result = calculate_forward_exchange(1.5, 4.0, 4.0)
    assert result.forward_rate == pytest.approx(1.5)


def test_custom_notional_and_tolerance():
    result = calculate_forward_exchange(1.26, 2.5, 3.0, notional=1_000_000, tolerance=1e-3)
    assert result.foreign_currency_amount == pytest.approx(1_260_000)
    assert result.no_arbitrage is True


def test_is_valid_flags_non_physical_inputs():
    assert calculate_forward_exchange(-1, 2.5, 3.0).is_valid is False
    assert calculate_forward_exchange(1.26, -100, 3.0).is_valid is False
    assert calculate_forward_exchange(1.26, 2.5, -150).is_valid is False


def test_zero_spot_does_not_raise():
    result = calculate_forward_exchange(0.0, 2.5, 3.0)
    assert result.forward_rate == 0.0
    assert math.isnan(result.domestic_equivalent)
    assert result.no_arbitrage is False
    assert result.is_valid is False


def test_extreme_differential_overflows():
    with pytest.raises(OverflowError):
        calculate_forward_exchange(1.0, -1e6, 1e6)


def test_unknown_growth_convention():
    with pytest.raises(ValueError, match="Unknown growth convention"):
        calculate_forward_exchange(1.26, 2.5, 3.0, growth="annual")


def test_result_to_dict():
    data = calculate_forward_exchange(1.26, 2.5, 3.0).to_dict()
    assert set(data) == {
        "forward_rate",
        "domestic_ending_value",
        "foreign_currency_amount",
        "foreign_ending_value",
        "domestic_equivalent",
        "arbitrage_diff",
        "no_arbitrage",
        "is_valid",
    }
