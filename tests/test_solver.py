"""Tests for the bisection yield solver."""

import logging

import pytest

from bondytm.bonds import BondParameters, present_value
from bondytm.solver import MAX_ITERATIONS, TOLERANCE, UPPER_BOUND, bisect_rate, solve_ytm


def _bond(price, coupon=6, years=5, face=100, freq=2):
    return BondParameters(bond_price=price, coupon_payment=coupon, years=years, face_value=face, frequency=freq)


def test_par_bond_yield_equals_coupon_rate(par_bond):
    sol = solve_ytm(par_bond)
    assert abs(sol.bond_equivalent_yield - 0.06) <= 1e-4
    assert sol.yield_per_period == pytest.approx(0.03, abs=1e-6)


def test_discount_bond_yields_more():
    assert solve_ytm(_bond(95)).bond_equivalent_yield > 0.06


def test_premium_bond_yields_less():
    assert solve_ytm(_bond(105)).bond_equivalent_yield < 0.06


def test_yield_falls_as_price_rises():
    ytms = [solve_ytm(_bond(p)).bond_equivalent_yield for p in (90, 95, 100, 105, 110)]
    assert all(a > b for a, b in zip(ytms, ytms[1:]))


def test_present_value_round_trip():
    bond = _bond(97.8, coupon=11)
    sol = solve_ytm(bond)
    assert present_value(sol.cash_flows, sol.yield_per_period) == pytest.approx(97.8, abs=1e-4)


def test_annualizations():
    sol = solve_ytm(_bond(95))
    r = sol.yield_per_period
    assert sol.bond_equivalent_yield == r * 2
    assert sol.effective_annual_yield == (1 + r) ** 2 - 1
    assert sol.effective_annual_yield > sol.bond_equivalent_yield


def test_solution_shape(par_bond):
    sol = solve_ytm(par_bond)
    assert sol.periods == 10
    assert sol.coupon_payment == 3.0
    assert sol.cash_flows == [3.0] * 9 + [103.0]


def test_iteration_count_is_fixed_by_tolerance(par_bond):
    # [0, 1] halves exactly; 2**-24 is the first width under 1e-7
    sol = solve_ytm(par_bond)
    assert sol.iterations == 24
    assert 2.0 ** -sol.iterations <= TOLERANCE
    assert sol.iterations < MAX_ITERATIONS


def test_deterministic():
    a = solve_ytm(_bond(93.25, coupon=4.5, years=7, freq=4))
    b = solve_ytm(_bond(93.25, coupon=4.5, years=7, freq=4))
    assert a.iterations == b.iterations
    assert a.yield_per_period == b.yield_per_period


def test_very_cheap_bond_clamps_to_upper_bound(caplog):
    with caplog.at_level(logging.WARNING, logger="bondytm.solver"):
        sol = solve_ytm(_bond(1))
    assert sol.yield_per_period == pytest.approx(UPPER_BOUND, abs=TOLERANCE)
    assert "bracket edge" in caplog.text


def test_overpriced_bond_clamps_to_zero(caplog):
    # undiscounted flows only total 130
    with caplog.at_level(logging.WARNING, logger="bondytm.solver"):
        sol = solve_ytm(_bond(200))
    assert sol.yield_per_period == pytest.approx(0.0, abs=TOLERANCE)
    assert "bracket edge" in caplog.text


def test_no_warning_inside_bracket(par_bond, caplog):
    with caplog.at_level(logging.WARNING, logger="bondytm.solver"):
        solve_ytm(par_bond)
    assert caplog.records == []


def test_zero_coupon_bond():
    # 100 face, 4 years annual, priced for an 8% yield
    price = 100 / 1.08 ** 4
    sol = solve_ytm(_bond(price, coupon=0, years=4, freq=1))
    assert sol.bond_equivalent_yield == pytest.approx(0.08, abs=1e-6)


def test_bisect_rate_on_single_flow():
    rate, iterations = bisect_rate([110.0], 100.0)
    assert rate == pytest.approx(0.10, abs=1e-7)
    assert iterations == 24


def test_zero_frequency_is_not_caught():
    with pytest.raises(ZeroDivisionError):
        solve_ytm(_bond(100, freq=0))
