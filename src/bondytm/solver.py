from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List

from .bonds import BondParameters, present_value

logger = logging.getLogger(__name__)

# Bisection bracket for the periodic rate: 0% to 100% per period
LOWER_BOUND = 0.0
UPPER_BOUND = 1.0
MAX_ITERATIONS = 200
TOLERANCE = 1e-7


@dataclass(frozen=True)
class YieldSolution:
    yield_per_period: float
    bond_equivalent_yield: float     # periodic rate * frequency
    effective_annual_yield: float    # (1 + periodic rate) ** frequency - 1
    periods: int
    coupon_payment: float            # periodic coupon
    cash_flows: List[float]          # periods 1..n
    iterations: int


def bisect_rate(flows: List[float], target_price: float) -> tuple:
    """
    Find the periodic rate at which ``flows`` discount to ``target_price``.

    Present value falls as the rate rises, so a PV above the target means the
    rate is still too low. Roots outside the bracket converge to the nearest
    bound.

    Returns
    -------
    (rate, iterations)
    """
    low = LOWER_BOUND
    high = UPPER_BOUND
    iterations = 0

    while iterations < MAX_ITERATIONS and (high - low) > TOLERANCE:
        mid = (low + high) / 2
        if present_value(flows, mid) > target_price:
            low = mid
        else:
            high = mid
        iterations += 1

    if low == LOWER_BOUND or high == UPPER_BOUND:
        logger.warning(
            "Yield search stayed pinned to the [%s, %s] bracket edge for price %s; "
            "the true periodic yield may lie outside it",
            LOWER_BOUND, UPPER_BOUND, target_price,
        )

    return (low + high) / 2, iterations


def solve_ytm(params: BondParameters) -> YieldSolution:
    flows = params.cash_flows()
    rate, iterations = bisect_rate(flows, params.bond_price)
    logger.debug(
        "Solved periodic yield %.10f in %d iterations (%d periods)",
        rate, iterations, params.periods,
    )

    freq = params.frequency
    return YieldSolution(
        yield_per_period=rate,
        bond_equivalent_yield=rate * freq,
        effective_annual_yield=(1 + rate) ** freq - 1,
        periods=params.periods,
        coupon_payment=params.coupon_per_period,
        cash_flows=flows,
        iterations=iterations,
    )
