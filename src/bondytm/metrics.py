"""Bond YTM metrics: the single entry point for anything that displays results."""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import List, Mapping, Union

import pandas as pd

from .bonds import BondParameters, CashFlow, cash_flow_frame, generate_cash_flows
from .pricing import PricingAnalysis, analyze_bond_pricing
from .solver import solve_ytm


@dataclass(frozen=True)
class YTMResult:
    yield_per_period: float
    bond_equivalent_yield: float
    effective_annual_yield: float
    periods: int
    coupon_payment: float            # periodic coupon
    cash_flows: List[CashFlow]       # period 0..n schedule
    iterations: int
    pricing_analysis: PricingAnalysis

    def schedule_frame(self) -> pd.DataFrame:
        return cash_flow_frame(self.cash_flows, ytm=self.bond_equivalent_yield)

    def to_dict(self) -> dict:
        """Flat summary (no schedule), suitable for a DataFrame row."""
        return {
            "yield_per_period": self.yield_per_period,
            "bond_equivalent_yield": self.bond_equivalent_yield,
            "effective_annual_yield": self.effective_annual_yield,
            "periods": self.periods,
            "coupon_payment": self.coupon_payment,
            "iterations": self.iterations,
            "pricing": self.pricing_analysis.kind,
            "pricing_detail": self.pricing_analysis.detail,
        }


def calculate_bond_ytm_metrics(params: Union[BondParameters, Mapping]) -> YTMResult:
    """
    Solve the yield, build the cash-flow schedule and classify the price.

    Parameters
    ----------
    params : BondParameters or mapping
        Already-validated bond parameters. A mapping must use the
        ``BondParameters`` field names.

    Returns
    -------
    YTMResult
    """
    if not isinstance(params, BondParameters):
        params = BondParameters(**params)

    solution = solve_ytm(params)

    # schedule uses the solver's periodic coupon so both agree on the flows
    schedule = generate_cash_flows(
        bond_price=params.bond_price,
        face_value=params.face_value,
        frequency=params.frequency,
        years=params.years,
        coupon_payment=solution.coupon_payment,
    )

    pricing = analyze_bond_pricing(params.bond_price, params.face_value)

    fields = asdict(solution)
    fields["cash_flows"] = schedule
    return YTMResult(pricing_analysis=pricing, **fields)
