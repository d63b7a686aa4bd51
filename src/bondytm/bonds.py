from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

@dataclass(frozen=True)
class BondParameters:
    bond_price: float        # Market price
    coupon_payment: float    # Annual coupon in currency units (e.g., 6.0 on a 100 face)
    years: float             # Years to maturity
    face_value: float        # Redemption value (par)
    frequency: int = 2       # Coupon payments per year (2=semiannual, 1=annual, 4=quarterly)

    @property
    def periods(self) -> int:
        return period_count(self.years, self.frequency)

    @property
    def coupon_per_period(self) -> float:
        return self.coupon_payment / self.frequency

    def cash_flows(self) -> List[float]:
        # periods 1..n, redemption folded into the last one
        c = self.coupon_per_period
        n = self.periods
        flows = [c] * n
        if flows:
            flows[-1] += self.face_value
        return flows

    def present_value(self, rate: float) -> float:
        return present_value(self.cash_flows(), rate)


@dataclass(frozen=True)
class CashFlow:
    period: int
    time_years: float
    coupon_payment: float
    principal_payment: float
    total_cash_flow: float


def period_count(years: float, frequency: int) -> int:
    """Number of coupon periods, ``years * frequency`` as an integer.

    Validation rejects non-integral counts before the engine runs, so the
    rounding only absorbs float noise such as ``2.3 * 10``.
    """
    return int(round(years * frequency))


def present_value(flows: Sequence[float], rate: float) -> float:
    """Discount per-period flows (first entry at t=1) at a periodic rate."""
    return sum(cf / ((1 + rate) ** (t + 1)) for t, cf in enumerate(flows))


def generate_cash_flows(
    bond_price: float,
    face_value: float,
    frequency: int,
    years: float,
    coupon_payment: float,
) -> List[CashFlow]:
    """
    Build the full cash-flow schedule of a bond from the buyer's side.

    Parameters
    ----------
    bond_price : float
        Purchase price, paid out at period 0.
    face_value : float
        Redemption amount received with the final coupon.
    frequency : int
        Coupon payments per year.
    years : float
        Years to maturity.
    coupon_payment : float
        Periodic coupon (annual coupon already divided by frequency).

    Returns
    -------
    list of CashFlow
        ``periods + 1`` records, period 0 through ``periods``.
    """
    periods = period_count(years, frequency)

    # Period 0: purchase outflow
    flows = [
        CashFlow(
            period=0,
            time_years=0.0,
            coupon_payment=0.0,
            principal_payment=-bond_price,
            total_cash_flow=-bond_price,
        )
    ]

    for t in range(1, periods + 1):
        principal = face_value if t == periods else 0.0
        flows.append(
            CashFlow(
                period=t,
                time_years=t / frequency,
                coupon_payment=coupon_payment,
                principal_payment=principal,
                total_cash_flow=coupon_payment + principal,
            )
        )
    return flows


SCHEDULE_COLUMNS = ["Period", "Time (Years)", "Coupon Payment", "Face Value", "Total Cash Flow"]
YTM_COLUMN = "YTM (r)"


def cash_flow_frame(flows: Sequence[CashFlow], ytm: Optional[float] = None) -> pd.DataFrame:
    """Tabular schedule; with ``ytm`` (annualized) every row also shows the solved yield."""
    rows = [
        {
            "Period": cf.period,
            "Time (Years)": cf.time_years,
            "Coupon Payment": cf.coupon_payment,
            "Face Value": cf.principal_payment,
            "Total Cash Flow": cf.total_cash_flow,
        }
        for cf in flows
    ]
    df = pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
    if ytm is not None:
        df.insert(2, YTM_COLUMN, ytm)
    return df
