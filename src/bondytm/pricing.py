from __future__ import annotations
from dataclasses import dataclass

PAR = "par"
PREMIUM = "premium"
DISCOUNT = "discount"

PAR_TOLERANCE = 0.01  # currency units

@dataclass(frozen=True)
class PricingAnalysis:
    kind: str           # par / premium / discount
    description: str
    detail: str


def analyze_bond_pricing(bond_price: float, face_value: float) -> PricingAnalysis:
    difference = bond_price - face_value
    if abs(difference) < PAR_TOLERANCE:
        return PricingAnalysis(PAR, "Trading at par", "Price equals face value")
    if difference > 0:
        return PricingAnalysis(PREMIUM, "Trading at premium", "Price > Par")
    return PricingAnalysis(DISCOUNT, "Trading at discount", "Price < Par")
