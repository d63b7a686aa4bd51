"""
Input validation for bond parameters.

The yield engine trusts its inputs; everything user-supplied (CLI flags, CSV
rows) goes through here first.
"""

from __future__ import annotations
import math
from typing import Any, Dict, Mapping, Optional

from .bonds import BondParameters

FIELDS = ("bond_price", "coupon_payment", "years", "face_value", "frequency")

LABELS = {
    "bond_price": "Bond price",
    "coupon_payment": "Coupon payment",
    "years": "Years to maturity",
    "face_value": "Face value",
    "frequency": "Payment frequency",
}

# years * frequency may carry float noise (e.g. 2.3 * 10)
PERIOD_EPS = 1e-9
# 100 years of monthly coupons
MAX_PERIODS = 1200


class InvalidParameters(ValueError):
    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        detail = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(f"Invalid bond parameters ({detail})")


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number


def _is_missing(value: Any) -> bool:
    # blank CSV cells arrive as NaN, blank form fields as ""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return isinstance(value, float) and math.isnan(value)


def validate_field(name: str, value: Any) -> Optional[str]:
    """Return an error message for one field, or None if the value is usable."""
    label = LABELS.get(name, name)
    number = _to_number(value)
    if number is None:
        return f"{label} must be a number"
    if not math.isfinite(number):
        return f"{label} must be finite"

    if name == "coupon_payment":
        if number < 0:
            return f"{label} cannot be negative"
    elif name == "frequency":
        if number <= 0 or not number.is_integer():
            return f"{label} must be a positive whole number"
    elif number <= 0:
        return f"{label} must be greater than zero"
    return None


def validate_parameters(values: Mapping[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for name in FIELDS:
        if _is_missing(values.get(name)):
            errors[name] = f"{LABELS[name]} is required"
            continue
        error = validate_field(name, values[name])
        if error:
            errors[name] = error

    # the period count only makes sense once years and frequency are valid
    if "years" not in errors and "frequency" not in errors:
        periods = float(values["years"]) * float(values["frequency"])
        if not math.isfinite(periods) or periods > MAX_PERIODS:
            errors["periods"] = f"Bond cannot have more than {MAX_PERIODS} coupon periods"
        elif abs(periods - round(periods)) > PERIOD_EPS:
            errors["periods"] = (
                f"Years x frequency must be a whole number of periods (got {periods:g})"
            )
        elif round(periods) < 1:
            errors["periods"] = "Bond must have at least one coupon period"
    return errors


def has_errors(errors: Mapping[str, str]) -> bool:
    return bool(errors)


def parse_parameters(values: Mapping[str, Any]) -> BondParameters:
    """Coerce raw values into BondParameters, raising InvalidParameters on failure."""
    errors = validate_parameters(values)
    if has_errors(errors):
        raise InvalidParameters(errors)
    return BondParameters(
        bond_price=float(values["bond_price"]),
        coupon_payment=float(values["coupon_payment"]),
        years=float(values["years"]),
        face_value=float(values["face_value"]),
        frequency=int(float(values["frequency"])),
    )
