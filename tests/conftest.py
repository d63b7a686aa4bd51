import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from bondytm.bonds import BondParameters


@pytest.fixture
def par_bond():
    """6% annual coupon, semiannual, 5 years, priced at par."""
    return BondParameters(bond_price=100, coupon_payment=6, years=5, face_value=100, frequency=2)


@pytest.fixture
def bonds_csv(tmp_path):
    """Small batch file: two good bonds and one with a negative price."""
    rows = [
        {"name": "par", "bond_price": 100, "coupon_payment": 6, "years": 5, "face_value": 100, "freq": 2},
        {"name": "discount", "bond_price": 95, "coupon_payment": 6, "years": 5, "face_value": 100, "freq": 2},
        {"name": "broken", "bond_price": -1, "coupon_payment": 6, "years": 5, "face_value": 100, "freq": 2},
    ]
    path = tmp_path / "bonds.csv"
    pd.DataFrame(rows).to_csv(path, index=False)
    return path
