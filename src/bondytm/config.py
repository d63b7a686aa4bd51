# Purpose: Central settings for the bondytm toolkit: default bond inputs,
# output file names and logging. Override the log level with BONDYTM_LOG_LEVEL.

import logging
import os
from typing import Optional

# Default bond shown when no inputs are given (semiannual, 5 years)
DEFAULT_BOND_PRICE = 97.8
DEFAULT_COUPON_PAYMENT = 11.0   # annual, currency units
DEFAULT_YEARS = 5
DEFAULT_FACE_VALUE = 100.0
DEFAULT_FREQUENCY = 2

# Output files
DEFAULT_BATCH_OUTPUT = "bond_ytm_output.csv"
DEFAULT_CHART_PATH = "cash_flows.png"

# Logging
LOG_LEVEL = os.environ.get("BONDYTM_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Chart colours
PRINCIPAL_COLOR = "#0079a6"
COUPON_COLOR = "#3c6ae5"
YTM_COLOR = "#7a46ff"


def configure_logging(level: Optional[str] = None) -> None:
    name = (level or LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(level=name, format=LOG_FORMAT)
