# src/bondytm/main_cli.py
import argparse
import logging
import os
from typing import List, Optional

import numpy as np
import pandas as pd

# package-relative imports (works when installed as bondytm)
from . import config
from .bonds import YTM_COLUMN
from .chart import plot_cash_flows
from .metrics import calculate_bond_ytm_metrics
from .validation import InvalidParameters, parse_parameters

logger = logging.getLogger(__name__)

# CSV column -> BondParameters field
CSV_COLUMNS = {
    "bond_price": "bond_price",
    "coupon_payment": "coupon_payment",
    "years": "years",
    "face_value": "face_value",
    "freq": "frequency",
}

# money to cents, yield as a decimal rate
TABLE_DECIMALS = {
    "Time (Years)": 2,
    YTM_COLUMN: 6,
    "Coupon Payment": 2,
    "Face Value": 2,
    "Total Cash Flow": 2,
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ---------- helpers ----------
def _require_file(path: str) -> None:
    if not os.path.isfile(path):
        raise SystemExit(f"Error: file not found: {path}")


def _equation(result, price: float, face: float) -> str:
    n = result.periods
    return (
        f"{price:.2f} = sum_{{t=1..{n}}} {result.coupon_payment:.2f}/(1+y)^t + {face:.2f}/(1+y)^{n}"
        f"  =>  y = {result.yield_per_period * 100:.4f}% per period,"
        f" YTM = {result.bond_equivalent_yield * 100:.4f}% annualized"
    )


def _print_kv(title: str, mapping: dict) -> None:
    print(f"\n{title}:")
    for k, v in mapping.items():
        if isinstance(v, (float, np.floating)):
            print(f"{k} {float(v):.6f}")
        else:
            print(f"{k} {v}")


# ---------- commands ----------
def cmd_ytm(price: float, coupon: float, years: float, face: float, freq: int,
            table: bool, chart: Optional[str], out: Optional[str]) -> None:
    try:
        params = parse_parameters({
            "bond_price": price,
            "coupon_payment": coupon,
            "years": years,
            "face_value": face,
            "frequency": freq,
        })
    except InvalidParameters as exc:
        raise SystemExit(f"Error: {exc}")

    result = calculate_bond_ytm_metrics(params)

    _print_kv("Yield to maturity", {
        "yield_per_period": result.yield_per_period,
        "bond_equivalent_yield": result.bond_equivalent_yield,
        "effective_annual_yield": result.effective_annual_yield,
        "periods": result.periods,
        "coupon_per_period": result.coupon_payment,
        "iterations": result.iterations,
    })
    print(f"\nPrice vs Par: {result.pricing_analysis.description} ({result.pricing_analysis.detail})")
    print(f"\nEquation: {_equation(result, params.bond_price, params.face_value)}")

    schedule = result.schedule_frame()
    if table:
        print("\nCash flow schedule:")
        print(schedule.round(TABLE_DECIMALS).to_string(index=False))

    if out:
        schedule.to_csv(out, index=False)
        print(f"Saved: {out}")

    if chart:
        plot_cash_flows(result, out_path=chart)


def cmd_bond(file: str, out: str) -> None:
    _require_file(file)
    df = pd.read_csv(file)

    required_cols = {"bond_price", "coupon_payment", "years", "face_value"}
    if not required_cols.issubset(df.columns):
        missing = required_cols - set(df.columns)
        raise SystemExit(f"Error: missing required columns: {sorted(missing)}")

    print("Loaded bonds:")
    print(df)

    rows = []
    skipped = 0
    for idx, r in df.iterrows():
        name = r.get("name", f"bond_{idx}")

        raw = {field: r.get(col) for col, field in CSV_COLUMNS.items()}
        if raw["frequency"] is None or pd.isna(raw["frequency"]):
            raw["frequency"] = config.DEFAULT_FREQUENCY

        try:
            params = parse_parameters(raw)
        except InvalidParameters as exc:
            logger.warning("Row %s (%s) skipped: %s", idx, name, exc)
            print(f"Row {idx} ({name}) skipped: {exc}")
            skipped += 1
            continue

        result = calculate_bond_ytm_metrics(params)
        rows.append({"name": name, **result.to_dict()})

    out_df = pd.DataFrame(rows)
    print("\nBond yields:")
    print(out_df.round(6))
    if skipped:
        print(f"\n{skipped} row(s) skipped")

    out_path = out or config.DEFAULT_BATCH_OUTPUT
    out_df.to_csv(out_path, index=False)
    print(f"\nSaved: {out_path}")


# ---------- cli ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Bond Yield to Maturity Calculator")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help=f"Logging level (default: {config.LOG_LEVEL})")
    sub = p.add_subparsers(dest="cmd", required=True)

    # ytm
    y = sub.add_parser("ytm", help="Solve the yield to maturity of one bond")
    y.add_argument("--price", type=float, default=config.DEFAULT_BOND_PRICE, help=f"Market price (default: {config.DEFAULT_BOND_PRICE})")
    y.add_argument("--coupon", type=float, default=config.DEFAULT_COUPON_PAYMENT, help=f"Annual coupon payment in currency units (default: {config.DEFAULT_COUPON_PAYMENT})")
    y.add_argument("--years", type=float, default=config.DEFAULT_YEARS, help=f"Years to maturity (default: {config.DEFAULT_YEARS})")
    y.add_argument("--face", type=float, default=config.DEFAULT_FACE_VALUE, help=f"Face value (default: {config.DEFAULT_FACE_VALUE})")
    y.add_argument("--freq", type=int, default=config.DEFAULT_FREQUENCY, help=f"Payments per year (default: {config.DEFAULT_FREQUENCY})")
    y.add_argument("--table", action="store_true", help="Print the cash flow schedule")
    y.add_argument("--chart", default=None, help="Optional output PNG for the cash flow chart")
    y.add_argument("--out", default=None, help="Optional output CSV for the cash flow schedule")

    # bond
    b = sub.add_parser("bond", help="Solve yields for bonds from CSV")
    b.add_argument("--file", required=True, help="CSV with columns: name,bond_price,coupon_payment,years,face_value,freq")
    b.add_argument("--out", default=config.DEFAULT_BATCH_OUTPUT, help=f"Output CSV filename (default: {config.DEFAULT_BATCH_OUTPUT})")

    return p


def main(argv: Optional[List[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)
    try:
        config.configure_logging(args.log_level)
    except ValueError as exc:
        # BONDYTM_LOG_LEVEL bypasses the argparse choices
        raise SystemExit(f"Error: {exc}")

    if args.cmd == "ytm":
        cmd_ytm(args.price, args.coupon, args.years, args.face, args.freq, args.table, args.chart, args.out)
    elif args.cmd == "bond":
        cmd_bond(args.file, args.out)
    else:
        p.print_help()
        raise SystemExit(2)


if __name__ == "__main__":
    main()
