# src/bondytm/chart.py
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from . import config
from .metrics import YTMResult


def plot_cash_flows(
    result: YTMResult,
    out_path: str = config.DEFAULT_CHART_PATH,
    show: bool = False,
) -> pd.DataFrame:
    """
    Plot the cash-flow schedule of a solved bond.

    Parameters
    ----------
    result : YTMResult
        Output of ``calculate_bond_ytm_metrics``.
    out_path : str, optional
        Output path for saving the plot (default: 'cash_flows.png').
        Pass an empty string to skip saving.
    show : bool, optional
        If True, displays the plot interactively.

    Returns
    -------
    pd.DataFrame
        The cash-flow schedule that was plotted.
    """

    df = result.schedule_frame()
    x = np.arange(len(df))
    labels = [f"{t:.1f}" for t in df["Time (Years)"]]

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.bar(x, df["Face Value"], color=config.PRINCIPAL_COLOR, label="Principal/Purchase")
    # coupons stack on top of the redemption bar
    ax.bar(
        x,
        df["Coupon Payment"],
        bottom=df["Face Value"].clip(lower=0),
        color=config.COUPON_COLOR,
        label="Coupon payments",
    )
    ax.axhline(0, color="black", lw=0.8)
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_xlabel("Time (Years)")
    ax.set_ylabel("Cash Flow")
    ax.grid(True, axis="y", linestyle="--", alpha=0.6)

    ax2 = ax.twinx()
    ytm_pct = result.bond_equivalent_yield * 100
    ax2.plot(x, [ytm_pct] * len(x), color=config.YTM_COLOR, lw=2, label="Yield-to-maturity (r)")
    ax2.set_ylabel("YTM (%)")
    ax2.set_ylim(0, max(ytm_pct * 1.5, 1.0))

    handles = ax.get_legend_handles_labels()
    handles2 = ax2.get_legend_handles_labels()
    ax.legend(handles[0] + handles2[0], handles[1] + handles2[1], loc="upper left")
    ax.set_title(f"Bond Cash Flows (YTM {ytm_pct:.2f}%)")

    if out_path:
        fig.savefig(out_path, bbox_inches="tight")
        print(f"Saved plot: {out_path}")

    if show:
        plt.show()
    plt.close(fig)

    return df
