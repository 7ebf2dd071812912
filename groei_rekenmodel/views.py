"""View model: engine results as pandas frames for charts and tables."""

from __future__ import annotations

import numpy as np
import pandas as pd

from groei_rekenmodel.analysis import AnyResult, Composition

MONTHLY_COLUMNS = ["month", "year", "balance", "contributions", "returns"]
YEARLY_COLUMNS = [
    "year",
    "months",
    "start_balance",
    "contributions",
    "returns",
    "end_balance",
    "cumulative_contributions",
    "cumulative_returns",
]


def monthly_frame(result: AnyResult) -> pd.DataFrame:
    """One row per month, ``year`` as a fractional axis value."""
    data = result.monthly_data
    df = pd.DataFrame(
        {
            "month": [p.month for p in data],
            "balance": [p.balance for p in data],
            "contributions": [p.cumulative_contributions for p in data],
            "returns": [p.cumulative_returns for p in data],
        }
    )
    df["year"] = df["month"] / 12.0
    return df[MONTHLY_COLUMNS]


def yearly_frame(result: AnyResult) -> pd.DataFrame:
    if not result.yearly_data:
        return pd.DataFrame(columns=YEARLY_COLUMNS)

    initial = result.monthly_data[0].cumulative_contributions
    df = pd.DataFrame(
        {
            "year": [r.year for r in result.yearly_data],
            "months": [r.months for r in result.yearly_data],
            "start_balance": [r.start_balance for r in result.yearly_data],
            "contributions": [r.contributions_this_year for r in result.yearly_data],
            "returns": [r.returns_this_year for r in result.yearly_data],
            "end_balance": [r.end_balance for r in result.yearly_data],
        }
    )
    df["cumulative_contributions"] = initial + df["contributions"].cumsum()
    df["cumulative_returns"] = df["returns"].cumsum()
    return df[YEARLY_COLUMNS]


def composition_frame(comp: Composition, labels: tuple[str, str, str] = ("Initial", "Contributions", "Returns")) -> pd.DataFrame:
    """Long format for a donut chart, with each slice's share of the total."""
    amounts = np.array([comp.initial, comp.contributions, comp.returns], dtype=float)
    total = float(amounts.sum())
    share = amounts / total * 100.0 if total > 0 else np.zeros_like(amounts)
    return pd.DataFrame({"component": list(labels), "amount": amounts, "share_pct": share})


def sample_points(df: pd.DataFrame, max_points: int = 100) -> pd.DataFrame:
    """Thin a long series to roughly ``max_points`` rows, always keeping the last."""
    n = len(df)
    if n <= max_points:
        return df
    step = max(1, n // max_points)
    idx = np.arange(0, n, step)
    if idx[-1] != n - 1:
        idx = np.append(idx, n - 1)
    return df.iloc[idx].reset_index(drop=True)
