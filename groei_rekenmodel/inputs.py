"""Parsing and clamping of raw UI values into a ProjectionInput.

The engine never range-checks its input. Everything here is UI policy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from groei_rekenmodel.domain import ProjectionInput

_DECIMAL_COMMA_LOCALES = {"pt", "nl"}
_CURRENCY_TOKENS = ("R$", "US$", "€", "$", "EUR", "eur", "BRL", "USD")


@dataclass(frozen=True)
class InputBounds:
    """Allowed ranges for each form field (inclusive)."""

    initial_min: float = 0.0
    initial_max: float = 100_000_000.0
    monthly_min: float = 0.0
    monthly_max: float = 50_000.0
    rate_min: float = 0.0
    rate_max: float = 30.0
    years_min: int = 1
    years_max: int = 50
    goal_min: float = 0.0
    goal_max: float = 10_000_000_000.0


DEFAULT_BOUNDS = InputBounds()


def parse_number(raw: str, locale: str = "en") -> float:
    """Parse a localized amount such as ``"1.000,50"`` (pt/nl) or ``"1,000.50"`` (en)."""
    cleaned = raw.strip()
    for token in _CURRENCY_TOKENS:
        cleaned = cleaned.replace(token, "")
    cleaned = cleaned.replace(" ", "").replace("\u00a0", "").replace("%", "")
    if cleaned == "":
        raise ValueError("Leeg bedrag")

    if locale in _DECIMAL_COMMA_LOCALES:
        # a lone dot without a comma is still read as the decimal point
        if "," in cleaned:
            cleaned = cleaned.replace(".", "").replace(",", ".")
        elif cleaned.count(".") > 1:
            cleaned = cleaned.replace(".", "")
    else:
        cleaned = cleaned.replace(",", "")

    try:
        return float(cleaned)
    except ValueError:
        raise ValueError(f"Ongeldig bedrag: {raw!r}") from None


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` to ``[low, high]``; NaN and infinities map to an edge."""
    if math.isnan(value):
        return low
    return min(max(value, low), high)


def build_input(
    *,
    initial_investment: float,
    monthly_contribution: float,
    annual_rate: float,
    years: Optional[int] = None,
    target_goal: Optional[float] = None,
    bounds: InputBounds = DEFAULT_BOUNDS,
) -> ProjectionInput:
    """Clamp raw form values and build the engine input.

    ``years`` sets the fixed horizon; leave it out for pure goal seeking.
    """
    initial = clamp(float(initial_investment), bounds.initial_min, bounds.initial_max)
    monthly = clamp(float(monthly_contribution), bounds.monthly_min, bounds.monthly_max)
    rate = clamp(float(annual_rate), bounds.rate_min, bounds.rate_max)

    horizon_months = None
    if years is not None:
        horizon_months = 12 * int(clamp(float(years), bounds.years_min, bounds.years_max))

    goal = None
    if target_goal is not None:
        goal = clamp(float(target_goal), bounds.goal_min, bounds.goal_max)

    return ProjectionInput(
        initial_investment=initial,
        monthly_contribution=monthly,
        annual_rate=rate,
        horizon_months=horizon_months,
        target_goal=goal,
    )
