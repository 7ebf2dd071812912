"""Derived figures for the result cards: composition, ratios and goal status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from groei_rekenmodel.domain import NOT_REACHED, GoalSeekResult, MonthsToGoal, ProjectionResult
from groei_rekenmodel.logic import monthly_rate

AnyResult = Union[ProjectionResult, GoalSeekResult]

# A goal counts as reachable when it takes at most this multiple of the horizon.
REACHABLE_HORIZON_FACTOR = 1.5


@dataclass(frozen=True)
class Composition:
    """Split of the final value into its three sources."""

    initial: float
    contributions: float
    returns: float

    @property
    def total(self) -> float:
        return self.initial + self.contributions + self.returns


@dataclass(frozen=True)
class ProjectionMetrics:
    monthly_rate_pct: float
    roi_pct: Optional[float]
    capital_multiplier: Optional[float]


class GoalStatus(Enum):
    REACHED = "reached"
    REACHABLE = "reachable"
    DISTANT = "distant"
    UNREACHABLE = "unreachable"


def composition(result: AnyResult) -> Composition:
    """Returns are floored at zero; a chart slice cannot be negative."""
    initial = result.monthly_data[0].balance
    return Composition(
        initial=initial,
        contributions=result.total_contributions - initial,
        returns=max(0.0, result.total_returns),
    )


def metrics(result: AnyResult, annual_rate: float) -> ProjectionMetrics:
    """Ratios are ``None`` when nothing was invested."""
    invested = result.total_contributions
    if invested > 0:
        roi_pct: Optional[float] = result.total_returns / invested * 100.0
        multiplier: Optional[float] = result.final_value / invested
    else:
        roi_pct = None
        multiplier = None
    return ProjectionMetrics(
        monthly_rate_pct=monthly_rate(annual_rate) * 100.0,
        roi_pct=roi_pct,
        capital_multiplier=multiplier,
    )


def goal_status(result: ProjectionResult, target_goal: float, months_to_goal: MonthsToGoal) -> GoalStatus:
    """Classify the goal against a horizon projection.

    ``months_to_goal`` comes from :func:`months_to_reach_goal`, so it is not
    limited to the horizon.
    """
    if result.final_value >= target_goal:
        return GoalStatus.REACHED
    if months_to_goal is NOT_REACHED:
        return GoalStatus.UNREACHABLE
    horizon_months = len(result.monthly_data) - 1
    if months_to_goal <= horizon_months * REACHABLE_HORIZON_FACTOR:
        return GoalStatus.REACHABLE
    return GoalStatus.DISTANT
