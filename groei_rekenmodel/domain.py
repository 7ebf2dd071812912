"""Domain models for the Groei projection engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


# 50 years. Goal seeking never simulates more months than this.
MAX_MONTHS = 600


class GoalOutcome(Enum):
    """Marker for a goal that the simulation did not reach."""

    NOT_REACHED = "not reached"

    def __repr__(self) -> str:
        return "NOT_REACHED"


NOT_REACHED = GoalOutcome.NOT_REACHED

MonthsToGoal = Union[int, GoalOutcome]


@dataclass
class ProjectionInput:
    """Input parameters for the projection engine.

    Semantics:
    - ``annual_rate`` is a nominal annual percentage (10 means 10%).
    - ``horizon_months`` drives :func:`project_over_horizon`.
    - ``target_goal`` drives :func:`months_to_reach_goal` and :func:`seek_goal`.

    Values are not range-checked here. Callers clamp them first, see
    :mod:`groei_rekenmodel.inputs`.
    """

    initial_investment: float
    monthly_contribution: float
    annual_rate: float
    horizon_months: Optional[int] = None
    target_goal: Optional[float] = None

    def __post_init__(self) -> None:
        self.initial_investment = float(self.initial_investment)
        self.monthly_contribution = float(self.monthly_contribution)
        self.annual_rate = float(self.annual_rate)
        if self.horizon_months is not None:
            self.horizon_months = int(self.horizon_months)
        if self.target_goal is not None:
            self.target_goal = float(self.target_goal)

    @classmethod
    def for_years(
        cls,
        *,
        initial_investment: float,
        monthly_contribution: float,
        annual_rate: float,
        years: int,
        target_goal: Optional[float] = None,
    ) -> "ProjectionInput":
        """Fixed-period variant: the horizon is whole years."""
        return cls(
            initial_investment=initial_investment,
            monthly_contribution=monthly_contribution,
            annual_rate=annual_rate,
            horizon_months=12 * int(years),
            target_goal=target_goal,
        )


@dataclass(frozen=True)
class MonthlyDataPoint:
    """Account state at the end of ``month`` (0 is the initial deposit)."""

    month: int
    balance: float
    cumulative_contributions: float
    cumulative_returns: float


@dataclass(frozen=True)
class YearlyRollup:
    """One block of up to 12 months.

    ``months`` is 12 except for a trailing partial year.
    """

    year: int
    months: int
    start_balance: float
    end_balance: float
    contributions_this_year: float
    returns_this_year: float


@dataclass(frozen=True)
class ProjectionResult:
    """Output of a fixed-horizon projection.

    ``months_to_goal`` is ``None`` when no target was given, otherwise the first
    month with ``balance >= target_goal`` or ``NOT_REACHED``.
    """

    monthly_data: Tuple[MonthlyDataPoint, ...]
    yearly_data: Tuple[YearlyRollup, ...]
    months_to_goal: Optional[MonthsToGoal]
    final_value: float
    total_contributions: float
    total_returns: float


@dataclass(frozen=True)
class GoalSeekResult:
    """Output of a goal-seeking run, including the simulated path."""

    months_to_goal: MonthsToGoal
    monthly_data: Tuple[MonthlyDataPoint, ...]
    yearly_data: Tuple[YearlyRollup, ...]
    final_value: float
    total_contributions: float
    total_returns: float
