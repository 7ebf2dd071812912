"""Pure calculation logic for the Groei projection engine.

Timing semantics used consistently by every operation:
- ``monthly_data[m]`` is the account state at the end of month m.
- Growth is applied to the previous month's ending balance FIRST, the monthly
  contribution lands AFTER it. A fresh contribution earns no return in the
  month it is made.
"""

from __future__ import annotations

import logging
import math
from itertools import islice
from typing import Iterator, Optional, Sequence

from groei_rekenmodel.domain import (
    MAX_MONTHS,
    NOT_REACHED,
    GoalSeekResult,
    MonthlyDataPoint,
    MonthsToGoal,
    ProjectionInput,
    ProjectionResult,
    YearlyRollup,
)

logger = logging.getLogger(__name__)


def monthly_rate(annual_rate: float) -> float:
    """Convert a nominal annual percentage into the effective monthly rate."""
    if annual_rate == 0:
        return 0.0
    base = 1.0 + annual_rate / 100.0
    if base < 0:
        # No real 12th root; let it propagate instead of going complex.
        return math.nan
    return base ** (1.0 / 12.0) - 1.0


def _point(month: int, balance: float, contributed: float) -> MonthlyDataPoint:
    return MonthlyDataPoint(
        month=month,
        balance=balance,
        cumulative_contributions=contributed,
        cumulative_returns=balance - contributed,
    )


def _iter_months(inp: ProjectionInput, rate: float) -> Iterator[MonthlyDataPoint]:
    """Yield month 0, 1, 2, ... forever. Callers bound it."""
    balance = inp.initial_investment
    contributed = inp.initial_investment
    contribution = inp.monthly_contribution
    growth = 1.0 + rate

    month = 0
    yield _point(month, balance, contributed)
    while True:
        month += 1
        balance = balance * growth
        balance += contribution
        contributed += contribution
        yield _point(month, balance, contributed)


def _yearly_rollups(monthly_data: Sequence[MonthlyDataPoint]) -> tuple[YearlyRollup, ...]:
    """Group the trajectory in 12-month blocks, plus a trailing partial block."""
    last_month = len(monthly_data) - 1
    rollups: list[YearlyRollup] = []
    for year, start_idx in enumerate(range(0, last_month, 12), start=1):
        end_idx = min(start_idx + 12, last_month)
        start = monthly_data[start_idx]
        end = monthly_data[end_idx]
        rollups.append(
            YearlyRollup(
                year=year,
                months=end_idx - start_idx,
                start_balance=start.balance,
                end_balance=end.balance,
                contributions_this_year=end.cumulative_contributions - start.cumulative_contributions,
                returns_this_year=end.cumulative_returns - start.cumulative_returns,
            )
        )
    return tuple(rollups)


def _first_month_at_goal(monthly_data: Sequence[MonthlyDataPoint], target_goal: float) -> MonthsToGoal:
    for point in monthly_data:
        if point.balance >= target_goal:
            return point.month
    return NOT_REACHED


def project_over_horizon(inp: ProjectionInput) -> ProjectionResult:
    """Simulate exactly ``inp.horizon_months`` months.

    Returns ``horizon_months + 1`` monthly points (month 0 included), the yearly
    rollups and, when ``inp.target_goal`` is set, the first month the goal is met
    within the horizon.
    """
    if inp.horizon_months is None:
        raise ValueError("horizon_months is verplicht voor een horizonprojectie.")

    rate = monthly_rate(inp.annual_rate)
    horizon = max(0, inp.horizon_months)
    monthly_data = tuple(islice(_iter_months(inp, rate), horizon + 1))

    if inp.target_goal is None:
        months_to_goal: Optional[MonthsToGoal] = None
    else:
        months_to_goal = _first_month_at_goal(monthly_data, inp.target_goal)

    final = monthly_data[-1]
    return ProjectionResult(
        monthly_data=monthly_data,
        yearly_data=_yearly_rollups(monthly_data),
        months_to_goal=months_to_goal,
        final_value=final.balance,
        total_contributions=final.cumulative_contributions,
        total_returns=final.cumulative_returns,
    )


def _require_goal(inp: ProjectionInput) -> float:
    if inp.target_goal is None:
        raise ValueError("target_goal is verplicht om de doeltijd te bepalen.")
    return inp.target_goal


def _goal_shortcut(inp: ProjectionInput, target_goal: float, rate: float) -> Optional[MonthsToGoal]:
    """Answer without simulating when the outcome is already known."""
    if target_goal <= inp.initial_investment:
        return 0
    if inp.monthly_contribution == 0 and (rate == 0 or inp.initial_investment == 0):
        # Balance never moves.
        logger.debug("Goal %.2f unreachable: balance is constant.", target_goal)
        return NOT_REACHED
    return None


def _path_to_goal(inp: ProjectionInput, target_goal: float, rate: float) -> Iterator[MonthlyDataPoint]:
    """Yield month 0 onward, stopping at the goal or after MAX_MONTHS months."""
    for point in islice(_iter_months(inp, rate), MAX_MONTHS + 1):
        yield point
        if point.balance >= target_goal:
            return


def _outcome(last: MonthlyDataPoint, target_goal: float) -> MonthsToGoal:
    if last.balance >= target_goal:
        return last.month
    logger.debug("Goal %.2f not reached within %d months.", target_goal, MAX_MONTHS)
    return NOT_REACHED


def months_to_reach_goal(inp: ProjectionInput) -> MonthsToGoal:
    """Number of months until the balance first reaches ``inp.target_goal``.

    Returns ``0`` when the initial investment already meets the goal and
    ``NOT_REACHED`` when the goal is not met within ``MAX_MONTHS`` months.
    """
    target_goal = _require_goal(inp)
    rate = monthly_rate(inp.annual_rate)

    shortcut = _goal_shortcut(inp, target_goal, rate)
    if shortcut is not None:
        return shortcut

    last = None
    for last in _path_to_goal(inp, target_goal, rate):
        pass
    return _outcome(last, target_goal)


def seek_goal(inp: ProjectionInput) -> GoalSeekResult:
    """Like :func:`months_to_reach_goal`, but keep the simulated path for charting."""
    target_goal = _require_goal(inp)
    rate = monthly_rate(inp.annual_rate)

    shortcut = _goal_shortcut(inp, target_goal, rate)
    if shortcut is not None:
        monthly_data = (_point(0, inp.initial_investment, inp.initial_investment),)
        months_to_goal = shortcut
    else:
        monthly_data = tuple(_path_to_goal(inp, target_goal, rate))
        months_to_goal = _outcome(monthly_data[-1], target_goal)

    final = monthly_data[-1]
    return GoalSeekResult(
        months_to_goal=months_to_goal,
        monthly_data=monthly_data,
        yearly_data=_yearly_rollups(monthly_data),
        final_value=final.balance,
        total_contributions=final.cumulative_contributions,
        total_returns=final.cumulative_returns,
    )
