"""Groei Rekenmodel package for compound-interest investment projections."""

from groei_rekenmodel.domain import (
    MAX_MONTHS,
    NOT_REACHED,
    GoalOutcome,
    GoalSeekResult,
    MonthlyDataPoint,
    ProjectionInput,
    ProjectionResult,
    YearlyRollup,
)
from groei_rekenmodel.logic import months_to_reach_goal, monthly_rate, project_over_horizon, seek_goal

__all__ = [
    "MAX_MONTHS",
    "NOT_REACHED",
    "GoalOutcome",
    "GoalSeekResult",
    "MonthlyDataPoint",
    "ProjectionInput",
    "ProjectionResult",
    "YearlyRollup",
    "months_to_reach_goal",
    "monthly_rate",
    "project_over_horizon",
    "seek_goal",
]
