"""Domain models for hydration statistics."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DailyStats:
    """Totals for one calendar date measured against the current goal."""

    date: str
    total_ml: int
    goal_ml: int
    entries_count: int
    percentage: float


@dataclass(frozen=True)
class StreakSummary:
    """Consecutive goal-met days ending today, and the best run seen."""

    current_streak: int = 0
    best_streak: int = 0


@dataclass(frozen=True)
class MonthlyStats:
    """Rollup of the days with data in one month."""

    month: str
    year: int
    days: list[DailyStats]
    total_ml: int
    average_ml: float
    days_goal_met: int
    current_streak: int
    best_streak: int


@dataclass(frozen=True)
class YearlyOverview:
    """Monthly rollups for a year; months that failed to load are listed apart."""

    year: int
    months: list[MonthlyStats] = field(default_factory=list)
    failed_months: list[int] = field(default_factory=list)
