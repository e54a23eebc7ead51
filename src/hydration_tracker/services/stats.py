"""Statistics service for water entries."""

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass, field, replace
from datetime import date

from hydration_tracker.domain.entries import DATE_FORMAT, DailyTotalRow
from hydration_tracker.domain.errors import StorageError
from hydration_tracker.domain.stats import (
    DailyStats,
    MonthlyStats,
    StreakSummary,
    YearlyOverview,
)
from hydration_tracker.services.entries import EntryRepository
from hydration_tracker.services.settings import SettingsService
from hydration_tracker.services.streaks import calculate_streaks

logger = logging.getLogger(__name__)

DECEMBER = 12
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)


@dataclass
class StatsService:
    """Service for daily, monthly and yearly hydration stats."""

    repository: EntryRepository
    settings_service: SettingsService
    lock: AbstractContextManager = field(default_factory=threading.RLock)
    today: Callable[[], date] = date.today

    def get_daily(self, day: date) -> DailyStats:
        """Return totals for a date against the current goal."""
        date_key = day.strftime(DATE_FORMAT)
        with self.lock:
            goal_ml = self.settings_service.get_goal().goal_ml
            row = self.repository.get_daily_total(date_key)
        return _daily_stats(row, goal_ml)

    def get_today(self) -> DailyStats:
        """Return today's totals."""
        return self.get_daily(self.today())

    def get_month(self, year: int, month: int) -> MonthlyStats:
        """Return the month rollup with streaks over the whole history."""
        with self.lock:
            goal_ml = self.settings_service.get_goal().goal_ml
            stats = self._aggregate_month(year, month, goal_ml, MONTH_NAMES)
            streaks = self._compute_streaks(goal_ml)
        return replace(
            stats,
            current_streak=streaks.current_streak,
            best_streak=streaks.best_streak,
        )

    def get_streaks(self) -> StreakSummary:
        """Return the current and best goal streaks as of today."""
        with self.lock:
            goal_ml = self.settings_service.get_goal().goal_ml
            return self._compute_streaks(goal_ml)

    def get_year(self, year: int) -> YearlyOverview:
        """Return rollups for each month of a year, omitting months that fail."""
        overview = YearlyOverview(year=year)
        for month in range(1, DECEMBER + 1):
            try:
                with self.lock:
                    goal_ml = self.settings_service.get_goal().goal_ml
                    stats = self._aggregate_month(
                        year, month, goal_ml, MONTH_ABBREVIATIONS
                    )
            except Exception:
                logger.exception(
                    "Failed to aggregate month", extra={"year": year, "month": month}
                )
                overview.failed_months.append(month)
                continue
            overview.months.append(stats)
        return overview

    def _aggregate_month(
        self, year: int, month: int, goal_ml: int, labels: tuple[str, ...]
    ) -> MonthlyStats:
        if not 1 <= month <= DECEMBER:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        rows = self.repository.list_daily_totals(prefix=f"{year:04d}-{month:02d}")
        days = [_daily_stats(row, goal_ml) for row in rows]
        total_ml = sum(day.total_ml for day in days)
        return MonthlyStats(
            month=labels[month - 1],
            year=year,
            days=days,
            total_ml=total_ml,
            average_ml=total_ml / len(days) if days else 0.0,
            days_goal_met=sum(1 for day in days if day.total_ml >= goal_ml),
            current_streak=0,
            best_streak=0,
        )

    def _compute_streaks(self, goal_ml: int) -> StreakSummary:
        try:
            rows = self.repository.list_daily_totals(descending=True)
        except StorageError:
            logger.warning("Failed to read history for streaks", exc_info=True)
            return StreakSummary()
        return calculate_streaks(rows, goal_ml, self.today())


def _daily_stats(row: DailyTotalRow, goal_ml: int) -> DailyStats:
    percentage = row.total_ml / goal_ml * 100 if goal_ml > 0 else 0.0
    return DailyStats(
        date=row.date,
        total_ml=row.total_ml,
        goal_ml=goal_ml,
        entries_count=row.entries_count,
        percentage=percentage,
    )
