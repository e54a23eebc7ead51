"""Goal streak calculation."""

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from hydration_tracker.domain.entries import DATE_FORMAT, DailyTotalRow
from hydration_tracker.domain.stats import StreakSummary


def calculate_streaks(
    rows: Sequence[DailyTotalRow], goal_ml: int, today: date
) -> StreakSummary:
    """Scan daily totals backwards from today and count goal-met runs.

    ``rows`` must hold one row per date, newest first. The row at index ``i``
    is expected to fall on ``today - i`` days. A matching day under goal ends
    the current streak; a mismatch means an untracked day, which ends the scan.
    Rows whose date does not parse are skipped but still consume their index.
    """
    current_streak = 0
    best_streak = 0
    temp_streak = 0
    checking_current = True

    for index, row in enumerate(rows):
        try:
            day = datetime.strptime(row.date, DATE_FORMAT).date()
        except ValueError:
            continue
        expected = today - timedelta(days=index)
        if day != expected:
            best_streak = max(best_streak, temp_streak)
            break
        if row.total_ml >= goal_ml:
            temp_streak += 1
            if checking_current:
                current_streak = temp_streak
        else:
            checking_current = False
            best_streak = max(best_streak, temp_streak)
            temp_streak = 0

    best_streak = max(best_streak, temp_streak)
    return StreakSummary(current_streak=current_streak, best_streak=best_streak)
