"""Pydantic models for the HTTP API."""

from pydantic import BaseModel


class AddEntryRequest(BaseModel):
    """Request body for logging an entry."""

    amount_ml: int


class WaterEntryModel(BaseModel):
    """A logged entry."""

    id: int
    amount_ml: int
    timestamp: str
    date: str


class DailyStatsModel(BaseModel):
    """Totals for one date."""

    date: str
    total_ml: int
    goal_ml: int
    entries_count: int
    percentage: float


class MonthlyStatsModel(BaseModel):
    """Rollup for one month."""

    month: str
    year: int
    days: list[DailyStatsModel]
    total_ml: int
    average_ml: float
    days_goal_met: int
    current_streak: int
    best_streak: int


class StreakModel(BaseModel):
    """Current and best goal streaks."""

    current_streak: int
    best_streak: int


class SettingsModel(BaseModel):
    """The settings record."""

    daily_goal_ml: int = 4000
    reminder_interval_minutes: int = 60
    reminder_enabled: bool = True
    sound_enabled: bool = True
    start_with_system: bool = False
    theme: str = "dark"
