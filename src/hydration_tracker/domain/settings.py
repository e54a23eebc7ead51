"""Domain models for tracker settings."""

from dataclasses import dataclass

DEFAULT_GOAL_ML = 4000


@dataclass(frozen=True)
class TrackerSettings:
    """The single settings record."""

    daily_goal_ml: int = DEFAULT_GOAL_ML
    reminder_interval_minutes: int = 60
    reminder_enabled: bool = True
    sound_enabled: bool = True
    start_with_system: bool = False
    theme: str = "dark"


@dataclass(frozen=True)
class GoalReading:
    """Goal used for aggregation, flagged when the stored value was unavailable."""

    goal_ml: int
    used_default: bool = False
