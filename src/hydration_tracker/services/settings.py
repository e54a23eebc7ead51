"""Tracker settings service."""

import logging
import threading
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import Protocol

from hydration_tracker.domain.settings import (
    DEFAULT_GOAL_ML,
    GoalReading,
    TrackerSettings,
)

logger = logging.getLogger(__name__)


class SettingsRepository(Protocol):
    """Persistence interface for the settings record."""

    def get_settings(self) -> TrackerSettings:
        """Return the stored settings."""

    def save_settings(self, settings: TrackerSettings) -> None:
        """Overwrite the stored settings in place."""

    def get_daily_goal(self) -> int | None:
        """Return the stored daily goal, if present."""


@dataclass
class SettingsService:
    """Service for reading and updating settings."""

    repository: SettingsRepository
    lock: AbstractContextManager = field(default_factory=threading.RLock)

    def get_settings(self) -> TrackerSettings:
        """Return the current settings."""
        with self.lock:
            return self.repository.get_settings()

    def save_settings(self, settings: TrackerSettings) -> None:
        """Persist updated settings."""
        with self.lock:
            self.repository.save_settings(settings)

    def get_goal(self) -> GoalReading:
        """Return the daily goal, falling back to the default when unreadable."""
        try:
            with self.lock:
                goal_ml = self.repository.get_daily_goal()
        except Exception:
            logger.warning("Failed to read daily goal, using default", exc_info=True)
            return GoalReading(goal_ml=DEFAULT_GOAL_ML, used_default=True)
        if goal_ml is None:
            return GoalReading(goal_ml=DEFAULT_GOAL_ML, used_default=True)
        return GoalReading(goal_ml=goal_ml)
