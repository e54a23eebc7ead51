"""SQLite repository for the settings record."""

from dataclasses import dataclass

from hydration_tracker.adapters.sqlite_database import SqliteDatabase
from hydration_tracker.domain.errors import StorageError
from hydration_tracker.domain.settings import TrackerSettings
from hydration_tracker.services.settings import SettingsRepository


@dataclass
class SqliteSettingsRepository(SettingsRepository):
    """SQLite implementation for the one-row settings table."""

    database: SqliteDatabase

    def get_settings(self) -> TrackerSettings:
        """Return the settings row."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "SELECT daily_goal_ml, reminder_interval_minutes, reminder_enabled, "
                "sound_enabled, start_with_system, theme FROM settings WHERE id = 1"
            )
            row = cursor.fetchone()
        if row is None:
            raise StorageError("Settings row is missing")
        return TrackerSettings(
            daily_goal_ml=row[0],
            reminder_interval_minutes=row[1],
            reminder_enabled=bool(row[2]),
            sound_enabled=bool(row[3]),
            start_with_system=bool(row[4]),
            theme=row[5],
        )

    def save_settings(self, settings: TrackerSettings) -> None:
        """Update the settings row in place."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "UPDATE settings SET daily_goal_ml = ?, reminder_interval_minutes = ?, "
                "reminder_enabled = ?, sound_enabled = ?, start_with_system = ?, "
                "theme = ? WHERE id = 1",
                (
                    settings.daily_goal_ml,
                    settings.reminder_interval_minutes,
                    int(settings.reminder_enabled),
                    int(settings.sound_enabled),
                    int(settings.start_with_system),
                    settings.theme,
                ),
            )

    def get_daily_goal(self) -> int | None:
        """Return the stored daily goal."""
        with self.database.cursor() as cursor:
            cursor.execute("SELECT daily_goal_ml FROM settings WHERE id = 1")
            row = cursor.fetchone()
        if row is None:
            return None
        return row[0]
