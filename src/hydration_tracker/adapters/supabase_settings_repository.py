"""Supabase repository for the settings record."""

from dataclasses import asdict, dataclass

from supabase import Client

from hydration_tracker.adapters.supabase_query import execute
from hydration_tracker.domain.errors import StorageError
from hydration_tracker.domain.settings import TrackerSettings
from hydration_tracker.services.settings import SettingsRepository

SETTINGS_ROW_ID = 1


@dataclass
class SupabaseSettingsRepository(SettingsRepository):
    """Supabase implementation for the one-row settings table."""

    client: Client

    def ensure_settings_row(self) -> None:
        """Insert the default settings row when none exists yet."""
        if self._fetch_row() is None:
            execute(
                self.client.table("settings").insert(
                    {"id": SETTINGS_ROW_ID, **asdict(TrackerSettings())}
                ),
                "create settings",
            )

    def get_settings(self) -> TrackerSettings:
        """Return the settings row."""
        row = self._fetch_row()
        if row is None:
            raise StorageError("Settings row is missing")
        defaults = TrackerSettings()
        return TrackerSettings(
            daily_goal_ml=int(row.get("daily_goal_ml", defaults.daily_goal_ml)),
            reminder_interval_minutes=int(
                row.get(
                    "reminder_interval_minutes", defaults.reminder_interval_minutes
                )
            ),
            reminder_enabled=bool(
                row.get("reminder_enabled", defaults.reminder_enabled)
            ),
            sound_enabled=bool(row.get("sound_enabled", defaults.sound_enabled)),
            start_with_system=bool(
                row.get("start_with_system", defaults.start_with_system)
            ),
            theme=str(row.get("theme", defaults.theme)),
        )

    def save_settings(self, settings: TrackerSettings) -> None:
        """Update the settings row in place."""
        execute(
            self.client.table("settings")
            .update(asdict(settings))
            .eq("id", SETTINGS_ROW_ID),
            "save settings",
        )

    def get_daily_goal(self) -> int | None:
        """Return the stored daily goal."""
        row = self._fetch_row()
        if row is None or row.get("daily_goal_ml") is None:
            return None
        return int(row["daily_goal_ml"])

    def _fetch_row(self) -> dict[str, object] | None:
        response = execute(
            self.client.table("settings")
            .select("*")
            .eq("id", SETTINGS_ROW_ID)
            .limit(1),
            "read settings",
        )
        if not response.data:
            return None
        return response.data[0]
