"""Dependency container wiring for the application."""

import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass

from supabase import create_client

from hydration_tracker.adapters.sqlite_database import SqliteDatabase
from hydration_tracker.adapters.sqlite_entry_repository import SqliteEntryRepository
from hydration_tracker.adapters.sqlite_settings_repository import (
    SqliteSettingsRepository,
)
from hydration_tracker.adapters.supabase_entry_repository import (
    SupabaseEntryRepository,
)
from hydration_tracker.adapters.supabase_settings_repository import (
    SupabaseSettingsRepository,
)
from hydration_tracker.config import Settings
from hydration_tracker.services.entries import EntryRepository, EntryService
from hydration_tracker.services.settings import SettingsRepository, SettingsService
from hydration_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService
    settings_service: SettingsService
    stats_service: StatsService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    entry_repository: EntryRepository
    settings_repository: SettingsRepository
    lock: AbstractContextManager

    if resolved_settings.storage_backend == "supabase":
        if not (
            resolved_settings.supabase_url and resolved_settings.supabase_service_key
        ):
            raise ValueError("Supabase backend requires supabase_url and key")
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        entry_repository = SupabaseEntryRepository(supabase_client)
        supabase_settings = SupabaseSettingsRepository(supabase_client)
        supabase_settings.ensure_settings_row()
        settings_repository = supabase_settings
        lock = threading.RLock()

        def close_resources() -> None:
            return None

    else:
        database = SqliteDatabase.open(resolved_settings.database_path)
        entry_repository = SqliteEntryRepository(database)
        settings_repository = SqliteSettingsRepository(database)
        lock = database.lock
        close_resources = database.close

    settings_service = SettingsService(settings_repository, lock=lock)
    entry_service = EntryService(entry_repository, lock=lock)
    stats_service = StatsService(
        repository=entry_repository,
        settings_service=settings_service,
        lock=lock,
    )

    return AppContainer(
        settings=resolved_settings,
        entry_service=entry_service,
        settings_service=settings_service,
        stats_service=stats_service,
        close_resources=close_resources,
    )
