"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime

import pytest

from hydration_tracker.config import Settings
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.entries import DailyTotalRow, WaterEntry
from hydration_tracker.domain.errors import StorageError
from hydration_tracker.domain.settings import TrackerSettings
from hydration_tracker.services.entries import EntryRepository, EntryService
from hydration_tracker.services.settings import SettingsRepository, SettingsService
from hydration_tracker.services.stats import StatsService

FIXED_NOW = datetime(2024, 3, 5, 9, 30, 15)


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: list[WaterEntry] = field(default_factory=list)
    failing_prefixes: set[str] = field(default_factory=set)
    fail_history_reads: bool = False
    next_id: int = 1

    def add_entry(self, amount_ml: int, timestamp: str, date: str) -> WaterEntry:
        entry = WaterEntry(
            id=self.next_id, amount_ml=amount_ml, timestamp=timestamp, date=date
        )
        self.next_id += 1
        self.entries.append(entry)
        return entry

    def seed(self, date: str, *amounts: int) -> None:
        for amount in amounts:
            self.add_entry(amount, timestamp=f"{date} 12:00:00", date=date)

    def delete_entry(self, entry_id: int) -> None:
        self.entries = [entry for entry in self.entries if entry.id != entry_id]

    def list_entries_for_date(self, date: str) -> list[WaterEntry]:
        matching = [entry for entry in self.entries if entry.date == date]
        return sorted(
            matching, key=lambda entry: (entry.timestamp, entry.id), reverse=True
        )

    def get_daily_total(self, date: str) -> DailyTotalRow:
        matching = [entry for entry in self.entries if entry.date == date]
        return DailyTotalRow(
            date=date,
            total_ml=sum(entry.amount_ml for entry in matching),
            entries_count=len(matching),
        )

    def list_daily_totals(
        self, prefix: str = "", descending: bool = False
    ) -> list[DailyTotalRow]:
        if prefix in self.failing_prefixes:
            raise RuntimeError(f"query failed for {prefix}")
        if descending and self.fail_history_reads:
            raise StorageError("history unavailable")
        dates = sorted(
            {entry.date for entry in self.entries if entry.date.startswith(prefix)},
            reverse=descending,
        )
        return [self.get_daily_total(day) for day in dates]


@dataclass
class InMemorySettingsRepository(SettingsRepository):
    """In-memory settings repository for tests."""

    settings: TrackerSettings = field(default_factory=TrackerSettings)
    fail_goal_reads: bool = False

    def get_settings(self) -> TrackerSettings:
        return self.settings

    def save_settings(self, settings: TrackerSettings) -> None:
        self.settings = settings

    def get_daily_goal(self) -> int | None:
        if self.fail_goal_reads:
            raise RuntimeError("settings unavailable")
        return self.settings.daily_goal_ml


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_path=str(tmp_path / "hydra.db"))


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def settings_repository() -> InMemorySettingsRepository:
    return InMemorySettingsRepository()


@pytest.fixture
def settings_service(
    settings_repository: InMemorySettingsRepository,
) -> SettingsService:
    return SettingsService(settings_repository)


@pytest.fixture
def stats_service(
    entry_repository: InMemoryEntryRepository, settings_service: SettingsService
) -> StatsService:
    return StatsService(
        repository=entry_repository,
        settings_service=settings_service,
        today=lambda: date(2024, 3, 5),
    )


@pytest.fixture
def container(
    settings: Settings,
    entry_repository: InMemoryEntryRepository,
    settings_service: SettingsService,
    stats_service: StatsService,
) -> AppContainer:
    entry_service = EntryService(entry_repository, clock=lambda: FIXED_NOW)

    def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        entry_service=entry_service,
        settings_service=settings_service,
        stats_service=stats_service,
        close_resources=close_resources,
    )
