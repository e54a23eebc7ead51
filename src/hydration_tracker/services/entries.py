"""Water entry logging service."""

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from hydration_tracker.domain.entries import (
    DATE_FORMAT,
    TIMESTAMP_FORMAT,
    DailyTotalRow,
    WaterEntry,
)

logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for water entries."""

    def add_entry(self, amount_ml: int, timestamp: str, date: str) -> WaterEntry:
        """Append an entry and return it with its assigned id."""

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry by id."""

    def list_entries_for_date(self, date: str) -> list[WaterEntry]:
        """Return the entries for a date, newest first."""

    def get_daily_total(self, date: str) -> DailyTotalRow:
        """Return the summed amount and entry count for a date."""

    def list_daily_totals(
        self, prefix: str = "", descending: bool = False
    ) -> list[DailyTotalRow]:
        """Return one summed row per date starting with prefix, ordered by date."""


@dataclass
class EntryService:
    """Service that records and removes intake events."""

    repository: EntryRepository
    lock: AbstractContextManager = field(default_factory=threading.RLock)
    clock: Callable[[], datetime] = datetime.now

    def add_entry(self, amount_ml: int) -> WaterEntry:
        """Record an entry stamped with the current local time."""
        now = self.clock()
        with self.lock:
            entry = self.repository.add_entry(
                amount_ml,
                timestamp=now.strftime(TIMESTAMP_FORMAT),
                date=now.strftime(DATE_FORMAT),
            )
        logger.info("Added entry %s (%s ml)", entry.id, entry.amount_ml)
        return entry

    def quick_add(self, amount_ml: int) -> WaterEntry:
        """Record a fixed-volume entry triggered outside the main window."""
        return self.add_entry(amount_ml)

    def remove_entry(self, entry_id: int) -> None:
        """Delete an entry."""
        with self.lock:
            self.repository.delete_entry(entry_id)

    def list_today_entries(self) -> list[WaterEntry]:
        """Return today's entries, newest first."""
        today = self.clock().strftime(DATE_FORMAT)
        with self.lock:
            return self.repository.list_entries_for_date(today)
