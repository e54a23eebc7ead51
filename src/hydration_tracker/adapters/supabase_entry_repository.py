"""Supabase repository for water entries."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from supabase import Client

from hydration_tracker.adapters.supabase_query import execute
from hydration_tracker.domain.entries import DailyTotalRow, WaterEntry
from hydration_tracker.domain.errors import StorageError
from hydration_tracker.services.entries import EntryRepository

_COLUMNS = "id, amount_ml, timestamp, date"
POSTGREST_MAX_ROWS = 1000


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for entry persistence.

    PostgREST has no ad-hoc ``GROUP BY``, so daily totals are summed here
    from the raw rows. Reads are paged because the server caps each response.
    """

    client: Client
    page_size: int = POSTGREST_MAX_ROWS

    def add_entry(self, amount_ml: int, timestamp: str, date: str) -> WaterEntry:
        """Insert an entry row and return it."""
        response = execute(
            self.client.table("water_entries").insert(
                {"amount_ml": amount_ml, "timestamp": timestamp, "date": date}
            ),
            "create water entry",
        )
        if not response.data:
            raise StorageError("Failed to create water entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry row."""
        execute(
            self.client.table("water_entries").delete().eq("id", entry_id),
            "delete water entry",
        )

    def list_entries_for_date(self, date: str) -> list[WaterEntry]:
        """Return entries for a date, newest first."""
        rows = self._fetch_all(
            lambda: self.client.table("water_entries")
            .select(_COLUMNS)
            .eq("date", date)
            .order("timestamp", desc=True)
            .order("id", desc=True),
            "list water entries",
        )
        return [_parse_entry(row) for row in rows]

    def get_daily_total(self, date: str) -> DailyTotalRow:
        """Return the sum and count of entries for a date."""
        entries = self.list_entries_for_date(date)
        return DailyTotalRow(
            date=date,
            total_ml=sum(entry.amount_ml for entry in entries),
            entries_count=len(entries),
        )

    def list_daily_totals(
        self, prefix: str = "", descending: bool = False
    ) -> list[DailyTotalRow]:
        """Return one summed row per date matching the prefix."""

        def build_query() -> Any:
            query = self.client.table("water_entries").select("amount_ml, date")
            if prefix:
                query = query.like("date", f"{prefix}%")
            return query.order("date", desc=descending).order("id")

        totals: dict[str, DailyTotalRow] = {}
        for row in self._fetch_all(build_query, "list daily totals"):
            date = str(row.get("date", ""))
            current = totals.get(date)
            totals[date] = DailyTotalRow(
                date=date,
                total_ml=(current.total_ml if current else 0)
                + int(row.get("amount_ml", 0)),
                entries_count=(current.entries_count if current else 0) + 1,
            )
        return sorted(totals.values(), key=lambda row: row.date, reverse=descending)

    def _fetch_all(
        self, build_query: Callable[[], Any], action: str
    ) -> list[dict[str, object]]:
        rows: list[dict[str, object]] = []
        offset = 0
        while True:
            response = execute(
                build_query().range(offset, offset + self.page_size - 1), action
            )
            page = response.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            offset += self.page_size


def _parse_entry(row: dict[str, object]) -> WaterEntry:
    return WaterEntry(
        id=int(row["id"]),
        amount_ml=int(row.get("amount_ml", 0)),
        timestamp=str(row.get("timestamp", "")),
        date=str(row.get("date", "")),
    )
