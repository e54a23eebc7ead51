"""SQLite repository for water entries."""

from dataclasses import dataclass

from hydration_tracker.adapters.sqlite_database import SqliteDatabase
from hydration_tracker.domain.entries import DailyTotalRow, WaterEntry
from hydration_tracker.domain.errors import StorageError
from hydration_tracker.services.entries import EntryRepository


@dataclass
class SqliteEntryRepository(EntryRepository):
    """SQLite implementation for entry persistence."""

    database: SqliteDatabase

    def add_entry(self, amount_ml: int, timestamp: str, date: str) -> WaterEntry:
        """Insert an entry row and return it."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "INSERT INTO water_entries (amount_ml, timestamp, date) "
                "VALUES (?, ?, ?)",
                (amount_ml, timestamp, date),
            )
            entry_id = cursor.lastrowid
        if entry_id is None:
            raise StorageError("Failed to create water entry")
        return WaterEntry(
            id=entry_id, amount_ml=amount_ml, timestamp=timestamp, date=date
        )

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry row."""
        with self.database.cursor() as cursor:
            cursor.execute("DELETE FROM water_entries WHERE id = ?", (entry_id,))

    def list_entries_for_date(self, date: str) -> list[WaterEntry]:
        """Return entries for a date, newest first."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "SELECT id, amount_ml, timestamp, date FROM water_entries "
                "WHERE date = ? ORDER BY timestamp DESC, id DESC",
                (date,),
            )
            rows = cursor.fetchall()
        return [
            WaterEntry(id=row[0], amount_ml=row[1], timestamp=row[2], date=row[3])
            for row in rows
        ]

    def get_daily_total(self, date: str) -> DailyTotalRow:
        """Return the sum and count of entries for a date."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "SELECT COALESCE(SUM(amount_ml), 0), COUNT(*) FROM water_entries "
                "WHERE date = ?",
                (date,),
            )
            total_ml, entries_count = cursor.fetchone()
        return DailyTotalRow(date=date, total_ml=total_ml, entries_count=entries_count)

    def list_daily_totals(
        self, prefix: str = "", descending: bool = False
    ) -> list[DailyTotalRow]:
        """Return one summed row per date matching the prefix."""
        order = "DESC" if descending else "ASC"
        with self.database.cursor() as cursor:
            cursor.execute(
                "SELECT date, SUM(amount_ml), COUNT(*) FROM water_entries "
                "WHERE date LIKE ? || '%' "
                f"GROUP BY date ORDER BY date {order}",  # noqa: S608
                (prefix,),
            )
            rows = cursor.fetchall()
        return [
            DailyTotalRow(date=row[0], total_ml=row[1], entries_count=row[2])
            for row in rows
        ]
