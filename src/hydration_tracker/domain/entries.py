"""Domain models for logged water entries."""

from dataclasses import dataclass

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class WaterEntry:
    """A single recorded intake event."""

    id: int
    amount_ml: int
    timestamp: str
    date: str


@dataclass(frozen=True)
class DailyTotalRow:
    """Entries for one date, summed by the store."""

    date: str
    total_ml: int
    entries_count: int
