"""Helpers shared by the Supabase repositories."""

from typing import Any, Protocol

import httpx
from supabase import PostgrestAPIError

from hydration_tracker.domain.errors import StorageError


class Executable(Protocol):
    """A PostgREST request builder ready to run."""

    def execute(self) -> Any:
        """Send the request and return the API response."""


def execute(query: Executable, action: str) -> Any:
    """Run a query, turning API and transport failures into StorageError."""
    try:
        return query.execute()
    except PostgrestAPIError as exc:
        raise StorageError(exc.message or f"Failed to {action}") from exc
    except httpx.HTTPError as exc:
        raise StorageError(f"Failed to {action}: {exc}") from exc
