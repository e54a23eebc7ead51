"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, Path, Request, Response, status
from fastapi.responses import JSONResponse

from hydration_tracker.api.models import (
    AddEntryRequest,
    DailyStatsModel,
    MonthlyStatsModel,
    SettingsModel,
    StreakModel,
    WaterEntryModel,
)
from hydration_tracker.app_logging import configure_logging
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.errors import StorageError
from hydration_tracker.domain.settings import TrackerSettings


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(StorageError)
    async def storage_error_handler(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        logger.error("Storage failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/entries", status_code=status.HTTP_201_CREATED)
    def add_entry(payload: AddEntryRequest, request: Request) -> WaterEntryModel:
        """Log an entry stamped with the current time."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.entry_service.add_entry(payload.amount_ml)
        return WaterEntryModel(**asdict(entry))

    @app.post("/entries/quick-add/{amount_ml}", status_code=status.HTTP_201_CREATED)
    def quick_add(amount_ml: int, request: Request) -> WaterEntryModel:
        """Log a fixed-volume entry from a shortcut."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.entry_service.quick_add(amount_ml)
        return WaterEntryModel(**asdict(entry))

    @app.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
    def remove_entry(entry_id: int, request: Request) -> Response:
        """Delete an entry."""
        state_container: AppContainer = request.app.state.container
        state_container.entry_service.remove_entry(entry_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/entries/today")
    def today_entries(request: Request) -> list[WaterEntryModel]:
        """Return today's entries, newest first."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.entry_service.list_today_entries()
        return [WaterEntryModel(**asdict(entry)) for entry in entries]

    @app.get("/stats/today")
    def today_stats(request: Request) -> DailyStatsModel:
        """Return today's totals."""
        state_container: AppContainer = request.app.state.container
        return DailyStatsModel(**asdict(state_container.stats_service.get_today()))

    @app.get("/stats/daily/{day}")
    def daily_stats(day: date, request: Request) -> DailyStatsModel:
        """Return totals for a date."""
        state_container: AppContainer = request.app.state.container
        return DailyStatsModel(**asdict(state_container.stats_service.get_daily(day)))

    @app.get("/stats/monthly/{year}/{month}")
    def monthly_stats(
        year: int, request: Request, month: int = Path(ge=1, le=12)
    ) -> MonthlyStatsModel:
        """Return a month rollup with streaks."""
        state_container: AppContainer = request.app.state.container
        stats = state_container.stats_service.get_month(year, month)
        return MonthlyStatsModel(**asdict(stats))

    @app.get("/stats/yearly/{year}")
    def yearly_overview(year: int, request: Request) -> list[MonthlyStatsModel]:
        """Return the rollups for each month of a year that loaded."""
        state_container: AppContainer = request.app.state.container
        overview = state_container.stats_service.get_year(year)
        return [MonthlyStatsModel(**asdict(month)) for month in overview.months]

    @app.get("/stats/streaks")
    def streaks(request: Request) -> StreakModel:
        """Return the current and best goal streaks."""
        state_container: AppContainer = request.app.state.container
        return StreakModel(**asdict(state_container.stats_service.get_streaks()))

    @app.get("/settings")
    def get_settings(request: Request) -> SettingsModel:
        """Return the current settings."""
        state_container: AppContainer = request.app.state.container
        return SettingsModel(**asdict(state_container.settings_service.get_settings()))

    @app.put("/settings", status_code=status.HTTP_204_NO_CONTENT)
    def save_settings(payload: SettingsModel, request: Request) -> Response:
        """Overwrite the settings record."""
        state_container: AppContainer = request.app.state.container
        state_container.settings_service.save_settings(
            TrackerSettings(**payload.model_dump())
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app
