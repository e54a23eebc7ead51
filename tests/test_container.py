"""Tests for container wiring."""

import pytest

from hydration_tracker.config import Settings
from hydration_tracker.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.settings_service.get_settings().daily_goal_ml == 4000
    entry = container.entry_service.add_entry(250)
    assert container.stats_service.get_today().total_ml == 250
    assert entry.id == 1
    container.close_resources()


def test_build_container_shares_one_lock(settings: Settings) -> None:
    container = build_container(settings)

    assert container.entry_service.lock is container.stats_service.lock
    assert container.settings_service.lock is container.stats_service.lock
    container.close_resources()


def test_supabase_backend_requires_credentials() -> None:
    with pytest.raises(ValueError):
        build_container(Settings(storage_backend="supabase"))
