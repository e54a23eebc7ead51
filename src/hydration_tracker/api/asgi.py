"""ASGI entrypoint for the hydration tracker API."""

from hydration_tracker.api.app import create_app
from hydration_tracker.containers import build_container

app = create_app(build_container())
