"""Shared test fixtures."""

from pathlib import Path

import pytest
from fastapi import FastAPI

from nowshowing.api.routes import health, snapshot
from nowshowing.config import settings


@pytest.fixture
def output_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point published snapshots at a temporary directory."""
    monkeypatch.setattr(settings, "output_dir", str(tmp_path))
    monkeypatch.setattr(settings, "output_filename", "")
    return tmp_path


@pytest.fixture
def test_app(output_dir: Path) -> FastAPI:
    """Minimal FastAPI app without the APScheduler lifespan, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(snapshot.router, prefix="/api")
    return app
