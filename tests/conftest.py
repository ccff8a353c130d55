"""Shared fixtures: a seeded full-size record set and a small hand-built one."""

from datetime import date

import pytest

from geodash.config import get_settings
from geodash.models import Record
from geodash.store import generate_records, get_records

REFERENCE_DAY = date(2026, 1, 1)


@pytest.fixture(scope="session")
def records() -> tuple[Record, ...]:
    """The default 5,000-record snapshot, seeded for reproducibility."""
    return generate_records(5000, seed=42, today=REFERENCE_DAY)


@pytest.fixture
def small_records() -> tuple[Record, ...]:
    return (
        Record("project-1", "Solar Farm Alpha 1", 10.5, 20.0, "Active", date(2025, 5, 1)),
        Record("project-2", "wind energy beta 1", -45.0, 100.0, "Pending", date(2025, 3, 9)),
        Record("project-3", "Biomass Facility 1", 10.5, -60.25, "Completed", date(2025, 7, 30)),
        Record("project-4", "Solar Farm Alpha 2", 80.0, 179.5, "Inactive", date(2025, 1, 15)),
        Record("project-5", "Coastal Management 1", -89.9, -179.9, "Active", date(2025, 7, 30)),
    )


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    """Clear the settings and store caches around a test that edits the environment.

    Runs from an empty directory so a developer .env file does not leak in.
    """
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_records.cache_clear()
    yield
    get_settings.cache_clear()
    get_records.cache_clear()
