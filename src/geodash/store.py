"""Record store: generates the mock project collection once and caches it for the process."""

import random
from datetime import date, timedelta
from functools import lru_cache

from geodash.config import get_settings
from geodash.logs import get_logger
from geodash.models import STATUSES, Record

log = get_logger(__name__)

PROJECT_NAMES: tuple[str, ...] = (
    "Solar Farm Alpha",
    "Wind Energy Beta",
    "Hydroelectric Project",
    "Geothermal Station",
    "Biomass Facility",
    "Grid Infrastructure",
    "Smart City Initiative",
    "Environmental Survey",
    "Resource Mapping",
    "Climate Analysis",
    "Urban Planning Zone",
    "Agricultural Census",
    "Mineral Exploration",
    "Water Resource Study",
    "Coastal Management",
)


def generate_records(
    count: int = 5000,
    seed: int | None = None,
    today: date | None = None,
) -> tuple[Record, ...]:
    """Build ``count`` projects with random coordinates, status, and update date.

    Names cycle through PROJECT_NAMES with a per-cycle suffix
    ("Solar Farm Alpha 1", "Wind Energy Beta 1", ..., "Solar Farm Alpha 2").

    Args:
        count: Number of records.
        seed: RNG seed. None = fresh randomness on every call.
        today: Reference date for ``last_updated``; defaults to date.today().

    Returns:
        Tuple of Record in id order (project-1 .. project-N).
    """
    rng = random.Random(seed)
    today = today or date.today()
    records: list[Record] = []
    for i in range(count):
        variant = PROJECT_NAMES[i % len(PROJECT_NAMES)]
        records.append(
            Record(
                id=f"project-{i + 1}",
                name=f"{variant} {i // len(PROJECT_NAMES) + 1}",
                latitude=round(rng.uniform(-90.0, 90.0), 6),
                longitude=round(rng.uniform(-180.0, 180.0), 6),
                status=rng.choice(STATUSES),
                last_updated=today - timedelta(days=rng.randrange(365)),
            )
        )
    return tuple(records)


@lru_cache(maxsize=1)
def get_records() -> tuple[Record, ...]:
    """The process-wide snapshot every query runs against."""
    settings = get_settings()
    records = generate_records(settings.record_count, seed=settings.seed)
    log.info("generated %d records (seed=%s)", len(records), settings.seed)
    return records


def find_record(records: tuple[Record, ...], record_id: str) -> Record | None:
    return next((r for r in records if r.id == record_id), None)
