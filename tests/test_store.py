from datetime import date, timedelta

from geodash.models import STATUSES
from geodash.store import PROJECT_NAMES, find_record, generate_records, get_records

REFERENCE_DAY = date(2026, 1, 1)  # matches the records fixture


def test_shape_of_generated_records(records):
    assert len(records) == 5000
    assert records[0].id == "project-1"
    assert records[-1].id == "project-5000"
    assert len({r.id for r in records}) == 5000


def test_names_cycle_through_variants(records):
    assert records[0].name == "Solar Farm Alpha 1"
    assert records[1].name == "Wind Energy Beta 1"
    assert records[14].name == "Coastal Management 1"
    assert records[15].name == "Solar Farm Alpha 2"
    assert records[4999].name == f"{PROJECT_NAMES[4999 % 15]} {4999 // 15 + 1}"


def test_values_stay_in_range(records):
    oldest = REFERENCE_DAY - timedelta(days=364)
    for r in records:
        assert -90.0 <= r.latitude <= 90.0
        assert -180.0 <= r.longitude <= 180.0
        assert r.status in STATUSES
        assert oldest <= r.last_updated <= REFERENCE_DAY
        assert round(r.latitude, 6) == r.latitude


def test_same_seed_same_records():
    day = date(2026, 3, 1)
    assert generate_records(50, seed=3, today=day) == generate_records(50, seed=3, today=day)
    assert generate_records(50, seed=3, today=day) != generate_records(50, seed=4, today=day)


def test_get_records_is_cached_for_the_process(monkeypatch, fresh_settings):
    monkeypatch.setenv("GEODASH_RECORD_COUNT", "20")
    monkeypatch.setenv("GEODASH_SEED", "5")
    first = get_records()
    assert len(first) == 20
    assert get_records() is first


def test_find_record(small_records):
    assert find_record(small_records, "project-3").name == "Biomass Facility 1"
    assert find_record(small_records, "project-99") is None
