"""
Tests for the in-memory health record store.
"""

from datetime import datetime, timedelta, timezone

from models import (
    BloodPressureReading,
    BloodSugarReading,
    ReadingType,
    WeightReading,
    reading_timestamp,
)
from storage import HealthRecordStore, seed_demo_readings


def _is_descending(readings):
    stamps = [reading_timestamp(r) for r in readings]
    return all(a >= b for a, b in zip(stamps, stamps[1:]))


class TestAppend:

    def test_assigns_timestamp_from_clock(self, clock):
        store = HealthRecordStore(clock=clock)
        stored = store.append(BloodSugarReading(value=110))
        assert stored.date == "2024-05-01T08:00:00+00:00"
        assert stored.value == 110

    def test_payload_date_is_ignored(self, clock):
        store = HealthRecordStore(clock=clock)
        stored = store.append(WeightReading(value=70, date="1999-01-01T00:00:00+00:00"))
        assert stored.date.startswith("2024-05-01")

    def test_sorted_descending_after_every_append(self, clock):
        store = HealthRecordStore(seed_demo_readings(), clock=clock)
        for value in (90, 95, 100, 130):
            store.append(BloodSugarReading(value=value))
            assert _is_descending(store.readings)
        assert store.readings[0].value == 130

    def test_older_clock_value_is_sorted_below_newer_rows(self):
        newest = datetime(2024, 1, 2, tzinfo=timezone.utc)
        store = HealthRecordStore(
            [WeightReading(value=80, date=newest.isoformat())],
            clock=lambda: newest - timedelta(days=1),
        )
        store.append(WeightReading(value=81))
        assert [r.value for r in store.readings] == [80, 81]

    def test_duplicates_are_kept(self):
        fixed = datetime(2024, 1, 1, tzinfo=timezone.utc)
        store = HealthRecordStore(clock=lambda: fixed)
        store.append(BloodSugarReading(value=100))
        store.append(BloodSugarReading(value=100))
        assert len(store) == 2

    def test_tie_keeps_most_recent_append_first(self):
        fixed = datetime(2024, 1, 1, tzinfo=timezone.utc)
        store = HealthRecordStore(clock=lambda: fixed)
        store.append(BloodSugarReading(value=100))
        store.append(BloodSugarReading(value=120))
        assert store.latest(ReadingType.BLOOD_SUGAR).value == 120

    def test_no_range_validation(self, clock):
        store = HealthRecordStore(clock=clock)
        store.append(WeightReading(value=-5))
        assert store.latest(ReadingType.WEIGHT).value == -5


class TestQueries:

    def test_latest_is_max_timestamp_per_type(self):
        store = HealthRecordStore(seed_demo_readings())
        assert store.latest(ReadingType.BLOOD_SUGAR).value == 105
        bp = store.latest(ReadingType.BLOOD_PRESSURE)
        assert (bp.systolic, bp.diastolic) == (122, 81)
        assert store.latest(ReadingType.WEIGHT).value == 74.8

    def test_latest_missing_type(self):
        store = HealthRecordStore([BloodPressureReading(
            systolic=120, diastolic=80, date="2024-01-01T00:00:00+00:00"
        )])
        assert store.latest(ReadingType.WEIGHT) is None

    def test_history_is_ascending(self):
        store = HealthRecordStore(seed_demo_readings())
        values = [r.value for r in store.history(ReadingType.BLOOD_SUGAR)]
        assert values == [110, 140, 105]

    def test_readings_returns_copy(self):
        store = HealthRecordStore(seed_demo_readings())
        store.readings.clear()
        assert len(store) == 7

    def test_seed_uses_local_wall_clock(self):
        local_times = [
            reading_timestamp(r).astimezone().strftime("%Y-%m-%d %H:%M")
            for r in seed_demo_readings()
        ]
        assert local_times[0] == "2023-10-26 08:00"
        assert local_times[3] == "2023-10-26 14:00"
        assert local_times[-1] == "2023-10-27 08:30"

    def test_seed_is_sorted_on_construction(self):
        store = HealthRecordStore(seed_demo_readings())
        assert _is_descending(store.readings)
