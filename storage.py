"""
In-memory health record store.

Readings live only for the lifetime of the browser session that owns the
store. The collection is kept sorted newest-first after every append.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional

from models import (
    BloodPressureReading,
    BloodSugarReading,
    HealthReading,
    ReadingType,
    WeightReading,
    reading_timestamp,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def seed_demo_readings() -> List[HealthReading]:
    """Demonstration rows shown on first launch, at local wall-clock times."""
    day1_morning = datetime(2023, 10, 26, 8, 0).astimezone().isoformat()
    day1_afternoon = datetime(2023, 10, 26, 14, 0).astimezone().isoformat()
    day2_morning = datetime(2023, 10, 27, 8, 30).astimezone().isoformat()
    return [
        BloodSugarReading(value=110, date=day1_morning),
        BloodPressureReading(systolic=120, diastolic=80, date=day1_morning),
        WeightReading(value=75, date=day1_morning),
        BloodSugarReading(value=140, date=day1_afternoon),
        BloodSugarReading(value=105, date=day2_morning),
        BloodPressureReading(systolic=122, diastolic=81, date=day2_morning),
        WeightReading(value=74.8, date=day2_morning),
    ]


class HealthRecordStore:
    """
    Append-only collection of timestamped readings.

    - append() stamps the reading with the clock and re-sorts descending.
    - Ties on timestamp keep the most recently appended reading first.
    - No update, delete, or range validation.
    """

    def __init__(
        self,
        readings: Optional[List[HealthReading]] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.clock = clock
        self._readings: List[HealthReading] = sorted(
            readings or [], key=reading_timestamp, reverse=True
        )

    @property
    def readings(self) -> List[HealthReading]:
        return list(self._readings)

    def __len__(self) -> int:
        return len(self._readings)

    def append(self, reading: HealthReading) -> HealthReading:
        """Stamp ``reading`` with the current time, insert it, and re-sort."""
        stamped = replace(reading, date=self.clock().isoformat())
        # Prepending keeps the new reading ahead of equal timestamps under a stable sort.
        self._readings = sorted(
            [stamped] + self._readings, key=reading_timestamp, reverse=True
        )
        logger.info("Stored %s reading at %s", stamped.type.value, stamped.date)
        return stamped

    def latest(self, reading_type: ReadingType) -> Optional[HealthReading]:
        for reading in self._readings:
            if reading.type == reading_type:
                return reading
        return None

    def history(self, reading_type: ReadingType) -> List[HealthReading]:
        """All readings of one type, oldest first."""
        return [r for r in reversed(self._readings) if r.type == reading_type]
