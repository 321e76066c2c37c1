"""
Data model for Health Guardian AI.

Readings are a tagged union over three frozen dataclasses; ``type`` is the
discriminant and every consumer branches on it explicitly.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, List, Optional, Union

from pydantic import BaseModel, Field


class ReadingType(str, Enum):
    BLOOD_SUGAR = "bloodSugar"
    BLOOD_PRESSURE = "bloodPressure"
    WEIGHT = "weight"


READING_LABELS = {
    ReadingType.BLOOD_SUGAR: "Blood Sugar",
    ReadingType.BLOOD_PRESSURE: "Blood Pressure",
    ReadingType.WEIGHT: "Weight",
}

READING_UNITS = {
    ReadingType.BLOOD_SUGAR: "mg/dL",
    ReadingType.BLOOD_PRESSURE: "mmHg",
    ReadingType.WEIGHT: "kg",
}


@dataclass(frozen=True)
class BloodSugarReading:
    type: ClassVar[ReadingType] = ReadingType.BLOOD_SUGAR
    value: float  # mg/dL
    date: Optional[str] = None


@dataclass(frozen=True)
class BloodPressureReading:
    type: ClassVar[ReadingType] = ReadingType.BLOOD_PRESSURE
    systolic: int  # mmHg
    diastolic: int  # mmHg
    date: Optional[str] = None


@dataclass(frozen=True)
class WeightReading:
    type: ClassVar[ReadingType] = ReadingType.WEIGHT
    value: float  # kg
    date: Optional[str] = None


HealthReading = Union[BloodSugarReading, BloodPressureReading, WeightReading]


def reading_timestamp(reading: HealthReading) -> datetime:
    """Parse the ISO-8601 ``date`` of a stored reading."""
    return datetime.fromisoformat(reading.date)


class AppView(str, Enum):
    DASHBOARD = "DASHBOARD"
    LOG_DATA = "LOG_DATA"
    MEAL_ANALYZER = "MEAL_ANALYZER"
    HEALTH_ASSISTANT = "HEALTH_ASSISTANT"


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" or "model"
    text: str


class MealAnalysisResult(BaseModel):
    """Structured meal analysis returned by the hosted model."""

    summary: str = Field(
        ...,
        description="A brief, 1-2 sentence summary of the meal's impact on blood sugar.",
    )
    good_for_sugar: List[str] = Field(
        ...,
        description=(
            "List of ingredients or components in the meal that are generally "
            "good for blood sugar control."
        ),
    )
    bad_for_sugar: List[str] = Field(
        ...,
        description=(
            "List of ingredients or components in the meal that could "
            "negatively impact blood sugar."
        ),
    )
    suggestions: List[str] = Field(
        ...,
        description=(
            "Actionable suggestions for making the meal healthier or for "
            "future meal choices."
        ),
    )
