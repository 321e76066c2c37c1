"""
Dashboard projection and rendering.

summarize_readings() projects the record store into latest-per-type and
ascending history; render_dashboard_action() turns that into Gradio updates
for the cards, charts and the onboarding panel.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import gradio as gr
import pandas as pd

from models import (
    READING_LABELS,
    READING_UNITS,
    BloodPressureReading,
    BloodSugarReading,
    HealthReading,
    ReadingType,
    WeightReading,
    reading_timestamp,
)
from storage import HealthRecordStore

MIN_CHART_POINTS = 2

# Y-axis padding around the data range, per chart.
CHART_PADDING = {
    ReadingType.BLOOD_SUGAR: 10,
    ReadingType.BLOOD_PRESSURE: 10,
    ReadingType.WEIGHT: 2,
}

CHART_TITLES = {
    ReadingType.BLOOD_SUGAR: "Blood Sugar Trend",
    ReadingType.BLOOD_PRESSURE: "Blood Pressure Trend",
    ReadingType.WEIGHT: "Weight Trend",
}

ONBOARDING_TXT = """
### Welcome to Health Guardian!

Log your first health metric to see your dashboard.
"""


@dataclass
class DashboardSummary:
    latest: Dict[ReadingType, Optional[HealthReading]] = field(default_factory=dict)
    history: Dict[ReadingType, List[HealthReading]] = field(default_factory=dict)
    show_onboarding: bool = True

    def chart_visible(self, reading_type: ReadingType) -> bool:
        return len(self.history.get(reading_type, [])) >= MIN_CHART_POINTS


def summarize_readings(store: HealthRecordStore) -> DashboardSummary:
    """Latest reading and ascending history per type, read from the store."""
    latest: Dict[ReadingType, Optional[HealthReading]] = {}
    history: Dict[ReadingType, List[HealthReading]] = {}
    for reading_type in ReadingType:
        latest[reading_type] = store.latest(reading_type)
        history[reading_type] = store.history(reading_type)
    return DashboardSummary(
        latest=latest, history=history, show_onboarding=len(store) == 0
    )


def _format_number(value: float) -> str:
    """Full-precision text for a reading value; whole numbers drop the ".0"."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_value(reading: Optional[HealthReading]) -> str:
    if reading is None:
        return "N/A"
    if isinstance(reading, BloodPressureReading):
        return f"{reading.systolic}/{reading.diastolic}"
    if isinstance(reading, (BloodSugarReading, WeightReading)):
        return _format_number(reading.value)
    raise TypeError(f"Unknown reading type: {type(reading).__name__}")


def format_timestamp(reading: Optional[HealthReading]) -> str:
    if reading is None:
        return ""
    return reading_timestamp(reading).astimezone().strftime("%b %d, %Y %H:%M")


def metric_card_markdown(
    reading_type: ReadingType, reading: Optional[HealthReading]
) -> str:
    lines = [
        f"### {READING_LABELS[reading_type]}",
        f"# {format_value(reading)} <small>{READING_UNITS[reading_type]}</small>",
    ]
    if reading is not None:
        lines.append(f"Last updated: {format_timestamp(reading)}")
    return "\n\n".join(lines)


def _chart_time(reading: HealthReading):
    return reading_timestamp(reading).astimezone().replace(tzinfo=None)


def chart_frame(reading_type: ReadingType, history: List[HealthReading]) -> pd.DataFrame:
    """Long-format frame (date, value, series) for gr.LinePlot."""
    rows = []
    for reading in history:
        when = _chart_time(reading)
        if isinstance(reading, BloodPressureReading):
            rows.append({"date": when, "value": reading.systolic, "series": "Systolic"})
            rows.append({"date": when, "value": reading.diastolic, "series": "Diastolic"})
        elif isinstance(reading, (BloodSugarReading, WeightReading)):
            label = f"{READING_LABELS[reading_type]} ({READING_UNITS[reading_type]})"
            rows.append({"date": when, "value": reading.value, "series": label})
        else:
            raise TypeError(f"Unknown reading type: {type(reading).__name__}")
    return pd.DataFrame(rows, columns=["date", "value", "series"])


def chart_y_limits(reading_type: ReadingType, frame: pd.DataFrame) -> List[float]:
    pad = CHART_PADDING[reading_type]
    return [float(frame["value"].min()) - pad, float(frame["value"].max()) + pad]


def chart_update(summary: DashboardSummary, reading_type: ReadingType):
    if not summary.chart_visible(reading_type):
        return gr.update(visible=False)
    frame = chart_frame(reading_type, summary.history[reading_type])
    return gr.update(
        value=frame,
        visible=True,
        y_lim=chart_y_limits(reading_type, frame),
    )


def render_dashboard_action(store: HealthRecordStore) -> Tuple:
    """
    Gradio callback: render the dashboard from the record store.

    Returns updates for: onboarding panel, metric cards row, the three
    metric cards, and the three trend charts.
    """
    summary = summarize_readings(store)
    has_data = not summary.show_onboarding
    cards = tuple(
        gr.update(value=metric_card_markdown(t, summary.latest[t])) for t in ReadingType
    )
    charts = tuple(chart_update(summary, t) for t in ReadingType)
    return (
        gr.update(visible=summary.show_onboarding),
        gr.update(visible=has_data),
    ) + cards + charts
