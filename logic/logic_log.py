import logging
from typing import Optional, Tuple

import gradio as gr

from logic.logic_dashboard import render_dashboard_action
from logic.logic_nav import switch_page
from models import (
    AppView,
    BloodPressureReading,
    BloodSugarReading,
    HealthReading,
    ReadingType,
    WeightReading,
)
from storage import HealthRecordStore

logger = logging.getLogger(__name__)

TYPE_CHOICES = [
    ("Blood Sugar", ReadingType.BLOOD_SUGAR.value),
    ("Blood Pressure", ReadingType.BLOOD_PRESSURE.value),
    ("Weight", ReadingType.WEIGHT.value),
]


def _is_empty(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def build_reading_payload(
    data_type: str,
    blood_sugar,
    systolic,
    diastolic,
    weight,
) -> Optional[HealthReading]:
    """
    Build one undated reading from the fields of the selected type.

    Returns None when a required field is empty. Values are not range-checked.
    """
    reading_type = ReadingType(data_type)
    if reading_type == ReadingType.BLOOD_SUGAR:
        if _is_empty(blood_sugar):
            return None
        return BloodSugarReading(value=float(blood_sugar))
    if reading_type == ReadingType.BLOOD_PRESSURE:
        if _is_empty(systolic) or _is_empty(diastolic):
            return None
        return BloodPressureReading(
            systolic=int(float(systolic)), diastolic=int(float(diastolic))
        )
    if reading_type == ReadingType.WEIGHT:
        if _is_empty(weight):
            return None
        return WeightReading(value=float(weight))
    raise ValueError(f"Unhandled reading type: {reading_type}")


def select_type_action(data_type: str) -> Tuple:
    """Show only the field group of the selected reading type."""
    reading_type = ReadingType(data_type)
    return (
        gr.update(visible=reading_type == ReadingType.BLOOD_SUGAR),
        gr.update(visible=reading_type == ReadingType.BLOOD_PRESSURE),
        gr.update(visible=reading_type == ReadingType.WEIGHT),
    )


def save_reading_action(
    data_type: str,
    blood_sugar,
    systolic,
    diastolic,
    weight,
    store: HealthRecordStore,
    current_view: AppView,
):
    """
    Gradio callback for "Save Data".

    Outputs: store, the four field inputs, the navigation outputs of
    switch_page(), then the dashboard outputs of render_dashboard_action().
    An incomplete form changes nothing.
    """
    payload = build_reading_payload(data_type, blood_sugar, systolic, diastolic, weight)
    if payload is None:
        logger.debug("Ignoring incomplete %s form", data_type)
        return (
            (store,)
            + (gr.update(),) * 4
            + (current_view,)
            + (gr.update(),) * 8
            + (gr.update(),) * 8
        )

    store.append(payload)
    cleared = (gr.update(value=None),) * 4
    return (
        (store,)
        + cleared
        + switch_page(AppView.DASHBOARD)
        + render_dashboard_action(store)
    )
