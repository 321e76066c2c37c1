import logging
from typing import Iterator, List, Tuple

import gradio as gr

from agents.meal_analyzer import analyze_meal
from errors import AnalysisError
from models import MealAnalysisResult

logger = logging.getLogger(__name__)

ANALYSIS_ERROR_MESSAGE = "Sorry, I couldn't analyze the meal. Please try again."

DISCLAIMER_TXT = (
    "Disclaimer: This analysis is AI-generated and for informational purposes only. "
    "It is not a substitute for professional medical advice."
)

ANALYZE_LABEL = "Analyze My Meal"
BUSY_LABEL = "Analyzing..."


def analysis_card_markdown(title: str, icon: str, items: List[str]) -> str:
    """One category card; empty string when the category has no items."""
    if not items:
        return ""
    bullets = "\n".join(f"- {item}" for item in items)
    return f"#### {icon} {title}\n\n{bullets}"


def render_analysis_markdown(result: MealAnalysisResult) -> str:
    sections = [
        "### Analysis Results",
        f'*"{result.summary}"*',
    ]
    cards = [
        analysis_card_markdown("Good for Sugar", "✅", result.good_for_sugar),
        analysis_card_markdown("Consider Moderation", "❌", result.bad_for_sugar),
        analysis_card_markdown("Healthier Suggestions", "💡", result.suggestions),
    ]
    sections.extend(card for card in cards if card)
    sections.append(f"<small>{DISCLAIMER_TXT}</small>")
    return "\n\n".join(sections)


def _busy(is_busy: bool) -> Tuple:
    return (
        gr.update(interactive=not is_busy),
        gr.update(value=BUSY_LABEL if is_busy else ANALYZE_LABEL, interactive=not is_busy),
    )


def analyze_meal_action(meal: str) -> Iterator[Tuple]:
    """
    Gradio generator callback for "Analyze My Meal".

    Yields (error box, result panel, meal input, analyze button). The first
    yield shows the busy state; the last shows either the result or the
    generic error message.
    """
    if not meal or not meal.strip():
        yield gr.update(), gr.update(), gr.update(), gr.update()
        return

    yield (
        gr.update(value="", visible=False),
        gr.update(value="", visible=False),
    ) + _busy(True)

    try:
        result = analyze_meal(meal)
    except AnalysisError:
        logger.error("Meal analysis failed for input of %d chars", len(meal))
        yield (
            gr.update(value=ANALYSIS_ERROR_MESSAGE, visible=True),
            gr.update(value="", visible=False),
        ) + _busy(False)
        return

    yield (
        gr.update(value="", visible=False),
        gr.update(value=render_analysis_markdown(result), visible=True),
    ) + _busy(False)
