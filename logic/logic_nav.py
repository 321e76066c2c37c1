from typing import Tuple

import gradio as gr

from models import AppView

PAGE_ORDER = (
    AppView.DASHBOARD,
    AppView.LOG_DATA,
    AppView.MEAL_ANALYZER,
    AppView.HEALTH_ASSISTANT,
)

NAV_LABELS = {
    AppView.DASHBOARD: "📊 Dashboard",
    AppView.LOG_DATA: "📝 Log Data",
    AppView.MEAL_ANALYZER: "✨ Meal AI",
    AppView.HEALTH_ASSISTANT: "💬 Assistant",
}


def page_updates(view: AppView) -> Tuple:
    """Visibility updates for the four pages, in PAGE_ORDER."""
    return tuple(gr.update(visible=(page == view)) for page in PAGE_ORDER)


def nav_updates(view: AppView) -> Tuple:
    """Highlight the active nav button."""
    return tuple(
        gr.update(variant="primary" if page == view else "secondary")
        for page in PAGE_ORDER
    )


def switch_page(view: AppView) -> Tuple:
    """Return (view_state, *page visibility, *nav variants) for the active view."""
    view = AppView(view)
    return (view,) + page_updates(view) + nav_updates(view)
