import argparse
import os
import sys

_parser = argparse.ArgumentParser(add_help=False)
_parser.add_argument("--mode", type=str, choices=["test", "live"], default=None)
_parser.add_argument("--log-level", type=str, default=None)
_args, _unknown = _parser.parse_known_args(sys.argv[1:])
if _args.mode is not None:
    os.environ["UI_TEST_MODE"] = "true" if _args.mode == "test" else "false"
if _args.log_level is not None:
    os.environ["LOG_LEVEL"] = _args.log_level

import gradio as gr  # noqa: E402

import llm_config  # noqa: E402
from logging_config import setup_logging  # noqa: E402
from logic.logic_assistant import EMPTY_TRANSCRIPT_TXT, chat_send_action  # noqa: E402
from logic.logic_dashboard import (  # noqa: E402
    CHART_TITLES,
    ONBOARDING_TXT,
    render_dashboard_action,
)
from logic.logic_log import TYPE_CHOICES, save_reading_action, select_type_action  # noqa: E402
from logic.logic_meal import ANALYZE_LABEL, analyze_meal_action  # noqa: E402
from logic.logic_nav import NAV_LABELS, switch_page  # noqa: E402
from models import AppView, ReadingType  # noqa: E402
from storage import HealthRecordStore, seed_demo_readings  # noqa: E402

setup_logging(llm_config.LOG_LEVEL)
llm_config.require_api_key()

initial_readings = seed_demo_readings() if llm_config.SEED_DEMO_DATA else []

with gr.Blocks(title="Health Guardian AI") as demo:
    # Global states (copied per browser session)
    view_state = gr.State(AppView.DASHBOARD)
    store_state = gr.State(HealthRecordStore(initial_readings))
    transcript_state = gr.State([])

    # ========== Header ==========
    with gr.Row():
        gr.Markdown("# ❤️ Health Guardian AI")
        nav_dashboard = gr.Button(NAV_LABELS[AppView.DASHBOARD], variant="primary")
        nav_log = gr.Button(NAV_LABELS[AppView.LOG_DATA], variant="secondary")
        nav_meal = gr.Button(NAV_LABELS[AppView.MEAL_ANALYZER], variant="secondary")
        nav_assistant = gr.Button(NAV_LABELS[AppView.HEALTH_ASSISTANT], variant="secondary")

    # ========== Dashboard ==========
    with gr.Column(visible=True) as page_dashboard:
        with gr.Row():
            gr.Markdown("## Your Health Dashboard")
            log_new_btn = gr.Button("➕ Log New Data", variant="primary")

        with gr.Column(visible=False) as onboarding_panel:
            gr.Markdown(ONBOARDING_TXT)
            get_started_btn = gr.Button("Get Started ➜", variant="primary")

        with gr.Row(visible=True) as cards_row:
            card_blood_sugar = gr.Markdown()
            card_blood_pressure = gr.Markdown()
            card_weight = gr.Markdown()

        chart_blood_sugar = gr.LinePlot(
            x="date",
            y="value",
            color="series",
            title=CHART_TITLES[ReadingType.BLOOD_SUGAR],
            visible=False,
        )
        chart_blood_pressure = gr.LinePlot(
            x="date",
            y="value",
            color="series",
            title=CHART_TITLES[ReadingType.BLOOD_PRESSURE],
            visible=False,
        )
        chart_weight = gr.LinePlot(
            x="date",
            y="value",
            color="series",
            title=CHART_TITLES[ReadingType.WEIGHT],
            visible=False,
        )

    # ========== Log data ==========
    with gr.Column(visible=False) as page_log:
        gr.Markdown("## Log New Health Data")
        data_type = gr.Radio(
            label="Select data type",
            choices=TYPE_CHOICES,
            value=ReadingType.BLOOD_SUGAR.value,
        )
        with gr.Column(visible=True) as blood_sugar_fields:
            blood_sugar_input = gr.Number(label="Blood Sugar (mg/dL)", info="e.g., 120")
        with gr.Row(visible=False) as blood_pressure_fields:
            systolic_input = gr.Number(label="Systolic (mmHg)", info="e.g., 120", precision=0)
            diastolic_input = gr.Number(label="Diastolic (mmHg)", info="e.g., 80", precision=0)
        with gr.Column(visible=False) as weight_fields:
            weight_input = gr.Number(label="Weight (kg)", info="e.g., 75.5", step=0.1)
        with gr.Row():
            cancel_btn = gr.Button("Cancel", variant="secondary")
            save_btn = gr.Button("Save Data", variant="primary")

    # ========== Meal analyzer ==========
    with gr.Column(visible=False) as page_meal:
        gr.Markdown(
            "## ✨ AI Meal Analyzer\n\n"
            "Describe your meal, and our AI will give you insights on its "
            "potential impact on your blood sugar."
        )
        meal_input = gr.Textbox(
            label="Your meal",
            lines=4,
            placeholder=(
                "e.g., A bowl of oatmeal with brown sugar, bananas, "
                "and a glass of orange juice"
            ),
        )
        analyze_btn = gr.Button(ANALYZE_LABEL, variant="primary")
        analysis_error = gr.Markdown("", visible=False)
        analysis_result = gr.Markdown("", visible=False)

    # ========== Health assistant ==========
    with gr.Column(visible=False) as page_assistant:
        gr.Markdown("## 💬 AI Health Assistant\n\nAsk general health and wellness questions")
        empty_hint = gr.Markdown(EMPTY_TRANSCRIPT_TXT)
        chatbot = gr.Chatbot(label="Conversation", type="messages", autoscroll=True)
        with gr.Row():
            chat_input = gr.Textbox(
                label="Your message",
                placeholder="Type your question...",
                scale=4,
            )
            send_btn = gr.Button("Send", variant="primary", scale=1)

    # ====== Event bindings ======

    nav_outputs = [
        view_state,
        page_dashboard,
        page_log,
        page_meal,
        page_assistant,
        nav_dashboard,
        nav_log,
        nav_meal,
        nav_assistant,
    ]
    dashboard_outputs = [
        onboarding_panel,
        cards_row,
        card_blood_sugar,
        card_blood_pressure,
        card_weight,
        chart_blood_sugar,
        chart_blood_pressure,
        chart_weight,
    ]

    demo.load(render_dashboard_action, inputs=[store_state], outputs=dashboard_outputs)

    # Navigation
    nav_dashboard.click(
        lambda: switch_page(AppView.DASHBOARD), inputs=None, outputs=nav_outputs
    ).then(render_dashboard_action, inputs=[store_state], outputs=dashboard_outputs)

    for button in (nav_log, log_new_btn, get_started_btn):
        button.click(
            lambda: switch_page(AppView.LOG_DATA), inputs=None, outputs=nav_outputs
        )

    nav_meal.click(
        lambda: switch_page(AppView.MEAL_ANALYZER), inputs=None, outputs=nav_outputs
    )

    nav_assistant.click(
        lambda: switch_page(AppView.HEALTH_ASSISTANT), inputs=None, outputs=nav_outputs
    )

    # Log data form
    data_type.change(
        select_type_action,
        inputs=[data_type],
        outputs=[blood_sugar_fields, blood_pressure_fields, weight_fields],
    )

    save_btn.click(
        save_reading_action,
        inputs=[
            data_type,
            blood_sugar_input,
            systolic_input,
            diastolic_input,
            weight_input,
            store_state,
            view_state,
        ],
        outputs=[
            store_state,
            blood_sugar_input,
            systolic_input,
            diastolic_input,
            weight_input,
        ]
        + nav_outputs
        + dashboard_outputs,
    )

    cancel_btn.click(
        lambda: switch_page(AppView.DASHBOARD), inputs=None, outputs=nav_outputs
    ).then(render_dashboard_action, inputs=[store_state], outputs=dashboard_outputs)

    # Meal analyzer
    analyze_btn.click(
        analyze_meal_action,
        inputs=[meal_input],
        outputs=[analysis_error, analysis_result, meal_input, analyze_btn],
    )

    # Health assistant
    chat_outputs = [transcript_state, chatbot, empty_hint, send_btn, chat_input]
    send_btn.click(
        chat_send_action,
        inputs=[chat_input, transcript_state],
        outputs=chat_outputs,
    )
    chat_input.submit(
        chat_send_action,
        inputs=[chat_input, transcript_state],
        outputs=chat_outputs,
    )

if __name__ == "__main__":
    demo.launch()
