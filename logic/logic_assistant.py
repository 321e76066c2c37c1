import logging
from typing import Dict, Iterator, List, Tuple

import gradio as gr

from agents.assistant import get_health_advice
from errors import AdviceError
from models import ChatMessage

logger = logging.getLogger(__name__)

ADVICE_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."
EMPTY_TRANSCRIPT_TXT = "Start the conversation by asking a question below."


def to_chatbot_messages(transcript: List[ChatMessage]) -> List[Dict[str, str]]:
    """Convert the transcript to gr.Chatbot(type="messages") format."""
    return [
        {"role": "user" if m.role == "user" else "assistant", "content": m.text}
        for m in transcript
    ]


def _render(transcript: List[ChatMessage], busy: bool) -> Tuple:
    return (
        transcript,
        gr.update(value=to_chatbot_messages(transcript)),
        gr.update(visible=len(transcript) == 0),
        gr.update(interactive=not busy),
    )


def chat_send_action(
    user_input: str, transcript: List[ChatMessage]
) -> Iterator[Tuple]:
    """
    Gradio generator callback for one assistant turn.

    Yields (transcript state, chatbot, empty hint, send button, chat input).
    The user's message is shown before the model is called; a failed call
    adds an apology as a model message.
    """
    if not user_input or not user_input.strip():
        yield _render(transcript, busy=False) + (gr.update(),)
        return

    transcript = transcript + [ChatMessage(role="user", text=user_input)]
    yield _render(transcript, busy=True) + (gr.update(value="", interactive=False),)

    try:
        reply = get_health_advice(user_input)
        transcript = transcript + [ChatMessage(role="model", text=reply)]
    except AdviceError:
        logger.error("Health advice failed; showing apology in transcript")
        transcript = transcript + [ChatMessage(role="model", text=ADVICE_ERROR_MESSAGE)]

    yield _render(transcript, busy=False) + (gr.update(interactive=True),)
