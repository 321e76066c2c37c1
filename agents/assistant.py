"""
Conversational health assistant.

The conversation lives in one process-wide ChatSession: created lazily on the
first message, reused for every later turn, and never torn down. Callers only
pass the new prompt; the session keeps the system instruction and all prior
turns.
"""

import logging
import threading
from typing import Dict, List, Optional

from agents.base import OpenAIStyleClient
from agents.prompt_health import ASSISTANT_SYSTEM_PROMPT
from errors import AdviceError
from llm_config import CHAT_MODEL_NAME, LLM_BASE_URL, UI_TEST_MODE

logger = logging.getLogger(__name__)


class ChatSession:
    """Multi-turn conversation with a fixed system instruction."""

    def __init__(self, client: OpenAIStyleClient, system_instruction: str):
        self.client = client
        self.system_instruction = system_instruction
        self.history: List[Dict[str, str]] = []
        # Gradio runs sync handlers on a thread pool; one turn at a time.
        self._lock = threading.Lock()

    def build_messages(self, prompt: str) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": self.system_instruction}
        ]
        messages.extend(self.history)
        messages.append({"role": "user", "content": prompt})
        return messages

    def send_message(self, prompt: str) -> str:
        """Send one user turn and return the reply; failed turns leave history untouched."""
        with self._lock:
            if UI_TEST_MODE:
                reply = f"[UI test mode] You said: {prompt}"
            else:
                reply = self.client.chat(self.build_messages(prompt))
            self.history.append({"role": "user", "content": prompt})
            self.history.append({"role": "assistant", "content": reply})
            return reply


_chat_session: Optional[ChatSession] = None
_session_init_lock = threading.Lock()


def get_chat_session() -> ChatSession:
    global _chat_session
    if _chat_session is None:
        with _session_init_lock:
            if _chat_session is None:
                _chat_session = ChatSession(
                    OpenAIStyleClient(LLM_BASE_URL, CHAT_MODEL_NAME),
                    ASSISTANT_SYSTEM_PROMPT,
                )
    return _chat_session


def get_health_advice(prompt: str) -> str:
    """Return the assistant's reply, or raise AdviceError on any failure."""
    try:
        reply = get_chat_session().send_message(prompt)
    except Exception as e:
        logger.exception("Error getting health advice")
        raise AdviceError("Failed to get health advice from AI.") from e
    logger.info("Health assistant replied (%d chars)", len(reply))
    return reply
