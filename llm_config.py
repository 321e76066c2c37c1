"""
Central configuration for the hosted LLM used by Health Guardian AI.

- UI_TEST_MODE: if True, do not call any real LLM, return dummy outputs.
- LLM_BASE_URL: base URL of the OpenAI-compatible chat completions endpoint.
- LLM_API_KEY: API key for the hosted model (API_KEY is accepted as well).
- CHAT_MODEL_NAME: model used by the health assistant conversation.
- ANALYSIS_MODEL_NAME: model used for structured meal analysis.
"""

import os

from errors import ConfigurationError


def _bool_env(name: str, default: str = "false") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


# If True, do not call any real LLM and always return dummy outputs.
UI_TEST_MODE: bool = _bool_env("UI_TEST_MODE", "false")

# Gemini exposes an OpenAI-compatible surface; any compatible server works.
LLM_BASE_URL: str = os.getenv(
    "LLM_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai"
).rstrip("/")

LLM_API_KEY: str | None = os.getenv("LLM_API_KEY") or os.getenv("API_KEY") or None

CHAT_MODEL_NAME: str = os.getenv("CHAT_MODEL_NAME", "gemini-2.5-flash")
ANALYSIS_MODEL_NAME: str = os.getenv("ANALYSIS_MODEL_NAME", "gemini-2.5-flash")

# HTTP timeout
try:
    LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "60"))
except ValueError:
    LLM_TIMEOUT = 60.0

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Pre-seed the record store with demonstration readings.
SEED_DEMO_DATA: bool = _bool_env("SEED_DEMO_DATA", "true")


def require_api_key() -> None:
    """Fail startup when the hosted model has no credential configured."""
    if UI_TEST_MODE:
        return
    if not LLM_API_KEY:
        raise ConfigurationError(
            "LLM_API_KEY (or API_KEY) environment variable not set"
        )
