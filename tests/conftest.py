"""
Shared test fixtures and configuration.
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("LLM_API_KEY", "test-api-key")
os.environ.setdefault("LLM_BASE_URL", "http://llm.test/v1")
os.environ.setdefault("UI_TEST_MODE", "false")
os.environ.setdefault("SEED_DEMO_DATA", "false")


class StepClock:
    """Clock that advances a fixed step on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now


@pytest.fixture
def clock():
    return StepClock(datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def fresh_chat_session(monkeypatch):
    import agents.assistant as assistant

    monkeypatch.setattr(assistant, "_chat_session", None)
    return assistant
