import logging
from typing import Any, Dict, List, Optional

import requests

import llm_config

logger = logging.getLogger(__name__)


class OpenAIStyleClient:
    """Low-level HTTP client for OpenAI-style /chat/completions."""

    def __init__(self, base_url: str, model_name: str):
        self.base_url = base_url.rstrip("/")
        self.model_name = model_name

    def chat(
        self,
        messages: List[Dict[str, str]],
        response_format: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if llm_config.LLM_API_KEY:
            headers["Authorization"] = f"Bearer {llm_config.LLM_API_KEY}"

        payload: Dict[str, Any] = {
            "model": self.model_name,
            "messages": messages,
            "temperature": kwargs.get("temperature", 0.7),
            "stream": False,
        }
        if "max_tokens" in kwargs:
            payload["max_tokens"] = kwargs["max_tokens"]
        if response_format is not None:
            payload["response_format"] = response_format

        url = self.base_url + "/chat/completions"
        logger.debug("POST %s model=%s messages=%d", url, self.model_name, len(messages))
        resp = requests.post(
            url, headers=headers, json=payload, timeout=llm_config.LLM_TIMEOUT
        )
        resp.raise_for_status()
        data = resp.json()

        # Standard OpenAI-style result
        content = data["choices"][0]["message"]["content"]
        if not content:
            raise ValueError("Model returned an empty message")
        return content
