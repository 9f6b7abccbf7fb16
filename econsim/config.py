"""
Runtime configuration for the chat relay.

Settings are read from environment variables so the Streamlit app can run
with or without an AI backend configured.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class ChatSettings:
    """
    Connection settings for the chat completion endpoint.

    Attributes:
        api_url: Chat completions URL (OpenAI-compatible streaming endpoint)
        api_key: Bearer token
        model: Model identifier sent in the request body
        timeout: Request timeout in seconds
    """
    api_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def is_configured(self) -> bool:
        return bool(self.api_url and self.api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ChatSettings":
        """
        Build settings from AI_API_URL, AI_API_KEY, AI_MODEL and AI_TIMEOUT.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
        """
        env = os.environ if environ is None else environ
        timeout = env.get("AI_TIMEOUT")
        return cls(
            api_url=env.get("AI_API_URL") or None,
            api_key=env.get("AI_API_KEY") or None,
            model=env.get("AI_MODEL") or DEFAULT_MODEL,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
