"""
Chat Relay Client

Sends the conversation to an OpenAI-compatible chat completion endpoint and
parses its server-sent event stream into text deltas.

The engine never depends on this module. The UI uses it to answer
follow-up questions about the current simulation.
"""

import json
import logging
from typing import Any, Iterable, Iterator, Mapping, Optional

import requests

from .config import ChatSettings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert economic policy advisor specializing in fiscal policy, trade economics, subsidies, and price controls. You help users understand the implications of various economic policies through simulation analysis.

Your expertise includes:
- **Tax Policy**: Income tax, corporate tax, sales tax effects on consumer behavior, investment, and government revenue
- **Trade Policy**: Tariffs, quotas, trade agreements, and their effects on domestic/international markets
- **Subsidies**: Production subsidies, consumer subsidies, and their market distortions and welfare effects
- **Price Controls**: Price ceilings, price floors, and their effects on supply, demand, and market equilibrium

When analyzing policies:
1. Explain the economic theory behind the effects
2. Discuss short-term vs long-term implications
3. Highlight trade-offs and unintended consequences
4. Reference supply/demand dynamics and equilibrium shifts
5. Consider distributional effects across different economic groups

Be precise, data-driven, and balanced in your analysis. Use economic terminology appropriately but explain concepts clearly for non-economists."""

GREETING = (
    "Hello! I'm your AI policy advisor. Ask me about tax effects, trade implications, "
    "subsidy impacts, or price controls and I'll provide economic analysis."
)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
USAGE_LIMIT_MESSAGE = "AI usage limit reached. Please add credits to continue."
UNAVAILABLE_MESSAGE = "AI service temporarily unavailable"

STATUS_MESSAGES = {
    429: RATE_LIMIT_MESSAGE,
    402: USAGE_LIMIT_MESSAGE,
}

DATA_PREFIX = "data: "
DONE_MARKER = "[DONE]"


class ChatError(Exception):
    """Base class for chat relay failures."""


class ChatConfigurationError(ChatError):
    """Raised when the API URL or key is missing."""


class ChatServiceError(ChatError):
    """Raised when the endpoint rejects the request or the transport fails."""

    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def error_message_for_status(status_code: int) -> str:
    """User-facing message for a failed response status."""
    return STATUS_MESSAGES.get(status_code, UNAVAILABLE_MESSAGE)


def build_chat_messages(
    history: Iterable[Mapping[str, str]],
    simulation: Any = None,
) -> list[dict]:
    """
    Build the request message list.

    Args:
        history: Prior user/assistant turns as ``{"role", "content"}`` mappings
        simulation: Optional SimulationResult; its JSON is added as context

    Returns:
        Messages starting with the system prompt
    """
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    if simulation is not None:
        messages.append({
            "role": "system",
            "content": "Current simulation results:\n" + simulation.to_json(),
        })
    messages.extend({"role": turn["role"], "content": turn["content"]} for turn in history)
    return messages


def _delta_content(payload: Any) -> Optional[str]:
    """Extract ``choices[0].delta.content`` if present."""
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    delta = first.get("delta") if isinstance(first, dict) else None
    content = delta.get("content") if isinstance(delta, dict) else None
    return content if isinstance(content, str) and content else None


def _data_payload(line: str) -> Optional[str]:
    """Return the payload of a ``data:`` line, or None for lines to skip."""
    if line.endswith("\r"):
        line = line[:-1]
    if line.startswith(":") or not line.strip():
        return None
    if not line.startswith(DATA_PREFIX):
        return None
    return line[len(DATA_PREFIX):].strip()


class SSEDeltaParser:
    """
    Incremental parser for a streamed chat completion.

    Feed raw text chunks as they arrive. Complete lines are parsed; a line
    whose JSON does not parse yet is put back into the buffer and retried
    once the next chunk arrives.
    """

    def __init__(self):
        self._buffer = ""
        self.done = False

    def feed(self, chunk: str) -> list[str]:
        """Consume a chunk and return the content deltas it completed."""
        if self.done:
            return []

        self._buffer += chunk
        deltas = []

        while "\n" in self._buffer:
            line, self._buffer = self._buffer.split("\n", 1)
            payload = _data_payload(line)
            if payload is None:
                continue
            if payload == DONE_MARKER:
                self.done = True
                break

            try:
                parsed = json.loads(payload)
            except json.JSONDecodeError:
                self._buffer = line + "\n" + self._buffer
                break

            content = _delta_content(parsed)
            if content:
                deltas.append(content)

        return deltas

    def flush(self) -> list[str]:
        """Parse whatever is left once the stream ends; partial lines are ignored."""
        leftover, self._buffer = self._buffer, ""
        if self.done or not leftover.strip():
            return []

        deltas = []
        for raw in leftover.split("\n"):
            payload = _data_payload(raw)
            if payload is None or payload == DONE_MARKER:
                continue
            try:
                content = _delta_content(json.loads(payload))
            except json.JSONDecodeError:
                continue
            if content:
                deltas.append(content)
        return deltas


class PolicyChatClient:
    """Blocking streaming client for the chat completion endpoint."""

    def __init__(self, settings: Optional[ChatSettings] = None):
        self.settings = settings or ChatSettings.from_env()

    def _request_body(self, messages: list[dict]) -> dict:
        return {
            "model": self.settings.model,
            "messages": messages,
            "stream": True,
        }

    def stream(self, messages: list[dict]) -> Iterator[str]:
        """
        Post the conversation and yield content deltas as they arrive.

        Raises:
            ChatConfigurationError: If the API URL or key is missing
            ChatServiceError: On a non-OK response or transport failure
        """
        if not self.settings.is_configured:
            logger.warning("Chat requested but AI_API_URL / AI_API_KEY are not set")
            raise ChatConfigurationError("AI_API_KEY or AI_API_URL is not configured")

        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }
        logger.info(f"Processing policy chat request with {len(messages)} messages")

        try:
            response = requests.post(
                self.settings.api_url,
                headers=headers,
                json=self._request_body(messages),
                stream=True,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Policy chat transport error: {e}")
            raise ChatServiceError(None, UNAVAILABLE_MESSAGE) from e

        try:
            if not response.ok:
                logger.error(f"AI gateway error: {response.status_code} {response.text}")
                raise ChatServiceError(response.status_code, error_message_for_status(response.status_code))

            if response.encoding is None:
                response.encoding = "utf-8"

            parser = SSEDeltaParser()
            try:
                for chunk in response.iter_content(chunk_size=None, decode_unicode=True):
                    if isinstance(chunk, bytes):
                        chunk = chunk.decode("utf-8")
                    yield from parser.feed(chunk)
                    if parser.done:
                        break
            except requests.RequestException as e:
                logger.error(f"Policy chat stream interrupted: {e}")
                raise ChatServiceError(None, UNAVAILABLE_MESSAGE) from e
            yield from parser.flush()
        finally:
            response.close()

    def complete(self, messages: list[dict]) -> str:
        """Run ``stream`` to completion and return the joined reply."""
        return "".join(self.stream(messages))
