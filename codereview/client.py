"""
Async client for the Ollama chat endpoint.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from codereview.constants import CHAT_PATH, INVALID_RESPONSE_MESSAGE


class InferenceError(Exception):
    """The inference endpoint could not produce a usable response."""


class InferenceTimeoutError(InferenceError):
    """The inference call did not finish within its deadline."""


class OllamaChatClient:
    """One long-lived connection pool to the inference endpoint, shared by all requests."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the chat client.

        Args:
            base_url: Root URL of the Ollama server; ``/api/chat`` is appended.
            timeout: Total deadline in seconds for one call, from dispatch to decoded body.
            transport: Optional httpx transport, used by tests to stub the server.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}{CHAT_PATH}"

    async def chat(self, payload: Dict[str, Any]) -> Optional[str]:
        """
        POST the payload and return ``message.content``.

        Returns:
            The generated text, or None when the response carries a message
            without content.

        Raises:
            InferenceTimeoutError: The deadline elapsed.
            InferenceError: Transport failure, non-2xx status, non-JSON body
                or a body without a ``message`` object.
        """
        try:
            data = await asyncio.wait_for(self._post(payload), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise InferenceTimeoutError(
                f"Ollama request timed out after {self.timeout:g} seconds"
            )

        return self._extract_content(data)

    async def _post(self, payload: Dict[str, Any]) -> Any:
        try:
            response = await self._client.post(CHAT_PATH, json=payload)
        except httpx.TimeoutException as e:
            raise InferenceTimeoutError(f"Ollama request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise InferenceError(f"Ollama request failed ({self.url}): {e}") from e

        if not response.is_success:
            raise InferenceError(
                f"Ollama returned HTTP {response.status_code}: {response.text[:400]}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise InferenceError(f"Ollama returned a non-JSON body: {e}") from e

    @staticmethod
    def _extract_content(data: Any) -> Optional[str]:
        if not isinstance(data, dict) or not isinstance(data.get("message"), dict):
            logging.error(f"Unexpected Ollama response shape: {str(data)[:400]}")
            raise InferenceError(INVALID_RESPONSE_MESSAGE)

        content = data["message"].get("content")
        if content is None:
            return None
        if not isinstance(content, str):
            logging.error(f"Ollama message content is not text: {content!r}")
            raise InferenceError(INVALID_RESPONSE_MESSAGE)

        return content

    async def aclose(self):
        await self._client.aclose()
