"""Ollama API client for locally served models."""

from ..errors import ProviderError
from ..settings import DEFAULT_TIMEOUT, OLLAMA_BASE_URL
from ..types import ChatMessage
from .base import post_json


class OllamaClient:
    """Non-streaming chat against an Ollama server."""

    name = "Ollama"

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = (base_url or OLLAMA_BASE_URL).rstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/chat"

    async def chat(self, model: str, messages: list[ChatMessage]) -> str:
        payload = {"model": model, "messages": messages, "stream": False}
        headers = {"Content-Type": "application/json"}

        data = await post_json(self.name, self.url, model, payload, headers, self.timeout)

        message = data.get("message") if isinstance(data, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise ProviderError(f"Unexpected response format from {model}", model=model)
        return content
