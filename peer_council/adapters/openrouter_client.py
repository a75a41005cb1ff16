"""OpenRouter API client for making LLM requests."""

from ..errors import ProviderError
from ..settings import DEFAULT_TIMEOUT, OPENROUTER_BASE_URL
from ..types import ChatMessage
from .base import post_json


class OpenRouterClient:
    """Chat completions against the OpenRouter API."""

    name = "OpenRouter"

    def __init__(
        self, api_key: str, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT
    ):
        self.api_key = api_key
        self.base_url = (base_url or OPENROUTER_BASE_URL).rstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/chat/completions"

    async def chat(self, model: str, messages: list[ChatMessage]) -> str:
        """
        Query a single model via OpenRouter API.

        Args:
            model: OpenRouter model identifier (e.g., "openai/gpt-4o")
            messages: List of message dicts with 'role' and 'content'

        Returns:
            The assistant message content

        Raises:
            ProviderError: If the request fails or the reply has no text content
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        payload = {
            "model": model,
            "messages": messages,
        }

        data = await post_json(self.name, self.url, model, payload, headers, self.timeout)

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not isinstance(content, str):
            raise ProviderError(f"Unexpected response format from {model}", model=model)
        return content
