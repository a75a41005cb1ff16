"""
Provider clients.

Each client exposes ``async chat(model, messages) -> str``; new providers only
need to implement the same method.
"""

from ..errors import ConfigError
from ..settings import CouncilConfig
from .base import ChatProvider
from .ollama_client import OllamaClient
from .openrouter_client import OpenRouterClient


def create_provider(config: CouncilConfig) -> ChatProvider:
    """Build the client selected by ``config.provider``."""
    if config.provider == "openrouter":
        if not config.api_key:
            raise ConfigError("api_key is required for the openrouter provider")
        return OpenRouterClient(config.api_key, config.base_url, config.timeout)
    if config.provider == "ollama":
        return OllamaClient(config.base_url, config.timeout)
    raise ConfigError(f"Unknown provider {config.provider!r}")


__all__ = [
    "ChatProvider",
    "OllamaClient",
    "OpenRouterClient",
    "create_provider",
]
