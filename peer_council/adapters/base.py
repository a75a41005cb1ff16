"""The chat capability every provider client implements, and the shared HTTP call."""

import logging
from typing import Protocol

import httpx

from ..errors import ProviderError
from ..types import ChatMessage

logger = logging.getLogger(__name__)


class ChatProvider(Protocol):
    """Anything that can send a chat request to a named model and return its text reply."""

    async def chat(self, model: str, messages: list[ChatMessage]) -> str:
        """
        Send one chat request.

        Raises:
            ProviderError: On transport failure, timeout, HTTP error status,
                or a reply without text content
        """
        ...


async def post_json(
    provider_name: str,
    url: str,
    model: str,
    payload: dict,
    headers: dict[str, str],
    timeout: float,
) -> dict:
    """
    POST a JSON payload and decode the JSON reply.

    Every failure mode is raised as ProviderError with a readable message;
    the status code is included for HTTP errors.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(url, headers=headers, json=payload)
    except httpx.TimeoutException as e:
        raise ProviderError(
            f"{provider_name} request to {model} timed out after {timeout}s", model=model
        ) from e
    except httpx.HTTPError as e:
        raise ProviderError(f"{provider_name} request to {model} failed: {e}", model=model) from e

    # httpx does not follow redirects here, so anything outside 2xx is a failure
    if not 200 <= response.status_code < 300:
        logger.debug("%s returned %s for %s", provider_name, response.status_code, model)
        raise ProviderError(
            f"{provider_name} API error ({response.status_code}): {response.text}",
            model=model,
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        raise ProviderError(f"Unexpected response format from {model}", model=model) from e
