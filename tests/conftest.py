"""
Pytest configuration and fixtures for peer council tests.

This module provides sample data and a scripted in-memory provider for
running the council without making actual API calls.
"""

import logging
from typing import Any

import pytest

from peer_council.errors import ProviderError
from peer_council.settings import CouncilConfig

# =============================================================================
# Sample Model Responses
# =============================================================================

SAMPLE_MODELS = [
    "openai/gpt-5.2",
    "google/gemini-3-pro-preview",
    "anthropic/claude-sonnet-4.5",
]

SAMPLE_CHAIRMAN = "openai/gpt-5.2"

SAMPLE_INITIAL_RESPONSES = [
    {
        "model": "openai/gpt-5.2",
        "response": "Python is the best language for beginners due to its readable syntax.",
    },
    {
        "model": "google/gemini-3-pro-preview",
        "response": "JavaScript is ideal for beginners because it runs in browsers.",
    },
    {
        "model": "anthropic/claude-sonnet-4.5",
        "response": "Python offers the gentlest learning curve for new programmers.",
    },
]

SAMPLE_RANKING_TEXT = """Response A provides good practical advice with clear reasoning.
Response B offers a different perspective but lacks depth.
Response C is comprehensive but could be more concise.

FINAL RANKING:
1. Response A
2. Response C
3. Response B"""

SAMPLE_RANKING_TEXT_NO_HEADER = """Response A is best.
Response C is second.
Response B is third."""

RANKING_PROMPT_MARKER = "IMPORTANT: Your final ranking"
CHAIRMAN_PROMPT_MARKER = "You are the Chairman"


# =============================================================================
# Scripted provider
# =============================================================================


class ScriptedProvider:
    """
    In-memory ChatProvider.

    Replies are looked up by (stage, model) where stage is "respond", "rank"
    or "synthesize", detected from the prompt. A reply that is an Exception
    instance is raised instead of returned.
    """

    def __init__(self, replies: dict[tuple[str, str], Any] | None = None, default: str = "ok"):
        self.replies = replies or {}
        self.default = default
        self.calls: list[tuple[str, str, list[dict]]] = []

    @staticmethod
    def stage_of(messages: list[dict]) -> str:
        content = messages[-1]["content"]
        if CHAIRMAN_PROMPT_MARKER in content:
            return "synthesize"
        if RANKING_PROMPT_MARKER in content:
            return "rank"
        return "respond"

    def calls_for(self, stage: str) -> list[str]:
        return [model for call_stage, model, _ in self.calls if call_stage == stage]

    def prompt_for(self, stage: str) -> str:
        for call_stage, _, messages in self.calls:
            if call_stage == stage:
                return messages[-1]["content"]
        raise AssertionError(f"No {stage} call was made")

    async def chat(self, model: str, messages: list[dict]) -> str:
        stage = self.stage_of(messages)
        self.calls.append((stage, model, messages))
        reply = self.replies.get((stage, model), self.default)
        if isinstance(reply, Exception):
            raise reply
        return reply


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def sample_models() -> list[str]:
    """Return sample model identifiers."""
    return SAMPLE_MODELS.copy()


@pytest.fixture
def sample_initial_responses() -> list[dict[str, Any]]:
    """Return sample Stage 1 responses from models."""
    return [r.copy() for r in SAMPLE_INITIAL_RESPONSES]


@pytest.fixture
def sample_ranking_text() -> str:
    """Return sample ranking text with FINAL RANKING header."""
    return SAMPLE_RANKING_TEXT


@pytest.fixture
def sample_ranking_text_no_header() -> str:
    """Return sample ranking text without proper header."""
    return SAMPLE_RANKING_TEXT_NO_HEADER


@pytest.fixture
def council_config() -> CouncilConfig:
    """Return a valid configuration for the sample council."""
    return CouncilConfig(
        provider="openrouter",
        models=SAMPLE_MODELS.copy(),
        chairman_model=SAMPLE_CHAIRMAN,
        api_key="test-key",
    )


@pytest.fixture
def council_logger() -> logging.Logger:
    """Return a dedicated logger for progress output."""
    return logging.getLogger("peer_council.tests")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the developer's config.yaml, .env and API keys."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PEER_COUNCIL_CONFIG", raising=False)
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    monkeypatch.setattr("peer_council.settings.load_dotenv", lambda *a, **k: False)


# =============================================================================
# Helper Functions
# =============================================================================


def make_stage1_result(model: str, response: str) -> dict[str, Any]:
    """Create a mock Stage 1 result."""
    return {"model": model, "response": response}


def make_ranking(model: str, parsed_ranking: list[str], evaluation: str = "") -> dict[str, Any]:
    """Create a mock Stage 2 ranking entry."""
    return {"model": model, "evaluation": evaluation, "parsed_ranking": parsed_ranking}


def provider_error(message: str, status_code: int | None = None) -> ProviderError:
    """Create a provider failure to script into a ScriptedProvider."""
    return ProviderError(message, status_code=status_code)
