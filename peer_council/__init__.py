"""
Peer council: several models answer a question, rank each other's answers
anonymously, and a chairman model writes the final answer.
"""

from .adapters import ChatProvider, OllamaClient, OpenRouterClient, create_provider
from .engine import (
    Council,
    anonymize_responses,
    calculate_aggregate_rankings,
    parse_ranking_from_text,
    run_council,
)
from .errors import ConfigError, CouncilError, ProviderError, StageError
from .settings import CouncilConfig, load_config
from .types import (
    AggregateRanking,
    ChatMessage,
    CouncilResult,
    Stage1Entry,
    Stage2Ranking,
    Stage2Result,
    Stage3Result,
)

__version__ = "0.1.0"

__all__ = [
    "AggregateRanking",
    "ChatMessage",
    "ChatProvider",
    "ConfigError",
    "Council",
    "CouncilConfig",
    "CouncilError",
    "CouncilResult",
    "OllamaClient",
    "OpenRouterClient",
    "ProviderError",
    "Stage1Entry",
    "Stage2Ranking",
    "Stage2Result",
    "Stage3Result",
    "StageError",
    "anonymize_responses",
    "calculate_aggregate_rankings",
    "create_provider",
    "load_config",
    "parse_ranking_from_text",
    "run_council",
]
