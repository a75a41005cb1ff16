"""
Council engine.

Public API:
    - Orchestration: Council, run_council
    - Parsing: parse_ranking_from_text
    - Aggregation: calculate_aggregate_rankings
    - Anonymization: anonymize_responses, deanonymize_ranking
    - Prompts: build_ranking_prompt, build_chairman_prompt, format_anonymized_responses
"""

from .aggregation import calculate_aggregate_rankings
from .anonymize import anonymize_responses, deanonymize_ranking, make_label
from .orchestrator import Council, run_council
from .parsers import parse_ranking_from_text
from .prompts import build_chairman_prompt, build_ranking_prompt, format_anonymized_responses

__all__ = [
    # Orchestrator
    "Council",
    "run_council",
    # Parsers
    "parse_ranking_from_text",
    # Aggregation
    "calculate_aggregate_rankings",
    # Anonymization
    "anonymize_responses",
    "deanonymize_ranking",
    "make_label",
    # Prompts
    "build_ranking_prompt",
    "build_chairman_prompt",
    "format_anonymized_responses",
]
