"""
Ranking aggregation utilities for council deliberation.

Calculates aggregate rankings from peer evaluations.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal

from ..types import AggregateRanking, Stage2Ranking

_TWO_PLACES = Decimal("0.01")


def _average(positions: list[int]) -> float:
    """Arithmetic mean rounded half-up to two decimal places."""
    mean = Decimal(sum(positions)) / Decimal(len(positions))
    return float(mean.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def calculate_aggregate_rankings(
    stage2_results: Iterable[Stage2Ranking], label_to_model: Mapping[str, str]
) -> list[AggregateRanking]:
    """
    Calculate aggregate rankings across all models.

    Labels that are not in ``label_to_model`` are ignored.

    Args:
        stage2_results: Rankings from each model, with their parsed label lists
        label_to_model: Mapping from anonymous labels to model names

    Returns:
        List of dicts with model name and average rank, sorted best to worst
    """
    # Track positions for each model
    model_positions: defaultdict[str, list[int]] = defaultdict(list)

    for ranking in stage2_results:
        for position, label in enumerate(ranking["parsed_ranking"], start=1):
            if label in label_to_model:
                model_positions[label_to_model[label]].append(position)

    aggregate: list[AggregateRanking] = [
        {
            "model": model,
            "average_rank": _average(positions),
            "rankings_count": len(positions),
        }
        for model, positions in model_positions.items()
    ]

    # Sort by average rank (lower is better); sort is stable so ties keep first-seen order
    aggregate.sort(key=lambda x: x["average_rank"])

    return aggregate
