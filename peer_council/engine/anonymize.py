"""Anonymous labels for Stage 1 responses."""

from collections.abc import Mapping, Sequence

from ..types import Stage1Entry

LABEL_PREFIX = "Response"
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def make_label(index: int) -> str:
    """Label for the response at ``index`` (0 -> "Response A")."""
    if not 0 <= index < len(ALPHABET):
        raise ValueError(
            f"No label for response #{index + 1}: at most {len(ALPHABET)} are supported"
        )
    return f"{LABEL_PREFIX} {ALPHABET[index]}"


def anonymize_responses(
    stage1_results: Sequence[Stage1Entry],
) -> tuple[list[tuple[str, str]], dict[str, str]]:
    """
    Replace model names with positional labels.

    Args:
        stage1_results: Successful Stage 1 entries, in council order

    Returns:
        Tuple of ((label, response text) pairs, label_to_model mapping)
    """
    if len(stage1_results) > len(ALPHABET):
        raise ValueError(
            f"Cannot anonymize {len(stage1_results)} responses: "
            f"at most {len(ALPHABET)} are supported"
        )

    labeled = []
    label_to_model = {}
    for index, result in enumerate(stage1_results):
        label = make_label(index)
        labeled.append((label, result["response"]))
        label_to_model[label] = result["model"]
    return labeled, label_to_model


def deanonymize_ranking(
    parsed_ranking: Sequence[str], label_to_model: Mapping[str, str]
) -> list[str]:
    """Map labels back to model names, leaving unknown labels as they are."""
    return [label_to_model.get(label, label) for label in parsed_ranking]
