"""
Text parsing utilities for council responses.

Extracts the ranked list of anonymized labels from a model's free-form
evaluation text.
"""

import re

RANKING_MARKER = "FINAL RANKING:"

# number, period, optional space, "Response X"
_NUMBERED_LABEL = re.compile(r"\d+\.\s*Response [A-Z]")
# number, period, optional space, a bare letter ending the token
_NUMBERED_LETTER = re.compile(r"\d+\.\s*[A-Z](?:\s|$|,|\.)")
_LABEL = re.compile(r"Response [A-Z]")
_ORDINAL = re.compile(r"^\d+\.\s*")
# B > A > C, single letters only
_GREATER_THAN_CHAIN = re.compile(r"\b[A-Z]\b\s*>\s*\b[A-Z]\b(?:\s*>\s*\b[A-Z]\b)*")


def _strip_ordinal(match: str) -> str:
    return _ORDINAL.sub("", match)


def _numbered_labels(text: str) -> list[str]:
    return [_strip_ordinal(m) for m in _NUMBERED_LABEL.findall(text)]


def parse_ranking_from_text(ranking_text: str) -> list[str]:
    """
    Parse the ranking from a model's evaluation text.

    Strategies are tried in order and the first one that finds anything wins:

    1. ``FINAL RANKING:`` section with a numbered list of "Response X" labels
    2. ``FINAL RANKING:`` section with a numbered list of bare letters ("1. B")
    3. Numbered "Response X" list anywhere in the text
    4. Every "Response X" mention, in order of first appearance
    5. A chain of single letters such as ``B > A > C``

    Args:
        ranking_text: The full text response from the model

    Returns:
        List of response labels in ranked order (best first); empty if
        nothing recognizable was found
    """
    marker_index = ranking_text.find(RANKING_MARKER)
    if marker_index != -1:
        ranking_section = ranking_text[marker_index:]

        labels = _numbered_labels(ranking_section)
        if labels:
            return labels

        letters = _NUMBERED_LETTER.findall(ranking_section)
        if letters:
            return [
                f"Response {_strip_ordinal(m).strip().rstrip(',.')}" for m in letters
            ]

    labels = _numbered_labels(ranking_text)
    if labels:
        return labels

    # Fallback: mention order, keeping only the first occurrence of each label
    mentions = _LABEL.findall(ranking_text)
    if mentions:
        return list(dict.fromkeys(mentions))

    chain = _GREATER_THAN_CHAIN.search(ranking_text)
    if chain:
        letters = [token.strip() for token in chain.group(0).split(">")]
        if all(re.fullmatch(r"[A-Z]", letter) for letter in letters):
            return [f"Response {letter}" for letter in letters]

    return []
