"""
Tests for the ranking parser.

The ranking parser extracts structured rankings from model evaluation text.
These tests cover the fallback strategies and formats that models might produce.
"""

from peer_council.engine import parse_ranking_from_text


class TestHeaderedNumberedList:
    """FINAL RANKING: followed by a numbered list of full labels."""

    def test_standard_format(self):
        """Test parsing standard FINAL RANKING format."""
        text = "FINAL RANKING:\n1. Response B\n2. Response A\n3. Response C"
        assert parse_ranking_from_text(text) == ["Response B", "Response A", "Response C"]

    def test_sample_evaluation(self, sample_ranking_text):
        assert parse_ranking_from_text(sample_ranking_text) == [
            "Response A",
            "Response C",
            "Response B",
        ]

    def test_no_spaces_after_number(self):
        """Test parsing when there's no space after the period."""
        text = """
FINAL RANKING:
1.Response A
2.Response B
3.Response C
"""
        assert parse_ranking_from_text(text) == ["Response A", "Response B", "Response C"]

    def test_extra_whitespace(self):
        text = """
FINAL RANKING:
1.   Response A
2.    Response B
3.  Response C
"""
        assert parse_ranking_from_text(text) == ["Response A", "Response B", "Response C"]

    def test_five_responses(self):
        """Test parsing with 5 responses (typical council size)."""
        text = """
FINAL RANKING:
1. Response A
2. Response D
3. Response B
4. Response E
5. Response C
"""
        result = parse_ranking_from_text(text)
        assert result == ["Response A", "Response D", "Response B", "Response E", "Response C"]

    def test_response_mentioned_in_evaluation(self):
        """Mentions before the marker don't pollute the ranking."""
        text = """
Response A provides excellent detail on the topic.
Response B is lacking in depth but is accurate.
Response C offers a balanced view.

1. Response B is the shortest

FINAL RANKING:
1. Response C
2. Response A
3. Response B
"""
        assert parse_ranking_from_text(text) == ["Response C", "Response A", "Response B"]

    def test_text_after_ranking(self):
        text = """
FINAL RANKING:
1. Response B
2. Response A
3. Response C

Note: This was a difficult decision.
"""
        assert parse_ranking_from_text(text) == ["Response B", "Response A", "Response C"]

    def test_uses_first_marker(self):
        text = "FINAL RANKING: see below\n\nFINAL RANKING:\n1. Response B\n2. Response A"
        assert parse_ranking_from_text(text) == ["Response B", "Response A"]


class TestHeaderedBareLetters:
    """FINAL RANKING: followed by a numbered list of bare letters."""

    def test_bare_letters(self):
        text = "Some evaluation...\n\nFINAL RANKING:\n1. B\n2. A\n3. C\n"
        assert parse_ranking_from_text(text) == ["Response B", "Response A", "Response C"]

    def test_bare_letters_at_end_of_text(self):
        text = "FINAL RANKING:\n1. C\n2. A"
        assert parse_ranking_from_text(text) == ["Response C", "Response A"]

    def test_bare_letters_with_trailing_punctuation(self):
        text = "FINAL RANKING: 1. B, 2. C. 3. A"
        assert parse_ranking_from_text(text) == ["Response B", "Response C", "Response A"]

    def test_words_are_not_letters(self):
        """Multi-letter tokens are not labels."""
        text = "FINAL RANKING:\n1. Best overall\n2. Average"
        assert parse_ranking_from_text(text) == []


class TestUnheaderedFallbacks:
    """No FINAL RANKING: marker."""

    def test_numbered_list_without_header(self):
        text = "My ranking:\n1. Response C\n2. Response A\n3. Response B"
        assert parse_ranking_from_text(text) == ["Response C", "Response A", "Response B"]

    def test_numbered_list_wins_over_earlier_mentions(self):
        text = "Response A was weak.\n\nRanking:\n1. Response B\n2. Response A"
        assert parse_ranking_from_text(text) == ["Response B", "Response A"]

    def test_lowercase_header(self):
        """Lowercase 'final ranking' is not the marker; the numbered list still parses."""
        text = """
final ranking:
1. Response A
2. Response B
"""
        assert parse_ranking_from_text(text) == ["Response A", "Response B"]

    def test_no_header_fallback(self, sample_ranking_text_no_header):
        """Fallback extracts Response X patterns in order of appearance."""
        result = parse_ranking_from_text(sample_ranking_text_no_header)
        assert result == ["Response A", "Response C", "Response B"]

    def test_mentions_in_prose(self):
        text = "I think Response C was best, then Response A, then Response B."
        assert parse_ranking_from_text(text) == ["Response C", "Response A", "Response B"]

    def test_mentions_are_deduplicated(self):
        text = "Response A is great. Response A was the best. Response B was ok."
        assert parse_ranking_from_text(text) == ["Response A", "Response B"]

    def test_bullet_format_under_header(self):
        """Bullets are not numbered, so mention order is used."""
        text = """
FINAL RANKING:
- Response B
- Response A
- Response C
"""
        assert parse_ranking_from_text(text) == ["Response B", "Response A", "Response C"]

    def test_mixed_case_response(self):
        """Response must have capital R."""
        text = """
FINAL RANKING:
1. response A
2. Response B
3. RESPONSE C
"""
        assert parse_ranking_from_text(text) == ["Response B"]


class TestGreaterThanChain:
    """Rankings written as B > A > C."""

    def test_chain(self):
        text = "Overall I think the ranking is B > A > C"
        assert parse_ranking_from_text(text) == ["Response B", "Response A", "Response C"]

    def test_chain_without_spaces(self):
        assert parse_ranking_from_text("C>B>A") == ["Response C", "Response B", "Response A"]

    def test_first_chain_wins(self):
        text = "First pass: A > B. Final: B > A > C"
        assert parse_ranking_from_text(text) == ["Response A", "Response B"]

    def test_multi_letter_tokens_are_ignored(self):
        assert parse_ranking_from_text("AB > CD") == []


class TestNothingRecognizable:
    """Free text without labels yields an empty list, never an error."""

    def test_empty_text(self):
        assert parse_ranking_from_text("") == []

    def test_no_responses_mentioned(self):
        text = "This is just some random text without any rankings."
        assert parse_ranking_from_text(text) == []

    def test_marker_without_list(self):
        assert parse_ranking_from_text("FINAL RANKING:\nI cannot decide.") == []

    def test_is_deterministic(self, sample_ranking_text):
        assert parse_ranking_from_text(sample_ranking_text) == parse_ranking_from_text(
            sample_ranking_text
        )
