"""
Prompt templates for council deliberation.

All prompt construction logic is centralized here for easier maintenance.
"""

from collections.abc import Sequence

from ..types import Stage1Entry, Stage2Ranking


def format_anonymized_responses(labeled_responses: Sequence[tuple[str, str]]) -> str:
    """Join (label, text) pairs into the block shown to ranking models."""
    return "\n\n".join(f"{label}:\n{text}" for label, text in labeled_responses)


def build_ranking_prompt(user_query: str, responses_text: str) -> str:
    """
    Build the Stage 2 ranking prompt.

    Args:
        user_query: Original user question
        responses_text: Formatted anonymous responses

    Returns:
        Complete ranking prompt
    """
    return f"""You are evaluating different responses to the following question:

Question: {user_query}

Here are the responses from different models (anonymized):

{responses_text}

Your task:
1. First, evaluate each response individually. For each response, explain what it does well and what it does poorly.
2. Then, at the very end of your response, provide a final ranking.

IMPORTANT: Your final ranking MUST be formatted EXACTLY as follows:
- Start with the line "FINAL RANKING:" (all caps, with colon)
- Then list the responses from best to worst as a numbered list
- Each line should be: number, period, space, then ONLY the response label (e.g., "1. Response A")
- Do not add any other text or explanations in the ranking section

Example of the correct format:

FINAL RANKING:
1. Response C
2. Response A
3. Response B

Now provide your evaluation and ranking:"""


def build_chairman_prompt(
    user_query: str,
    stage1_results: Sequence[Stage1Entry],
    stage2_results: Sequence[Stage2Ranking],
) -> str:
    """
    Build the Stage 3 chairman synthesis prompt.

    Args:
        user_query: Original user question
        stage1_results: Individual model responses from Stage 1
        stage2_results: Full evaluations from Stage 2

    Returns:
        Complete chairman prompt
    """
    stage1_text = "\n\n".join(
        f"Model: {result['model']}\nResponse: {result['response']}" for result in stage1_results
    )

    stage2_text = "\n\n".join(
        f"Model: {result['model']}\nRanking: {result['evaluation']}" for result in stage2_results
    )

    return f"""You are the Chairman of an LLM Council. Multiple AI models have provided responses to a user's question, and then ranked each other's responses.

Original Question: {user_query}

STAGE 1 - Individual Responses:
{stage1_text}

STAGE 2 - Peer Rankings:
{stage2_text}

Your task is to synthesize all of this information into a single, comprehensive, accurate answer to the original question. Consider:
- The individual responses and their insights
- The peer rankings and what they reveal about response quality
- Any patterns of agreement or disagreement

IMPORTANT: Respond with the answer DIRECTLY. Do NOT include any preamble, introduction, or meta-commentary about being a chairman, synthesizing responses, or the council process. Just provide the final answer as if you were answering the question yourself."""
