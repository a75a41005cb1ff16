"""
Main orchestration for standard (ranking) council deliberation.

Contains Stage 1-2-3 flow: collect responses, rank, synthesize.
"""

import asyncio
import logging
import time
from collections.abc import Sequence

from ..adapters import ChatProvider, create_provider
from ..errors import StageError
from ..settings import CouncilConfig, load_config
from ..types import (
    ChatMessage,
    CouncilResult,
    Stage1Entry,
    Stage2Ranking,
    Stage2Result,
    Stage3Result,
)
from .aggregation import calculate_aggregate_rankings
from .anonymize import anonymize_responses
from .parsers import parse_ranking_from_text
from .prompts import build_chairman_prompt, build_ranking_prompt, format_anonymized_responses

LOGGER_NAME = "peer_council"

# Characters of an unparseable evaluation to show in the progress log
_TAIL_LENGTH = 200


def _elapsed(start: float) -> str:
    return f"{time.monotonic() - start:.1f}s"


class Council:
    """
    Runs the three council stages against one chat provider.

    Args:
        config: Council configuration; validated here, before any stage runs
        provider: Chat capability to use; built from the config when omitted
        logger: Side channel for progress lines
    """

    def __init__(
        self,
        config: CouncilConfig,
        provider: ChatProvider | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config.validate()
        self.models = list(config.models)
        self.chairman_model = config.chairman_model
        self.verbose = config.verbose
        self.provider = provider if provider is not None else create_provider(config)
        self.logger = logger if logger is not None else logging.getLogger(LOGGER_NAME)

    def _log(self, message: str, level: int = logging.INFO) -> None:
        """Progress goes to DEBUG unless the council is verbose."""
        self.logger.log(level if self.verbose else logging.DEBUG, message)

    async def _chat(self, model: str, prompt: str) -> str:
        messages: list[ChatMessage] = [{"role": "user", "content": prompt}]
        return await self.provider.chat(model, messages)

    async def run(self, user_query: str) -> CouncilResult:
        """
        Run all three stages.

        Stages that finished before a failure stay in the result; the failing
        stage and everything after it are None and ``error`` says which stage
        failed and why.

        Args:
            user_query: The user's question

        Returns:
            CouncilResult dict
        """
        self._log(f"Starting council with {len(self.models)} models")
        start = time.monotonic()

        result: CouncilResult = {
            "query": user_query,
            "stage1": None,
            "stage2": None,
            "stage3": None,
            "error": None,
        }

        try:
            result["stage1"] = await self.stage1_collect_responses(user_query)
        except Exception as e:
            return self._fail(result, 1, e)

        try:
            result["stage2"] = await self.stage2_collect_rankings(user_query, result["stage1"])
        except Exception as e:
            return self._fail(result, 2, e)

        try:
            result["stage3"] = await self.stage3_synthesize_final(
                user_query, result["stage1"], result["stage2"]["rankings"]
            )
        except Exception as e:
            return self._fail(result, 3, e)

        self._log(f"Council complete in {_elapsed(start)}")
        return result

    def _fail(self, result: CouncilResult, stage: int, error: Exception) -> CouncilResult:
        result["error"] = f"Stage {stage} failed: {error}"
        self._log(result["error"], logging.ERROR)
        return result

    async def stage1_collect_responses(self, user_query: str) -> list[Stage1Entry]:
        """
        Stage 1: Collect individual responses from all council models.

        Args:
            user_query: The user's question

        Returns:
            List of dicts with 'model' and 'response' keys, in council order

        Raises:
            StageError: If no model responded
        """
        self._log("Stage 1: Collecting responses...")
        start = time.monotonic()

        async def query_single_model(model: str) -> Stage1Entry:
            self._log(f"  Querying {model}...")
            response = await self._chat(model, user_query)
            self._log(f"  {model} responded ({len(response)} chars)")
            return {"model": model, "response": response}

        # Wait for every model; failures come back as exception objects
        results = await asyncio.gather(
            *(query_single_model(model) for model in self.models), return_exceptions=True
        )

        stage1_results = []
        for model, outcome in zip(self.models, results):
            if isinstance(outcome, BaseException):
                self._log(f"  {model} failed: {outcome}", logging.WARNING)
            else:
                stage1_results.append(outcome)

        if not stage1_results:
            raise StageError(1, "All models failed to respond in Stage 1")

        self._log(
            f"Stage 1 complete: {len(stage1_results)}/{len(self.models)} succeeded "
            f"in {_elapsed(start)}"
        )
        return stage1_results

    async def stage2_collect_rankings(
        self, user_query: str, stage1_results: Sequence[Stage1Entry]
    ) -> Stage2Result:
        """
        Stage 2: Each council model ranks the anonymized responses.

        Every configured model is asked, including those that failed Stage 1.
        Failed rankers are dropped; evaluations that cannot be parsed are kept
        with an empty ``parsed_ranking``.

        Args:
            user_query: The original user query
            stage1_results: Results from Stage 1

        Returns:
            Dict with 'rankings', 'label_to_model' and 'aggregate_rankings'
        """
        self._log("Stage 2: Peer ranking (anonymized)...")
        start = time.monotonic()

        labeled_responses, label_to_model = anonymize_responses(stage1_results)
        self._log(
            f"  Anonymized {len(stage1_results)} responses: {', '.join(label_to_model)}"
        )

        ranking_prompt = build_ranking_prompt(
            user_query, format_anonymized_responses(labeled_responses)
        )

        async def rank_single_model(model: str) -> Stage2Ranking:
            self._log(f"  {model} is ranking...")
            evaluation = await self._chat(model, ranking_prompt)
            parsed = parse_ranking_from_text(evaluation)
            if parsed:
                self._log(f"  {model} ranked: {' > '.join(parsed)}")
            else:
                tail = evaluation[-_TAIL_LENGTH:].replace("\n", " ").strip()
                self._log(f'  {model} ranking could not be parsed. Tail: "{tail}"', logging.WARNING)
            return {"model": model, "evaluation": evaluation, "parsed_ranking": parsed}

        results = await asyncio.gather(
            *(rank_single_model(model) for model in self.models), return_exceptions=True
        )

        rankings = []
        for model, outcome in zip(self.models, results):
            if isinstance(outcome, BaseException):
                self._log(f"  {model} failed to rank: {outcome}", logging.WARNING)
            else:
                rankings.append(outcome)

        aggregate_rankings = calculate_aggregate_rankings(rankings, label_to_model)

        self._log(
            f"Stage 2 complete: {len(rankings)}/{len(self.models)} ranked in {_elapsed(start)}"
        )
        for entry in aggregate_rankings:
            self._log(f"  {entry['model']}: avg rank {entry['average_rank']}")

        return {
            "rankings": rankings,
            "label_to_model": label_to_model,
            "aggregate_rankings": aggregate_rankings,
        }

    async def stage3_synthesize_final(
        self,
        user_query: str,
        stage1_results: Sequence[Stage1Entry],
        stage2_results: Sequence[Stage2Ranking],
    ) -> Stage3Result:
        """
        Stage 3: Chairman synthesizes final response.

        Args:
            user_query: The original user query
            stage1_results: Individual model responses from Stage 1
            stage2_results: Evaluations from Stage 2

        Returns:
            Dict with 'model' and 'response' keys

        Raises:
            ProviderError: If the chairman call fails (there is no fallback)
        """
        self._log(f"Stage 3: Chairman ({self.chairman_model}) synthesizing...")
        start = time.monotonic()

        chairman_prompt = build_chairman_prompt(user_query, stage1_results, stage2_results)
        response = await self._chat(self.chairman_model, chairman_prompt)

        self._log(f"Stage 3 complete in {_elapsed(start)} ({len(response)} chars)")
        return {"model": self.chairman_model, "response": response}


async def run_council(
    user_query: str,
    config: CouncilConfig | None = None,
    provider: ChatProvider | None = None,
    logger: logging.Logger | None = None,
) -> CouncilResult:
    """
    Run a full council using ``config`` (or the configuration from ``load_config()``).

    Raises:
        ConfigError: If the configuration is invalid; no stage is started
    """
    council = Council(config if config is not None else load_config(), provider, logger)
    return await council.run(user_query)
