"""Shapes of the records produced by a council run."""

from typing import Literal, TypedDict


class ChatMessage(TypedDict):
    role: Literal["user", "assistant", "system"]
    content: str


class Stage1Entry(TypedDict):
    model: str
    response: str


class Stage2Ranking(TypedDict):
    model: str
    evaluation: str
    parsed_ranking: list[str]


class AggregateRanking(TypedDict):
    model: str
    average_rank: float
    rankings_count: int


class Stage2Result(TypedDict):
    rankings: list[Stage2Ranking]
    label_to_model: dict[str, str]
    aggregate_rankings: list[AggregateRanking]


class Stage3Result(TypedDict):
    model: str
    response: str


class CouncilResult(TypedDict):
    query: str
    stage1: list[Stage1Entry] | None
    stage2: Stage2Result | None
    stage3: Stage3Result | None
    error: str | None
