from typing import Literal

from pydantic import BaseModel

from rcl.utils.id_types import MatchId, TeamId


class BracketTeam(BaseModel):
    name: str
    id: TeamId | None = None
    seed: int | None = None


class BracketSeed(BaseModel):
    id: MatchId
    date: str
    teams: tuple[BracketTeam, BracketTeam]
    score: tuple[int, int]
    status: Literal["completed", "scheduled"]
    round_id: int
    match_order: int


class BracketRoundView(BaseModel):
    title: str
    seeds: list[BracketSeed]


class BracketView(BaseModel):
    rounds: list[BracketRoundView]
    total_matches: int
