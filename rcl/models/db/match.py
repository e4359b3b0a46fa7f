from enum import IntEnum

from heliclockter import datetime_utc
from pydantic import BaseModel, Field

from rcl.models.db.shared import BaseModelORM
from rcl.utils.id_types import ClubCode, MatchId, SportId, TeamId


class BracketRound(IntEnum):
    FIRST_ROUND = 0
    SECOND_ROUND = 1
    QUARTER_FINALS = 2
    SEMI_FINALS = 3
    CONSOLATION_FINALS = 4
    FINALS = 5


ROUND_TITLES = {
    BracketRound.FIRST_ROUND: "1st Round",
    BracketRound.SECOND_ROUND: "2nd Round",
    BracketRound.QUARTER_FINALS: "Quarter Finals",
    BracketRound.SEMI_FINALS: "Semi Finals",
    BracketRound.CONSOLATION_FINALS: "Consolation Finals",
    BracketRound.FINALS: "Finals",
}


class Match(BaseModelORM):
    match_id: MatchId
    sport_id: SportId
    round_id: int
    match_order: int = 0
    team1_id: TeamId | None = None
    team2_id: TeamId | None = None
    team1_score: int = 0
    team2_score: int = 0
    parent_match1_id: MatchId | None = None
    parent_match2_id: MatchId | None = None
    start_time: datetime_utc | None = None


class MatchWithClubs(Match):
    """A match row joined with the club behind each team slot."""

    team1_club_id: ClubCode | None = None
    team1_club_name: str | None = None
    team1_seed_number: int | None = None
    team2_club_id: ClubCode | None = None
    team2_club_name: str | None = None
    team2_seed_number: int | None = None


class MatchScoreBody(BaseModel):
    team1_score: int = Field(ge=0)
    team2_score: int = Field(ge=0)
