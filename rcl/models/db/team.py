from heliclockter import datetime_utc
from pydantic import BaseModel

from rcl.models.db.shared import BaseModelORM
from rcl.utils.id_types import ClubCode, SportId, TeamId


class TeamBody(BaseModel):
    sport_id: SportId
    club_id: ClubCode


class TeamInsertable(BaseModelORM, TeamBody):
    created: datetime_utc


class Team(TeamInsertable):
    team_id: TeamId
    seed_number: int | None = None


class TeamWithClub(Team):
    club_name: str | None = None


class TeamsGenerateBody(BaseModel):
    sport_id: SportId | None = None
