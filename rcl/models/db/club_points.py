from heliclockter import datetime_utc
from pydantic import BaseModel, Field

from rcl.models.db.shared import BaseModelORM
from rcl.utils.id_types import ClubCode, ClubPointId, SportId


class ClubPointInsertable(BaseModelORM):
    club_id: ClubCode
    sport_id: SportId | None = None
    points: int
    place: int | None = None
    created: datetime_utc


class ClubPoint(ClubPointInsertable):
    point_id: ClubPointId


class ClubPointWithClub(ClubPoint):
    club_name: str
    category: str


class ClubPointBody(BaseModel):
    club_id: ClubCode
    sport_id: SportId
    points: int = Field(ge=10, le=99, description="Points must be double digits (10-99)")
    place: int = Field(ge=1, description="Place must be a positive number")


class StandingAward(BaseModel):
    club_id: ClubCode
    place: int
    points: int


class TournamentAwardBody(BaseModel):
    sport_id: SportId
    standings: list[StandingAward]
