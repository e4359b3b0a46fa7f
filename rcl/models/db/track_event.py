from heliclockter import datetime_utc
from pydantic import BaseModel, Field, model_validator

from rcl.models.db.shared import BaseModelORM
from rcl.utils.id_types import RmisId, SportId, TeamId, TrackEventId


class TrackEvent(BaseModelORM):
    id: TrackEventId
    sport_id: SportId
    rmis_id: RmisId | None = None
    team_id: TeamId | None = None
    score: str | None = None
    place: int | None = None
    updated: datetime_utc


class TrackEventUpsertBody(BaseModel):
    sport_id: SportId
    rmis_id: RmisId | None = None
    team_id: TeamId | None = None
    score: str | None = None
    place: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def exactly_one_participant(self) -> "TrackEventUpsertBody":
        if (self.rmis_id is None) == (self.team_id is None):
            raise ValueError("Exactly one of rmis_id and team_id must be given")
        return self


class TrackEventResultBody(BaseModel):
    score: str | None = None
    place: int | None = Field(default=None, ge=1)
