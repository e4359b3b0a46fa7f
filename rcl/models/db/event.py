from heliclockter import datetime_utc
from pydantic import BaseModel, Field

from rcl.models.db.shared import BaseModelORM
from rcl.models.sport_day import SportDay
from rcl.utils.id_types import SportId
from rcl.utils.types import EnumValueStr


class SportType(EnumValueStr):
    TEAM = "team"
    INDIVIDUAL = "individual"
    TRACK_INDIVIDUAL = "trackIndividual"
    TRACK_TEAM = "trackTeam"

    @property
    def is_track(self) -> bool:
        return self in TRACK_SPORT_TYPES


TRACK_SPORT_TYPES = frozenset({SportType.TRACK_INDIVIDUAL, SportType.TRACK_TEAM})


class EventBody(BaseModel):
    sport_name: str = Field(min_length=1)
    sport_day: SportDay
    sport_type: SportType
    gender_type: str | None = None
    category: str | None = None
    min_count: int | None = Field(default=None, ge=0)
    max_count: int | None = Field(default=None, ge=0)
    reserve_count: int | None = Field(default=None, ge=0)
    registration_close: datetime_utc | None = None


class EventInsertable(BaseModelORM, EventBody):
    created: datetime_utc


class Event(EventInsertable):
    sport_id: SportId
