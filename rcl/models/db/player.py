from enum import IntEnum

from heliclockter import datetime_utc
from pydantic import BaseModel, Field

from rcl.models.db.shared import BaseModelORM
from rcl.utils.id_types import ClubCode, RmisId


class MembershipStatus(IntEnum):
    GENERAL = 1
    PROSPECTIVE = 5


class PlayerBody(BaseModel):
    rmis_id: RmisId = Field(min_length=1)
    name: str = Field(min_length=1)
    gender: str | None = None
    club_id: ClubCode
    status: int | None = None


class PlayerInsertable(BaseModelORM, PlayerBody):
    created: datetime_utc


class Player(PlayerInsertable):
    pass


class PlayerWithClub(Player):
    club_name: str | None = None
    category: str | None = None
