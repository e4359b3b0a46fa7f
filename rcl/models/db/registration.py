from heliclockter import datetime_utc
from pydantic import BaseModel

from rcl.models.db.shared import BaseModelORM
from rcl.models.sport_day import SportDay
from rcl.utils.id_types import ClubCode, DayRegistrationId, RmisId, SportId


class RegistrationBody(BaseModel):
    rmis_id: RmisId
    sport_id: SportId
    club_id: ClubCode
    main_player: bool = True


class Registration(BaseModelORM, RegistrationBody):
    created: datetime_utc


class DayRegistrationBody(BaseModel):
    rmis_id: RmisId
    sport_day: str


class DayRegistration(BaseModelORM):
    id: DayRegistrationId
    rmis_id: RmisId
    sport_day: SportDay
    created: datetime_utc
