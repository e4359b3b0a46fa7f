from typing import Annotated

from heliclockter import datetime_utc
from pydantic import BaseModel, StringConstraints

from rcl.models.db.shared import BaseModelORM
from rcl.utils.id_types import ClubCode, ClubId


class ClubBody(BaseModelORM):
    club_id: Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]
    club_name: Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]
    category: Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]


class ClubInsertable(ClubBody):
    created: datetime_utc


class Club(ClubInsertable):
    id: ClubId
    club_id: ClubCode


class ClubUpdateBody(BaseModel):
    club_id: str | None = None
    club_name: str | None = None
    category: str | None = None
