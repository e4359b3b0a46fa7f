from heliclockter import datetime_utc
from pydantic import BaseModel

from rcl.models.db.shared import BaseModelORM
from rcl.utils.id_types import RmisId
from rcl.utils.types import EnumValueStr


class PermissionLevel(EnumValueStr):
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"


class PermissionBody(BaseModel):
    rmis_id: RmisId
    permission_level: PermissionLevel
    card_name: str | None = None


class Permission(BaseModelORM, PermissionBody):
    created: datetime_utc
