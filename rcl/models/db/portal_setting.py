from heliclockter import datetime_utc
from pydantic import BaseModel

from rcl.models.db.shared import BaseModelORM

REGISTRATION_PORTAL_OPEN = "registration_portal_open"


class PortalSetting(BaseModelORM):
    setting_key: str
    is_enabled: bool
    updated_by: str | None = None
    updated: datetime_utc


class PortalStatusUpdateBody(BaseModel):
    is_open: bool


class PortalStatusView(BaseModel):
    is_open: bool
    updated_by: str | None = None
    updated: datetime_utc | None = None
    message: str


class RegistrationWindowView(BaseModel):
    is_open: bool
    opens: datetime_utc
    closes: datetime_utc
    fee: int
