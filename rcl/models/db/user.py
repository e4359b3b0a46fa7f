from pydantic import BaseModel, ConfigDict

from rcl.models.db.permission import PermissionLevel
from rcl.utils.types import EnumValueStr

ADMIN_ROLE_IDS = frozenset({1, 2, 3, 4})
PORTAL_ROLE_IDS = frozenset({1, 2, 3, 4, 5, 6})


class LoginType(EnumValueStr):
    ADMIN = "admin"
    PORTAL = "portal"


class LegacyMember(BaseModel):
    """A row of `club_membership_data` as returned by the legacy membership API."""

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    m_id: int | str | None = None
    m_username: str
    m_password: str | None = None
    m_name: str | None = None
    card_name: str | None = None
    role_id: int | None = None
    membership_id: int | str | None = None
    club_id: int | str | None = None

    @property
    def user_id(self) -> str:
        return str(self.id or self.m_id or self.m_username)

    @property
    def has_admin_access(self) -> bool:
        return self.role_id in ADMIN_ROLE_IDS

    @property
    def has_portal_access(self) -> bool:
        return self.role_id in PORTAL_ROLE_IDS


class SessionUser(BaseModel):
    sub: str
    email: str
    name: str
    role_id: int | None = None
    membership_id: str | None = None
    club_id: str | None = None
    has_admin_access: bool = False
    has_portal_access: bool = False
    permission_level: PermissionLevel | None = None

    @property
    def is_super_admin(self) -> bool:
        return self.permission_level is PermissionLevel.SUPER_ADMIN


class UserLoginBody(BaseModel):
    email: str
    password: str
    login_type: LoginType
