from datetime import timedelta
from typing import Any

import jwt
from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from heliclockter import datetime_utc
from pydantic import BaseModel
from starlette import status

from rcl.config import config
from rcl.models.db.user import LegacyMember, LoginType, SessionUser, UserLoginBody
from rcl.sql.permissions import get_permission
from rcl.utils.id_types import RmisId
from rcl.utils.logging import logger
from rcl.utils.membership_api import (
    MembershipApiClient,
    MembershipApiError,
    get_membership_api_client,
)
from rcl.utils.security import verify_legacy_password

router = APIRouter(prefix=config.api_prefix)

JWT_ALGORITHM = "HS256"

security = HTTPBearer(auto_error=False)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionUser


def create_access_token(user: SessionUser, expires_delta: timedelta | None = None) -> str:
    expire = datetime_utc.now() + (expires_delta or timedelta(minutes=config.jwt_expire_minutes))
    payload: dict[str, Any] = {**user.model_dump(mode="json"), "exp": expire}
    return jwt.encode(payload, config.jwt_secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> SessionUser:
    try:
        payload = jwt.decode(token, config.jwt_secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid token") from exc

    payload.pop("exp", None)
    return SessionUser.model_validate(payload)


async def build_session_user(member: LegacyMember) -> SessionUser:
    membership_id = str(member.membership_id) if member.membership_id is not None else None
    permission = await get_permission(RmisId(membership_id)) if membership_id else None
    return SessionUser(
        sub=member.user_id,
        email=member.m_username,
        name=member.card_name or member.m_name or member.m_username,
        role_id=member.role_id,
        membership_id=membership_id,
        club_id=str(member.club_id) if member.club_id is not None else None,
        has_admin_access=member.has_admin_access,
        has_portal_access=member.has_portal_access,
        permission_level=permission.permission_level if permission is not None else None,
    )


async def user_authenticated(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> SessionUser:
    if credentials is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Not authenticated")
    return decode_access_token(credentials.credentials)


async def admin_authenticated(user: SessionUser = Depends(user_authenticated)) -> SessionUser:
    if not user.has_admin_access:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Admin access required")
    return user


async def super_admin_authenticated(
    user: SessionUser = Depends(user_authenticated),
) -> SessionUser:
    if not user.is_super_admin:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Super admin access required")
    return user


async def portal_authenticated(user: SessionUser = Depends(user_authenticated)) -> SessionUser:
    if not user.has_portal_access:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Portal access required")
    return user


@router.post("/auth/token", response_model=Token)
async def login_for_access_token(
    body: UserLoginBody,
    client: MembershipApiClient = Depends(get_membership_api_client),
) -> Token:
    try:
        member = await client.fetch_member_by_username(body.email.strip())
    except MembershipApiError as exc:
        logger.error("Login for %s failed: %s", body.email, exc)
        raise HTTPException(
            status.HTTP_502_BAD_GATEWAY, "Authentication service unavailable"
        ) from exc

    if member is None or not verify_legacy_password(body.password, member.m_password):
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Incorrect email or password")

    if body.login_type is LoginType.ADMIN and not member.has_admin_access:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Access denied: insufficient privileges")

    if body.login_type is LoginType.PORTAL and not member.has_portal_access:
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Access denied: insufficient privileges")

    user = await build_session_user(member)
    return Token(access_token=create_access_token(user), user=user)


@router.get("/auth/me", response_model=SessionUser)
async def get_me(user: SessionUser = Depends(user_authenticated)) -> SessionUser:
    return user
