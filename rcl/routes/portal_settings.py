from fastapi import APIRouter, Depends
from heliclockter import datetime_utc

from rcl.config import config
from rcl.models.db.portal_setting import (
    REGISTRATION_PORTAL_OPEN,
    PortalSetting,
    PortalStatusUpdateBody,
    PortalStatusView,
    RegistrationWindowView,
)
from rcl.models.db.user import SessionUser
from rcl.routes.auth import super_admin_authenticated
from rcl.routes.models import PortalStatusResponse, RegistrationWindowResponse
from rcl.sql.portal_settings import get_portal_setting, sql_upsert_portal_setting

router = APIRouter(prefix=config.api_prefix)


def build_portal_status(setting: PortalSetting | None) -> PortalStatusView:
    if setting is None:
        return PortalStatusView(is_open=False, message="Registration portal is closed")

    return PortalStatusView(
        is_open=setting.is_enabled,
        updated_by=setting.updated_by,
        updated=setting.updated,
        message=(
            "Registration portal is open"
            if setting.is_enabled
            else "Registration portal is closed"
        ),
    )


def registration_window_is_open(now: datetime_utc | None = None) -> bool:
    now = now or datetime_utc.now()
    return config.registration_opening_date <= now <= config.registration_deadline


async def portal_is_open() -> bool:
    setting = await get_portal_setting(REGISTRATION_PORTAL_OPEN)
    return setting is not None and setting.is_enabled


@router.get("/config/portal_status", response_model=PortalStatusResponse)
async def get_portal_status() -> PortalStatusResponse:
    return PortalStatusResponse(
        data=build_portal_status(await get_portal_setting(REGISTRATION_PORTAL_OPEN))
    )


@router.patch("/config/portal_status", response_model=PortalStatusResponse)
async def update_portal_status(
    body: PortalStatusUpdateBody, user: SessionUser = Depends(super_admin_authenticated)
) -> PortalStatusResponse:
    setting = await sql_upsert_portal_setting(REGISTRATION_PORTAL_OPEN, body.is_open, user.name)
    return PortalStatusResponse(data=build_portal_status(setting))


@router.get("/config/registration_window", response_model=RegistrationWindowResponse)
async def get_registration_window() -> RegistrationWindowResponse:
    return RegistrationWindowResponse(
        data=RegistrationWindowView(
            is_open=registration_window_is_open(),
            opens=config.registration_opening_date,
            closes=config.registration_deadline,
            fee=config.registration_fee,
        )
    )
