from fastapi import APIRouter, HTTPException
from starlette import status

from rcl.config import config
from rcl.models.db.registration import DayRegistrationBody
from rcl.models.sport_day import parse_sport_day
from rcl.routes.models import (
    DayRegistrationResponse,
    DayRegistrationStatus,
    DayRegistrationStatusResponse,
)
from rcl.routes.portal_settings import portal_is_open
from rcl.sql.day_registrations import get_day_registration, sql_create_day_registration
from rcl.utils.errors import (
    ForeignKey,
    UniqueIndex,
    check_foreign_key_violation,
    check_unique_constraint_violation,
)
from rcl.utils.id_types import RmisId

router = APIRouter(prefix=config.api_prefix)


@router.post("/day_registrations", response_model=DayRegistrationResponse)
async def create_day_registration(body: DayRegistrationBody) -> DayRegistrationResponse:
    if not await portal_is_open():
        raise HTTPException(status.HTTP_403_FORBIDDEN, "portal_closed")

    sport_day = parse_sport_day(body.sport_day)
    if sport_day is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid sport day")

    if await get_day_registration(body.rmis_id, sport_day) is not None:
        raise HTTPException(
            status.HTTP_409_CONFLICT, "Player already registered for this sport day"
        )

    with (
        check_unique_constraint_violation(
            {UniqueIndex.day_registrations_rmis_id_sport_day_key}, status.HTTP_409_CONFLICT
        ),
        check_foreign_key_violation({ForeignKey.day_registrations_rmis_id_fkey}),
    ):
        registration = await sql_create_day_registration(body.rmis_id, sport_day)

    return DayRegistrationResponse(data=registration)


@router.get("/day_registrations", response_model=DayRegistrationStatusResponse)
async def get_day_registration_status(
    rmis_id: RmisId, sport_day: str
) -> DayRegistrationStatusResponse:
    day = parse_sport_day(sport_day)
    if day is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid sport day")

    registration = await get_day_registration(rmis_id, day)
    return DayRegistrationStatusResponse(
        data=DayRegistrationStatus(
            is_registered=registration is not None, registration=registration
        )
    )
