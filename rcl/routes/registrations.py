from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.models.db.registration import RegistrationBody
from rcl.models.db.user import SessionUser
from rcl.routes.auth import portal_authenticated
from rcl.routes.models import (
    RegistrationResponse,
    RegistrationResult,
    RegistrationsResponse,
    SuccessResponse,
)
from rcl.routes.portal_settings import registration_window_is_open
from rcl.sql.registrations import (
    get_registration,
    get_registrations,
    sql_create_registration,
    sql_delete_registration,
)
from rcl.utils.errors import (
    ForeignKey,
    UniqueIndex,
    check_foreign_key_violation,
    check_unique_constraint_violation,
)
from rcl.utils.id_types import ClubCode, RmisId, SportId

router = APIRouter(prefix=config.api_prefix)


def check_registration_window(user: SessionUser) -> None:
    if not user.has_admin_access and not registration_window_is_open():
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Registration is closed")


@router.post("/registrations", response_model=RegistrationResponse)
async def create_registration(
    body: RegistrationBody, user: SessionUser = Depends(portal_authenticated)
) -> RegistrationResponse:
    check_registration_window(user)

    existing = await get_registration(body.rmis_id, body.sport_id)
    if existing is not None:
        return RegistrationResponse(
            data=RegistrationResult(registration=existing, already_registered=True)
        )

    with (
        check_unique_constraint_violation(
            {UniqueIndex.registrations_rmis_id_sport_id_key}, status.HTTP_409_CONFLICT
        ),
        check_foreign_key_violation(
            {
                ForeignKey.registrations_rmis_id_fkey,
                ForeignKey.registrations_sport_id_fkey,
                ForeignKey.registrations_club_id_fkey,
            }
        ),
    ):
        registration = await sql_create_registration(body)

    return RegistrationResponse(data=RegistrationResult(registration=registration))


@router.get("/registrations", response_model=RegistrationsResponse)
async def list_registrations(
    sport_id: SportId | None = None,
    club_id: ClubCode | None = None,
    rmis_id: RmisId | None = None,
) -> RegistrationsResponse:
    return RegistrationsResponse(
        data=await get_registrations(sport_id=sport_id, club_id=club_id, rmis_id=rmis_id)
    )


@router.delete("/registrations", response_model=SuccessResponse)
async def delete_registration(
    rmis_id: RmisId, sport_id: SportId, user: SessionUser = Depends(portal_authenticated)
) -> SuccessResponse:
    check_registration_window(user)

    if not await sql_delete_registration(rmis_id, sport_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Registration not found")
    return SuccessResponse()
