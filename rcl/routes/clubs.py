from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.models.db.club import ClubBody, ClubUpdateBody
from rcl.models.db.user import SessionUser
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import ClubResponse, ClubsResponse
from rcl.sql.clubs import get_club_by_id, get_clubs, sql_create_club, sql_update_club
from rcl.utils.errors import UniqueIndex, check_unique_constraint_violation
from rcl.utils.id_types import ClubId
from rcl.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/clubs", response_model=ClubsResponse)
async def list_clubs(category: str | None = None) -> ClubsResponse:
    return ClubsResponse(data=await get_clubs(category))


@router.post("/clubs", response_model=ClubResponse)
async def create_club(
    club: ClubBody, _: SessionUser = Depends(admin_authenticated)
) -> ClubResponse:
    with check_unique_constraint_violation({UniqueIndex.clubs_club_id_key}):
        club_pk = await sql_create_club(club)

    return ClubResponse(data=assert_some(await get_club_by_id(club_pk)))


@router.put("/clubs/{club_pk}", response_model=ClubResponse)
async def update_club(
    club_pk: ClubId, club: ClubUpdateBody, _: SessionUser = Depends(admin_authenticated)
) -> ClubResponse:
    if len(club.model_dump(exclude_none=True)) < 1:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "No fields to update")

    with check_unique_constraint_violation({UniqueIndex.clubs_club_id_key}):
        updated = await sql_update_club(club_pk, club)

    if updated is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Club not found")
    return ClubResponse(data=updated)
