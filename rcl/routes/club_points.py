from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.models.db.club_points import ClubPointBody, TournamentAwardBody
from rcl.models.db.user import SessionUser
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import (
    ClubPointCreatedResponse,
    ClubPointsResponse,
    StandingsAwardResponse,
    StandingsAwardResult,
    SuccessResponse,
)
from rcl.sql.club_points import (
    get_club_points,
    sql_create_club_point,
    sql_delete_club_point,
    sql_update_standing_points,
)
from rcl.utils.errors import ForeignKey, check_foreign_key_violation
from rcl.utils.id_types import ClubPointId, SportId

router = APIRouter(prefix=config.api_prefix)

AWARDED_PLACES = frozenset({1, 2, 3})


@router.get("/club_points", response_model=ClubPointsResponse)
async def list_club_points(sport_id: SportId | None = None) -> ClubPointsResponse:
    return ClubPointsResponse(data=await get_club_points(sport_id))


@router.post("/club_points", response_model=ClubPointCreatedResponse)
async def create_club_point(
    body: ClubPointBody, _: SessionUser = Depends(admin_authenticated)
) -> ClubPointCreatedResponse:
    with check_foreign_key_violation(
        {ForeignKey.club_points_club_id_fkey, ForeignKey.club_points_sport_id_fkey}
    ):
        point_id = await sql_create_club_point(body)
    return ClubPointCreatedResponse(data=point_id)


@router.delete("/club_points/{point_id}", response_model=SuccessResponse)
async def delete_club_point(
    point_id: ClubPointId, _: SessionUser = Depends(admin_authenticated)
) -> SuccessResponse:
    if not await sql_delete_club_point(point_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Club point not found")
    return SuccessResponse()


@router.post("/club_points/award", response_model=StandingsAwardResponse)
async def award_tournament_standings(
    body: TournamentAwardBody, _: SessionUser = Depends(admin_authenticated)
) -> StandingsAwardResponse:
    if len(body.standings) < 1:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "No standings provided")

    podium = [standing for standing in body.standings if standing.place in AWARDED_PLACES]
    if len(podium) < 1:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "No standings for places 1-3")

    updated = 0
    for standing in podium:
        if await sql_update_standing_points(body.sport_id, standing) > 0:
            updated += 1

    return StandingsAwardResponse(data=StandingsAwardResult(updated=updated))
