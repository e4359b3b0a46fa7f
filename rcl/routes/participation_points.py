from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.logic.participation import (
    build_club_participation_detail,
    get_eligible_sport_ids,
    get_sport_ids_to_award,
    summarize_club_participation,
    without_track_sports,
)
from rcl.models.db.user import SessionUser
from rcl.models.participation import ParticipationAwardBody, ParticipationAwardSummary
from rcl.models.sport_day import SportDay, parse_sport_day
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import (
    ClubParticipationResponse,
    ParticipationAwardResponse,
    ParticipationOverviewResponse,
)
from rcl.sql.club_points import (
    get_awarded_sport_ids,
    get_club_ids_with_place,
    sql_insert_participation_points,
)
from rcl.sql.clubs import get_club_by_code, get_clubs
from rcl.sql.day_registrations import get_day_registered_rmis_ids
from rcl.sql.registrations import get_day_registration_rows
from rcl.utils.id_types import ClubCode
from rcl.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)


def sport_day_or_400(value: str | None) -> SportDay:
    sport_day = parse_sport_day(value)
    if sport_day is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid sport day")
    return sport_day


@router.get("/admin/participation_points", response_model=ParticipationOverviewResponse)
async def get_participation_overview(
    sport_day: str = config.current_sport_day,
    _: SessionUser = Depends(admin_authenticated),
) -> ParticipationOverviewResponse:
    day = sport_day_or_400(sport_day)
    awarded_club_ids = await get_club_ids_with_place(day.place)

    summaries = []
    for club in await get_clubs():
        registrations = await get_day_registration_rows(club.club_id, day)
        day_registered = await get_day_registered_rmis_ids(
            {reg.rmis_id for reg in registrations}, day
        )
        summaries.append(
            summarize_club_participation(
                club, registrations, day_registered, club.club_id in awarded_club_ids
            )
        )

    return ParticipationOverviewResponse(data=summaries)


@router.get(
    "/admin/participation_points/{club_id}", response_model=ClubParticipationResponse
)
async def get_club_participation(
    club_id: ClubCode,
    sport_day: str = config.current_sport_day,
    _: SessionUser = Depends(admin_authenticated),
) -> ClubParticipationResponse:
    day = sport_day_or_400(sport_day)
    club = await get_club_by_code(club_id)
    if club is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Club not found")

    registrations = await get_day_registration_rows(club.club_id, day)
    day_registered = await get_day_registered_rmis_ids(
        {reg.rmis_id for reg in registrations}, day
    )
    return ClubParticipationResponse(
        data=build_club_participation_detail(club, registrations, day_registered, day)
    )


@router.post("/admin/participation_points/award", response_model=ParticipationAwardResponse)
async def award_participation_points(
    body: ParticipationAwardBody,
    _: SessionUser = Depends(admin_authenticated),
) -> ParticipationAwardResponse:
    day = sport_day_or_400(body.sport_day)
    points = config.participation_points_per_sport

    clubs_awarded = 0
    clubs_skipped = 0
    total_points_awarded = 0

    for club in await get_clubs():
        registrations = without_track_sports(await get_day_registration_rows(club.club_id, day))
        if len(registrations) < 1:
            continue

        day_registered = await get_day_registered_rmis_ids(
            {reg.rmis_id for reg in registrations}, day
        )
        if len(get_eligible_sport_ids(registrations, day_registered)) < 1:
            continue

        already_awarded = await get_awarded_sport_ids(club.club_id, day.place)
        sport_ids = get_sport_ids_to_award(registrations, day_registered, already_awarded)
        if len(sport_ids) < 1:
            clubs_skipped += 1
            continue

        await sql_insert_participation_points(club.club_id, sport_ids, day.place, points)
        clubs_awarded += 1
        total_points_awarded += points * len(sport_ids)

    logger.info(
        "Awarded %s participation points for %s to %s clubs (%s skipped)",
        total_points_awarded,
        day.label,
        clubs_awarded,
        clubs_skipped,
    )
    return ParticipationAwardResponse(
        data=ParticipationAwardSummary(
            clubs_awarded=clubs_awarded,
            clubs_skipped=clubs_skipped,
            total_points_awarded=total_points_awarded,
            sport_day=day,
        )
    )
