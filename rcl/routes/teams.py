from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.logic.teams import get_eligible_clubs, get_non_eligible_clubs, sort_available_clubs
from rcl.models.db.event import Event, SportType
from rcl.models.db.team import TeamBody, TeamsGenerateBody
from rcl.models.db.user import SessionUser
from rcl.models.teams import (
    AvailableClubsView,
    NonEligibleClubsView,
    SportTeamsGenerated,
    TeamsGenerationSummary,
)
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import (
    AvailableClubsResponse,
    NonEligibleClubsResponse,
    SuccessResponse,
    TeamResponse,
    TeamsGenerationResponse,
    TeamsResponse,
)
from rcl.sql.events import get_event, get_events
from rcl.sql.teams import (
    get_club_registration_counts,
    get_team,
    get_teams_for_sport,
    sql_create_team,
    sql_create_teams,
    sql_delete_team,
)
from rcl.utils.errors import (
    ForeignKey,
    UniqueIndex,
    check_foreign_key_violation,
    check_unique_constraint_violation,
)
from rcl.utils.id_types import SportId, TeamId
from rcl.utils.logging import logger
from rcl.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)

TEAM_SPORT_TYPES = [SportType.TEAM, SportType.TRACK_TEAM, SportType.INDIVIDUAL]


async def get_sport_or_404(sport_id: SportId) -> Event:
    sport = await get_event(sport_id)
    if sport is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Sport not found")
    return sport


@router.get("/teams", response_model=TeamsResponse)
async def list_teams(sport_id: SportId) -> TeamsResponse:
    return TeamsResponse(data=await get_teams_for_sport(sport_id))


@router.post("/teams", response_model=TeamResponse)
async def create_team(
    body: TeamBody, _: SessionUser = Depends(admin_authenticated)
) -> TeamResponse:
    with (
        check_unique_constraint_violation({UniqueIndex.teams_sport_id_club_id_key}),
        check_foreign_key_violation(
            {ForeignKey.teams_club_id_fkey, ForeignKey.teams_sport_id_fkey}
        ),
    ):
        team_id = await sql_create_team(body)

    return TeamResponse(data=assert_some(await get_team(team_id)))


@router.post("/teams/generate", response_model=TeamsGenerationResponse)
async def generate_teams(
    body: TeamsGenerateBody, _: SessionUser = Depends(admin_authenticated)
) -> TeamsGenerationResponse:
    """
    Create a team for every club whose registrations for a sport reach its `min_count`.

    Only clubs in the sport's category count, and clubs that already have a team are skipped.
    Without a `sport_id` every team, track team and individual sport is processed.
    """
    if body.sport_id is not None:
        sports = [await get_sport_or_404(body.sport_id)]
    else:
        sports = await get_events(sport_types=TEAM_SPORT_TYPES)

    results = []
    for sport in sports:
        counts = await get_club_registration_counts(sport.sport_id, sport.category)
        eligible = get_eligible_clubs(sport, counts)
        if eligible:
            await sql_create_teams(sport.sport_id, [club.club_id for club in eligible])

        results.append(
            SportTeamsGenerated(
                sport_id=sport.sport_id,
                sport_name=sport.sport_name,
                created=len(eligible),
                skipped=sum(1 for club in counts if club.has_team),
                eligible_clubs=len(eligible),
            )
        )

    summary = TeamsGenerationSummary(
        total_created=sum(result.created for result in results),
        total_skipped=sum(result.skipped for result in results),
        results=results,
    )
    logger.info(
        "Created %s teams, skipped %s existing teams",
        summary.total_created,
        summary.total_skipped,
    )
    return TeamsGenerationResponse(data=summary)


@router.delete("/teams/{team_id}", response_model=SuccessResponse)
async def delete_team(
    team_id: TeamId, _: SessionUser = Depends(admin_authenticated)
) -> SuccessResponse:
    with check_foreign_key_violation(
        {ForeignKey.matches_team1_id_fkey, ForeignKey.matches_team2_id_fkey}
    ):
        deleted = await sql_delete_team(team_id)

    if not deleted:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Team not found")
    return SuccessResponse()


@router.get("/teams/non_eligible", response_model=NonEligibleClubsResponse)
async def get_non_eligible_teams(sport_id: SportId) -> NonEligibleClubsResponse:
    sport = await get_sport_or_404(sport_id)
    counts = await get_club_registration_counts(sport.sport_id, sport.category)
    return NonEligibleClubsResponse(
        data=NonEligibleClubsView(
            sport_name=sport.sport_name,
            min_count=sport.min_count,
            clubs=get_non_eligible_clubs(sport, counts),
        )
    )


@router.get("/teams/available_clubs", response_model=AvailableClubsResponse)
async def get_available_clubs(sport_id: SportId) -> AvailableClubsResponse:
    sport = await get_sport_or_404(sport_id)
    counts = await get_club_registration_counts(sport.sport_id, sport.category)
    return AvailableClubsResponse(
        data=AvailableClubsView(sport_name=sport.sport_name, clubs=sort_available_clubs(counts))
    )
