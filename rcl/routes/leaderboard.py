from fastapi import APIRouter, HTTPException, Query, Response
from starlette import status

from rcl.config import config
from rcl.logic.leaderboard import build_club_details, build_pagination
from rcl.logic.standings import derive_tournament_standings
from rcl.models.leaderboard import AggregatedLeaderboard
from rcl.models.standings import TournamentStandingsView
from rcl.routes.models import (
    AggregatedLeaderboardResponse,
    ClubDetailsResponse,
    TournamentStandingsResponse,
)
from rcl.sql.clubs import get_club_by_code
from rcl.sql.leaderboard import (
    get_aggregated_leaderboard,
    get_club_point_entries,
    get_leaderboard_count,
)
from rcl.sql.matches import get_matches_with_clubs
from rcl.utils.id_types import ClubCode, SportId

router = APIRouter(prefix=config.api_prefix)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("/leaderboard/tournament_standings", response_model=TournamentStandingsResponse)
async def get_tournament_standings(sport_id: SportId | None = None) -> TournamentStandingsResponse:
    if sport_id is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "sport_id is required")

    matches = await get_matches_with_clubs(sport_id)
    return TournamentStandingsResponse(
        data=TournamentStandingsView(standings=derive_tournament_standings(matches))
    )


@router.get("/leaderboard/aggregated", response_model=AggregatedLeaderboardResponse)
async def get_leaderboard(
    category: str | None = None,
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
) -> AggregatedLeaderboardResponse:
    clubs = await get_aggregated_leaderboard(category, limit, offset)
    total = await get_leaderboard_count(category)
    return AggregatedLeaderboardResponse(
        data=AggregatedLeaderboard(
            clubs=clubs, total=total, pagination=build_pagination(limit, offset, total)
        )
    )


@router.get("/leaderboard/club_details/{club_id}", response_model=ClubDetailsResponse)
async def get_club_details(club_id: ClubCode, response: Response) -> ClubDetailsResponse:
    club = await get_club_by_code(club_id)
    if club is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Club not found")

    response.headers.update(NO_CACHE_HEADERS)
    entries = await get_club_point_entries(club_id)
    return ClubDetailsResponse(data=build_club_details(club, entries))
