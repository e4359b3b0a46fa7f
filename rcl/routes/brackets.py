from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.logic.brackets import build_bracket_rounds
from rcl.models.brackets import BracketView
from rcl.models.db.match import MatchScoreBody
from rcl.models.db.user import SessionUser
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import BracketResponse, MatchResponse
from rcl.sql.matches import get_matches_with_clubs, sql_update_match_score
from rcl.utils.id_types import MatchId, SportId

router = APIRouter(prefix=config.api_prefix)


@router.get("/brackets", response_model=BracketResponse)
async def get_bracket(sport_id: SportId) -> BracketResponse:
    matches = await get_matches_with_clubs(sport_id)
    return BracketResponse(
        data=BracketView(rounds=build_bracket_rounds(matches), total_matches=len(matches))
    )


@router.put("/brackets/matches/{match_id}", response_model=MatchResponse)
async def update_match_score(
    match_id: MatchId,
    body: MatchScoreBody,
    _: SessionUser = Depends(admin_authenticated),
) -> MatchResponse:
    match = await sql_update_match_score(match_id, body)
    if match is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Match not found")
    return MatchResponse(data=match)
