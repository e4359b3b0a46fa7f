import math

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from rcl.config import config
from rcl.models.db.player import PlayerBody
from rcl.models.db.user import SessionUser
from rcl.models.players import PlayerCreateResult, PlayerSearchResult
from rcl.routes.auth import portal_authenticated
from rcl.routes.models import (
    PlayerCreateResponse,
    PlayerResponse,
    PlayerSearchResponse,
    PlayersResponse,
)
from rcl.sql.players import get_player, get_players, search_players, sql_create_player
from rcl.utils.errors import ForeignKey, check_foreign_key_violation
from rcl.utils.id_types import ClubCode, RmisId
from rcl.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/players", response_model=PlayersResponse)
async def list_players(club_id: ClubCode | None = None) -> PlayersResponse:
    return PlayersResponse(data=await get_players(club_id))


@router.post("/players", response_model=PlayerCreateResponse)
async def create_player(
    body: PlayerBody, _: SessionUser = Depends(portal_authenticated)
) -> PlayerCreateResponse:
    existing = await get_player(body.rmis_id)
    if existing is not None:
        return PlayerCreateResponse(data=PlayerCreateResult(player=existing, already_exists=True))

    with check_foreign_key_violation({ForeignKey.players_club_id_fkey}):
        await sql_create_player(body)

    return PlayerCreateResponse(
        data=PlayerCreateResult(player=assert_some(await get_player(body.rmis_id)))
    )


@router.get("/players/search", response_model=PlayerSearchResponse)
async def search_for_players(
    name: str | None = None,
    rmis_id: str | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> PlayerSearchResponse:
    players, total = await search_players(
        (name or "").strip(), (rmis_id or "").strip(), limit, (page - 1) * limit
    )
    return PlayerSearchResponse(
        data=PlayerSearchResult(
            players=players,
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        )
    )


@router.get("/players/{rmis_id}", response_model=PlayerResponse)
async def get_player_by_rmis_id(rmis_id: RmisId) -> PlayerResponse:
    player = await get_player(rmis_id)
    if player is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Player not found")
    return PlayerResponse(data=player)
