from typing import Any

from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.player import (
    MembershipStatus,
    Player,
    PlayerBody,
    PlayerInsertable,
    PlayerWithClub,
)
from rcl.models.membership import ClubMembershipCounts
from rcl.schema import players
from rcl.utils.id_types import ClubCode, RmisId
from rcl.utils.types import dict_without_none


async def get_player(rmis_id: RmisId) -> Player | None:
    query = "SELECT * FROM players WHERE rmis_id = :rmis_id"
    result = await database.fetch_one(query=query, values={"rmis_id": rmis_id})
    return Player.model_validate(result) if result is not None else None


async def get_players(club_id: ClubCode | None = None) -> list[Player]:
    club_filter = "WHERE club_id = :club_id" if club_id is not None else ""
    query = f"""
        SELECT *
        FROM players
        {club_filter}
        ORDER BY name
        """
    result = await database.fetch_all(query=query, values=dict_without_none({"club_id": club_id}))
    return [Player.model_validate(player) for player in result]


async def get_membership_counts_per_club() -> list[ClubMembershipCounts]:
    query = """
        SELECT
            c.club_id,
            c.club_name,
            COUNT(p.rmis_id) FILTER (WHERE p.status = :general) AS general_members_count,
            COUNT(p.rmis_id) FILTER (WHERE p.status = :prospective) AS prospective_members_count,
            COUNT(p.rmis_id) AS total_players_count
        FROM clubs c
        LEFT JOIN players p ON p.club_id = c.club_id
        GROUP BY c.club_id, c.club_name
        ORDER BY c.club_name
        """
    result = await database.fetch_all(
        query=query,
        values={
            "general": int(MembershipStatus.GENERAL),
            "prospective": int(MembershipStatus.PROSPECTIVE),
        },
    )
    return [ClubMembershipCounts.model_validate(dict(row._mapping)) for row in result]


async def search_players(
    name: str | None, rmis_id: str | None, limit: int, offset: int
) -> tuple[list[PlayerWithClub], int]:
    """Players whose name or RMIS id contains any of the given terms, ordered by name."""
    conditions = []
    params: dict[str, Any] = {}
    if name:
        conditions.append("p.name ILIKE :name")
        params["name"] = f"%{name}%"
    if rmis_id:
        conditions.append("p.rmis_id ILIKE :rmis_id")
        params["rmis_id"] = f"%{rmis_id}%"

    if not conditions:
        return [], 0

    where = " OR ".join(conditions)
    total = await database.fetch_val(
        query=f"SELECT COUNT(*) FROM players p WHERE {where}", values=params
    )
    query = f"""
        SELECT p.*, c.club_name, c.category
        FROM players p
        LEFT JOIN clubs c ON c.club_id = p.club_id
        WHERE {where}
        ORDER BY p.name
        LIMIT :limit OFFSET :offset
        """
    result = await database.fetch_all(
        query=query, values={**params, "limit": limit, "offset": offset}
    )
    return [PlayerWithClub.model_validate(player) for player in result], total


async def sql_create_player(player: PlayerBody) -> None:
    await database.execute(
        query=players.insert(),
        values=PlayerInsertable(**player.model_dump(), created=datetime_utc.now()).model_dump(),
    )
