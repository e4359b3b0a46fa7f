from typing import Any

from rcl.database import database
from rcl.models.leaderboard import ClubPointEntry, LeaderboardRow
from rcl.utils.id_types import ClubCode


def _category_filter(category: str | None, params: dict[str, Any]) -> str:
    if category is None:
        return ""
    params["category"] = category
    return "WHERE c.category = :category"


async def get_aggregated_leaderboard(
    category: str | None, limit: int | None, offset: int
) -> list[LeaderboardRow]:
    params: dict[str, Any] = {"offset": offset}
    category_filter = _category_filter(category, params)
    limit_clause = ""
    if limit is not None:
        limit_clause = "LIMIT :limit"
        params["limit"] = limit

    query = f"""
        WITH club_totals AS (
            SELECT
                c.club_id,
                c.club_name,
                c.category,
                COALESCE(SUM(cp.points), 0) AS total_points,
                COUNT(cp.point_id) AS entries_count
            FROM clubs c
            LEFT JOIN club_points cp ON cp.club_id = c.club_id
            {category_filter}
            GROUP BY c.club_id, c.club_name, c.category
        )
        SELECT
            *,
            RANK() OVER (ORDER BY total_points DESC) AS rank
        FROM club_totals
        ORDER BY total_points DESC, club_name ASC
        {limit_clause}
        OFFSET :offset
        """
    result = await database.fetch_all(query=query, values=params)
    return [LeaderboardRow.model_validate(dict(row._mapping)) for row in result]


async def get_leaderboard_count(category: str | None) -> int:
    params: dict[str, Any] = {}
    query = f"SELECT COUNT(*) FROM clubs c {_category_filter(category, params)}"
    return await database.fetch_val(query=query, values=params)


async def get_club_point_entries(club_id: ClubCode) -> list[ClubPointEntry]:
    query = """
        SELECT
            cp.point_id,
            cp.points,
            cp.place,
            cp.sport_id,
            e.sport_name,
            e.category AS sport_category,
            e.gender_type,
            e.sport_type
        FROM club_points cp
        LEFT JOIN events e ON e.sport_id = cp.sport_id
        WHERE cp.club_id = :club_id
        ORDER BY cp.points DESC
        """
    result = await database.fetch_all(query=query, values={"club_id": club_id})
    return [ClubPointEntry.model_validate(dict(row._mapping)) for row in result]
