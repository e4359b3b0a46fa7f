from typing import Any

from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.club import Club, ClubBody, ClubInsertable, ClubUpdateBody
from rcl.schema import clubs
from rcl.utils.id_types import ClubCode, ClubId
from rcl.utils.types import dict_without_none


async def get_clubs(category: str | None = None) -> list[Club]:
    category_filter = "WHERE category = :category" if category is not None else ""
    query = f"""
        SELECT *
        FROM clubs
        {category_filter}
        ORDER BY club_name
        """
    result = await database.fetch_all(
        query=query, values=dict_without_none({"category": category})
    )
    return [Club.model_validate(club) for club in result]


async def get_club_by_id(club_pk: ClubId) -> Club | None:
    query = "SELECT * FROM clubs WHERE id = :club_pk"
    result = await database.fetch_one(query=query, values={"club_pk": club_pk})
    return Club.model_validate(result) if result is not None else None


async def get_club_by_code(club_id: ClubCode) -> Club | None:
    query = "SELECT * FROM clubs WHERE club_id = :club_id"
    result = await database.fetch_one(query=query, values={"club_id": club_id})
    return Club.model_validate(result) if result is not None else None


async def sql_create_club(club: ClubBody) -> ClubId:
    new_id = await database.execute(
        query=clubs.insert(),
        values=ClubInsertable(**club.model_dump(), created=datetime_utc.now()).model_dump(),
    )
    return ClubId(new_id)


async def sql_update_club(club_pk: ClubId, club: ClubUpdateBody) -> Club | None:
    values: dict[str, Any] = club.model_dump(exclude_none=True)
    assignments = ", ".join(f"{column} = :{column}" for column in values)
    query = f"""
        UPDATE clubs
        SET {assignments}
        WHERE id = :club_pk
        RETURNING *
        """
    result = await database.fetch_one(query=query, values={**values, "club_pk": club_pk})
    return Club.model_validate(result) if result is not None else None
