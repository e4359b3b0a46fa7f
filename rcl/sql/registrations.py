from typing import Any

from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.registration import Registration, RegistrationBody
from rcl.models.participation import DayRegistrationRow
from rcl.models.sport_day import SportDay
from rcl.schema import registrations
from rcl.utils.id_types import ClubCode, RmisId, SportId


async def get_registrations(
    *,
    sport_id: SportId | None = None,
    club_id: ClubCode | None = None,
    rmis_id: RmisId | None = None,
) -> list[Registration]:
    query = """
        SELECT *
        FROM registrations
        WHERE TRUE
        """
    params: dict[str, Any] = {}
    if sport_id is not None:
        query += "AND sport_id = :sport_id "
        params["sport_id"] = sport_id
    if club_id is not None:
        query += "AND club_id = :club_id "
        params["club_id"] = club_id
    if rmis_id is not None:
        query += "AND rmis_id = :rmis_id "
        params["rmis_id"] = rmis_id

    query += "ORDER BY created"
    result = await database.fetch_all(query=query, values=params)
    return [Registration.model_validate(registration) for registration in result]


async def get_registration(rmis_id: RmisId, sport_id: SportId) -> Registration | None:
    query = """
        SELECT *
        FROM registrations
        WHERE rmis_id = :rmis_id AND sport_id = :sport_id
        """
    result = await database.fetch_one(
        query=query, values={"rmis_id": rmis_id, "sport_id": sport_id}
    )
    return Registration.model_validate(result) if result is not None else None


async def sql_create_registration(body: RegistrationBody) -> Registration:
    values = {**body.model_dump(), "created": datetime_utc.now()}
    await database.execute(query=registrations.insert(), values=values)
    return Registration.model_validate(values)


async def sql_delete_registration(rmis_id: RmisId, sport_id: SportId) -> bool:
    query = """
        DELETE FROM registrations
        WHERE rmis_id = :rmis_id AND sport_id = :sport_id
        RETURNING id
        """
    deleted = await database.fetch_val(
        query=query, values={"rmis_id": rmis_id, "sport_id": sport_id}
    )
    return deleted is not None


async def get_day_registration_rows(
    club_id: ClubCode, sport_day: SportDay
) -> list[DayRegistrationRow]:
    """All registrations of a club for the sports that take place on the given day."""
    query = """
        SELECT
            r.rmis_id,
            r.sport_id,
            e.sport_name,
            e.sport_type,
            p.name AS player_name,
            p.gender
        FROM registrations r
        JOIN events e ON e.sport_id = r.sport_id
        LEFT JOIN players p ON p.rmis_id = r.rmis_id
        WHERE r.club_id = :club_id AND e.sport_day = :sport_day
        ORDER BY e.sport_name, p.name
        """
    result = await database.fetch_all(
        query=query, values={"club_id": club_id, "sport_day": sport_day.value}
    )
    return [DayRegistrationRow.model_validate(dict(row._mapping)) for row in result]
