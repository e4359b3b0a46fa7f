from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.registration import DayRegistration
from rcl.models.sport_day import SportDay
from rcl.utils.id_types import RmisId


async def get_day_registration(rmis_id: RmisId, sport_day: SportDay) -> DayRegistration | None:
    query = """
        SELECT *
        FROM day_registrations
        WHERE rmis_id = :rmis_id AND sport_day = :sport_day
        """
    result = await database.fetch_one(
        query=query, values={"rmis_id": rmis_id, "sport_day": sport_day.value}
    )
    return DayRegistration.model_validate(result) if result is not None else None


async def sql_create_day_registration(rmis_id: RmisId, sport_day: SportDay) -> DayRegistration:
    query = """
        INSERT INTO day_registrations (rmis_id, sport_day, created)
        VALUES (:rmis_id, :sport_day, :created)
        RETURNING *
        """
    result = await database.fetch_one(
        query=query,
        values={"rmis_id": rmis_id, "sport_day": sport_day.value, "created": datetime_utc.now()},
    )
    assert result is not None
    return DayRegistration.model_validate(result)


async def get_day_registered_rmis_ids(
    rmis_ids: set[RmisId], sport_day: SportDay
) -> set[RmisId]:
    if len(rmis_ids) < 1:
        return set()

    query = """
        SELECT rmis_id
        FROM day_registrations
        WHERE sport_day = :sport_day AND rmis_id = any(:rmis_ids)
        """
    result = await database.fetch_all(
        query=query, values={"sport_day": sport_day.value, "rmis_ids": list(rmis_ids)}
    )
    return {RmisId(row["rmis_id"]) for row in result}
