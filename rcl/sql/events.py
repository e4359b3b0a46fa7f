from typing import Any

from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.event import Event, EventBody, EventInsertable, SportType
from rcl.models.sport_day import SportDay
from rcl.schema import events
from rcl.utils.id_types import SportId


async def get_events(
    *,
    category: str | None = None,
    sport_types: list[SportType] | None = None,
    gender: str | None = None,
    sport_day: SportDay | None = None,
) -> list[Event]:
    query = """
        SELECT *
        FROM events
        WHERE TRUE
        """
    params: dict[str, Any] = {}

    if category is not None:
        query += "AND category = :category "
        params["category"] = category

    if sport_types:
        query += "AND sport_type::text = any(:sport_types) "
        params["sport_types"] = [sport_type.value for sport_type in sport_types]

    if gender is not None:
        query += "AND gender_type = :gender "
        params["gender"] = gender

    if sport_day is not None:
        query += "AND sport_day = :sport_day "
        params["sport_day"] = sport_day.value

    query += "ORDER BY sport_day, sport_name"
    result = await database.fetch_all(query=query, values=params)
    return [Event.model_validate(event) for event in result]


async def get_event(sport_id: SportId) -> Event | None:
    query = "SELECT * FROM events WHERE sport_id = :sport_id"
    result = await database.fetch_one(query=query, values={"sport_id": sport_id})
    return Event.model_validate(result) if result is not None else None


async def sql_create_event(event: EventBody) -> SportId:
    new_id = await database.execute(
        query=events.insert(),
        values=EventInsertable(**event.model_dump(), created=datetime_utc.now()).model_dump(),
    )
    return SportId(new_id)
