from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from rcl.config import config
from rcl.models.db.event import EventBody, SportType
from rcl.models.db.user import SessionUser
from rcl.models.sport_day import SportDay, parse_sport_day
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import EventResponse, EventsResponse
from rcl.sql.events import get_event, get_events, sql_create_event
from rcl.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


def parse_sport_types(value: str | None) -> list[SportType]:
    if value is None:
        return []

    sport_types = []
    for part in value.split(","):
        if part.strip() == "":
            continue
        try:
            sport_types.append(SportType(part.strip()))
        except ValueError as exc:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, f"Unknown sport type: {part.strip()}"
            ) from exc
    return sport_types


@router.get("/events", response_model=EventsResponse)
async def list_events(
    category: str | None = None,
    type: str | None = Query(None, description="Comma separated sport types"),  # noqa: A002
    gender: str | None = None,
    day: str | None = None,
) -> EventsResponse:
    sport_day: SportDay | None = None
    if day is not None:
        sport_day = parse_sport_day(day)
        if sport_day is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid sport day")

    return EventsResponse(
        data=await get_events(
            category=category,
            sport_types=parse_sport_types(type),
            gender=gender,
            sport_day=sport_day,
        )
    )


@router.post("/events", response_model=EventResponse)
async def create_event(
    event: EventBody, _: SessionUser = Depends(admin_authenticated)
) -> EventResponse:
    sport_id = await sql_create_event(event)
    return EventResponse(data=assert_some(await get_event(sport_id)))
