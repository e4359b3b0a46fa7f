from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.logic.track_events import compute_track_awards, sort_by_place_then_name
from rcl.models.db.event import Event, SportType
from rcl.models.db.track_event import TrackEventResultBody, TrackEventUpsertBody
from rcl.models.db.user import SessionUser
from rcl.models.track_events import TrackAwardBody, TrackAwardResult, TrackEventsView
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import TrackAwardResponse, TrackEventResponse, TrackEventsResponse
from rcl.sql.club_points import sql_replace_sport_points
from rcl.sql.events import get_event
from rcl.sql.track_events import (
    get_individual_track_entries,
    get_team_track_entries,
    get_track_entry_scores,
    sql_update_track_event,
    sql_upsert_track_event,
)
from rcl.utils.id_types import SportId, TrackEventId

router = APIRouter(prefix=config.api_prefix)


async def get_track_sport_or_400(sport_id: SportId) -> Event:
    sport = await get_event(sport_id)
    if sport is None:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Sport not found")
    if not sport.sport_type.is_track:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Sport is not a track event")
    return sport


@router.get("/track_events", response_model=TrackEventsResponse)
async def get_track_events(sport_id: SportId) -> TrackEventsResponse:
    sport = await get_track_sport_or_400(sport_id)

    if sport.sport_type is SportType.TRACK_INDIVIDUAL:
        registered = await get_individual_track_entries(sport_id)
        entries = [entry for entry in registered if entry.main_player]
        reserves = [
            entry.model_copy(update={"id": None, "score": "", "place": None})
            for entry in registered
            if not entry.main_player
        ]
        return TrackEventsResponse(
            data=TrackEventsView(
                sport=sport,
                entries=sort_by_place_then_name(entries),
                reserves=sort_by_place_then_name(reserves),
            )
        )

    teams = await get_team_track_entries(sport_id)
    return TrackEventsResponse(
        data=TrackEventsView(sport=sport, entries=sort_by_place_then_name(teams))
    )


@router.put("/track_events", response_model=TrackEventResponse)
async def upsert_track_event(
    body: TrackEventUpsertBody, _: SessionUser = Depends(admin_authenticated)
) -> TrackEventResponse:
    await get_track_sport_or_400(body.sport_id)
    return TrackEventResponse(data=await sql_upsert_track_event(body))


@router.patch("/track_events/{track_event_id}", response_model=TrackEventResponse)
async def update_track_event_result(
    track_event_id: TrackEventId,
    body: TrackEventResultBody,
    _: SessionUser = Depends(admin_authenticated),
) -> TrackEventResponse:
    track_event = await sql_update_track_event(track_event_id, body)
    if track_event is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Track entry not found")
    return TrackEventResponse(data=track_event)


@router.post("/track_events/award", response_model=TrackAwardResponse)
async def award_track_event(
    body: TrackAwardBody, _: SessionUser = Depends(admin_authenticated)
) -> TrackAwardResponse:
    sport = await get_track_sport_or_400(body.sport_id)
    individual = sport.sport_type is SportType.TRACK_INDIVIDUAL

    entries = await get_track_entry_scores(sport.sport_id, individual)
    awards = compute_track_awards(entries, individual)
    await sql_replace_sport_points(sport.sport_id, awards)

    return TrackAwardResponse(data=TrackAwardResult(updated=len(awards), sport=sport))
