from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.track_event import TrackEvent, TrackEventResultBody, TrackEventUpsertBody
from rcl.models.track_events import TrackEntryScore, TrackEntryView
from rcl.utils.id_types import SportId, TrackEventId


async def get_individual_track_entries(sport_id: SportId) -> list[TrackEntryView]:
    """Main players and reserves registered for an individual track event, with their results."""
    query = """
        SELECT
            te.id,
            r.rmis_id,
            COALESCE(p.name, '-') AS name,
            COALESCE(p.club_id, r.club_id) AS club_id,
            COALESCE(c.club_name, '-') AS club_name,
            COALESCE(te.score, '') AS score,
            te.place,
            r.main_player
        FROM registrations r
        LEFT JOIN players p ON p.rmis_id = r.rmis_id
        LEFT JOIN clubs c ON c.club_id = COALESCE(p.club_id, r.club_id)
        LEFT JOIN track_events te ON te.sport_id = r.sport_id AND te.rmis_id = r.rmis_id
        WHERE r.sport_id = :sport_id
        """
    result = await database.fetch_all(query=query, values={"sport_id": sport_id})
    return [TrackEntryView.model_validate(dict(row._mapping)) for row in result]


async def get_team_track_entries(sport_id: SportId) -> list[TrackEntryView]:
    query = """
        SELECT
            te.id,
            t.team_id,
            COALESCE(c.club_name, '-') AS name,
            t.club_id,
            COALESCE(c.club_name, '-') AS club_name,
            COALESCE(te.score, '') AS score,
            te.place
        FROM teams t
        LEFT JOIN clubs c ON c.club_id = t.club_id
        LEFT JOIN track_events te ON te.sport_id = t.sport_id AND te.team_id = t.team_id
        WHERE t.sport_id = :sport_id
        """
    result = await database.fetch_all(query=query, values={"sport_id": sport_id})
    return [TrackEntryView.model_validate(dict(row._mapping)) for row in result]


async def get_track_entry_scores(sport_id: SportId, individual: bool) -> list[TrackEntryScore]:
    """Recorded results of a track event, each resolved to the club it scores for."""
    if individual:
        query = """
            SELECT p.club_id, te.score
            FROM track_events te
            JOIN players p ON p.rmis_id = te.rmis_id
            WHERE te.sport_id = :sport_id
            ORDER BY te.id
            """
    else:
        query = """
            SELECT t.club_id, te.score
            FROM track_events te
            JOIN teams t ON t.team_id = te.team_id
            WHERE te.sport_id = :sport_id
            ORDER BY te.id
            """
    result = await database.fetch_all(query=query, values={"sport_id": sport_id})
    return [TrackEntryScore.model_validate(dict(row._mapping)) for row in result]


async def sql_upsert_track_event(body: TrackEventUpsertBody) -> TrackEvent:
    conflict_column = "rmis_id" if body.rmis_id is not None else "team_id"
    query = f"""
        INSERT INTO track_events (sport_id, rmis_id, team_id, score, place, updated)
        VALUES (:sport_id, :rmis_id, :team_id, :score, :place, :updated)
        ON CONFLICT (sport_id, {conflict_column}) DO UPDATE
        SET score = EXCLUDED.score, place = EXCLUDED.place, updated = EXCLUDED.updated
        RETURNING *
        """
    result = await database.fetch_one(
        query=query, values={**body.model_dump(), "updated": datetime_utc.now()}
    )
    assert result is not None
    return TrackEvent.model_validate(result)


async def sql_update_track_event(
    track_event_id: TrackEventId, body: TrackEventResultBody
) -> TrackEvent | None:
    query = """
        UPDATE track_events
        SET score = :score, place = :place, updated = :updated
        WHERE id = :id
        RETURNING *
        """
    result = await database.fetch_one(
        query=query,
        values={**body.model_dump(), "id": track_event_id, "updated": datetime_utc.now()},
    )
    return TrackEvent.model_validate(result) if result is not None else None
