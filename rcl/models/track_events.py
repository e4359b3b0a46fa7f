from pydantic import BaseModel

from rcl.models.db.event import Event
from rcl.utils.id_types import ClubCode, RmisId, SportId, TeamId, TrackEventId


class TrackEntryScore(BaseModel):
    """One participant's recorded result, already resolved to the club it scores for."""

    club_id: ClubCode
    score: str | None = None


class TrackClubAward(BaseModel):
    club_id: ClubCode
    points: int
    best_place: int | None = None


class TrackEntryView(BaseModel):
    id: TrackEventId | None = None
    rmis_id: RmisId | None = None
    team_id: TeamId | None = None
    name: str
    club_id: ClubCode | None = None
    club_name: str
    score: str = ""
    place: int | None = None
    main_player: bool = True


class TrackEventsView(BaseModel):
    sport: Event
    entries: list[TrackEntryView]
    reserves: list[TrackEntryView] = []


class TrackAwardBody(BaseModel):
    sport_id: SportId


class TrackAwardResult(BaseModel):
    updated: int
    sport: Event
