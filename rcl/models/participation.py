from pydantic import BaseModel

from rcl.models.db.event import SportType
from rcl.models.sport_day import SportDay
from rcl.utils.id_types import ClubCode, RmisId, SportId


class DayRegistrationRow(BaseModel):
    """A registration of one player for one sport taking place on a given sport day."""

    rmis_id: RmisId
    sport_id: SportId
    sport_name: str
    sport_type: SportType
    player_name: str | None = None
    gender: str | None = None


class ClubParticipationSummary(BaseModel):
    club_id: ClubCode
    club_name: str
    registered_players_count: int
    day_registration_count: int
    registered_sports_count: int
    eligible_sports_count: int
    already_awarded: bool


class SportParticipant(BaseModel):
    rmis_id: RmisId
    name: str | None = None
    gender: str | None = None
    day_registered: bool


class SportParticipation(BaseModel):
    sport_id: SportId
    sport_name: str
    players: list[SportParticipant]


class PlayerParticipation(SportParticipant):
    sports: list[SportId]


class ClubParticipationDetailSummary(BaseModel):
    total_players: int
    day_registered_count: int
    total_sports: int
    sport_day: SportDay


class ClubParticipationClub(BaseModel):
    club_id: ClubCode
    club_name: str


class ClubParticipationDetail(BaseModel):
    club: ClubParticipationClub
    sports: list[SportParticipation]
    players: list[PlayerParticipation]
    summary: ClubParticipationDetailSummary


class ParticipationAwardBody(BaseModel):
    sport_day: str | None = None


class ParticipationAwardSummary(BaseModel):
    clubs_awarded: int
    clubs_skipped: int
    total_points_awarded: int
    sport_day: SportDay
