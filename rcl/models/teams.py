from pydantic import BaseModel

from rcl.utils.id_types import ClubCode, SportId


class ClubRegistrationCount(BaseModel):
    club_id: ClubCode
    club_name: str
    registration_count: int
    has_team: bool = False


class SportTeamsGenerated(BaseModel):
    sport_id: SportId
    sport_name: str
    created: int
    skipped: int
    eligible_clubs: int


class TeamsGenerationSummary(BaseModel):
    total_created: int
    total_skipped: int
    results: list[SportTeamsGenerated]


class NonEligibleClubsView(BaseModel):
    sport_name: str
    min_count: int | None
    clubs: list[ClubRegistrationCount]


class AvailableClubsView(BaseModel):
    sport_name: str
    clubs: list[ClubRegistrationCount]
