from pydantic import BaseModel

from rcl.models.db.event import SportType
from rcl.utils.id_types import ClubCode, ClubPointId, SportId


class LeaderboardRow(BaseModel):
    club_id: ClubCode
    club_name: str
    category: str
    total_points: int
    entries_count: int
    rank: int = 0


class LeaderboardPagination(BaseModel):
    limit: int | None
    offset: int
    has_more: bool


class AggregatedLeaderboard(BaseModel):
    clubs: list[LeaderboardRow]
    total: int
    pagination: LeaderboardPagination


class ClubPointEntry(BaseModel):
    point_id: ClubPointId
    points: int
    place: int | None = None
    sport_id: SportId | None = None
    sport_name: str | None = None
    sport_category: str | None = None
    gender_type: str | None = None
    sport_type: SportType | None = None


class SportInfo(BaseModel):
    sport_name: str
    category: str | None = None
    gender_type: str | None = None
    sport_type: SportType | None = None


class SportPointEntry(BaseModel):
    point_id: ClubPointId
    points: int
    place: int | None = None


class SportBreakdown(BaseModel):
    sport_id: SportId | None
    sport_info: SportInfo | None
    entries: list[SportPointEntry]
    total_points: int
    entries_count: int


class ClubDetailsClub(BaseModel):
    club_id: ClubCode
    club_name: str
    category: str


class ClubDetailsSummary(BaseModel):
    total_points: int
    total_entries: int
    sports_count: int


class ClubDetails(BaseModel):
    club: ClubDetailsClub
    summary: ClubDetailsSummary
    sports_breakdown: list[SportBreakdown]
