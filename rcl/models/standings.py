from pydantic import BaseModel

from rcl.utils.id_types import ClubCode


class StandingRow(BaseModel):
    club_id: ClubCode
    club_name: str
    place: int
    points: int


class TournamentStandingsView(BaseModel):
    standings: list[StandingRow]
