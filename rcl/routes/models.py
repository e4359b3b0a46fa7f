from typing import Generic, TypeVar

from pydantic import BaseModel

from rcl.models.brackets import BracketView
from rcl.models.db.club import Club
from rcl.models.db.club_points import ClubPointWithClub
from rcl.models.db.event import Event
from rcl.models.db.match import Match
from rcl.models.db.permission import Permission
from rcl.models.db.player import Player
from rcl.models.db.portal_setting import PortalStatusView, RegistrationWindowView
from rcl.models.db.registration import DayRegistration, Registration
from rcl.models.db.team import Team, TeamWithClub
from rcl.models.db.track_event import TrackEvent
from rcl.models.leaderboard import AggregatedLeaderboard, ClubDetails
from rcl.models.membership import ClubMembershipView, MembershipRulesResult
from rcl.models.participation import (
    ClubParticipationDetail,
    ClubParticipationSummary,
    ParticipationAwardSummary,
)
from rcl.models.players import PlayerCreateResult, PlayerSearchResult
from rcl.models.standings import TournamentStandingsView
from rcl.models.teams import AvailableClubsView, NonEligibleClubsView, TeamsGenerationSummary
from rcl.models.track_events import TrackAwardResult, TrackEventsView
from rcl.utils.id_types import ClubPointId


class SuccessResponse(BaseModel):
    success: bool = True


DataT = TypeVar("DataT")


class DataResponse(BaseModel, Generic[DataT]):
    data: DataT


class ClubsResponse(DataResponse[list[Club]]):
    pass


class ClubResponse(DataResponse[Club]):
    pass


class EventsResponse(DataResponse[list[Event]]):
    pass


class EventResponse(DataResponse[Event]):
    pass


class PlayersResponse(DataResponse[list[Player]]):
    pass


class PlayerResponse(DataResponse[Player]):
    pass


class PlayerSearchResponse(DataResponse[PlayerSearchResult]):
    pass


class PlayerCreateResponse(DataResponse[PlayerCreateResult]):
    pass


class TeamsResponse(DataResponse[list[TeamWithClub]]):
    pass


class TeamResponse(DataResponse[Team]):
    pass


class TeamsGenerationResponse(DataResponse[TeamsGenerationSummary]):
    pass


class NonEligibleClubsResponse(DataResponse[NonEligibleClubsView]):
    pass


class AvailableClubsResponse(DataResponse[AvailableClubsView]):
    pass


class ClubPointsResponse(DataResponse[list[ClubPointWithClub]]):
    pass


class ClubPointCreatedResponse(DataResponse[ClubPointId]):
    pass


class StandingsAwardResult(BaseModel):
    updated: int


class StandingsAwardResponse(DataResponse[StandingsAwardResult]):
    pass


class TournamentStandingsResponse(DataResponse[TournamentStandingsView]):
    pass


class AggregatedLeaderboardResponse(DataResponse[AggregatedLeaderboard]):
    pass


class ClubDetailsResponse(DataResponse[ClubDetails]):
    pass


class ParticipationOverviewResponse(DataResponse[list[ClubParticipationSummary]]):
    pass


class ClubParticipationResponse(DataResponse[ClubParticipationDetail]):
    pass


class ParticipationAwardResponse(DataResponse[ParticipationAwardSummary]):
    pass


class MembershipDataResponse(DataResponse[list[ClubMembershipView]]):
    pass


class MembershipRulesResponse(DataResponse[MembershipRulesResult]):
    pass


class TrackEventsResponse(DataResponse[TrackEventsView]):
    pass


class TrackEventResponse(DataResponse[TrackEvent]):
    pass


class TrackAwardResponse(DataResponse[TrackAwardResult]):
    pass


class BracketResponse(DataResponse[BracketView]):
    pass


class MatchResponse(DataResponse[Match]):
    pass


class PermissionsResponse(DataResponse[list[Permission]]):
    pass


class PermissionResponse(DataResponse[Permission]):
    pass


class PortalStatusResponse(DataResponse[PortalStatusView]):
    pass


class RegistrationWindowResponse(DataResponse[RegistrationWindowView]):
    pass


class RegistrationResult(BaseModel):
    registration: Registration
    already_registered: bool = False


class RegistrationResponse(DataResponse[RegistrationResult]):
    pass


class RegistrationsResponse(DataResponse[list[Registration]]):
    pass


class DayRegistrationResponse(DataResponse[DayRegistration]):
    pass


class DayRegistrationStatus(BaseModel):
    is_registered: bool
    registration: DayRegistration | None = None


class DayRegistrationStatusResponse(DataResponse[DayRegistrationStatus]):
    pass
