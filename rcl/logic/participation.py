from collections.abc import Iterable, Sequence

from rcl.config import config
from rcl.models.db.club import Club
from rcl.models.participation import (
    ClubParticipationClub,
    ClubParticipationDetail,
    ClubParticipationDetailSummary,
    ClubParticipationSummary,
    DayRegistrationRow,
    PlayerParticipation,
    SportParticipant,
    SportParticipation,
)
from rcl.models.sport_day import SportDay
from rcl.utils.id_types import RmisId, SportId


def without_track_sports(registrations: Iterable[DayRegistrationRow]) -> list[DayRegistrationRow]:
    """Track events have their own point awarding, so they never earn participation points."""
    return [reg for reg in registrations if not reg.sport_type.is_track]


def group_players_by_sport(
    registrations: Iterable[DayRegistrationRow],
) -> dict[SportId, set[RmisId]]:
    players_by_sport: dict[SportId, set[RmisId]] = {}
    for reg in registrations:
        players_by_sport.setdefault(reg.sport_id, set()).add(reg.rmis_id)
    return players_by_sport


def attendance_ratio(players: set[RmisId], day_registered: set[RmisId]) -> float:
    if len(players) < 1:
        return 0.0
    return len(players & day_registered) / len(players)


def get_eligible_sport_ids(
    registrations: Iterable[DayRegistrationRow],
    day_registered: set[RmisId],
    threshold: float | None = None,
) -> list[SportId]:
    min_ratio = config.participation_attendance_threshold if threshold is None else threshold
    return [
        sport_id
        for sport_id, players in group_players_by_sport(registrations).items()
        if len(players) > 0 and attendance_ratio(players, day_registered) >= min_ratio
    ]


def summarize_club_participation(
    club: Club,
    registrations: Sequence[DayRegistrationRow],
    day_registered: set[RmisId],
    already_awarded: bool,
) -> ClubParticipationSummary:
    registered_players = {reg.rmis_id for reg in registrations}
    return ClubParticipationSummary(
        club_id=club.club_id,
        club_name=club.club_name,
        registered_players_count=len(registered_players),
        day_registration_count=len(registered_players & day_registered),
        registered_sports_count=len(group_players_by_sport(registrations)),
        eligible_sports_count=len(get_eligible_sport_ids(registrations, day_registered)),
        already_awarded=already_awarded,
    )


def get_sport_ids_to_award(
    registrations: Sequence[DayRegistrationRow],
    day_registered: set[RmisId],
    already_awarded_sport_ids: set[SportId],
) -> list[SportId]:
    eligible = get_eligible_sport_ids(without_track_sports(registrations), day_registered)
    return sorted(
        sport_id for sport_id in eligible if sport_id not in already_awarded_sport_ids
    )


def build_club_participation_detail(
    club: Club,
    registrations: Sequence[DayRegistrationRow],
    day_registered: set[RmisId],
    sport_day: SportDay,
) -> ClubParticipationDetail:
    sports: dict[SportId, SportParticipation] = {}
    players: dict[RmisId, PlayerParticipation] = {}

    for reg in registrations:
        is_day_registered = reg.rmis_id in day_registered
        sport = sports.setdefault(
            reg.sport_id,
            SportParticipation(sport_id=reg.sport_id, sport_name=reg.sport_name, players=[]),
        )
        player = players.setdefault(
            reg.rmis_id,
            PlayerParticipation(
                rmis_id=reg.rmis_id,
                name=reg.player_name,
                gender=reg.gender,
                sports=[],
                day_registered=is_day_registered,
            ),
        )

        if reg.sport_id not in player.sports:
            player.sports.append(reg.sport_id)
        if all(participant.rmis_id != reg.rmis_id for participant in sport.players):
            sport.players.append(
                SportParticipant(
                    rmis_id=reg.rmis_id,
                    name=reg.player_name,
                    gender=reg.gender,
                    day_registered=is_day_registered,
                )
            )

    sorted_sports = sorted(sports.values(), key=lambda sport: sport.sport_name.lower())
    sorted_players = sorted(
        players.values(),
        key=lambda player: (not player.day_registered, (player.name or "").lower()),
    )

    return ClubParticipationDetail(
        club=ClubParticipationClub(club_id=club.club_id, club_name=club.club_name),
        sports=sorted_sports,
        players=sorted_players,
        summary=ClubParticipationDetailSummary(
            total_players=len(sorted_players),
            day_registered_count=sum(1 for player in sorted_players if player.day_registered),
            total_sports=len(sorted_sports),
            sport_day=sport_day,
        ),
    )
