from collections.abc import Sequence

from rcl.models.db.event import Event
from rcl.models.teams import ClubRegistrationCount


def get_required_registrations(sport: Event) -> int:
    """A club needs at least one registration, and `min_count` of them when the sport sets one."""
    return max(sport.min_count or 0, 1)


def get_eligible_clubs(
    sport: Event, counts: Sequence[ClubRegistrationCount]
) -> list[ClubRegistrationCount]:
    required = get_required_registrations(sport)
    return [
        club for club in counts if not club.has_team and club.registration_count >= required
    ]


def get_non_eligible_clubs(
    sport: Event, counts: Sequence[ClubRegistrationCount]
) -> list[ClubRegistrationCount]:
    required = get_required_registrations(sport)
    clubs = [
        club
        for club in counts
        if not club.has_team and 0 < club.registration_count < required
    ]
    return sorted(clubs, key=lambda club: (-club.registration_count, club.club_name))


def sort_available_clubs(
    counts: Sequence[ClubRegistrationCount],
) -> list[ClubRegistrationCount]:
    return sorted(
        counts,
        key=lambda club: (club.has_team, -club.registration_count, club.club_name),
    )
