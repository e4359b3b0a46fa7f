from rcl.logic.participation import (
    attendance_ratio,
    build_club_participation_detail,
    get_eligible_sport_ids,
    get_sport_ids_to_award,
    summarize_club_participation,
)
from rcl.models.db.event import SportType
from rcl.models.participation import DayRegistrationRow
from rcl.models.sport_day import SportDay
from rcl.utils.dummy_records import DUMMY_CLUB1
from rcl.utils.id_types import RmisId, SportId


def _reg(
    rmis_id: str,
    sport_id: int,
    sport_name: str = "Cricket",
    sport_type: SportType = SportType.TEAM,
    player_name: str | None = None,
) -> DayRegistrationRow:
    return DayRegistrationRow(
        rmis_id=RmisId(rmis_id),
        sport_id=SportId(sport_id),
        sport_name=sport_name,
        sport_type=sport_type,
        player_name=player_name or f"Player {rmis_id}",
    )


REGISTRATIONS = [
    # Cricket: 2 of 4 attended, exactly on the threshold
    _reg("p1", 1),
    _reg("p2", 1),
    _reg("p3", 1),
    _reg("p4", 1),
    # Netball: 1 of 3 attended
    _reg("p1", 2, "Netball"),
    _reg("p5", 2, "Netball"),
    _reg("p6", 2, "Netball"),
    # Sprint: all attended, but track events are never awarded here
    _reg("p2", 3, "100m Sprint", SportType.TRACK_INDIVIDUAL),
]
DAY_REGISTERED = {RmisId("p1"), RmisId("p2")}


def test_attendance_ratio() -> None:
    assert attendance_ratio(set(), {RmisId("p1")}) == 0.0
    assert attendance_ratio({RmisId("p1"), RmisId("p2")}, {RmisId("p1")}) == 0.5


def test_eligible_sports_meet_threshold_inclusive() -> None:
    assert sorted(get_eligible_sport_ids(REGISTRATIONS, DAY_REGISTERED)) == [1, 3]
    assert sorted(get_eligible_sport_ids(REGISTRATIONS, DAY_REGISTERED, threshold=0.3)) == [
        1,
        2,
        3,
    ]
    assert get_eligible_sport_ids(REGISTRATIONS, set()) == []


def test_sports_to_award_exclude_track_and_awarded_sports() -> None:
    assert get_sport_ids_to_award(REGISTRATIONS, DAY_REGISTERED, set()) == [1]
    assert get_sport_ids_to_award(REGISTRATIONS, DAY_REGISTERED, {SportId(1)}) == []


def test_summarize_club_participation() -> None:
    summary = summarize_club_participation(DUMMY_CLUB1, REGISTRATIONS, DAY_REGISTERED, False)

    assert summary.club_id == DUMMY_CLUB1.club_id
    assert summary.registered_players_count == 6
    assert summary.day_registration_count == 2
    # Track events count towards the overview even though they are not awarded here
    assert summary.registered_sports_count == 3
    assert summary.eligible_sports_count == 2
    assert summary.already_awarded is False


def test_club_participation_detail() -> None:
    detail = build_club_participation_detail(
        DUMMY_CLUB1, REGISTRATIONS, DAY_REGISTERED, SportDay.DAY_01
    )

    assert [sport.sport_name for sport in detail.sports] == ["100m Sprint", "Cricket", "Netball"]
    assert [player.rmis_id for player in detail.players][:2] == ["p1", "p2"]
    assert all(not player.day_registered for player in detail.players[2:])

    p1 = detail.players[0]
    assert p1.sports == [1, 2]

    cricket = detail.sports[1]
    assert [player.day_registered for player in cricket.players] == [True, True, False, False]

    assert detail.summary.total_players == 6
    assert detail.summary.day_registered_count == 2
    assert detail.summary.total_sports == 3
    assert detail.summary.sport_day is SportDay.DAY_01
