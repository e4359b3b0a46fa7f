import pytest
from starlette.exceptions import HTTPException

from rcl.models.db.event import Event, SportType
from rcl.models.db.team import TeamsGenerateBody
from rcl.models.teams import ClubRegistrationCount
from rcl.routes import teams as team_routes
from rcl.utils.dummy_records import DUMMY_ADMIN, DUMMY_TEAM_EVENT, DUMMY_TRACK_TEAM_EVENT
from rcl.utils.id_types import ClubCode, SportId, TeamId

CRICKET = DUMMY_TEAM_EVENT.model_copy(update={"min_count": 5})
RELAY = DUMMY_TRACK_TEAM_EVENT.model_copy(update={"min_count": 4})

COUNTS = {
    CRICKET.sport_id: [
        ClubRegistrationCount(club_id=ClubCode("RC-COL"), club_name="Colombo", registration_count=6),
        ClubRegistrationCount(club_id=ClubCode("RC-KDY"), club_name="Kandy", registration_count=2),
        ClubRegistrationCount(
            club_id=ClubCode("RC-GAL"), club_name="Galle", registration_count=9, has_team=True
        ),
    ],
    RELAY.sport_id: [
        ClubRegistrationCount(club_id=ClubCode("RC-COL"), club_name="Colombo", registration_count=4),
        ClubRegistrationCount(club_id=ClubCode("RC-KDY"), club_name="Kandy", registration_count=4),
    ],
}


@pytest.fixture
def created_teams(monkeypatch: pytest.MonkeyPatch) -> dict[SportId, list[ClubCode]]:
    created: dict[SportId, list[ClubCode]] = {}
    events = {CRICKET.sport_id: CRICKET, RELAY.sport_id: RELAY}

    async def fake_get_event(sport_id: SportId) -> Event | None:
        return events.get(sport_id)

    async def fake_get_events(*, sport_types: list[SportType]) -> list[Event]:
        return [event for event in events.values() if event.sport_type in sport_types]

    async def fake_counts(sport_id: SportId, _: str | None) -> list[ClubRegistrationCount]:
        return [
            count.model_copy(update={"has_team": True})
            if count.club_id in created.get(sport_id, [])
            else count
            for count in COUNTS[sport_id]
        ]

    async def fake_create_teams(sport_id: SportId, club_ids: list[ClubCode]) -> None:
        created.setdefault(sport_id, []).extend(club_ids)

    monkeypatch.setattr(team_routes, "get_event", fake_get_event)
    monkeypatch.setattr(team_routes, "get_events", fake_get_events)
    monkeypatch.setattr(team_routes, "get_club_registration_counts", fake_counts)
    monkeypatch.setattr(team_routes, "sql_create_teams", fake_create_teams)
    return created


@pytest.mark.asyncio
async def test_generate_teams_for_one_sport(
    created_teams: dict[SportId, list[ClubCode]],
) -> None:
    response = await team_routes.generate_teams(
        TeamsGenerateBody(sport_id=CRICKET.sport_id), DUMMY_ADMIN
    )

    assert created_teams == {CRICKET.sport_id: ["RC-COL"]}
    assert response.data.total_created == 1
    assert response.data.total_skipped == 1
    assert response.data.results[0].eligible_clubs == 1


@pytest.mark.asyncio
async def test_generate_teams_for_all_sports_twice(
    created_teams: dict[SportId, list[ClubCode]],
) -> None:
    first = await team_routes.generate_teams(TeamsGenerateBody(), DUMMY_ADMIN)
    second = await team_routes.generate_teams(TeamsGenerateBody(), DUMMY_ADMIN)

    assert created_teams == {
        CRICKET.sport_id: ["RC-COL"],
        RELAY.sport_id: ["RC-COL", "RC-KDY"],
    }
    assert first.data.total_created == 3
    assert second.data.total_created == 0
    assert second.data.total_skipped == 4


@pytest.mark.asyncio
async def test_generate_teams_for_unknown_sport(
    created_teams: dict[SportId, list[ClubCode]],
) -> None:
    with pytest.raises(HTTPException) as exc_info:
        await team_routes.generate_teams(TeamsGenerateBody(sport_id=SportId(404)), DUMMY_ADMIN)

    assert exc_info.value.status_code == 404
    assert created_teams == {}


@pytest.mark.asyncio
async def test_non_eligible_and_available_clubs(
    created_teams: dict[SportId, list[ClubCode]],
) -> None:
    non_eligible = await team_routes.get_non_eligible_teams(CRICKET.sport_id)
    assert non_eligible.data.min_count == 5
    assert [club.club_id for club in non_eligible.data.clubs] == ["RC-KDY"]

    available = await team_routes.get_available_clubs(CRICKET.sport_id)
    assert [(club.club_id, club.has_team) for club in available.data.clubs] == [
        ("RC-COL", False),
        ("RC-KDY", False),
        ("RC-GAL", True),
    ]


@pytest.mark.asyncio
async def test_delete_unknown_team(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_delete(_: TeamId) -> bool:
        return False

    monkeypatch.setattr(team_routes, "sql_delete_team", fake_delete)

    with pytest.raises(HTTPException) as exc_info:
        await team_routes.delete_team(TeamId(3), DUMMY_ADMIN)

    assert exc_info.value.status_code == 404
