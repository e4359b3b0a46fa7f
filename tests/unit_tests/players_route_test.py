import pytest
from starlette.exceptions import HTTPException

from rcl.models.db.player import Player, PlayerBody, PlayerWithClub
from rcl.routes import players as player_routes
from rcl.utils.dummy_records import DUMMY_MOCK_TIME, DUMMY_PORTAL_USER
from rcl.utils.id_types import ClubCode, RmisId

BODY = PlayerBody(
    rmis_id=RmisId("RMIS-42"), name="Nimal Perera", gender="male", club_id=ClubCode("RC-KDY")
)


@pytest.fixture
def stored_players(monkeypatch: pytest.MonkeyPatch) -> dict[RmisId, Player]:
    players: dict[RmisId, Player] = {}

    async def fake_get_player(rmis_id: RmisId) -> Player | None:
        return players.get(rmis_id)

    async def fake_create(body: PlayerBody) -> None:
        players[body.rmis_id] = Player(**body.model_dump(), created=DUMMY_MOCK_TIME)

    monkeypatch.setattr(player_routes, "get_player", fake_get_player)
    monkeypatch.setattr(player_routes, "sql_create_player", fake_create)
    return players


@pytest.mark.asyncio
async def test_create_player_once(stored_players: dict[RmisId, Player]) -> None:
    created = await player_routes.create_player(BODY, DUMMY_PORTAL_USER)
    assert created.data.already_exists is False
    assert created.data.player.name == "Nimal Perera"

    renamed = BODY.model_copy(update={"name": "Someone Else"})
    existing = await player_routes.create_player(renamed, DUMMY_PORTAL_USER)
    assert existing.data.already_exists is True
    assert existing.data.player.name == "Nimal Perera"
    assert list(stored_players) == ["RMIS-42"]


@pytest.mark.asyncio
async def test_unknown_player(stored_players: dict[RmisId, Player]) -> None:
    with pytest.raises(HTTPException) as exc_info:
        await player_routes.get_player_by_rmis_id(RmisId("RMIS-404"))

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_search_players_pagination(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str | None, str | None, int, int]] = []

    async def fake_search(
        name: str | None, rmis_id: str | None, limit: int, offset: int
    ) -> tuple[list[PlayerWithClub], int]:
        calls.append((name, rmis_id, limit, offset))
        player = PlayerWithClub(
            **BODY.model_dump(), created=DUMMY_MOCK_TIME, club_name="Kandy", category="community"
        )
        return [player], 21

    monkeypatch.setattr(player_routes, "search_players", fake_search)

    response = await player_routes.search_for_players(name=" nimal ", rmis_id=None, page=3, limit=10)

    assert calls == [("nimal", "", 10, 20)]
    assert response.data.total == 21
    assert response.data.total_pages == 3
    assert response.data.players[0].club_name == "Kandy"
