import pytest
from starlette.exceptions import HTTPException

from rcl.models.db.match import Match, MatchScoreBody
from rcl.routes import brackets as bracket_routes
from rcl.utils.dummy_records import DUMMY_ADMIN
from rcl.utils.id_types import MatchId, SportId


@pytest.fixture
def matches(monkeypatch: pytest.MonkeyPatch) -> dict[MatchId, Match]:
    stored = {MatchId(1): Match(match_id=MatchId(1), sport_id=SportId(10), round_id=5)}

    async def fake_update(match_id: MatchId, body: MatchScoreBody) -> Match | None:
        if match_id not in stored:
            return None
        stored[match_id] = stored[match_id].model_copy(update=body.model_dump())
        return stored[match_id]

    monkeypatch.setattr(bracket_routes, "sql_update_match_score", fake_update)
    return stored


@pytest.mark.asyncio
async def test_update_match_score(matches: dict[MatchId, Match]) -> None:
    response = await bracket_routes.update_match_score(
        MatchId(1), MatchScoreBody(team1_score=3, team2_score=1), DUMMY_ADMIN
    )

    assert (response.data.team1_score, response.data.team2_score) == (3, 1)


@pytest.mark.asyncio
async def test_update_unknown_match(matches: dict[MatchId, Match]) -> None:
    with pytest.raises(HTTPException) as exc_info:
        await bracket_routes.update_match_score(
            MatchId(2), MatchScoreBody(team1_score=0, team2_score=0), DUMMY_ADMIN
        )

    assert exc_info.value.status_code == 404
