from typing import Any

import pytest
from starlette.exceptions import HTTPException

from rcl.models.db.event import Event, SportType
from rcl.models.sport_day import SportDay
from rcl.routes import events as event_routes
from rcl.utils.dummy_records import DUMMY_TEAM_EVENT


@pytest.fixture
def filters(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []

    async def fake_get_events(**kwargs: Any) -> list[Event]:
        received.append(kwargs)
        return [DUMMY_TEAM_EVENT]

    monkeypatch.setattr(event_routes, "get_events", fake_get_events)
    return received


@pytest.mark.asyncio
async def test_list_events_with_several_types(filters: list[dict[str, Any]]) -> None:
    response = await event_routes.list_events(
        category="outdoor", type="team, trackTeam,", gender=None, day="d-01"
    )

    assert response.data == [DUMMY_TEAM_EVENT]
    assert filters == [
        {
            "category": "outdoor",
            "sport_types": [SportType.TEAM, SportType.TRACK_TEAM],
            "gender": None,
            "sport_day": SportDay.DAY_01,
        }
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(("sport_type", "day"), [("team,relay", None), (None, "D-09")])
async def test_list_events_rejects_unknown_filters(
    filters: list[dict[str, Any]], sport_type: str | None, day: str | None
) -> None:
    with pytest.raises(HTTPException) as exc_info:
        await event_routes.list_events(category=None, type=sport_type, gender=None, day=day)

    assert exc_info.value.status_code == 400
    assert filters == []
