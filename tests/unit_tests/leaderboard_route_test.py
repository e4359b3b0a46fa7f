import pytest
from starlette.exceptions import HTTPException
from starlette.responses import Response

from rcl.models.db.club import Club
from rcl.models.db.match import BracketRound, MatchWithClubs
from rcl.models.leaderboard import ClubPointEntry, LeaderboardRow
from rcl.routes import leaderboard as leaderboard_routes
from rcl.utils.dummy_records import DUMMY_CLUB1
from rcl.utils.id_types import ClubCode, ClubPointId, MatchId, SportId


@pytest.mark.asyncio
async def test_tournament_standings_requires_sport_id() -> None:
    with pytest.raises(HTTPException) as exc_info:
        await leaderboard_routes.get_tournament_standings(None)

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_tournament_standings(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_matches(sport_id: SportId) -> list[MatchWithClubs]:
        return [
            MatchWithClubs(
                match_id=MatchId(1),
                sport_id=sport_id,
                round_id=BracketRound.FINALS,
                team1_score=2,
                team2_score=1,
                team1_club_id=ClubCode("A"),
                team1_club_name="Club A",
                team2_club_id=ClubCode("B"),
                team2_club_name="Club B",
            )
        ]

    monkeypatch.setattr(leaderboard_routes, "get_matches_with_clubs", fake_matches)

    response = await leaderboard_routes.get_tournament_standings(SportId(3))

    assert [(row.club_id, row.place) for row in response.data.standings] == [("A", 1), ("B", 2)]


@pytest.mark.asyncio
async def test_aggregated_leaderboard_pagination(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_leaderboard(
        category: str | None, limit: int | None, offset: int
    ) -> list[LeaderboardRow]:
        assert (category, limit, offset) == ("community", 1, 1)
        return [
            LeaderboardRow(
                club_id=ClubCode("B"),
                club_name="Club B",
                category="community",
                total_points=80,
                entries_count=3,
                rank=1,
            )
        ]

    async def fake_count(_: str | None) -> int:
        return 3

    monkeypatch.setattr(leaderboard_routes, "get_aggregated_leaderboard", fake_leaderboard)
    monkeypatch.setattr(leaderboard_routes, "get_leaderboard_count", fake_count)

    response = await leaderboard_routes.get_leaderboard("community", 1, 1)

    assert response.data.total == 3
    assert response.data.pagination.has_more is True
    assert response.data.clubs[0].rank == 1


@pytest.mark.asyncio
async def test_club_details_sets_no_cache_headers(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_club(_: ClubCode) -> Club:
        return DUMMY_CLUB1

    async def fake_entries(_: ClubCode) -> list[ClubPointEntry]:
        return [ClubPointEntry(point_id=ClubPointId(1), points=-25)]

    monkeypatch.setattr(leaderboard_routes, "get_club_by_code", fake_club)
    monkeypatch.setattr(leaderboard_routes, "get_club_point_entries", fake_entries)

    response = Response()
    details = await leaderboard_routes.get_club_details(DUMMY_CLUB1.club_id, response)

    assert response.headers["cache-control"].startswith("no-store")
    assert details.data.summary.total_points == -25
    assert details.data.sports_breakdown[0].sport_id is None


@pytest.mark.asyncio
async def test_club_details_unknown_club(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_club(_: ClubCode) -> None:
        return None

    monkeypatch.setattr(leaderboard_routes, "get_club_by_code", fake_club)

    with pytest.raises(HTTPException) as exc_info:
        await leaderboard_routes.get_club_details(ClubCode("nope"), Response())

    assert exc_info.value.status_code == 404
