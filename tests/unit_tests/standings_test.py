from rcl.config import config
from rcl.logic.standings import derive_tournament_standings, get_winner_and_loser
from rcl.models.db.match import BracketRound, MatchWithClubs
from rcl.utils.id_types import ClubCode, MatchId, SportId


def _match(
    match_id: int,
    round_id: int,
    team1: tuple[str, str] | None,
    team2: tuple[str, str] | None,
    score1: int = 0,
    score2: int = 0,
) -> MatchWithClubs:
    return MatchWithClubs(
        match_id=MatchId(match_id),
        sport_id=SportId(1),
        round_id=round_id,
        match_order=match_id,
        team1_score=score1,
        team2_score=score2,
        team1_club_id=ClubCode(team1[0]) if team1 else None,
        team1_club_name=team1[1] if team1 else None,
        team2_club_id=ClubCode(team2[0]) if team2 else None,
        team2_club_name=team2[1] if team2 else None,
    )


A = ("A", "Club A")
B = ("B", "Club B")
C = ("C", "Club C")
D = ("D", "Club D")
E = ("E", "Club E")
F = ("F", "Club F")


def _places(matches: list[MatchWithClubs]) -> list[tuple[str, int, int]]:
    return [
        (row.club_id, row.place, row.points) for row in derive_tournament_standings(matches)
    ]


def test_empty_bracket_has_no_standings() -> None:
    assert derive_tournament_standings([]) == []


def test_tie_goes_to_side_two() -> None:
    winner, loser = get_winner_and_loser(_match(1, BracketRound.FINALS, A, B, 2, 2))
    assert winner.club_id == "B"
    assert loser.club_id == "A"


def test_finals_and_consolation_finals_decide_top_four() -> None:
    matches = [
        _match(1, BracketRound.SEMI_FINALS, A, C, 3, 1),
        _match(2, BracketRound.SEMI_FINALS, B, D, 2, 0),
        _match(3, BracketRound.CONSOLATION_FINALS, C, D, 0, 4),
        _match(4, BracketRound.FINALS, A, B, 1, 5),
    ]

    assert _places(matches) == [
        ("B", 1, config.first_place_points),
        ("A", 2, config.second_place_points),
        ("D", 3, config.third_place_points),
        ("C", 4, config.participation_points_per_sport),
    ]


def test_semi_final_losers_are_compared_without_consolation_finals() -> None:
    matches = [
        _match(1, BracketRound.SEMI_FINALS, A, C, 3, 1),
        _match(2, BracketRound.SEMI_FINALS, D, B, 2, 5),
        _match(3, BracketRound.FINALS, A, B, 4, 3),
    ]

    assert _places(matches) == [
        ("A", 1, config.first_place_points),
        ("B", 2, config.second_place_points),
        ("D", 3, config.third_place_points),
        ("C", 4, config.participation_points_per_sport),
    ]


def test_semi_final_losers_tied_on_score_keep_match_order() -> None:
    matches = [
        _match(1, BracketRound.SEMI_FINALS, A, C, 3, 1),
        _match(2, BracketRound.SEMI_FINALS, B, D, 3, 1),
    ]

    assert _places(matches)[:2] == [
        ("C", 3, config.third_place_points),
        ("D", 4, config.participation_points_per_sport),
    ]


def test_unplayed_finals_skips_first_and_second_place() -> None:
    matches = [
        _match(1, BracketRound.SEMI_FINALS, A, C, 3, 1),
        _match(2, BracketRound.SEMI_FINALS, B, D, 2, 0),
        _match(3, BracketRound.FINALS, A, B, 0, 0),
    ]

    places = _places(matches)
    assert [place for _, place, _ in places] == [3, 4, 5, 6]
    assert places[0][0] == "C"
    assert places[1][0] == "D"
    # A scored 3 in total, B scored 2.
    assert places[2] == ("A", 5, config.participation_points_per_sport)
    assert places[3] == ("B", 6, config.participation_points_per_sport)


def test_remaining_clubs_are_ordered_by_total_score() -> None:
    matches = [
        _match(1, BracketRound.QUARTER_FINALS, A, E, 4, 1),
        _match(2, BracketRound.QUARTER_FINALS, B, F, 4, 3),
        _match(3, BracketRound.QUARTER_FINALS, C, ("G", "Club G"), 5, 0),
        _match(4, BracketRound.QUARTER_FINALS, D, ("H", "Club H"), 2, 1),
        _match(5, BracketRound.SEMI_FINALS, A, C, 3, 1),
        _match(6, BracketRound.SEMI_FINALS, B, D, 2, 0),
        _match(7, BracketRound.CONSOLATION_FINALS, C, D, 2, 1),
        _match(8, BracketRound.FINALS, A, B, 3, 1),
    ]

    places = _places(matches)
    assert [club for club, _, _ in places] == ["A", "B", "C", "D", "F", "E", "H", "G"]
    assert [place for _, place, _ in places] == list(range(1, 9))


def test_placeholder_teams_are_never_ranked() -> None:
    matches = [
        _match(1, BracketRound.SEMI_FINALS, A, ("X", "TBD"), 3, 0),
        _match(2, BracketRound.SEMI_FINALS, B, None, 1, 0),
        _match(3, BracketRound.FINALS, A, B, 2, 1),
    ]

    assert _places(matches) == [
        ("A", 1, config.first_place_points),
        ("B", 2, config.second_place_points),
    ]


def test_every_club_is_placed_once() -> None:
    matches = [
        _match(1, BracketRound.SEMI_FINALS, A, C, 3, 1),
        _match(2, BracketRound.SEMI_FINALS, B, D, 2, 0),
        _match(3, BracketRound.CONSOLATION_FINALS, C, D, 1, 0),
        _match(4, BracketRound.FINALS, A, B, 2, 1),
    ]

    standings = derive_tournament_standings(matches)
    assert len({row.club_id for row in standings}) == len(standings)
    assert len({row.place for row in standings}) == len(standings)
