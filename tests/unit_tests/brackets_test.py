from rcl.logic.brackets import build_bracket_rounds, get_round_title
from rcl.models.db.match import BracketRound, MatchWithClubs
from rcl.utils.dummy_records import DUMMY_MOCK_TIME
from rcl.utils.id_types import ClubCode, MatchId, SportId, TeamId


def _match(match_id: int, round_id: int, match_order: int, **kwargs: object) -> MatchWithClubs:
    return MatchWithClubs.model_validate(
        {
            "match_id": MatchId(match_id),
            "sport_id": SportId(1),
            "round_id": round_id,
            "match_order": match_order,
            **kwargs,
        }
    )


def test_round_titles() -> None:
    assert get_round_title(BracketRound.FIRST_ROUND) == "1st Round"
    assert get_round_title(BracketRound.SEMI_FINALS) == "Semi Finals"
    assert get_round_title(BracketRound.FINALS) == "Finals"
    assert get_round_title(7) == "Round 7"


def test_rounds_are_grouped_and_sorted() -> None:
    matches = [
        _match(4, BracketRound.FINALS, 0),
        _match(2, BracketRound.SEMI_FINALS, 1),
        _match(1, BracketRound.SEMI_FINALS, 0),
    ]

    rounds = build_bracket_rounds(matches)

    assert [round_.title for round_ in rounds] == ["Semi Finals", "Finals"]
    assert [seed.id for seed in rounds[0].seeds] == [1, 2]
    assert [seed.id for seed in rounds[1].seeds] == [4]


def test_seed_of_played_match() -> None:
    [round_] = build_bracket_rounds(
        [
            _match(
                1,
                BracketRound.QUARTER_FINALS,
                0,
                team1_id=TeamId(11),
                team2_id=TeamId(12),
                team1_score=3,
                team2_score=1,
                team1_club_id=ClubCode("A"),
                team1_club_name="Club A",
                team1_seed_number=1,
                team2_club_id=ClubCode("B"),
                team2_club_name="Club B",
                team2_seed_number=8,
                start_time=DUMMY_MOCK_TIME,
            )
        ]
    )

    [seed] = round_.seeds
    assert seed.status == "completed"
    assert seed.score == (3, 1)
    assert seed.date == DUMMY_MOCK_TIME.isoformat()
    assert seed.teams[0].name == "Club A"
    assert seed.teams[0].id == 11
    assert seed.teams[0].seed == 1
    assert seed.teams[1].name == "Club B"
    assert seed.teams[1].seed == 8


def test_seed_of_unscheduled_match() -> None:
    [round_] = build_bracket_rounds([_match(1, BracketRound.FINALS, 0)])

    [seed] = round_.seeds
    assert seed.status == "scheduled"
    assert seed.date == "TBD"
    assert seed.score == (0, 0)
    assert [team.name for team in seed.teams] == ["TBD", "TBD"]
