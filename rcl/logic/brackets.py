from collections.abc import Sequence
from itertools import groupby

from rcl.logic.standings import PLACEHOLDER_CLUB_NAME, match_was_played
from rcl.models.brackets import BracketRoundView, BracketSeed, BracketTeam
from rcl.models.db.match import ROUND_TITLES, MatchWithClubs


def get_round_title(round_id: int) -> str:
    return next(
        (title for round_, title in ROUND_TITLES.items() if round_.value == round_id),
        f"Round {round_id}",
    )


def build_bracket_seed(match: MatchWithClubs) -> BracketSeed:
    return BracketSeed(
        id=match.match_id,
        date=match.start_time.isoformat() if match.start_time is not None else "TBD",
        teams=(
            BracketTeam(
                name=match.team1_club_name or PLACEHOLDER_CLUB_NAME,
                id=match.team1_id,
                seed=match.team1_seed_number,
            ),
            BracketTeam(
                name=match.team2_club_name or PLACEHOLDER_CLUB_NAME,
                id=match.team2_id,
                seed=match.team2_seed_number,
            ),
        ),
        score=(match.team1_score or 0, match.team2_score or 0),
        status="completed" if match_was_played(match) else "scheduled",
        round_id=match.round_id,
        match_order=match.match_order,
    )


def build_bracket_rounds(matches: Sequence[MatchWithClubs]) -> list[BracketRoundView]:
    ordered = sorted(matches, key=lambda match: (match.round_id, match.match_order))
    return [
        BracketRoundView(
            title=get_round_title(round_id),
            seeds=[build_bracket_seed(match) for match in round_matches],
        )
        for round_id, round_matches in groupby(ordered, key=lambda match: match.round_id)
    ]
