from collections.abc import Sequence
from dataclasses import dataclass

from rcl.config import config
from rcl.models.db.match import BracketRound, MatchWithClubs
from rcl.models.standings import StandingRow
from rcl.utils.id_types import ClubCode

PLACEHOLDER_CLUB_NAME = "TBD"


@dataclass(frozen=True)
class MatchSide:
    club_id: ClubCode | None
    club_name: str | None
    score: int

    @property
    def is_rankable(self) -> bool:
        return (
            self.club_id is not None
            and bool(self.club_name)
            and self.club_name != PLACEHOLDER_CLUB_NAME
        )


def get_match_sides(match: MatchWithClubs) -> tuple[MatchSide, MatchSide]:
    return (
        MatchSide(match.team1_club_id, match.team1_club_name, match.team1_score or 0),
        MatchSide(match.team2_club_id, match.team2_club_name, match.team2_score or 0),
    )


def match_was_played(match: MatchWithClubs) -> bool:
    return (match.team1_score or 0) > 0 or (match.team2_score or 0) > 0


def get_winner_and_loser(match: MatchWithClubs) -> tuple[MatchSide, MatchSide]:
    """Side 1 wins only on a strictly higher score, a tie goes to side 2."""
    side1, side2 = get_match_sides(match)
    return (side1, side2) if side1.score > side2.score else (side2, side1)


def _standing(side: MatchSide, place: int, points: int) -> StandingRow:
    assert side.club_id is not None and side.club_name is not None
    return StandingRow(club_id=side.club_id, club_name=side.club_name, place=place, points=points)


def _podium_from_final(
    match: MatchWithClubs | None, winner_place: int, winner_points: int, loser_points: int
) -> list[StandingRow]:
    if match is None or not match_was_played(match):
        return []

    winner, loser = get_winner_and_loser(match)
    standings = []
    if winner.is_rankable:
        standings.append(_standing(winner, winner_place, winner_points))
    if loser.is_rankable:
        standings.append(_standing(loser, winner_place + 1, loser_points))
    return standings


def _third_and_fourth_from_semi_finals(
    semi_finals: list[MatchWithClubs],
) -> list[StandingRow]:
    if len(semi_finals) != 2:
        return []

    semi_losers: list[MatchSide] = []
    for match in semi_finals:
        if not match_was_played(match):
            continue

        side1, side2 = get_match_sides(match)
        loser = side1 if side1.score < side2.score else side2
        if loser.is_rankable:
            # The loser's own score is the lower of the two.
            semi_losers.append(loser)

    if len(semi_losers) != 2:
        return []

    semi_losers.sort(key=lambda side: side.score, reverse=True)
    return [
        _standing(semi_losers[0], 3, config.third_place_points),
        _standing(semi_losers[1], 4, config.participation_points_per_sport),
    ]


def _total_scores_per_club(matches: Sequence[MatchWithClubs]) -> dict[ClubCode, tuple[str, int]]:
    totals: dict[ClubCode, tuple[str, int]] = {}
    for match in matches:
        for side in get_match_sides(match):
            if not side.is_rankable:
                continue

            assert side.club_id is not None and side.club_name is not None
            club_name, total = totals.get(side.club_id, (side.club_name, 0))
            totals[side.club_id] = (club_name, total + side.score)
    return totals


def derive_tournament_standings(matches: Sequence[MatchWithClubs]) -> list[StandingRow]:
    """
    Derive the final placement of clubs from a single-elimination bracket.

    The finals decide places 1 and 2. Places 3 and 4 come from the consolation finals, or,
    when there is none, from comparing the scores of the two semi-final losers. All other
    clubs follow from place 5 onward, ordered by their total score over all matches.
    """
    if len(matches) < 1:
        return []

    finals = next((m for m in matches if m.round_id == BracketRound.FINALS), None)
    consolation_finals = next(
        (m for m in matches if m.round_id == BracketRound.CONSOLATION_FINALS), None
    )
    semi_finals = [m for m in matches if m.round_id == BracketRound.SEMI_FINALS]

    standings = _podium_from_final(
        finals, 1, config.first_place_points, config.second_place_points
    )

    if consolation_finals is not None:
        standings += _podium_from_final(
            consolation_finals,
            3,
            config.third_place_points,
            config.participation_points_per_sport,
        )
    else:
        standings += _third_and_fourth_from_semi_finals(semi_finals)

    ranked_club_ids = {standing.club_id for standing in standings}
    remaining_clubs = [
        (club_id, club_name, total)
        for club_id, (club_name, total) in _total_scores_per_club(matches).items()
        if club_id not in ranked_club_ids
    ]
    remaining_clubs.sort(key=lambda club: club[2], reverse=True)

    standings += [
        StandingRow(
            club_id=club_id,
            club_name=club_name,
            place=5 + index,
            points=config.participation_points_per_sport,
        )
        for index, (club_id, club_name, _) in enumerate(remaining_clubs)
    ]
    return standings
