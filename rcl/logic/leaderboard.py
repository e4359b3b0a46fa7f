from collections.abc import Sequence

from rcl.models.db.club import Club
from rcl.models.leaderboard import (
    ClubDetails,
    ClubDetailsClub,
    ClubDetailsSummary,
    ClubPointEntry,
    LeaderboardPagination,
    LeaderboardRow,
    SportBreakdown,
    SportInfo,
    SportPointEntry,
)
from rcl.utils.id_types import SportId


def sort_leaderboard(rows: Sequence[LeaderboardRow]) -> list[LeaderboardRow]:
    return sorted(rows, key=lambda row: (-row.total_points, row.club_name))


def assign_competition_ranks(rows: Sequence[LeaderboardRow]) -> list[LeaderboardRow]:
    """
    Rank clubs by total points, highest first. Clubs with equal totals share a rank and the
    rank after a tie skips accordingly (1, 2, 2, 4).
    """
    ranked: list[LeaderboardRow] = []
    for index, row in enumerate(sort_leaderboard(rows)):
        if index > 0 and row.total_points == ranked[-1].total_points:
            rank = ranked[-1].rank
        else:
            rank = index + 1
        ranked.append(row.model_copy(update={"rank": rank}))
    return ranked


def build_pagination(limit: int | None, offset: int, total: int) -> LeaderboardPagination:
    return LeaderboardPagination(
        limit=limit,
        offset=offset,
        has_more=limit is not None and offset + limit < total,
    )


def build_club_details(club: Club, entries: Sequence[ClubPointEntry]) -> ClubDetails:
    """Group a club's point entries per sport, deductions without a sport form their own group."""
    by_sport: dict[SportId | None, SportBreakdown] = {}
    for entry in entries:
        breakdown = by_sport.get(entry.sport_id)
        if breakdown is None:
            sport_info = (
                SportInfo(
                    sport_name=entry.sport_name,
                    category=entry.sport_category,
                    gender_type=entry.gender_type,
                    sport_type=entry.sport_type,
                )
                if entry.sport_name is not None
                else None
            )
            breakdown = SportBreakdown(
                sport_id=entry.sport_id,
                sport_info=sport_info,
                entries=[],
                total_points=0,
                entries_count=0,
            )
            by_sport[entry.sport_id] = breakdown

        breakdown.entries.append(
            SportPointEntry(point_id=entry.point_id, points=entry.points, place=entry.place)
        )
        breakdown.total_points += entry.points
        breakdown.entries_count += 1

    for breakdown in by_sport.values():
        breakdown.entries.sort(key=lambda point: point.points, reverse=True)

    sports_breakdown = sorted(
        by_sport.values(), key=lambda breakdown: breakdown.total_points, reverse=True
    )
    return ClubDetails(
        club=ClubDetailsClub(
            club_id=club.club_id, club_name=club.club_name, category=club.category
        ),
        summary=ClubDetailsSummary(
            total_points=sum(entry.points for entry in entries),
            total_entries=len(entries),
            sports_count=len(sports_breakdown),
        ),
        sports_breakdown=sports_breakdown,
    )
