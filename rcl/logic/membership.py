from rcl.config import config
from rcl.models.membership import (
    AppliedDeduction,
    ClubMembershipCounts,
    ClubMembershipView,
    DeductionSeverity,
)

MIN_PLAYERS_FOR_DEDUCTION = 5

_SEVERITY_BY_POINTS: dict[int, DeductionSeverity] = {
    -80: "Critical",
    -50: "Medium",
    -25: "Low",
}


def get_general_member_percentage(general_members: int, total_players: int) -> float:
    return general_members / total_players * 100 if total_players > 0 else 0.0


def calculate_deduction_points(percentage: float, total_players: int) -> int:
    """
    Clubs are penalised when too few of their registered players are general members.
    Small clubs are exempt.
    """
    if total_players < MIN_PLAYERS_FOR_DEDUCTION:
        return 0

    if 67 <= percentage < 70:
        return -25
    if 62 <= percentage < 67:
        return -50
    if percentage < 62:
        return -80
    return 0


def get_deduction_severity(points: int) -> DeductionSeverity:
    return _SEVERITY_BY_POINTS.get(points, "None")


def build_club_membership_view(counts: ClubMembershipCounts) -> ClubMembershipView:
    percentage = get_general_member_percentage(
        counts.general_members_count, counts.total_players_count
    )
    deduction_points = calculate_deduction_points(percentage, counts.total_players_count)
    return ClubMembershipView(
        **counts.model_dump(),
        general_member_percentage=percentage,
        below_warning_threshold=(
            counts.total_players_count > 0
            and percentage < config.general_member_warning_threshold
        ),
        deduction_points=deduction_points,
        severity=get_deduction_severity(deduction_points),
    )


def get_deductions_to_apply(clubs: list[ClubMembershipCounts]) -> list[AppliedDeduction]:
    deductions = []
    for counts in clubs:
        view = build_club_membership_view(counts)
        if view.deduction_points != 0:
            deductions.append(
                AppliedDeduction(
                    club_id=view.club_id,
                    club_name=view.club_name,
                    general_member_percentage=view.general_member_percentage,
                    deduction_points=view.deduction_points,
                )
            )
    return deductions
