from typing import Literal

from pydantic import BaseModel

from rcl.utils.id_types import ClubCode

DeductionSeverity = Literal["Critical", "Medium", "Low", "None"]


class ClubMembershipCounts(BaseModel):
    club_id: ClubCode
    club_name: str
    general_members_count: int
    prospective_members_count: int
    total_players_count: int


class ClubMembershipView(ClubMembershipCounts):
    general_member_percentage: float
    below_warning_threshold: bool
    deduction_points: int
    severity: DeductionSeverity


class AppliedDeduction(BaseModel):
    club_id: ClubCode
    club_name: str
    general_member_percentage: float
    deduction_points: int


class MembershipRulesResult(BaseModel):
    message: str
    deductions_applied: list[AppliedDeduction]
    total_deductions: int
    total_points: int
