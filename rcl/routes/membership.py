from fastapi import APIRouter, Depends

from rcl.config import config
from rcl.logic.membership import build_club_membership_view, get_deductions_to_apply
from rcl.models.db.user import SessionUser
from rcl.models.membership import MembershipRulesResult
from rcl.routes.auth import admin_authenticated
from rcl.routes.models import MembershipDataResponse, MembershipRulesResponse
from rcl.sql.club_points import sql_replace_membership_deductions
from rcl.sql.players import get_membership_counts_per_club
from rcl.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)


@router.get("/admin/membership_data", response_model=MembershipDataResponse)
async def get_membership_data(
    _: SessionUser = Depends(admin_authenticated),
) -> MembershipDataResponse:
    counts = await get_membership_counts_per_club()
    return MembershipDataResponse(data=[build_club_membership_view(club) for club in counts])


@router.post("/admin/membership_rules/apply", response_model=MembershipRulesResponse)
async def apply_membership_rules(
    user: SessionUser = Depends(admin_authenticated),
) -> MembershipRulesResponse:
    deductions = get_deductions_to_apply(await get_membership_counts_per_club())
    await sql_replace_membership_deductions(deductions)

    total_points = sum(deduction.deduction_points for deduction in deductions)
    logger.info(
        "%s applied membership rules: %s clubs, %s points", user.email, len(deductions), total_points
    )
    return MembershipRulesResponse(
        data=MembershipRulesResult(
            message=f"Membership rules applied to {len(deductions)} club(s)",
            deductions_applied=deductions,
            total_deductions=len(deductions),
            total_points=total_points,
        )
    )
