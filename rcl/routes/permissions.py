from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from rcl.config import config
from rcl.models.db.permission import PermissionBody
from rcl.models.db.user import SessionUser
from rcl.routes.auth import super_admin_authenticated
from rcl.routes.models import PermissionResponse, PermissionsResponse, SuccessResponse
from rcl.sql.permissions import get_permissions, sql_delete_permission, sql_upsert_permission
from rcl.utils.id_types import RmisId

router = APIRouter(prefix=config.api_prefix)


@router.get("/admin/permissions", response_model=PermissionsResponse)
async def list_permissions(
    _: SessionUser = Depends(super_admin_authenticated),
) -> PermissionsResponse:
    return PermissionsResponse(data=await get_permissions())


@router.post("/admin/permissions", response_model=PermissionResponse)
async def upsert_permission(
    body: PermissionBody, _: SessionUser = Depends(super_admin_authenticated)
) -> PermissionResponse:
    return PermissionResponse(data=await sql_upsert_permission(body))


@router.delete("/admin/permissions/{rmis_id}", response_model=SuccessResponse)
async def delete_permission(
    rmis_id: RmisId, _: SessionUser = Depends(super_admin_authenticated)
) -> SuccessResponse:
    if not await sql_delete_permission(rmis_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Permission not found")
    return SuccessResponse()
