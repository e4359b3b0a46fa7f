from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.permission import Permission, PermissionBody
from rcl.schema import permissions
from rcl.utils.db import fetch_all_parsed, fetch_one_parsed
from rcl.utils.id_types import RmisId


async def get_permissions() -> list[Permission]:
    return await fetch_all_parsed(
        database, Permission, permissions.select().order_by(permissions.c.created)
    )


async def get_permission(rmis_id: RmisId) -> Permission | None:
    return await fetch_one_parsed(
        database, Permission, permissions.select().where(permissions.c.rmis_id == rmis_id)
    )


async def sql_upsert_permission(body: PermissionBody) -> Permission:
    query = """
        INSERT INTO permissions (rmis_id, permission_level, card_name, created)
        VALUES (:rmis_id, :permission_level, :card_name, :created)
        ON CONFLICT (rmis_id) DO UPDATE
        SET permission_level = EXCLUDED.permission_level, card_name = EXCLUDED.card_name
        RETURNING *
        """
    result = await database.fetch_one(
        query=query,
        values={
            "rmis_id": body.rmis_id,
            "permission_level": body.permission_level.value,
            "card_name": body.card_name,
            "created": datetime_utc.now(),
        },
    )
    assert result is not None
    return Permission.model_validate(result)


async def sql_delete_permission(rmis_id: RmisId) -> bool:
    query = "DELETE FROM permissions WHERE rmis_id = :rmis_id RETURNING rmis_id"
    deleted = await database.fetch_val(query=query, values={"rmis_id": rmis_id})
    return deleted is not None
