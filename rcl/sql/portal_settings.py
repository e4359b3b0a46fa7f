from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.portal_setting import PortalSetting


async def get_portal_setting(setting_key: str) -> PortalSetting | None:
    query = "SELECT * FROM portal_settings WHERE setting_key = :setting_key"
    result = await database.fetch_one(query=query, values={"setting_key": setting_key})
    return PortalSetting.model_validate(result) if result is not None else None


async def sql_upsert_portal_setting(
    setting_key: str, is_enabled: bool, updated_by: str | None
) -> PortalSetting:
    query = """
        INSERT INTO portal_settings (setting_key, is_enabled, updated_by, updated)
        VALUES (:setting_key, :is_enabled, :updated_by, :updated)
        ON CONFLICT (setting_key) DO UPDATE
        SET
            is_enabled = EXCLUDED.is_enabled,
            updated_by = EXCLUDED.updated_by,
            updated = EXCLUDED.updated
        RETURNING *
        """
    result = await database.fetch_one(
        query=query,
        values={
            "setting_key": setting_key,
            "is_enabled": is_enabled,
            "updated_by": updated_by,
            "updated": datetime_utc.now(),
        },
    )
    assert result is not None
    return PortalSetting.model_validate(result)
