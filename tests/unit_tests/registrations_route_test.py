import pytest
from starlette.exceptions import HTTPException

from rcl.models.db.portal_setting import (
    REGISTRATION_PORTAL_OPEN,
    PortalSetting,
    PortalStatusUpdateBody,
)
from rcl.models.db.registration import (
    DayRegistration,
    DayRegistrationBody,
    Registration,
    RegistrationBody,
)
from rcl.models.sport_day import SportDay
from rcl.routes import day_registrations as day_registration_routes
from rcl.routes import portal_settings as portal_settings_routes
from rcl.routes import registrations as registration_routes
from rcl.utils.dummy_records import DUMMY_ADMIN, DUMMY_MOCK_TIME, DUMMY_PORTAL_USER
from rcl.utils.id_types import ClubCode, DayRegistrationId, RmisId, SportId

BODY = RegistrationBody(
    rmis_id=RmisId("RMIS-9"), sport_id=SportId(3), club_id=ClubCode("RC-KDY")
)


def _window(monkeypatch: pytest.MonkeyPatch, is_open: bool) -> None:
    monkeypatch.setattr(registration_routes, "registration_window_is_open", lambda: is_open)


@pytest.mark.asyncio
async def test_registration_outside_window_is_forbidden_for_portal_users(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _window(monkeypatch, False)

    with pytest.raises(HTTPException) as exc_info:
        await registration_routes.create_registration(BODY, DUMMY_PORTAL_USER)

    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_existing_registration_is_returned(monkeypatch: pytest.MonkeyPatch) -> None:
    _window(monkeypatch, False)
    existing = Registration(**BODY.model_dump(), created=DUMMY_MOCK_TIME)

    async def fake_get_registration(_: RmisId, __: SportId) -> Registration:
        return existing

    monkeypatch.setattr(registration_routes, "get_registration", fake_get_registration)

    # Admins may register players outside the registration window
    response = await registration_routes.create_registration(BODY, DUMMY_ADMIN)

    assert response.data.already_registered is True
    assert response.data.registration == existing


@pytest.mark.asyncio
async def test_new_registration(monkeypatch: pytest.MonkeyPatch) -> None:
    _window(monkeypatch, True)
    created: list[RegistrationBody] = []

    async def fake_get_registration(_: RmisId, __: SportId) -> None:
        return None

    async def fake_create(body: RegistrationBody) -> Registration:
        created.append(body)
        return Registration(**body.model_dump(), created=DUMMY_MOCK_TIME)

    monkeypatch.setattr(registration_routes, "get_registration", fake_get_registration)
    monkeypatch.setattr(registration_routes, "sql_create_registration", fake_create)

    response = await registration_routes.create_registration(BODY, DUMMY_PORTAL_USER)

    assert response.data.already_registered is False
    assert created == [BODY]


def test_registration_window_bounds() -> None:
    config = portal_settings_routes.config
    assert portal_settings_routes.registration_window_is_open(config.registration_opening_date)
    assert portal_settings_routes.registration_window_is_open(config.registration_deadline)
    assert not portal_settings_routes.registration_window_is_open(DUMMY_MOCK_TIME)


def _portal(monkeypatch: pytest.MonkeyPatch, is_open: bool) -> None:
    async def fake_portal_is_open() -> bool:
        return is_open

    monkeypatch.setattr(day_registration_routes, "portal_is_open", fake_portal_is_open)


@pytest.mark.asyncio
async def test_day_registration_when_portal_closed(monkeypatch: pytest.MonkeyPatch) -> None:
    _portal(monkeypatch, False)

    with pytest.raises(HTTPException) as exc_info:
        await day_registration_routes.create_day_registration(
            DayRegistrationBody(rmis_id=RmisId("RMIS-9"), sport_day="D-01")
        )

    assert exc_info.value.status_code == 403
    assert exc_info.value.detail == "portal_closed"


@pytest.mark.asyncio
async def test_day_registration_rejects_unknown_day(monkeypatch: pytest.MonkeyPatch) -> None:
    _portal(monkeypatch, True)

    with pytest.raises(HTTPException) as exc_info:
        await day_registration_routes.create_day_registration(
            DayRegistrationBody(rmis_id=RmisId("RMIS-9"), sport_day="D-07")
        )

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_day_registration_conflict_then_success(monkeypatch: pytest.MonkeyPatch) -> None:
    _portal(monkeypatch, True)
    registrations: dict[tuple[RmisId, SportDay], DayRegistration] = {}

    async def fake_get(rmis_id: RmisId, sport_day: SportDay) -> DayRegistration | None:
        return registrations.get((rmis_id, sport_day))

    async def fake_create(rmis_id: RmisId, sport_day: SportDay) -> DayRegistration:
        registration = DayRegistration(
            id=DayRegistrationId(len(registrations) + 1),
            rmis_id=rmis_id,
            sport_day=sport_day,
            created=DUMMY_MOCK_TIME,
        )
        registrations[(rmis_id, sport_day)] = registration
        return registration

    monkeypatch.setattr(day_registration_routes, "get_day_registration", fake_get)
    monkeypatch.setattr(day_registration_routes, "sql_create_day_registration", fake_create)

    body = DayRegistrationBody(rmis_id=RmisId("RMIS-9"), sport_day="d-02")
    response = await day_registration_routes.create_day_registration(body)
    assert response.data.sport_day is SportDay.DAY_02

    with pytest.raises(HTTPException) as exc_info:
        await day_registration_routes.create_day_registration(body)
    assert exc_info.value.status_code == 409

    status = await day_registration_routes.get_day_registration_status(RmisId("RMIS-9"), "D-02")
    assert status.data.is_registered is True


@pytest.mark.asyncio
async def test_portal_status_without_setting(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_get_setting(_: str) -> PortalSetting | None:
        return None

    monkeypatch.setattr(portal_settings_routes, "get_portal_setting", fake_get_setting)

    response = await portal_settings_routes.get_portal_status()

    assert response.data.is_open is False
    assert response.data.updated_by is None


@pytest.mark.asyncio
async def test_portal_status_update_records_user(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, bool, str | None]] = []

    async def fake_upsert(key: str, is_enabled: bool, updated_by: str | None) -> PortalSetting:
        calls.append((key, is_enabled, updated_by))
        return PortalSetting(
            setting_key=key, is_enabled=is_enabled, updated_by=updated_by, updated=DUMMY_MOCK_TIME
        )

    monkeypatch.setattr(portal_settings_routes, "sql_upsert_portal_setting", fake_upsert)

    response = await portal_settings_routes.update_portal_status(
        PortalStatusUpdateBody(is_open=True), DUMMY_ADMIN
    )

    assert calls == [(REGISTRATION_PORTAL_OPEN, True, DUMMY_ADMIN.name)]
    assert response.data.is_open is True
    assert response.data.updated_by == DUMMY_ADMIN.name


@pytest.mark.asyncio
async def test_delete_registration_outside_window(monkeypatch: pytest.MonkeyPatch) -> None:
    _window(monkeypatch, False)
    deleted: list[tuple[RmisId, SportId]] = []

    async def fake_delete(rmis_id: RmisId, sport_id: SportId) -> bool:
        deleted.append((rmis_id, sport_id))
        return True

    monkeypatch.setattr(registration_routes, "sql_delete_registration", fake_delete)

    with pytest.raises(HTTPException) as exc_info:
        await registration_routes.delete_registration(
            BODY.rmis_id, BODY.sport_id, DUMMY_PORTAL_USER
        )
    assert exc_info.value.status_code == 403
    assert deleted == []

    response = await registration_routes.delete_registration(
        BODY.rmis_id, BODY.sport_id, DUMMY_ADMIN
    )
    assert response.success is True
    assert deleted == [(BODY.rmis_id, BODY.sport_id)]


@pytest.mark.asyncio
async def test_delete_unknown_registration(monkeypatch: pytest.MonkeyPatch) -> None:
    _window(monkeypatch, True)

    async def fake_delete(_: RmisId, __: SportId) -> bool:
        return False

    monkeypatch.setattr(registration_routes, "sql_delete_registration", fake_delete)

    with pytest.raises(HTTPException) as exc_info:
        await registration_routes.delete_registration(
            BODY.rmis_id, BODY.sport_id, DUMMY_PORTAL_USER
        )

    assert exc_info.value.status_code == 404
