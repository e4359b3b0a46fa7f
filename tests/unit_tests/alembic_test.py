from pathlib import Path

import pytest
from alembic.config import Config

from rcl.config import config
from rcl.utils import alembic as alembic_utils


def test_run_migrations_upgrades_to_head(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    lock_path = tmp_path / "migrations.lock"
    upgrades: list[tuple[str | None, str]] = []

    def fake_upgrade(alembic_config: Config, revision: str) -> None:
        assert lock_path.exists()
        upgrades.append((alembic_config.config_file_name, revision))

    monkeypatch.setattr(config, "migration_lock_path", str(lock_path))
    monkeypatch.setattr(alembic_utils.command, "upgrade", fake_upgrade)

    alembic_utils.alembic_run_migrations()

    assert upgrades == [(str(alembic_utils.ALEMBIC_INI_PATH), "head")]


def test_alembic_config_points_at_migrations() -> None:
    alembic_config = alembic_utils.get_alembic_config()

    assert alembic_utils.ALEMBIC_INI_PATH.exists()
    assert Path(str(alembic_config.get_main_option("script_location"))).name == "alembic"
