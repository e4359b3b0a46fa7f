import fcntl
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from alembic.config import Config

from alembic import command
from rcl.config import config
from rcl.utils.logging import logger

ALEMBIC_INI_PATH = Path(__file__).resolve().parents[2] / "alembic.ini"


@contextmanager
def migration_lock(lock_path: str) -> Iterator[None]:
    with open(lock_path, "w", encoding="utf-8") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_file, fcntl.LOCK_UN)


def get_alembic_config() -> Config:
    return Config(str(ALEMBIC_INI_PATH))


def alembic_run_migrations(revision: str = "head") -> None:
    with migration_lock(config.migration_lock_path):
        logger.info("Upgrading league schema to %s", revision)
        command.upgrade(get_alembic_config(), revision)
