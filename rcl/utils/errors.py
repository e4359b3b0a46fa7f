from collections.abc import Iterator
from contextlib import contextmanager
from enum import auto

from asyncpg.exceptions import ForeignKeyViolationError, UniqueViolationError
from fastapi import HTTPException
from starlette import status

from rcl.utils.logging import logger
from rcl.utils.types import EnumAutoStr


class UniqueIndex(EnumAutoStr):
    clubs_club_id_key = auto()
    registrations_rmis_id_sport_id_key = auto()
    day_registrations_rmis_id_sport_day_key = auto()
    teams_sport_id_club_id_key = auto()


class ForeignKey(EnumAutoStr):
    club_points_club_id_fkey = auto()
    club_points_sport_id_fkey = auto()
    registrations_rmis_id_fkey = auto()
    registrations_sport_id_fkey = auto()
    registrations_club_id_fkey = auto()
    day_registrations_rmis_id_fkey = auto()
    matches_team1_id_fkey = auto()
    matches_team2_id_fkey = auto()
    players_club_id_fkey = auto()
    teams_club_id_fkey = auto()
    teams_sport_id_fkey = auto()


unique_index_violation_error_lookup = {
    UniqueIndex.clubs_club_id_key: "A club with this club ID already exists",
    UniqueIndex.registrations_rmis_id_sport_id_key: "This member is already registered for this sport",
    UniqueIndex.day_registrations_rmis_id_sport_day_key: "Player already registered for this sport day",
    UniqueIndex.teams_sport_id_club_id_key: "Team already exists for this club and sport",
}


foreign_key_violation_error_lookup = {
    ForeignKey.club_points_club_id_fkey: "Club does not exist",
    ForeignKey.club_points_sport_id_fkey: "Sport does not exist",
    ForeignKey.registrations_rmis_id_fkey: "Player does not exist",
    ForeignKey.registrations_sport_id_fkey: "Sport does not exist",
    ForeignKey.registrations_club_id_fkey: "Club does not exist",
    ForeignKey.day_registrations_rmis_id_fkey: "Player does not exist",
    ForeignKey.matches_team1_id_fkey: "Team is part of a bracket",
    ForeignKey.matches_team2_id_fkey: "Team is part of a bracket",
    ForeignKey.players_club_id_fkey: "Club does not exist",
    ForeignKey.teams_club_id_fkey: "Club does not exist",
    ForeignKey.teams_sport_id_fkey: "Sport does not exist",
}


@contextmanager
def check_unique_constraint_violation(
    expected_violations: set[UniqueIndex],
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> Iterator[None]:
    try:
        yield
    except UniqueViolationError as exc:
        constraint_name = exc.as_dict()["constraint_name"]
        assert constraint_name, "UniqueViolationError occurred but no constraint_name defined"
        assert constraint_name in UniqueIndex.__members__, "Unknown UniqueViolationError occurred"
        constraint = UniqueIndex[constraint_name]
        assert constraint in unique_index_violation_error_lookup, (
            "Unknown UniqueViolationError occurred"
        )

        if constraint not in expected_violations:
            logger.exception("Unexpected unique constraint violation: %s", constraint_name)

        raise HTTPException(
            status_code=status_code,
            detail=unique_index_violation_error_lookup[constraint],
        ) from exc


@contextmanager
def check_foreign_key_violation(expected_violations: set[ForeignKey]) -> Iterator[None]:
    try:
        yield
    except ForeignKeyViolationError as exc:
        constraint_name = exc.as_dict()["constraint_name"]
        assert constraint_name, "ForeignKeyViolationError occurred but no constraint_name defined"
        assert constraint_name in ForeignKey.__members__, "Unknown ForeignKeyViolationError occurred"
        constraint = ForeignKey[constraint_name]
        assert constraint in foreign_key_violation_error_lookup, (
            "Unknown ForeignKeyViolationError occurred"
        )

        if constraint not in expected_violations:
            logger.exception("Unexpected foreign key violation: %s", constraint_name)

        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=foreign_key_violation_error_lookup[constraint],
        ) from exc
