from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.club_points import (
    ClubPointBody,
    ClubPointInsertable,
    ClubPointWithClub,
    StandingAward,
)
from rcl.models.membership import AppliedDeduction
from rcl.models.track_events import TrackClubAward
from rcl.schema import club_points
from rcl.utils.id_types import ClubCode, ClubPointId, SportId
from rcl.utils.types import dict_without_none


async def get_club_points(sport_id: SportId | None = None) -> list[ClubPointWithClub]:
    sport_filter = "WHERE cp.sport_id = :sport_id" if sport_id is not None else ""
    query = f"""
        SELECT cp.*, c.club_name, c.category
        FROM club_points cp
        JOIN clubs c ON c.club_id = cp.club_id
        {sport_filter}
        ORDER BY cp.points DESC, cp.point_id
        """
    result = await database.fetch_all(
        query=query, values=dict_without_none({"sport_id": sport_id})
    )
    return [ClubPointWithClub.model_validate(point) for point in result]


async def sql_create_club_point(body: ClubPointBody) -> ClubPointId:
    new_id = await database.execute(
        query=club_points.insert(),
        values=ClubPointInsertable(**body.model_dump(), created=datetime_utc.now()).model_dump(),
    )
    return ClubPointId(new_id)


async def sql_delete_club_point(point_id: ClubPointId) -> bool:
    query = "DELETE FROM club_points WHERE point_id = :point_id RETURNING point_id"
    deleted = await database.fetch_val(query=query, values={"point_id": point_id})
    return deleted is not None


async def sql_update_standing_points(sport_id: SportId, standing: StandingAward) -> int:
    """Rewrite the existing rows of a club in a sport, returns the number of rows touched."""
    query = """
        WITH updated AS (
            UPDATE club_points
            SET points = :points, place = :place
            WHERE sport_id = :sport_id AND club_id = :club_id
            RETURNING point_id
        )
        SELECT COUNT(*) FROM updated
        """
    return await database.fetch_val(
        query=query,
        values={
            "sport_id": sport_id,
            "club_id": standing.club_id,
            "points": standing.points,
            "place": standing.place,
        },
    )


async def get_club_ids_with_place(place: int) -> set[ClubCode]:
    query = "SELECT DISTINCT club_id FROM club_points WHERE place = :place"
    result = await database.fetch_all(query=query, values={"place": place})
    return {ClubCode(row["club_id"]) for row in result}


async def get_awarded_sport_ids(club_id: ClubCode, place: int) -> set[SportId]:
    query = """
        SELECT DISTINCT sport_id
        FROM club_points
        WHERE club_id = :club_id AND place = :place AND sport_id IS NOT NULL
        """
    result = await database.fetch_all(query=query, values={"club_id": club_id, "place": place})
    return {SportId(row["sport_id"]) for row in result}


async def sql_insert_participation_points(
    club_id: ClubCode, sport_ids: list[SportId], place: int, points: int
) -> None:
    created = datetime_utc.now()
    await database.execute_many(
        query=club_points.insert(),
        values=[
            ClubPointInsertable(
                club_id=club_id, sport_id=sport_id, points=points, place=place, created=created
            ).model_dump()
            for sport_id in sport_ids
        ],
    )


async def sql_replace_membership_deductions(deductions: list[AppliedDeduction]) -> None:
    created = datetime_utc.now()
    async with database.transaction():
        await database.execute(
            "DELETE FROM club_points WHERE sport_id IS NULL AND place IS NULL"
        )
        if deductions:
            await database.execute_many(
                query=club_points.insert(),
                values=[
                    ClubPointInsertable(
                        club_id=deduction.club_id,
                        points=deduction.deduction_points,
                        created=created,
                    ).model_dump()
                    for deduction in deductions
                ],
            )


async def sql_replace_sport_points(sport_id: SportId, awards: list[TrackClubAward]) -> None:
    created = datetime_utc.now()
    async with database.transaction():
        await database.execute(
            "DELETE FROM club_points WHERE sport_id = :sport_id", values={"sport_id": sport_id}
        )
        if awards:
            await database.execute_many(
                query=club_points.insert(),
                values=[
                    ClubPointInsertable(
                        club_id=award.club_id,
                        sport_id=sport_id,
                        points=award.points,
                        place=award.best_place,
                        created=created,
                    ).model_dump()
                    for award in awards
                ],
            )
