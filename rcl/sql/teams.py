from heliclockter import datetime_utc

from rcl.database import database
from rcl.models.db.team import Team, TeamBody, TeamInsertable, TeamWithClub
from rcl.models.teams import ClubRegistrationCount
from rcl.schema import teams
from rcl.utils.id_types import ClubCode, SportId, TeamId


async def get_teams_for_sport(sport_id: SportId) -> list[TeamWithClub]:
    query = """
        SELECT t.*, c.club_name
        FROM teams t
        LEFT JOIN clubs c ON c.club_id = t.club_id
        WHERE t.sport_id = :sport_id
        ORDER BY t.seed_number NULLS LAST, c.club_name
        """
    result = await database.fetch_all(query=query, values={"sport_id": sport_id})
    return [TeamWithClub.model_validate(team) for team in result]


async def get_team(team_id: TeamId) -> Team | None:
    query = "SELECT * FROM teams WHERE team_id = :team_id"
    result = await database.fetch_one(query=query, values={"team_id": team_id})
    return Team.model_validate(result) if result is not None else None


async def get_club_registration_counts(
    sport_id: SportId, category: str | None
) -> list[ClubRegistrationCount]:
    """Registrations per club of the sport's category, and whether the club already has a team."""
    query = """
        SELECT
            c.club_id,
            c.club_name,
            COUNT(r.rmis_id) AS registration_count,
            EXISTS (
                SELECT 1 FROM teams t WHERE t.sport_id = :sport_id AND t.club_id = c.club_id
            ) AS has_team
        FROM clubs c
        LEFT JOIN registrations r ON r.club_id = c.club_id AND r.sport_id = :sport_id
        WHERE c.category IS NOT DISTINCT FROM :category
        GROUP BY c.club_id, c.club_name
        ORDER BY c.club_name
        """
    result = await database.fetch_all(
        query=query, values={"sport_id": sport_id, "category": category}
    )
    return [ClubRegistrationCount.model_validate(dict(row._mapping)) for row in result]


async def sql_create_team(team: TeamBody) -> TeamId:
    return await database.execute(
        query=teams.insert(),
        values=TeamInsertable(**team.model_dump(), created=datetime_utc.now()).model_dump(),
    )


async def sql_create_teams(sport_id: SportId, club_ids: list[ClubCode]) -> None:
    created = datetime_utc.now()
    await database.execute_many(
        query=teams.insert(),
        values=[
            TeamInsertable(sport_id=sport_id, club_id=club_id, created=created).model_dump()
            for club_id in club_ids
        ],
    )


async def sql_delete_team(team_id: TeamId) -> bool:
    query = "DELETE FROM teams WHERE team_id = :team_id RETURNING team_id"
    deleted = await database.fetch_val(query=query, values={"team_id": team_id})
    return deleted is not None
