from rcl.database import database
from rcl.models.db.match import Match, MatchScoreBody, MatchWithClubs
from rcl.utils.id_types import MatchId, SportId


async def get_matches_with_clubs(sport_id: SportId) -> list[MatchWithClubs]:
    query = """
        SELECT
            m.*,
            t1.club_id AS team1_club_id,
            c1.club_name AS team1_club_name,
            t1.seed_number AS team1_seed_number,
            t2.club_id AS team2_club_id,
            c2.club_name AS team2_club_name,
            t2.seed_number AS team2_seed_number
        FROM matches m
        LEFT JOIN teams t1 ON t1.team_id = m.team1_id
        LEFT JOIN clubs c1 ON c1.club_id = t1.club_id
        LEFT JOIN teams t2 ON t2.team_id = m.team2_id
        LEFT JOIN clubs c2 ON c2.club_id = t2.club_id
        WHERE m.sport_id = :sport_id
        ORDER BY m.round_id, m.match_order, m.match_id
        """
    result = await database.fetch_all(query=query, values={"sport_id": sport_id})
    return [MatchWithClubs.model_validate(match) for match in result]


async def sql_update_match_score(match_id: MatchId, body: MatchScoreBody) -> Match | None:
    query = """
        UPDATE matches
        SET
            team1_score = :team1_score,
            team2_score = :team2_score
        WHERE match_id = :match_id
        RETURNING *
        """
    result = await database.fetch_one(
        query=query, values={"match_id": match_id, **body.model_dump()}
    )
    return Match.model_validate(result) if result is not None else None
