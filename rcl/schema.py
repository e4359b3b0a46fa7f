from sqlalchemy import Column, ForeignKey, Integer, String, Table, UniqueConstraint, func
from sqlalchemy.orm import declarative_base  # type: ignore[attr-defined]
from sqlalchemy.sql.sqltypes import BigInteger, Boolean, DateTime, Enum, Text

Base = declarative_base()
metadata = Base.metadata
DateTimeTZ = DateTime(timezone=True)

clubs = Table(
    "clubs",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("club_id", String, nullable=False, index=True, unique=True),
    Column("club_name", String, nullable=False, index=True),
    Column("category", String, nullable=False, index=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

events = Table(
    "events",
    metadata,
    Column("sport_id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("sport_name", String, nullable=False, index=True),
    Column("sport_day", String, nullable=False, index=True),
    Column(
        "sport_type",
        Enum(
            "team",
            "individual",
            "trackIndividual",
            "trackTeam",
            name="sport_type",
        ),
        nullable=False,
        index=True,
    ),
    Column("gender_type", String, nullable=True),
    Column("category", String, nullable=True, index=True),
    Column("min_count", Integer, nullable=True),
    Column("max_count", Integer, nullable=True),
    Column("reserve_count", Integer, nullable=True),
    Column("registration_close", DateTimeTZ, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

players = Table(
    "players",
    metadata,
    Column("rmis_id", String, primary_key=True, index=True),
    Column("name", String, nullable=False, index=True),
    Column("gender", String, nullable=True),
    Column("club_id", String, ForeignKey("clubs.club_id"), index=True, nullable=False),
    Column("status", Integer, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

teams = Table(
    "teams",
    metadata,
    Column("team_id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("sport_id", BigInteger, ForeignKey("events.sport_id"), index=True, nullable=False),
    Column("club_id", String, ForeignKey("clubs.club_id"), index=True, nullable=False),
    Column("seed_number", Integer, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("sport_id", "club_id"),
)

matches = Table(
    "matches",
    metadata,
    Column("match_id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("sport_id", BigInteger, ForeignKey("events.sport_id"), index=True, nullable=False),
    Column("round_id", Integer, nullable=False, index=True),
    Column("match_order", Integer, nullable=False, server_default="0"),
    Column("team1_id", BigInteger, ForeignKey("teams.team_id"), nullable=True),
    Column("team2_id", BigInteger, ForeignKey("teams.team_id"), nullable=True),
    Column("team1_score", Integer, nullable=False, server_default="0"),
    Column("team2_score", Integer, nullable=False, server_default="0"),
    Column("parent_match1_id", BigInteger, ForeignKey("matches.match_id"), nullable=True),
    Column("parent_match2_id", BigInteger, ForeignKey("matches.match_id"), nullable=True),
    Column("start_time", DateTimeTZ, nullable=True),
)

club_points = Table(
    "club_points",
    metadata,
    Column("point_id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("club_id", String, ForeignKey("clubs.club_id", ondelete="CASCADE"), index=True, nullable=False),
    Column("sport_id", BigInteger, ForeignKey("events.sport_id"), index=True, nullable=True),
    Column("points", Integer, nullable=False),
    Column("place", Integer, nullable=True, index=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

registrations = Table(
    "registrations",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("rmis_id", String, ForeignKey("players.rmis_id", ondelete="CASCADE"), index=True, nullable=False),
    Column("sport_id", BigInteger, ForeignKey("events.sport_id", ondelete="CASCADE"), index=True, nullable=False),
    Column("club_id", String, ForeignKey("clubs.club_id"), index=True, nullable=False),
    Column("main_player", Boolean, nullable=False, server_default="t"),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("rmis_id", "sport_id"),
)

day_registrations = Table(
    "day_registrations",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("rmis_id", String, ForeignKey("players.rmis_id", ondelete="CASCADE"), index=True, nullable=False),
    Column("sport_day", String, nullable=False, index=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("rmis_id", "sport_day"),
)

track_events = Table(
    "track_events",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("sport_id", BigInteger, ForeignKey("events.sport_id", ondelete="CASCADE"), index=True, nullable=False),
    Column("rmis_id", String, ForeignKey("players.rmis_id", ondelete="CASCADE"), nullable=True),
    Column("team_id", BigInteger, ForeignKey("teams.team_id", ondelete="CASCADE"), nullable=True),
    Column("score", Text, nullable=True),
    Column("place", Integer, nullable=True),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("sport_id", "rmis_id"),
    UniqueConstraint("sport_id", "team_id"),
)

permissions = Table(
    "permissions",
    metadata,
    Column("rmis_id", String, primary_key=True, index=True),
    Column(
        "permission_level",
        Enum(
            "super_admin",
            "admin",
            name="permission_level",
        ),
        nullable=False,
    ),
    Column("card_name", String, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

portal_settings = Table(
    "portal_settings",
    metadata,
    Column("setting_key", String, primary_key=True),
    Column("is_enabled", Boolean, nullable=False, server_default="f"),
    Column("updated_by", String, nullable=True),
    Column("updated", DateTimeTZ, nullable=False, server_default=func.now()),
)
