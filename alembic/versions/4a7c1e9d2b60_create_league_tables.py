"""create league tables

Revision ID: 4a7c1e9d2b60
Revises:
Create Date: 2025-10-01 00:00:00.000000

"""

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ENUM

from alembic import op

# revision identifiers, used by Alembic.
revision: str | None = "4a7c1e9d2b60"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None

sport_type_enum = ENUM(
    "team",
    "individual",
    "trackIndividual",
    "trackTeam",
    name="sport_type",
    create_type=False,
)

permission_level_enum = ENUM(
    "super_admin",
    "admin",
    name="permission_level",
    create_type=False,
)


def upgrade() -> None:
    sport_type_enum.create(op.get_bind(), checkfirst=True)
    permission_level_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "clubs",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("club_id", sa.String(), nullable=False),
        sa.Column("club_name", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("club_id"),
    )
    op.create_index(op.f("ix_clubs_id"), "clubs", ["id"], unique=False)
    op.create_index(op.f("ix_clubs_club_id"), "clubs", ["club_id"], unique=False)
    op.create_index(op.f("ix_clubs_club_name"), "clubs", ["club_name"], unique=False)
    op.create_index(op.f("ix_clubs_category"), "clubs", ["category"], unique=False)

    op.create_table(
        "events",
        sa.Column("sport_id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("sport_name", sa.String(), nullable=False),
        sa.Column("sport_day", sa.String(), nullable=False),
        sa.Column("sport_type", sport_type_enum, nullable=False),
        sa.Column("gender_type", sa.String(), nullable=True),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("min_count", sa.Integer(), nullable=True),
        sa.Column("max_count", sa.Integer(), nullable=True),
        sa.Column("reserve_count", sa.Integer(), nullable=True),
        sa.Column("registration_close", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("sport_id"),
    )
    op.create_index(op.f("ix_events_sport_id"), "events", ["sport_id"], unique=False)
    op.create_index(op.f("ix_events_sport_name"), "events", ["sport_name"], unique=False)
    op.create_index(op.f("ix_events_sport_day"), "events", ["sport_day"], unique=False)
    op.create_index(op.f("ix_events_category"), "events", ["category"], unique=False)

    op.create_table(
        "players",
        sa.Column("rmis_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("gender", sa.String(), nullable=True),
        sa.Column("club_id", sa.String(), nullable=False),
        sa.Column("status", sa.Integer(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["club_id"], ["clubs.club_id"]),
        sa.PrimaryKeyConstraint("rmis_id"),
    )
    op.create_index(op.f("ix_players_rmis_id"), "players", ["rmis_id"], unique=False)
    op.create_index(op.f("ix_players_name"), "players", ["name"], unique=False)
    op.create_index(op.f("ix_players_club_id"), "players", ["club_id"], unique=False)

    op.create_table(
        "teams",
        sa.Column("team_id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("sport_id", sa.BigInteger(), nullable=False),
        sa.Column("club_id", sa.String(), nullable=False),
        sa.Column("seed_number", sa.Integer(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["sport_id"], ["events.sport_id"]),
        sa.ForeignKeyConstraint(["club_id"], ["clubs.club_id"]),
        sa.PrimaryKeyConstraint("team_id"),
        sa.UniqueConstraint("sport_id", "club_id"),
    )
    op.create_index(op.f("ix_teams_team_id"), "teams", ["team_id"], unique=False)
    op.create_index(op.f("ix_teams_sport_id"), "teams", ["sport_id"], unique=False)
    op.create_index(op.f("ix_teams_club_id"), "teams", ["club_id"], unique=False)

    op.create_table(
        "matches",
        sa.Column("match_id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("sport_id", sa.BigInteger(), nullable=False),
        sa.Column("round_id", sa.Integer(), nullable=False),
        sa.Column("match_order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("team1_id", sa.BigInteger(), nullable=True),
        sa.Column("team2_id", sa.BigInteger(), nullable=True),
        sa.Column("team1_score", sa.Integer(), server_default="0", nullable=False),
        sa.Column("team2_score", sa.Integer(), server_default="0", nullable=False),
        sa.Column("parent_match1_id", sa.BigInteger(), nullable=True),
        sa.Column("parent_match2_id", sa.BigInteger(), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["sport_id"], ["events.sport_id"]),
        sa.ForeignKeyConstraint(["team1_id"], ["teams.team_id"]),
        sa.ForeignKeyConstraint(["team2_id"], ["teams.team_id"]),
        sa.ForeignKeyConstraint(["parent_match1_id"], ["matches.match_id"]),
        sa.ForeignKeyConstraint(["parent_match2_id"], ["matches.match_id"]),
        sa.PrimaryKeyConstraint("match_id"),
    )
    op.create_index(op.f("ix_matches_match_id"), "matches", ["match_id"], unique=False)
    op.create_index(op.f("ix_matches_sport_id"), "matches", ["sport_id"], unique=False)
    op.create_index(op.f("ix_matches_round_id"), "matches", ["round_id"], unique=False)

    op.create_table(
        "club_points",
        sa.Column("point_id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("club_id", sa.String(), nullable=False),
        sa.Column("sport_id", sa.BigInteger(), nullable=True),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("place", sa.Integer(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["club_id"], ["clubs.club_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["sport_id"], ["events.sport_id"]),
        sa.PrimaryKeyConstraint("point_id"),
    )
    op.create_index(op.f("ix_club_points_point_id"), "club_points", ["point_id"], unique=False)
    op.create_index(op.f("ix_club_points_club_id"), "club_points", ["club_id"], unique=False)
    op.create_index(op.f("ix_club_points_sport_id"), "club_points", ["sport_id"], unique=False)
    op.create_index(op.f("ix_club_points_place"), "club_points", ["place"], unique=False)

    op.create_table(
        "registrations",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("rmis_id", sa.String(), nullable=False),
        sa.Column("sport_id", sa.BigInteger(), nullable=False),
        sa.Column("club_id", sa.String(), nullable=False),
        sa.Column("main_player", sa.Boolean(), server_default="t", nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["rmis_id"], ["players.rmis_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["sport_id"], ["events.sport_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["club_id"], ["clubs.club_id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("rmis_id", "sport_id"),
    )
    op.create_index(op.f("ix_registrations_id"), "registrations", ["id"], unique=False)
    op.create_index(op.f("ix_registrations_rmis_id"), "registrations", ["rmis_id"], unique=False)
    op.create_index(op.f("ix_registrations_sport_id"), "registrations", ["sport_id"], unique=False)
    op.create_index(op.f("ix_registrations_club_id"), "registrations", ["club_id"], unique=False)

    op.create_table(
        "day_registrations",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("rmis_id", sa.String(), nullable=False),
        sa.Column("sport_day", sa.String(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["rmis_id"], ["players.rmis_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("rmis_id", "sport_day"),
    )
    op.create_index(op.f("ix_day_registrations_id"), "day_registrations", ["id"], unique=False)
    op.create_index(
        op.f("ix_day_registrations_rmis_id"), "day_registrations", ["rmis_id"], unique=False
    )
    op.create_index(
        op.f("ix_day_registrations_sport_day"), "day_registrations", ["sport_day"], unique=False
    )

    op.create_table(
        "track_events",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("sport_id", sa.BigInteger(), nullable=False),
        sa.Column("rmis_id", sa.String(), nullable=True),
        sa.Column("team_id", sa.BigInteger(), nullable=True),
        sa.Column("score", sa.Text(), nullable=True),
        sa.Column("place", sa.Integer(), nullable=True),
        sa.Column("updated", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["sport_id"], ["events.sport_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["rmis_id"], ["players.rmis_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["team_id"], ["teams.team_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("sport_id", "rmis_id"),
        sa.UniqueConstraint("sport_id", "team_id"),
    )
    op.create_index(op.f("ix_track_events_id"), "track_events", ["id"], unique=False)
    op.create_index(op.f("ix_track_events_sport_id"), "track_events", ["sport_id"], unique=False)

    op.create_table(
        "permissions",
        sa.Column("rmis_id", sa.String(), nullable=False),
        sa.Column("permission_level", permission_level_enum, nullable=False),
        sa.Column("card_name", sa.String(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("rmis_id"),
    )
    op.create_index(op.f("ix_permissions_rmis_id"), "permissions", ["rmis_id"], unique=False)

    op.create_table(
        "portal_settings",
        sa.Column("setting_key", sa.String(), nullable=False),
        sa.Column("is_enabled", sa.Boolean(), server_default="f", nullable=False),
        sa.Column("updated_by", sa.String(), nullable=True),
        sa.Column("updated", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("setting_key"),
    )


def downgrade() -> None:
    op.drop_table("portal_settings")
    op.drop_table("permissions")
    op.drop_table("track_events")
    op.drop_table("day_registrations")
    op.drop_table("registrations")
    op.drop_table("club_points")
    op.drop_table("matches")
    op.drop_table("teams")
    op.drop_table("players")
    op.drop_table("events")
    op.drop_table("clubs")
    permission_level_enum.drop(op.get_bind(), checkfirst=True)
    sport_type_enum.drop(op.get_bind(), checkfirst=True)
