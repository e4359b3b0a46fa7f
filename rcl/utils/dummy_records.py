from datetime import datetime, timezone

from heliclockter import datetime_utc

from rcl.models.db.club import Club
from rcl.models.db.event import Event, SportType
from rcl.models.db.user import SessionUser
from rcl.models.sport_day import SportDay
from rcl.utils.id_types import ClubCode, ClubId, SportId

DUMMY_MOCK_TIME = datetime_utc.from_datetime(datetime(2025, 10, 25, 9, 0, 0, tzinfo=timezone.utc))

DUMMY_CLUB1 = Club(
    id=ClubId(1),
    club_id=ClubCode("RC-COL"),
    club_name="Rotaract Club of Colombo",
    category="community",
    created=DUMMY_MOCK_TIME,
)

DUMMY_CLUB2 = Club(
    id=ClubId(2),
    club_id=ClubCode("RC-KDY"),
    club_name="Rotaract Club of Kandy",
    category="community",
    created=DUMMY_MOCK_TIME,
)

DUMMY_CLUB3 = Club(
    id=ClubId(3),
    club_id=ClubCode("RC-UOM"),
    club_name="Rotaract Club of University of Moratuwa",
    category="university",
    created=DUMMY_MOCK_TIME,
)

DUMMY_TEAM_EVENT = Event(
    sport_id=SportId(10),
    sport_name="Cricket",
    sport_day=SportDay.DAY_01,
    sport_type=SportType.TEAM,
    gender_type="male",
    category="outdoor",
    created=DUMMY_MOCK_TIME,
)

DUMMY_TRACK_INDIVIDUAL_EVENT = Event(
    sport_id=SportId(20),
    sport_name="100m Sprint",
    sport_day=SportDay.DAY_02,
    sport_type=SportType.TRACK_INDIVIDUAL,
    gender_type="female",
    category="track",
    created=DUMMY_MOCK_TIME,
)

DUMMY_TRACK_TEAM_EVENT = Event(
    sport_id=SportId(21),
    sport_name="4x100m Relay",
    sport_day=SportDay.DAY_02,
    sport_type=SportType.TRACK_TEAM,
    gender_type="mixed",
    category="track",
    created=DUMMY_MOCK_TIME,
)

DUMMY_ADMIN = SessionUser(
    sub="1",
    email="admin@rotaract3220.org",
    name="League Admin",
    role_id=1,
    membership_id="RMIS-0001",
    club_id="RC-COL",
    has_admin_access=True,
    has_portal_access=True,
)

DUMMY_PORTAL_USER = SessionUser(
    sub="2",
    email="secretary@rotaract3220.org",
    name="Club Secretary",
    role_id=5,
    membership_id="RMIS-0002",
    club_id="RC-KDY",
    has_admin_access=False,
    has_portal_access=True,
)
