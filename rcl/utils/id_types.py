from typing import NewType

ClubId = NewType("ClubId", int)
ClubCode = NewType("ClubCode", str)
SportId = NewType("SportId", int)
TeamId = NewType("TeamId", int)
MatchId = NewType("MatchId", int)
ClubPointId = NewType("ClubPointId", int)
DayRegistrationId = NewType("DayRegistrationId", int)
TrackEventId = NewType("TrackEventId", int)
RmisId = NewType("RmisId", str)
