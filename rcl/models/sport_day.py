from rcl.utils.types import EnumValueStr


class SportDay(EnumValueStr):
    E_SPORT = "D-00"
    DAY_01 = "D-01"
    DAY_02 = "D-02"
    DAY_03 = "D-03"

    @property
    def label(self) -> str:
        return _SPORT_DAY_LABELS[self]

    @property
    def place(self) -> int:
        """
        Participation points are stored in `club_points` with a negative place,
        one code per sport day, so they never collide with a real placement.
        """
        return _SPORT_DAY_PLACES[self]


_SPORT_DAY_LABELS = {
    SportDay.E_SPORT: "E-Sport",
    SportDay.DAY_01: "Day 01",
    SportDay.DAY_02: "Day 02",
    SportDay.DAY_03: "Day 03",
}

_SPORT_DAY_PLACES = {
    SportDay.E_SPORT: -1,
    SportDay.DAY_01: -2,
    SportDay.DAY_02: -3,
    SportDay.DAY_03: -4,
}


def parse_sport_day(value: str | None) -> SportDay | None:
    if value is None:
        return None
    try:
        return SportDay(value.strip().upper())
    except ValueError:
        return None


def get_sport_day_place(value: str | None) -> int | None:
    sport_day = parse_sport_day(value)
    return sport_day.place if sport_day is not None else None


def get_sport_day_from_place(place: int | None) -> SportDay | None:
    return next((day for day, code in _SPORT_DAY_PLACES.items() if code == place), None)
