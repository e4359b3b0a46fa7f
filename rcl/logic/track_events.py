import math
import re
from collections.abc import Sequence

from rcl.config import config
from rcl.models.track_events import TrackClubAward, TrackEntryScore, TrackEntryView
from rcl.utils.id_types import ClubCode

_LEADING_NUMBER = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_track_score(score: str | float | int | None) -> float | None:
    """
    Convert a recorded track result into a comparable number of seconds.

    Accepts plain numbers ("10.5", "10.5s"), `mm:ss(.ms)` and `hh:mm:ss` notations.
    Non-finite values are treated as missing.
    """
    if score is None:
        return None

    value = str(score).strip()
    if ":" in value:
        try:
            parts = [float(part) for part in value.split(":")]
        except ValueError:
            return None

        match parts:
            case [minutes, seconds]:
                parsed = minutes * 60 + seconds
            case [hours, minutes, seconds]:
                parsed = hours * 3600 + minutes * 60 + seconds
            case _:
                return None
    else:
        leading_number = _LEADING_NUMBER.match(value)
        if leading_number is None:
            return None
        parsed = float(leading_number.group())

    return parsed if math.isfinite(parsed) else None


def get_place_points(individual: bool) -> dict[int, int]:
    if individual:
        return {
            1: config.track_individual_first_place_points,
            2: config.track_individual_second_place_points,
            3: config.track_individual_third_place_points,
        }
    return {
        1: config.first_place_points,
        2: config.second_place_points,
        3: config.third_place_points,
    }


def compute_track_awards(
    entries: Sequence[TrackEntryScore], individual: bool
) -> list[TrackClubAward]:
    """
    Rank every scored entry (lowest time first) and aggregate the earned points per club.

    Places 1-3 earn placement points, every other scored entry earns participation points.
    A club keeps its best place over all of its entries.
    """
    place_points = get_place_points(individual)
    scored = [
        (parsed, entry)
        for entry in entries
        if (parsed := parse_track_score(entry.score)) is not None
    ]
    scored.sort(key=lambda item: item[0])

    awards: dict[ClubCode, TrackClubAward] = {}
    for index, (_, entry) in enumerate(scored):
        place = index + 1
        points = place_points.get(place, config.participation_points_per_sport)

        award = awards.setdefault(
            entry.club_id, TrackClubAward(club_id=entry.club_id, points=0, best_place=None)
        )
        award.points += points
        if award.best_place is None or place < award.best_place:
            award.best_place = place

    return list(awards.values())


def sort_by_place_then_name(entries: Sequence[TrackEntryView]) -> list[TrackEntryView]:
    def sort_key(entry: TrackEntryView) -> tuple[int, int, str]:
        if entry.place is not None and entry.place > 0:
            return (0, entry.place, entry.name.lower())
        return (1, 0, entry.name.lower())

    return sorted(entries, key=sort_key)
