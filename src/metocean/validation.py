"""Argument validation for MetOcean requests.

Every ``check_*`` function inspects plain values (mappings, model
instances, lists) and returns a list of violation messages. An empty list
means the argument is fine. The client concatenates the lists of all
arguments and raises a single MetOceanIllegalArgumentError, so a caller
sees every problem at once instead of fixing them one by one.

The checks run on the raw values, not on pydantic models, because arguments
often come straight from deserialized JSON.

Example:
    >>> check_points([{"lat": 100, "lon": 200}])
    ['points[0]: latitude of 100 is invalid (must be between -90 and 90)',
     'points[0]: longitude of 200 is invalid (must be between -180 and 180)']
"""

import logging
import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from .types import LATITUDE_RANGE, LONGITUDE_RANGE

logger = logging.getLogger(__name__)

POINTS_HINT = "Try something like [{'lat': -37.82, 'lon': 174.89}]"
VARIABLES_HINT = "e.g. ['wave.height']"


def get_field(obj: Any, name: str, *aliases: str) -> Any:
    """Read a field from a mapping or an object, trying aliases in order.

    Returns None when none of the names is present.
    """
    for key in (name, *aliases):
        if isinstance(obj, Mapping):
            if key in obj:
                return obj[key]
        elif hasattr(obj, key):
            return getattr(obj, key)
    return None


def is_number(value: Any) -> bool:
    """Return True for real numbers, excluding bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def _describe(value: Any) -> str:
    return f"{type(value).__name__} {value!r}"


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def check_coordinate(item: Any, label: str) -> list[str]:
    """Check the ``lat``/``lon`` of one point, reporting each separately."""
    violations = []
    lat = get_field(item, "lat")
    lon = get_field(item, "lon")
    lat_min, lat_max = LATITUDE_RANGE
    lon_min, lon_max = LONGITUDE_RANGE
    if not (is_number(lat) and lat_min <= lat <= lat_max):
        violations.append(
            f"{label}: latitude of {lat!r} is invalid "
            f"(must be between {lat_min:g} and {lat_max:g})"
        )
    if not (is_number(lon) and lon_min <= lon <= lon_max):
        violations.append(
            f"{label}: longitude of {lon!r} is invalid "
            f"(must be between {lon_min:g} and {lon_max:g})"
        )
    return violations


def check_points(points: Any, name: str = "points") -> list[str]:
    """Check that ``points`` is a non-empty list of valid coordinates."""
    if not _is_list(points):
        return [
            f"'{name}' must be a list of points, got {type(points).__name__}. "
            f"{POINTS_HINT}"
        ]
    if not points:
        return [f"'{name}' contained no points. {POINTS_HINT}"]

    violations = []
    for i, point in enumerate(points):
        violations.extend(check_coordinate(point, f"{name}[{i}]"))
    return violations


def check_timestamp(value: Any, label: str) -> list[str]:
    if isinstance(value, datetime):
        return []
    return [f"{label} must be a datetime, got {_describe(value)}"]


def check_variables(
    variables: Any, known: Optional[frozenset[str]] = None
) -> list[str]:
    """Check that ``variables`` is a non-empty list of strings.

    Names missing from ``known`` are not violations, the vocabulary on the
    server can be larger than ours. They are logged as warnings.
    """
    if not _is_list(variables) or len(variables) == 0:
        return [
            "'variables' must be a list of at least one forecast variable, "
            f"{VARIABLES_HINT}"
        ]

    violations = []
    for i, variable in enumerate(variables):
        if not isinstance(variable, str):
            violations.append(
                f"variables[{i}] must be a string, got {_describe(variable)}"
            )
        elif known is not None and variable not in known:
            logger.warning(f"Unknown forecast variable {variable!r}, sending anyway")
    return violations


def check_time_or_times(time: Any, times: Any) -> list[str]:
    """Check that exactly one of ``time`` and ``times`` was given."""
    if time is not None and times is not None:
        return [
            "Both 'time' and 'times' were given, but only one of the two "
            "can be included. Please remove one."
        ]
    if time is None and times is None:
        return ["Neither 'time' nor 'times' was given. Please include one of them."]
    return []


def check_time_range(time: Any) -> list[str]:
    """Check the fields of a time range descriptor, if one was given."""
    if time is None:
        return []

    violations = []
    start = get_field(time, "from", "from_")
    to = get_field(time, "to")
    interval = get_field(time, "interval")
    repeat = get_field(time, "repeat")

    if repeat is not None and to is not None:
        violations.append(
            "Both 'repeat' and 'to' were given in 'time', but only one of "
            "the two can be included. Please remove one."
        )
    if start is None and to is None:
        violations.append(
            "At least one of 'from' and 'to' is required in 'time'."
        )

    if start is not None:
        violations.extend(check_timestamp(start, "'time.from'"))
    if to is not None:
        violations.extend(check_timestamp(to, "'time.to'"))
    if interval is not None and not (is_number(interval) and interval > 0):
        violations.append(
            f"'time.interval' must be a positive number of hours, "
            f"got {_describe(interval)}"
        )
    if repeat is not None and (
        isinstance(repeat, bool) or not isinstance(repeat, int) or repeat < 1
    ):
        violations.append(
            f"'time.repeat' must be a positive integer, got {_describe(repeat)}"
        )
    return violations


def check_times(times: Any) -> list[str]:
    """Check an explicit list of timestamps, if one was given."""
    if times is None:
        return []
    if not _is_list(times):
        return [f"'times' must be a list of datetimes, got {type(times).__name__}"]
    if not times:
        return ["'times' must contain at least one datetime, it was empty."]

    violations = []
    for i, t in enumerate(times):
        violations.extend(check_timestamp(t, f"times[{i}]"))
    return violations


def check_route(route: Any) -> list[str]:
    """Check a route: a non-empty list of points, each with a timestamp."""
    violations = check_points(route, name="route")
    if _is_list(route):
        for i, waypoint in enumerate(route):
            violations.extend(
                check_timestamp(get_field(waypoint, "time"), f"route[{i}].time")
            )
    return violations


def check_speeds(speeds: Any, points: Any) -> list[str]:
    """Check per-segment speeds of a route-speed query.

    There must be one positive speed per segment, i.e.
    ``len(speeds) == len(points) - 1``.
    """
    if not _is_list(speeds) or len(speeds) == 0:
        return ["'speeds' must be a list of at least one speed"]

    violations = []
    for i, speed in enumerate(speeds):
        if not (is_number(speed) and speed > 0):
            violations.append(
                f"speeds[{i}] must be a positive number, got {_describe(speed)}"
            )
    if _is_list(points) and points and len(speeds) != len(points) - 1:
        violations.append(
            f"'speeds' must have one entry per route segment: expected "
            f"{len(points) - 1} for {len(points)} points, got {len(speeds)}"
        )
    return violations
