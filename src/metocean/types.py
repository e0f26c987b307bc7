"""Types and constants for the MetOcean Point Forecast API client.

This module defines endpoint URLs, the known forecast variable names and
the enumerations shared by the client, the models and the exceptions.

Example:
    Requesting a couple of wave variables::

        from metocean import MetOceanClient
        from metocean.types import WAVE_VARIABLES

        async with MetOceanClient(api_key) as client:
            data = await client.get_point_time_series(
                points=[{"lat": -37.82, "lon": 174.89}],
                variables=["wave.height", "wave.period.peak"],
                time={"from": start, "repeat": 8},
            )

        assert "wave.height" in WAVE_VARIABLES
"""

from enum import Enum, IntEnum


class NoDataReason(IntEnum):
    """Reason codes used in the ``noData`` arrays of a response.

    Each response also carries its own ``noDataReasons`` mapping, which is
    the authoritative source. These values mirror what the server
    advertises.

    Example:
        >>> series = response.variables["wave.height"]
        >>> land = [i for i, r in enumerate(series.no_data)
        ...         if r == NoDataReason.MASK_LAND]
    """

    GOOD = 0
    GAP = 1
    FILL = 2
    MASK_LAND = 3
    MASK_ICE = 4
    INVALID_HIGH = 5
    INVALID_LOW = 6
    ERROR_INTERNAL = 7


class ErrorKind(str, Enum):
    """Tag carried by every MetOcean exception.

    Lets callers branch on the kind of failure without an isinstance chain.
    """

    ILLEGAL_ARGUMENT = "illegal_argument"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INPUT = "input"
    SERVER = "server"
    DECODE = "decode"


DEFAULT_BASE_URL = "https://forecast-v2.metoceanapi.com"
"""str: Root URL of the MetOcean Point Forecast API (v2)."""

POINT_TIME_SERIES_PATH = "/point/time"
POINT_PATH = "/point"
ROUTE_TIME_SERIES_PATH = "/route/time"
ROUTE_SPEED_PATH = "/route/speed"

POINT_TIME_SERIES_URL = DEFAULT_BASE_URL + POINT_TIME_SERIES_PATH
POINT_URL = DEFAULT_BASE_URL + POINT_PATH
ROUTE_TIME_SERIES_URL = DEFAULT_BASE_URL + ROUTE_TIME_SERIES_PATH
ROUTE_SPEED_URL = DEFAULT_BASE_URL + ROUTE_SPEED_PATH

API_KEY_HEADER = "x-api-key"
"""str: Header the API key is sent in."""

DEFAULT_TIMEOUT = 30.0
"""float: Default HTTP timeout in seconds."""

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


ATMOSPHERIC_VARIABLES = frozenset(
    {
        "air.humidity.at-2m",
        "air.pressure.at-sea-level",
        "air.temperature.at-2m",
        "air.visibility",
        "atmosphere.convective.potential.energy",
        "cloud.base.height",
        "cloud.cover",
        "precipitation.rate",
        "radiation.flux.downward.longwave",
        "radiation.flux.downward.shortwave",
        "wind.direction.at-10m",
        "wind.direction.at-100m",
        "wind.speed.at-10m",
        "wind.speed.at-100m",
        "wind.speed.eastward.at-100m",
        "wind.speed.eastward.at-10m",
        "wind.speed.gust.at-10m",
        "wind.speed.northward.at-100m",
        "wind.speed.northward.at-10m",
    }
)
"""frozenset[str]: Time-series atmospheric variables."""

WAVE_VARIABLES = frozenset(
    {
        "wave.height",
        "wave.height.max",
        "wave.direction.peak",
        "wave.period.peak",
        "wave.height.above-8s",
        "wave.height.below-8s",
        "wave.period.above-8s.peak",
        "wave.period.below-8s.peak",
        "wave.direction.above-8s.peak",
        "wave.direction.below-8s.peak",
        "wave.direction.mean",
        "wave.directional-spread",
        "wave.period.tm01.mean",
        "wave.period.tm02.mean",
    }
)
"""frozenset[str]: Time-series wave variables."""

HYDRODYNAMIC_VARIABLES = frozenset(
    {
        "current.speed.eastward.at-sea-surface",
        "current.speed.eastward.at-sea-surface-no-tide",
        "current.speed.eastward.barotropic",
        "current.speed.eastward.barotropic-no-tide",
        "current.speed.northward.at-sea-surface",
        "current.speed.northward.at-sea-surface-no-tide",
        "current.speed.northward.barotropic",
        "current.speed.northward.barotropic-no-tide",
        "sea.temperature.at-surface",
        "sea.temperature.at-surface-anomaly",
    }
)
"""frozenset[str]: Time-series hydrodynamic variables."""

TIME_SERIES_VARIABLES = ATMOSPHERIC_VARIABLES | WAVE_VARIABLES | HYDRODYNAMIC_VARIABLES
"""frozenset[str]: Every known variable for the time-series and route endpoints."""

POINT_VARIABLES = frozenset({"sea.depth.below-sea-level"})
"""frozenset[str]: Known variables for the non-time-series ``/point`` endpoint.

Only partially documented upstream. Names outside this set are still sent,
the client just logs a warning.
"""
