"""MetOcean Point Forecast API async client.

This package provides a typed async client for the MetOcean Point Forecast
API, which serves weather and ocean forecasts at points and along routes.

Key features:
    - Point time-series forecasts (atmospheric, wave, hydrodynamic)
    - Time-independent point values such as sea depth
    - Forecasts along a route, from timestamped waypoints or from speeds
    - Local argument validation reporting every problem at once
    - Typed exceptions per HTTP status (401, 404, other 4xx, 5xx)
    - Timestamps decoded to ``datetime``
    - Optional DataFrame conversion via metocean.dataframe module

Example:
    Fetch a point time-series::

        import asyncio
        from datetime import datetime, timezone
        from metocean import MetOceanClient

        async def main():
            async with MetOceanClient(api_key="your-api-key") as client:
                data = await client.get_point_time_series(
                    points=[{"lat": -37.82, "lon": 174.89}],
                    times=[datetime.now(timezone.utc)],
                    variables=["air.temperature.at-2m", "cloud.cover"],
                )
                print(data.variables["cloud.cover"].data)

        asyncio.run(main())

    Read the key from the environment (``METOCEAN_API_KEY`` or ``.env``)::

        async with MetOceanClient.from_env() as client:
            route = await client.get_route_time_series(
                route=[{"lat": -30.9, "lon": 176.7, "time": start}],
                variables=["wave.height"],
            )

See Also:
    MetOcean API docs: https://forecast-docs.metoceanapi.com/docs/
"""

from .client import MetOceanClient
from .config import Settings, load_settings
from .exceptions import (
    MetOceanDecodeError,
    MetOceanError,
    MetOceanIllegalArgumentError,
    MetOceanInputError,
    MetOceanNotFoundError,
    MetOceanRequestError,
    MetOceanServerError,
    MetOceanUnauthorizedError,
)
from .models import (
    Point,
    PointResponse,
    PointTimeSeriesResponse,
    RoutePoint,
    RouteResponse,
    TimeRange,
    VariableData,
)
from .types import (
    ATMOSPHERIC_VARIABLES,
    DEFAULT_BASE_URL,
    HYDRODYNAMIC_VARIABLES,
    POINT_TIME_SERIES_URL,
    POINT_URL,
    POINT_VARIABLES,
    ROUTE_SPEED_URL,
    ROUTE_TIME_SERIES_URL,
    TIME_SERIES_VARIABLES,
    WAVE_VARIABLES,
    ErrorKind,
    NoDataReason,
)

__all__ = [
    "MetOceanClient",
    "Settings",
    "load_settings",
    "Point",
    "RoutePoint",
    "TimeRange",
    "VariableData",
    "PointTimeSeriesResponse",
    "PointResponse",
    "RouteResponse",
    "MetOceanError",
    "MetOceanIllegalArgumentError",
    "MetOceanRequestError",
    "MetOceanUnauthorizedError",
    "MetOceanNotFoundError",
    "MetOceanInputError",
    "MetOceanServerError",
    "MetOceanDecodeError",
    "ErrorKind",
    "NoDataReason",
    "DEFAULT_BASE_URL",
    "POINT_TIME_SERIES_URL",
    "POINT_URL",
    "ROUTE_TIME_SERIES_URL",
    "ROUTE_SPEED_URL",
    "ATMOSPHERIC_VARIABLES",
    "WAVE_VARIABLES",
    "HYDRODYNAMIC_VARIABLES",
    "TIME_SERIES_VARIABLES",
    "POINT_VARIABLES",
]
