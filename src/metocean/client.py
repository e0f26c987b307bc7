"""Async client for the MetOcean Point Forecast API.

This module provides MetOceanClient, which wraps the four forecast
endpoints of the API:

    - ``/point/time``: time-series at one or more points
    - ``/point``: time-independent values (e.g. sea depth) at points
    - ``/route/time``: values along a route of timestamped waypoints
    - ``/route/speed``: values along a route sailed at given speeds

Every call validates its arguments (unless disabled), POSTs a JSON body,
maps the HTTP status to a typed exception and decodes the payload into a
pydantic model with timestamps converted to ``datetime``.

Example:
    Fetch a wave forecast::

        import asyncio
        from datetime import datetime, timezone
        from metocean import MetOceanClient

        async def main():
            async with MetOceanClient(api_key="...") as client:
                data = await client.get_point_time_series(
                    points=[{"lat": -37.82, "lon": 174.89}],
                    variables=["wave.height", "wind.speed.at-10m"],
                    time={"from": datetime.now(timezone.utc), "repeat": 8},
                )
                heights = data.variables["wave.height"].data
                for t, h in zip(data.dimensions.time.data, heights):
                    print(f"{t}: {h} m")

        asyncio.run(main())
"""

import json
import logging
from datetime import datetime
from typing import Any, Optional, Sequence, TypeVar

import httpx
from pydantic import ValidationError

from .config import Settings, load_settings
from .exceptions import (
    MetOceanDecodeError,
    MetOceanIllegalArgumentError,
    MetOceanInputError,
    MetOceanNotFoundError,
    MetOceanServerError,
    MetOceanUnauthorizedError,
)
from .models import (
    ForecastResponse,
    Point,
    PointResponse,
    PointTimeSeriesResponse,
    RoutePoint,
    RouteResponse,
    TimeRange,
    to_wire,
)
from .types import (
    API_KEY_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    POINT_PATH,
    POINT_TIME_SERIES_PATH,
    POINT_VARIABLES,
    ROUTE_SPEED_PATH,
    ROUTE_TIME_SERIES_PATH,
    TIME_SERIES_VARIABLES,
)
from .validation import (
    check_points,
    check_route,
    check_speeds,
    check_time_or_times,
    check_time_range,
    check_timestamp,
    check_times,
    check_variables,
    get_field,
    is_number,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=ForecastResponse)

OWNED_REQUEST_OPTIONS = frozenset(
    {"method", "url", "headers", "content", "json", "data", "files"}
)
"""frozenset[str]: httpx request arguments callers cannot override."""


def encode_time_range(time: Any) -> Optional[dict[str, Any]]:
    """Build the wire form of a time range.

    ``interval`` is sent as a number of hours with an ``h`` suffix.

    Example:
        >>> encode_time_range({"from": datetime(2024, 1, 1), "interval": 6})
        {'from': datetime(2024, 1, 1, 0, 0), 'to': None, 'interval': '6h', 'repeat': None}
    """
    if time is None:
        return None
    interval = get_field(time, "interval")
    if is_number(interval):
        if float(interval).is_integer():
            interval = f"{int(interval)}h"
        else:
            interval = f"{interval!r}h"
    return {
        "from": get_field(time, "from", "from_"),
        "to": get_field(time, "to"),
        "interval": interval,
        "repeat": get_field(time, "repeat"),
    }


def error_list(payload: Any) -> list[str]:
    """Normalize an error body into a list of message strings."""
    if isinstance(payload, list):
        return [m if isinstance(m, str) else json.dumps(m) for m in payload]
    if payload is None:
        return []
    if isinstance(payload, str):
        return [payload]
    return [json.dumps(payload)]


class MetOceanClient:
    """Async client for the MetOcean Point Forecast API.

    Holds the API key and the request headers derived from it. The
    underlying httpx.AsyncClient is created on first use. The client keeps
    no per-call state, so concurrent calls are independent.

    Args:
        api_key: MetOcean API key. Required.
        validate_args: Validate arguments before sending. Defaults to True.
        timeout: HTTP request timeout in seconds. Defaults to 30.0.
        base_url: Root URL of the API.
        transport: Optional httpx transport, e.g. httpx.MockTransport.

    Raises:
        MetOceanIllegalArgumentError: If api_key is missing or empty.

    Example:
        Using as async context manager (recommended)::

            async with MetOceanClient(api_key) as client:
                depth = await client.get_point(
                    points=[{"lat": -37.82, "lon": 174.89}],
                    variables=["sea.depth.below-sea-level"],
                )

        Manual resource management::

            client = MetOceanClient(api_key)
            try:
                ...
            finally:
                await client.close()
    """

    def __init__(
        self,
        api_key: str,
        *,
        validate_args: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise MetOceanIllegalArgumentError(
                ["'api_key' must be a non-empty string"]
            )

        self._headers = {"Content-Type": "application/json", API_KEY_HEADER: api_key}
        self._validate_args = validate_args
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        base_url = base_url.rstrip("/")
        self.point_time_series_url = base_url + POINT_TIME_SERIES_PATH
        self.point_url = base_url + POINT_PATH
        self.route_time_series_url = base_url + ROUTE_TIME_SERIES_PATH
        self.route_speed_url = base_url + ROUTE_SPEED_PATH

    @classmethod
    def from_settings(
        cls, settings: Settings, **kwargs: Any
    ) -> "MetOceanClient":
        """Create a client from a Settings instance.

        Raises:
            MetOceanIllegalArgumentError: If settings has no API key.
        """
        if not settings.api_key:
            raise MetOceanIllegalArgumentError(
                ["No API key configured. Set METOCEAN_API_KEY or add it to .env"]
            )
        return cls(
            settings.api_key,
            validate_args=settings.validate_args,
            timeout=settings.timeout,
            base_url=settings.base_url,
            **kwargs,
        )

    @classmethod
    def from_env(
        cls, dotenv_path: Optional[str] = None, **kwargs: Any
    ) -> "MetOceanClient":
        """Create a client from environment variables and ``.env``.

        Example:
            >>> async with MetOceanClient.from_env() as client:
            ...     data = await client.get_point(points, variables)
        """
        return cls.from_settings(load_settings(dotenv_path), **kwargs)

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return dict(self._headers)

    @property
    def validate_args(self) -> bool:
        return self._validate_args

    async def __aenter__(self) -> "MetOceanClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Lazily create the underlying httpx.AsyncClient."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client. Safe to call multiple times."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _raise_if_invalid(self, violations: list[str]) -> None:
        if violations:
            raise MetOceanIllegalArgumentError(violations)

    async def _request(
        self,
        url: str,
        body: Any,
        request_options: Optional[dict[str, Any]] = None,
    ) -> Any:
        """POST a JSON body and return the decoded JSON payload.

        Args:
            url: Endpoint URL.
            body: Request body, converted with to_wire.
            request_options: Extra keyword arguments for httpx, such as
                ``timeout``. Method, URL, headers and body cannot be
                overridden.

        Returns:
            The parsed JSON payload of a 200 response.

        Raises:
            MetOceanDecodeError: If a 200 body is not valid JSON. Error
                statuses with a non-JSON body keep the raw text in
                ``error_list``.
            MetOceanUnauthorizedError: On 401.
            MetOceanNotFoundError: On 404.
            MetOceanInputError: On any other 4xx.
            MetOceanServerError: On 5xx or any other non-200 status.
            httpx.HTTPError: On network failures, unwrapped.
        """
        client = await self._ensure_client()

        options = dict(request_options or {})
        dropped = sorted(OWNED_REQUEST_OPTIONS.intersection(options))
        if dropped:
            logger.warning(f"Ignoring request options owned by the client: {dropped}")
            for key in dropped:
                del options[key]

        logger.debug(f"POST {url}")
        response = await client.request(
            "POST",
            url,
            headers=self._headers,
            content=json.dumps(to_wire(body)),
            **options,
        )
        status = response.status_code
        logger.debug(f"POST {url} returned {status}")

        try:
            payload = response.json()
        except ValueError as e:
            if status == 200:
                raise MetOceanDecodeError(
                    status, message=f"Response body is not valid JSON: {e}"
                ) from e
            # gateways and proxies answer errors with HTML or plain text
            payload = response.text

        if status == 200:
            return payload

        errors = error_list(payload)
        if status == 401:
            raise MetOceanUnauthorizedError(status, errors)
        if status == 404:
            raise MetOceanNotFoundError(status, errors)
        if 400 <= status < 500:
            raise MetOceanInputError(status, errors)
        raise MetOceanServerError(status, errors)

    def _decode(self, model: type[ResponseT], payload: Any) -> ResponseT:
        """Check the payload shape and convert it into ``model``."""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise MetOceanDecodeError(
                200, message=f"Unexpected {model.__name__} shape: {e}"
            ) from e

    async def get_point_time_series(
        self,
        points: Sequence[Point],
        variables: Sequence[str],
        *,
        time: Optional[TimeRange] = None,
        times: Optional[Sequence[datetime]] = None,
        request_options: Optional[dict[str, Any]] = None,
    ) -> PointTimeSeriesResponse:
        """Get forecast time-series at one or more points.

        Give either ``time``, a range, or ``times``, an explicit list.

        Args:
            points: Coordinates, as Point models or ``{"lat", "lon"}`` mappings.
            variables: Forecast variables, e.g. ``["wave.height"]``.
            time: TimeRange or mapping with ``from``/``to``/``interval``/
                ``repeat``.
            times: List of datetimes.
            request_options: Extra httpx request arguments.

        Returns:
            PointTimeSeriesResponse with ``dimensions.time.data`` as datetimes.

        Raises:
            MetOceanIllegalArgumentError: If validation fails.
            MetOceanRequestError: If the API rejects the request.

        Example:
            >>> data = await client.get_point_time_series(
            ...     points=[{"lat": -37.82, "lon": 174.89}],
            ...     times=[datetime.now(timezone.utc)],
            ...     variables=["air.temperature.at-2m", "cloud.cover"],
            ... )
        """
        if self._validate_args:
            self._raise_if_invalid(
                check_points(points)
                + check_time_or_times(time, times)
                + check_time_range(time)
                + check_times(times)
                + check_variables(variables, TIME_SERIES_VARIABLES)
            )

        body = {
            "points": points,
            "time": encode_time_range(time),
            "times": times,
            "variables": variables,
        }
        payload = await self._request(
            self.point_time_series_url, body, request_options
        )
        return self._decode(PointTimeSeriesResponse, payload)

    async def get_point(
        self,
        points: Sequence[Point],
        variables: Sequence[str],
        *,
        request_options: Optional[dict[str, Any]] = None,
    ) -> PointResponse:
        """Get time-independent values, such as sea depth, at points.

        Example:
            >>> data = await client.get_point(
            ...     points=[{"lat": 41, "lon": 42}],
            ...     variables=["sea.depth.below-sea-level"],
            ... )
        """
        if self._validate_args:
            self._raise_if_invalid(
                check_points(points) + check_variables(variables, POINT_VARIABLES)
            )

        body = {"points": points, "variables": variables}
        payload = await self._request(self.point_url, body, request_options)
        return self._decode(PointResponse, payload)

    async def get_route_time_series(
        self,
        route: Sequence[RoutePoint],
        variables: Sequence[str],
        *,
        request_options: Optional[dict[str, Any]] = None,
    ) -> RouteResponse:
        """Get forecast values along a route of timestamped waypoints.

        Args:
            route: Waypoints as RoutePoint models or ``{"lat", "lon", "time"}``
                mappings, in sailing order.
            variables: Forecast variables.
            request_options: Extra httpx request arguments.

        Returns:
            RouteResponse whose ``dimensions.timepoint.data`` entries have
            ``time`` decoded to datetime.
        """
        if self._validate_args:
            self._raise_if_invalid(
                check_route(route) + check_variables(variables, TIME_SERIES_VARIABLES)
            )

        body = {"route": route, "variables": variables}
        payload = await self._request(
            self.route_time_series_url, body, request_options
        )
        return self._decode(RouteResponse, payload)

    async def get_route_speed(
        self,
        start: datetime,
        speeds: Sequence[float],
        points: Sequence[Point],
        variables: Sequence[str],
        *,
        request_options: Optional[dict[str, Any]] = None,
    ) -> RouteResponse:
        """Get forecast values along a route sailed at given speeds.

        The server derives each waypoint time from ``start`` and the speed
        of every segment, so ``speeds`` holds one value per segment:
        ``len(speeds) == len(points) - 1``.

        Example:
            >>> data = await client.get_route_speed(
            ...     start=datetime.now(timezone.utc),
            ...     speeds=[10, 12],
            ...     points=[{"lat": 45, "lon": 43}, {"lat": 46, "lon": 42},
            ...             {"lat": 33, "lon": 55}],
            ...     variables=["air.visibility"],
            ... )
        """
        if self._validate_args:
            self._raise_if_invalid(
                check_timestamp(start, "'start'")
                + check_speeds(speeds, points)
                + check_points(points)
                + check_variables(variables, TIME_SERIES_VARIABLES)
            )

        body = {
            "start": start,
            "speeds": speeds,
            "points": points,
            "variables": variables,
        }
        payload = await self._request(self.route_speed_url, body, request_options)
        return self._decode(RouteResponse, payload)
