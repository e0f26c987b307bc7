"""Pydantic models for MetOcean API requests and responses.

Key model groups:
    1. **Request values**: Point, RoutePoint, TimeRange
    2. **Dimensions**: the coordinate axes a response is laid out on
    3. **Responses**: PointTimeSeriesResponse, PointResponse, RouteResponse

Responses keep the wire field names as aliases (``standardName``,
``noData``...) and expose snake_case attributes. Unknown fields are kept
(``extra="allow"``) so nothing the server sends is lost. Timestamps arrive
as ISO-8601 strings and are decoded into timezone-aware ``datetime``
objects.

Example:
    Reading a point time-series::

        response = await client.get_point_time_series(
            points=[Point(lat=-37.82, lon=174.89)],
            variables=["wave.height"],
            time=TimeRange(from_=start, repeat=8),
        )
        series = response.variables["wave.height"]
        for t, value in zip(response.dimensions.time.data, series.data):
            print(f"{t:%Y-%m-%d %H:%M}: {value} {series.units}")
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for all models that travel over the wire."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Point(WireModel):
    """Geographic coordinate.

    Attributes:
        lat: Latitude in decimal degrees (-90 to 90).
        lon: Longitude in decimal degrees (-180 to 180).
    """

    lat: float
    lon: float


class RoutePoint(Point):
    """Coordinate with the time a vessel is expected to be there.

    Attributes:
        time: Timestamp of the waypoint.
    """

    time: datetime


class TimeRange(WireModel):
    """Range of forecast times for the point time-series endpoint.

    At least one of ``from_`` and ``to`` is required, and ``repeat`` and
    ``to`` cannot be combined.

    Attributes:
        from_: First time to retrieve (``from`` on the wire).
        to: Last time to retrieve.
        interval: Hours between data points. The server defaults to 3.
        repeat: Number of data points to retrieve.

    Example:
        >>> TimeRange(from_=datetime(2024, 1, 1), interval=6, repeat=4)
        >>> TimeRange(**{"from": datetime(2024, 1, 1), "to": datetime(2024, 1, 2)})
    """

    from_: Optional[datetime] = Field(default=None, alias="from")
    to: Optional[datetime] = None
    interval: Optional[float] = None
    repeat: Optional[int] = None


class PointDimension(WireModel):
    """Point axis of a response."""

    type: Optional[str] = None
    units: Optional[str] = None
    data: list[Point]


class TimeDimension(WireModel):
    """Time axis of a point time-series response."""

    type: Optional[str] = None
    units: Optional[str] = None
    data: list[datetime]


class TimepointDimension(WireModel):
    """Combined (lat, lon, time) axis of a route response."""

    type: Optional[str] = None
    units: Optional[str] = None
    data: list[RoutePoint]


class PointTimeSeriesDimensions(WireModel):
    point: PointDimension
    time: TimeDimension


class PointDimensions(WireModel):
    point: PointDimension


class RouteDimensions(WireModel):
    timepoint: TimepointDimension


class VariableData(WireModel):
    """Values of one requested variable.

    ``data`` is laid out row-major over the axes named in ``dimensions``,
    e.g. ``["point", "time"]``. Missing values are ``None`` and the matching
    entry of ``no_data`` holds a NoDataReason code.

    Attributes:
        standard_name: CF standard name of the variable.
        units: Units of ``data``.
        si_units: SI equivalent of ``units``.
        dimensions: Names of the axes ``data`` is laid out on.
        data: Flattened values, ``None`` where missing.
        no_data: Reason code for each entry of ``data``.
    """

    standard_name: Optional[str] = Field(default=None, alias="standardName")
    units: Optional[str] = None
    si_units: Optional[str] = Field(default=None, alias="siUnits")
    dimensions: list[str] = Field(default_factory=list)
    data: list[Optional[float]]
    no_data: list[int] = Field(default_factory=list, alias="noData")


class ForecastResponse(WireModel):
    """Fields shared by every successful response.

    Attributes:
        no_data_reasons: Mapping of reason name to code used in ``no_data``.
        variables: Requested variable name to its values.
    """

    no_data_reasons: dict[str, int] = Field(
        default_factory=dict, alias="noDataReasons"
    )
    variables: dict[str, VariableData]

    def axis_lengths(self) -> dict[str, int]:
        """Return the length of every axis in ``dimensions``."""
        dims = getattr(self, "dimensions")
        return {
            name: len(getattr(dims, name).data)
            for name in type(dims).model_fields
        }


class PointTimeSeriesResponse(ForecastResponse):
    """Response of the ``/point/time`` endpoint."""

    dimensions: PointTimeSeriesDimensions


class PointResponse(ForecastResponse):
    """Response of the ``/point`` endpoint. Carries no time axis."""

    dimensions: PointDimensions


class RouteResponse(ForecastResponse):
    """Response of the ``/route/time`` and ``/route/speed`` endpoints."""

    dimensions: RouteDimensions


def format_timestamp(value: date) -> str:
    """Format a date or datetime as an ISO-8601 UTC string.

    Naive datetimes are taken to be UTC. Plain dates become midnight UTC.

    Example:
        >>> format_timestamp(datetime(2024, 1, 1, 12))
        '2024-01-01T12:00:00Z'
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def to_wire(value: Any) -> Any:
    """Convert request values into JSON-serializable structures.

    Models are dumped by alias, ``None`` entries of mappings are dropped
    and timestamps are formatted with format_timestamp.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, date):
        return format_timestamp(value)
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value
