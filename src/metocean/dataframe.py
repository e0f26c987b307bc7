"""DataFrame conversion utilities for MetOcean responses.

This module converts MetOcean response objects to pandas DataFrames with
one row per combination of the response axes:

    - PointTimeSeriesResponse: one row per (point, time)
    - RouteResponse: one row per route timepoint
    - PointResponse: one row per point

Requirements:
    pandas >= 2.0 must be installed. Install with:
        pip install pandas
    Or install metocean with pandas extra:
        pip install metocean-py[pandas]

Example:
    Basic usage::

        from metocean import MetOceanClient
        from metocean.dataframe import to_dataframe

        async with MetOceanClient(api_key) as client:
            response = await client.get_point_time_series(
                points=[{"lat": -37.82, "lon": 174.89}],
                variables=["wave.height"],
                time={"from": start, "repeat": 8},
            )
            df = to_dataframe(response)
            print(df.head())
"""

from itertools import product
from typing import Any

from .models import (
    ForecastResponse,
    PointResponse,
    PointTimeSeriesResponse,
    RouteResponse,
)


def _check_pandas() -> None:
    """Check if pandas is installed and raise informative error if not."""
    try:
        import pandas  # noqa: F401
    except ImportError as e:
        raise ImportError(
            "pandas is required for DataFrame conversion. "
            "Install it with: pip install pandas"
        ) from e


def _axis_columns(response: ForecastResponse, axis: str) -> dict[str, list[Any]]:
    """Coordinate columns contributed by one axis, indexed along that axis."""
    data = getattr(response.dimensions, axis).data
    if axis == "point":
        return {"lat": [p.lat for p in data], "lon": [p.lon for p in data]}
    if axis == "time":
        return {"time": list(data)}
    if axis == "timepoint":
        return {
            "lat": [p.lat for p in data],
            "lon": [p.lon for p in data],
            "time": [p.time for p in data],
        }
    raise ValueError(f"Unsupported axis: {axis!r}")


def _strides(shape: list[int]) -> list[int]:
    strides = []
    step = 1
    for size in reversed(shape):
        strides.append(step)
        step *= size
    return list(reversed(strides))


def to_dataframe(response: ForecastResponse) -> "pd.DataFrame":
    """Convert a MetOcean response to a pandas DataFrame.

    Variable values are unflattened using the axis order in each
    variable's ``dimensions``. Missing values become NaN.

    Args:
        response: PointTimeSeriesResponse, PointResponse or RouteResponse.

    Returns:
        pandas DataFrame with coordinate columns (``lat``, ``lon`` and, for
        time-series, ``time`` as UTC datetime64) followed by one column per
        variable.

    Raises:
        ImportError: If pandas is not installed.
        ValueError: If the response type is not recognized, or a variable
            refers to an axis the response does not have.

    Example:
        >>> df = to_dataframe(response)
        >>> df.columns
        Index(['lat', 'lon', 'time', 'wave.height'], dtype='object')
    """
    _check_pandas()
    import pandas as pd

    if not isinstance(
        response, (PointTimeSeriesResponse, PointResponse, RouteResponse)
    ):
        raise ValueError(
            f"Unsupported response type: {type(response).__name__}. "
            "Expected PointTimeSeriesResponse, PointResponse, or RouteResponse."
        )

    lengths = response.axis_lengths()
    axes = list(lengths)
    rows = list(product(*(range(lengths[axis]) for axis in axes)))

    columns: dict[str, list[Any]] = {}
    for position, axis in enumerate(axes):
        for name, values in _axis_columns(response, axis).items():
            columns[name] = [values[row[position]] for row in rows]

    for name, variable in response.variables.items():
        dims = variable.dimensions or axes
        missing = [d for d in dims if d not in lengths]
        if missing:
            raise ValueError(
                f"Variable {name!r} uses unknown dimension(s) {missing}"
            )
        strides = _strides([lengths[d] for d in dims])
        values = []
        for row in rows:
            index = dict(zip(axes, row))
            flat = sum(index[d] * s for d, s in zip(dims, strides))
            values.append(variable.data[flat] if flat < len(variable.data) else None)
        columns[name] = values

    df = pd.DataFrame(columns)
    if "time" in df.columns:
        df["time"] = pd.to_datetime(df["time"], utc=True)
    for name in response.variables:
        df[name] = pd.to_numeric(df[name])
    return df


__all__ = ["to_dataframe"]
