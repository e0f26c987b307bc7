"""Basic usage examples for MetOcean client.

Set METOCEAN_API_KEY in the environment or in a .env file first.
"""

import asyncio
from datetime import datetime, timedelta, timezone

from metocean import MetOceanClient, MetOceanUnauthorizedError


async def point_time_series_example(client: MetOceanClient) -> None:
    """Get a wave and wind forecast at a point."""
    now = datetime.now(timezone.utc)
    data = await client.get_point_time_series(
        points=[{"lat": -37.82, "lon": 174.89}],
        variables=["wave.height", "wind.speed.at-10m"],
        time={"from": now, "interval": 3, "repeat": 8},
    )

    print("=== Point Time-Series ===")
    waves = data.variables["wave.height"]
    wind = data.variables["wind.speed.at-10m"]
    for i, t in enumerate(data.dimensions.time.data):
        print(f"{t:%Y-%m-%d %H:%M}: {waves.data[i]} {waves.units}, "
              f"wind {wind.data[i]} {wind.units}")


async def point_example(client: MetOceanClient) -> None:
    """Get sea depth at two points."""
    data = await client.get_point(
        points=[{"lat": 41, "lon": 42}, {"lat": -37.82, "lon": 174.89}],
        variables=["sea.depth.below-sea-level"],
    )

    print("\n=== Sea Depth ===")
    depth = data.variables["sea.depth.below-sea-level"]
    for point, value in zip(data.dimensions.point.data, depth.data):
        print(f"({point.lat}, {point.lon}): {value} {depth.units}")


async def route_examples(client: MetOceanClient) -> None:
    """Get conditions along a route, by waypoint times and by speeds."""
    now = datetime.now(timezone.utc)
    route = await client.get_route_time_series(
        route=[
            {"lat": -30.94, "lon": 176.77, "time": now},
            {"lat": -30.15, "lon": 178.81, "time": now + timedelta(hours=3)},
        ],
        variables=["air.humidity.at-2m"],
    )

    print("\n=== Route (waypoint times) ===")
    humidity = route.variables["air.humidity.at-2m"]
    for tp, value in zip(route.dimensions.timepoint.data, humidity.data):
        print(f"{tp.time:%H:%M} ({tp.lat}, {tp.lon}): {value} {humidity.units}")

    speed = await client.get_route_speed(
        start=now,
        speeds=[10.2, 14.5],
        points=[
            {"lat": -30.94, "lon": 176.77},
            {"lat": -30.15, "lon": 178.81},
            {"lat": -29.88, "lon": 177.63},
        ],
        variables=["air.temperature.at-2m"],
    )

    print("\n=== Route (speeds) ===")
    temp = speed.variables["air.temperature.at-2m"]
    for tp, value in zip(speed.dimensions.timepoint.data, temp.data):
        print(f"{tp.time:%H:%M} ({tp.lat}, {tp.lon}): {value} {temp.units}")


async def main() -> None:
    try:
        async with MetOceanClient.from_env() as client:
            await point_time_series_example(client)
            await point_example(client)
            await route_examples(client)
    except MetOceanUnauthorizedError as e:
        print(f"Check METOCEAN_API_KEY: {e.error_list}")


if __name__ == "__main__":
    asyncio.run(main())
