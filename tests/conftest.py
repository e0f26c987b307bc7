import copy

import httpx
import pytest

from metocean import MetOceanClient


NO_DATA_REASONS = {
    "GOOD": 0,
    "GAP": 1,
    "FILL": 2,
    "MASK_LAND": 3,
    "MASK_ICE": 4,
    "INVALID_HIGH": 5,
    "INVALID_LOW": 6,
    "ERROR_INTERNAL": 7,
}

POINT_TIME_SERIES_PAYLOAD = {
    "dimensions": {
        "point": {
            "type": "point",
            "units": "degrees",
            "data": [{"lat": -37.82, "lon": 174.89}],
        },
        "time": {
            "type": "time",
            "units": "ISO8601",
            "data": ["2024-01-01T00:00:00Z", "2024-01-01T03:00:00Z"],
        },
    },
    "noDataReasons": NO_DATA_REASONS,
    "variables": {
        "cloud.cover": {
            "standardName": "cloud_area_fraction",
            "units": "percent",
            "siUnits": "1",
            "dimensions": ["point", "time"],
            "data": [12.5, None],
            "noData": [0, 1],
        }
    },
}

POINT_PAYLOAD = {
    "dimensions": {
        "point": {
            "type": "point",
            "units": "degrees",
            "data": [{"lat": 41.0, "lon": 42.0}, {"lat": 45.0, "lon": 43.0}],
        }
    },
    "noDataReasons": NO_DATA_REASONS,
    "variables": {
        "sea.depth.below-sea-level": {
            "standardName": "sea_floor_depth_below_sea_level",
            "units": "m",
            "siUnits": "m",
            "dimensions": ["point"],
            "data": [2105.0, None],
            "noData": [0, 3],
        }
    },
}

ROUTE_PAYLOAD = {
    "dimensions": {
        "timepoint": {
            "type": "timepoint",
            "units": "degrees, ISO8601",
            "data": [
                {"lat": -30.94, "lon": 176.77, "time": "2024-05-30T00:00:00Z"},
                {"lat": -30.15, "lon": 178.81, "time": "2024-05-30T03:00:00Z"},
            ],
        }
    },
    "noDataReasons": NO_DATA_REASONS,
    "variables": {
        "wave.height": {
            "standardName": "sea_surface_wave_significant_height",
            "units": "m",
            "siUnits": "m",
            "dimensions": ["timepoint"],
            "data": [2.1, 2.4],
            "noData": [0, 0],
        }
    },
}


class Recorder:
    """httpx.MockTransport handler that records requests."""

    def __init__(self, status=200, payload=None, content=None, exc=None):
        self.status = status
        self.payload = payload
        self.content = content
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        return httpx.Response(self.status, json=self.payload)


def make_client(recorder, **kwargs):
    return MetOceanClient(
        "test-key", transport=httpx.MockTransport(recorder), **kwargs
    )


@pytest.fixture
def point_time_series_payload():
    return copy.deepcopy(POINT_TIME_SERIES_PAYLOAD)


@pytest.fixture
def point_payload():
    return copy.deepcopy(POINT_PAYLOAD)


@pytest.fixture
def route_payload():
    return copy.deepcopy(ROUTE_PAYLOAD)
