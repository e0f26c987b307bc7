import logging
from datetime import datetime, timezone

import pytest

from metocean import Point, TimeRange
from metocean.types import POINT_VARIABLES
from metocean.validation import (
    check_points,
    check_route,
    check_speeds,
    check_time_or_times,
    check_time_range,
    check_times,
    check_variables,
    get_field,
    is_number,
)


NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestGetField:
    def test_mapping(self):
        assert get_field({"lat": 1}, "lat") == 1

    def test_object(self):
        assert get_field(Point(lat=1, lon=2), "lon") == 2.0

    def test_alias(self):
        assert get_field(TimeRange(from_=NOW), "from", "from_") == NOW
        assert get_field({"from_": NOW}, "from", "from_") == NOW

    def test_missing(self):
        assert get_field({}, "lat") is None
        assert get_field(object(), "lat") is None


class TestIsNumber:
    @pytest.mark.parametrize("value", [0, 1.5, -90, 180.0])
    def test_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize("value", [True, "1", None, float("nan"), [1]])
    def test_non_numbers(self, value):
        assert not is_number(value)


class TestCheckPoints:
    def test_valid_points(self):
        points = [
            {"lat": 0.0, "lon": 0.0},
            {"lat": -90, "lon": -180},
            {"lat": 90, "lon": 180},
            Point(lat=-37.82, lon=174.89),
        ]
        assert check_points(points) == []

    def test_invalid_latitude(self):
        violations = check_points([{"lat": 91, "lon": 0}])
        assert len(violations) == 1
        assert "latitude of 91 is invalid" in violations[0]

    def test_invalid_longitude(self):
        violations = check_points([{"lat": 0, "lon": -180.5}])
        assert len(violations) == 1
        assert "longitude of -180.5 is invalid" in violations[0]

    def test_both_invalid_are_both_reported(self):
        violations = check_points([{"lat": 100, "lon": 200}])
        assert len(violations) == 2
        assert "latitude" in violations[0]
        assert "longitude" in violations[1]

    def test_non_numeric(self):
        violations = check_points([{"lat": "10", "lon": None}])
        assert len(violations) == 2

    def test_reports_every_bad_point(self):
        violations = check_points(
            [{"lat": 100, "lon": 0}, {"lat": 0, "lon": 0}, {"lat": 0, "lon": 500}]
        )
        assert violations[0].startswith("points[0]")
        assert violations[1].startswith("points[2]")

    def test_empty(self):
        assert "contained no points" in check_points([])[0]

    def test_not_a_list(self):
        assert "must be a list" in check_points({"lat": 0, "lon": 0})[0]


class TestCheckVariables:
    def test_valid(self):
        assert check_variables(["wave.height", "cloud.cover"]) == []

    @pytest.mark.parametrize("variables", [[], None, "wave.height"])
    def test_empty_or_not_a_list(self, variables):
        assert "at least one forecast variable" in check_variables(variables)[0]

    def test_non_string_entry(self):
        violations = check_variables(["wave.height", 3])
        assert violations == ["variables[1] must be a string, got int 3"]

    def test_unknown_variable_only_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="metocean.validation"):
            violations = check_variables(["sea.salinity"], POINT_VARIABLES)
        assert violations == []
        assert "sea.salinity" in caplog.text


class TestCheckTimeOrTimes:
    def test_both(self):
        assert "Both 'time' and 'times'" in check_time_or_times({"from": NOW}, [NOW])[0]

    def test_neither(self):
        assert "Neither" in check_time_or_times(None, None)[0]

    def test_one(self):
        assert check_time_or_times({"from": NOW}, None) == []
        assert check_time_or_times(None, [NOW]) == []


class TestCheckTimeRange:
    def test_none(self):
        assert check_time_range(None) == []

    @pytest.mark.parametrize(
        "time",
        [
            {"from": NOW},
            {"to": NOW},
            {"from": NOW, "to": NOW, "interval": 1},
            {"from": NOW, "repeat": 5, "interval": 0.5},
            TimeRange(from_=NOW, repeat=2),
        ],
    )
    def test_valid(self, time):
        assert check_time_range(time) == []

    def test_repeat_and_to(self):
        violations = check_time_range({"repeat": 3, "to": NOW})
        assert len(violations) == 1
        assert "'repeat' and 'to'" in violations[0]

    def test_neither_from_nor_to(self):
        violations = check_time_range({"interval": 3, "repeat": 3})
        assert violations == ["At least one of 'from' and 'to' is required in 'time'."]

    def test_bad_types(self):
        violations = check_time_range(
            {"from": "2024-01-01", "interval": "3h", "repeat": 2.5}
        )
        assert len(violations) == 3
        assert "'time.from' must be a datetime" in violations[0]
        assert "'time.interval'" in violations[1]
        assert "'time.repeat'" in violations[2]


class TestCheckTimes:
    def test_none(self):
        assert check_times(None) == []

    def test_valid(self):
        assert check_times([NOW, datetime(2024, 1, 2)]) == []

    def test_empty(self):
        assert "it was empty" in check_times([])[0]

    def test_bad_entry(self):
        violations = check_times([NOW, "2024-01-02"])
        assert violations == ["times[1] must be a datetime, got str '2024-01-02'"]


class TestCheckRoute:
    def test_valid(self):
        assert check_route([{"lat": 1, "lon": 2, "time": NOW}]) == []

    def test_bad_waypoint(self):
        violations = check_route([{"lat": 95, "lon": 2}])
        assert len(violations) == 2
        assert violations[0].startswith("route[0]: latitude")
        assert violations[1].startswith("route[0].time")

    def test_empty(self):
        assert "'route' contained no points" in check_route([])[0]

    def test_longitude_past_antimeridian_rejected(self):
        violations = check_route([{"lat": -30.15, "lon": 186.77, "time": NOW}])
        assert violations == [
            "route[0]: longitude of 186.77 is invalid (must be between -180 and 180)"
        ]


class TestCheckSpeeds:
    POINTS = [{"lat": 0, "lon": 0}, {"lat": 1, "lon": 1}, {"lat": 2, "lon": 2}]

    def test_valid(self):
        assert check_speeds([10, 12.5], self.POINTS) == []

    def test_length_mismatch(self):
        violations = check_speeds([10, 12, 14], self.POINTS)
        assert "expected 2 for 3 points, got 3" in violations[0]

    def test_non_positive(self):
        violations = check_speeds([0, -1], self.POINTS)
        assert len(violations) == 2

    def test_empty(self):
        assert check_speeds([], self.POINTS) == ["'speeds' must be a list of at least one speed"]
