import pytest

from metocean.models import PointResponse, PointTimeSeriesResponse, RouteResponse


class TestToDataframePointTimeSeries:
    def test_one_row_per_point_and_time(self, point_time_series_payload):
        pytest.importorskip("pandas")
        from metocean.dataframe import to_dataframe

        point_time_series_payload["dimensions"]["point"]["data"].append(
            {"lat": -36.0, "lon": 175.0}
        )
        point_time_series_payload["variables"]["cloud.cover"]["data"] = [
            1.0,
            2.0,
            3.0,
            None,
        ]
        response = PointTimeSeriesResponse.model_validate(point_time_series_payload)

        df = to_dataframe(response)

        assert df.shape[0] == 4
        assert list(df.columns) == ["lat", "lon", "time", "cloud.cover"]
        assert df["lat"].tolist() == [-37.82, -37.82, -36.0, -36.0]
        assert df["cloud.cover"].tolist()[:3] == [1.0, 2.0, 3.0]
        assert df["cloud.cover"].isna().tolist()[3]

    def test_time_is_datetime(self, point_time_series_payload):
        pd = pytest.importorskip("pandas")
        from metocean.dataframe import to_dataframe

        response = PointTimeSeriesResponse.model_validate(point_time_series_payload)

        df = to_dataframe(response)

        assert pd.api.types.is_datetime64_any_dtype(df["time"])
        assert df["time"].iloc[1] == pd.Timestamp("2024-01-01T03:00:00Z")

    def test_time_major_variable_layout(self, point_time_series_payload):
        pytest.importorskip("pandas")
        from metocean.dataframe import to_dataframe

        point_time_series_payload["dimensions"]["point"]["data"].append(
            {"lat": -36.0, "lon": 175.0}
        )
        variable = point_time_series_payload["variables"]["cloud.cover"]
        variable["dimensions"] = ["time", "point"]
        # time 0: p0, p1; time 1: p0, p1
        variable["data"] = [10.0, 20.0, 11.0, 21.0]
        response = PointTimeSeriesResponse.model_validate(point_time_series_payload)

        df = to_dataframe(response)

        # rows are (p0, t0), (p0, t1), (p1, t0), (p1, t1)
        assert df["cloud.cover"].tolist() == [10.0, 11.0, 20.0, 21.0]


class TestToDataframeRoute:
    def test_route(self, route_payload):
        pytest.importorskip("pandas")
        from metocean.dataframe import to_dataframe

        df = to_dataframe(RouteResponse.model_validate(route_payload))

        assert df.shape[0] == 2
        assert list(df.columns) == ["lat", "lon", "time", "wave.height"]
        assert df["wave.height"].tolist() == [2.1, 2.4]


class TestToDataframePoint:
    def test_point(self, point_payload):
        pytest.importorskip("pandas")
        from metocean.dataframe import to_dataframe

        df = to_dataframe(PointResponse.model_validate(point_payload))

        assert list(df.columns) == ["lat", "lon", "sea.depth.below-sea-level"]
        assert df["sea.depth.below-sea-level"].iloc[0] == 2105.0
        assert "time" not in df.columns


class TestToDataframeErrors:
    def test_unknown_dimension(self, point_payload):
        pytest.importorskip("pandas")
        from metocean.dataframe import to_dataframe

        point_payload["variables"]["sea.depth.below-sea-level"]["dimensions"] = [
            "depth"
        ]
        with pytest.raises(ValueError, match="unknown dimension"):
            to_dataframe(PointResponse.model_validate(point_payload))

    def test_unsupported_type(self):
        pytest.importorskip("pandas")
        from metocean.dataframe import to_dataframe

        with pytest.raises(ValueError, match="Unsupported response type"):
            to_dataframe("not a response")
