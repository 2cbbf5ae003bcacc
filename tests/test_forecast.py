import numpy as np
import pytest

from energy_engine.errors import EngineArgumentError
from energy_engine.forecast import classify_trend, fit_line, forecast
from energy_engine.schema import SeriesTable, Trend


def make_table(values, name="S"):
    labels = [f"d{i}" for i in range(len(values))]
    return SeriesTable(labels, [name], [[v] for v in values])


def test_single_point_repeats_value():
    res = forecast(make_table([7]), "S", horizon=3)
    assert res.values == [7, 7, 7]
    assert res.slope == 0
    assert res.trend == Trend.STABLE
    assert [p.label for p in res.predictions] == ["Day 1", "Day 2", "Day 3"]


def test_single_point_is_rounded():
    res = forecast(make_table([3.14159]), "S", horizon=2)
    assert res.values == [3.14, 3.14]


def test_no_points_gives_zero_line():
    res = forecast(SeriesTable.empty(), "S")
    assert len(res.predictions) == 30
    assert set(res.values) == {0}
    assert res.predictions[-1].label == "Day 30"
    assert res.trend == Trend.STABLE


def test_increasing_series():
    res = forecast(make_table([1, 2, 3, 4, 5]), "S", horizon=3)
    assert res.slope > 0
    assert res.slope == pytest.approx(1.0)
    assert res.trend == Trend.INCREASING
    assert res.values == pytest.approx([6.0, 7.0, 8.0])


def test_decreasing_series():
    res = forecast(make_table([5, 4, 3, 2, 1]), "S", horizon=2)
    assert res.slope < 0
    assert res.trend == Trend.DECREASING
    assert res.values == pytest.approx([0.0, 0.0])


def test_predictions_clamped_at_zero():
    res = forecast(make_table([100, 80, 60, 40, 20]), "S", horizon=10)
    assert all(v >= 0 for v in res.values)
    assert res.values[0] == pytest.approx(0.0)


def test_invalid_rows_do_not_take_an_x_slot():
    # 1, 2, 3 at dense positions 0..2 regardless of the gap
    res = forecast(make_table([1.0, np.nan, 2.0, 3.0]), "S", horizon=1)
    assert res.slope == pytest.approx(1.0)
    assert res.values == pytest.approx([4.0])


def test_constant_series_is_stable():
    res = forecast(make_table([4, 4, 4, 4]), "S", horizon=2)
    assert res.trend == Trend.STABLE
    assert res.values == [4.0, 4.0]


def test_fit_line_and_trend_helpers():
    slope, intercept = fit_line([2.0, 4.0, 6.0])
    assert slope == pytest.approx(2.0)
    assert intercept == pytest.approx(2.0)
    assert classify_trend(0.0) == Trend.STABLE
    assert classify_trend(-1e-12) == Trend.DECREASING
    assert Trend.INCREASING.value == "Increasing"


def test_zero_and_negative_horizon():
    assert forecast(make_table([1, 2]), "S", horizon=0).predictions == ()
    with pytest.raises(EngineArgumentError):
        forecast(make_table([1, 2]), "S", horizon=-1)


def test_result_frame_for_charts():
    df = forecast(make_table([1, 2, 3]), "S", horizon=2).to_frame()
    assert df.columns.tolist() == ["period", "value"]
    assert df["period"].tolist() == ["Day 1", "Day 2"]
