# energy_engine/forecast.py
from __future__ import annotations

import numpy as np

from energy_engine.errors import EngineArgumentError
from energy_engine.schema import ForecastPoint, ForecastResult, SeriesTable, Trend
from energy_engine.stats import series_values

DEFAULT_HORIZON = 30


def _period_label(step: int) -> str:
    return f"Day {step + 1}"


def classify_trend(slope: float) -> Trend:
    # exact comparison, no tolerance band
    if slope > 0:
        return Trend.INCREASING
    if slope < 0:
        return Trend.DECREASING
    return Trend.STABLE


def fit_line(values) -> tuple[float, float]:
    """
    Ordinary least squares over (index, value) pairs via the normal equations.

    Returns (slope, intercept). Fewer than two points -> slope 0 and the
    intercept is the single value (or 0).
    """
    y = np.asarray(values, dtype=float)
    n = y.size
    if n == 0:
        return 0.0, 0.0
    if n == 1:
        return 0.0, float(y[0])

    x = np.arange(n, dtype=float)
    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_x2 = float((x * x).sum())

    denom = n * sum_x2 - sum_x * sum_x
    slope = 0.0 if denom == 0 else (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def forecast(table: SeriesTable, series_name: str, horizon: int = DEFAULT_HORIZON) -> ForecastResult:
    """
    Project `horizon` future points of a series with a straight-line fit.

    x is the position within the finite readings (skipped rows take no slot);
    projections start at x = n, are clamped at 0 and rounded to 2 decimals.
    """
    if horizon < 0:
        raise EngineArgumentError(f"horizon must be >= 0, got {horizon}")

    values = series_values(table, series_name)
    n = values.size

    if n < 2:
        # 0 points -> flat zero line, 1 point -> repeat it
        level = round(float(values[-1]), 2) if n == 1 else 0.0
        preds = tuple(ForecastPoint(_period_label(i), level) for i in range(horizon))
        return ForecastResult(predictions=preds, slope=0.0, trend=Trend.STABLE, intercept=level)

    slope, intercept = fit_line(values)

    preds = []
    for i in range(horizon):
        x = n + i
        predicted = max(0.0, slope * x + intercept)
        preds.append(ForecastPoint(_period_label(i), round(predicted, 2)))

    return ForecastResult(
        predictions=tuple(preds),
        slope=slope,
        trend=classify_trend(slope),
        intercept=intercept,
    )
