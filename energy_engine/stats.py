# energy_engine/stats.py
from __future__ import annotations

from typing import Callable

import numpy as np
import pandas as pd

from energy_engine.schema import SeriesTable, StatisticsSummary

StatisticsFn = Callable[[SeriesTable, str], StatisticsSummary]


def series_values(table: SeriesTable, series_name: str) -> np.ndarray:
    """
    Finite readings of one series, in row order.
    Unknown series -> empty array.
    """
    values = table.column(series_name).to_numpy(dtype=float)
    return values[np.isfinite(values)]


def compute_statistics(table: SeriesTable, series_name: str) -> StatisticsSummary:
    """
    Mean / max / min / population std / sum for one series.
    No valid values (or unknown series) -> all-zero summary.
    """
    values = series_values(table, series_name)
    if values.size == 0:
        return StatisticsSummary()

    total = float(values.sum())
    average = total / values.size
    variance = float(((values - average) ** 2).sum()) / values.size

    return StatisticsSummary(
        average=average,
        maximum=float(values.max()),
        minimum=float(values.min()),
        standard_deviation=float(np.sqrt(variance)),
        total=total,
    )


def statistics_frame(table: SeriesTable, statistics: StatisticsFn | None = None) -> pd.DataFrame:
    """One row of statistics per series, in series order."""
    stats_fn = statistics if statistics is not None else compute_statistics
    rows = []
    for name in table.series_names:
        s = stats_fn(table, name)
        rows.append({
            "series": name,
            "average": s.average,
            "maximum": s.maximum,
            "minimum": s.minimum,
            "std_dev": s.standard_deviation,
            "range": s.range,
            "total": s.total,
        })
    cols = ["series", "average", "maximum", "minimum", "std_dev", "range", "total"]
    return pd.DataFrame(rows, columns=cols)
