# app/views.py
from __future__ import annotations

from enum import Enum

import pandas as pd

from energy_engine.regions import regional_shares
from energy_engine.schema import ConsumerRank, RegionalSummary, SeriesTable, Trend

TREND_POINTS = 50

TREND_ICONS = {
    Trend.INCREASING: "📈",
    Trend.DECREASING: "📉",
    Trend.STABLE: "➡️",
}


class ViewMode(str, Enum):
    OVERVIEW = "overview"
    PREDICTIONS = "predictions"
    REGIONAL = "regional"

    @property
    def title(self) -> str:
        return {
            ViewMode.OVERVIEW: "📊 Overview",
            ViewMode.PREDICTIONS: "🔮 Predictions",
            ViewMode.REGIONAL: "🗺️ Regional",
        }[self]


def default_series(table: SeriesTable, preferred: str = "Punjab") -> str | None:
    if preferred in table:
        return preferred
    return table.series_names[0] if table.series_names else None


def trend_frame(table: SeriesTable, series_name: str, limit: int = TREND_POINTS) -> pd.DataFrame:
    """First `limit` readings of one series as date/value rows for the area chart."""
    col = table.column(series_name).iloc[:limit]
    return pd.DataFrame({"date": list(col.index), "value": col.to_numpy()}, columns=["date", "value"])


def top_consumers_frame(ranks: list[ConsumerRank]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"series": r.series_name, "total": r.total, "average": r.average} for r in ranks],
        columns=["series", "total", "average"],
    )


def regions_frame(summaries: list[RegionalSummary]) -> pd.DataFrame:
    shares = regional_shares(summaries)
    return pd.DataFrame(
        [
            {"region": s.region, "total": s.total, "members": s.member_count, "share": shares[s.region]}
            for s in summaries
        ],
        columns=["region", "total", "members", "share"],
    )
