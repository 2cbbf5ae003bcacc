# energy_engine/cache.py
from __future__ import annotations

import logging
from typing import Dict, Tuple

import pandas as pd

from energy_engine.forecast import DEFAULT_HORIZON, forecast
from energy_engine.regions import (
    DEFAULT_REGIONS,
    DEFAULT_TOP_LIMIT,
    RegionMap,
    aggregate_regions,
    normalize_region_map,
    top_consumers,
)
from energy_engine.schema import (
    ConsumerRank,
    ForecastResult,
    RegionalSummary,
    SeriesTable,
    StatisticsSummary,
)
from energy_engine.stats import StatisticsFn, compute_statistics, statistics_frame

logger = logging.getLogger(__name__)


class StatisticsCache:
    """
    Memoizes a statistics function by (table.version, series_name).

    Drop-in for `compute_statistics`; pass it as `statistics=` to the
    aggregator to avoid recomputing per-series totals.
    """

    def __init__(self, compute: StatisticsFn = compute_statistics):
        self._compute = compute
        self._store: Dict[Tuple[str, str], StatisticsSummary] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, table: SeriesTable, series_name: str) -> StatisticsSummary:
        key = (table.version, series_name)
        cached = self._store.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        result = self._compute(table, series_name)
        self._store[key] = result
        return result

    def clear(self) -> None:
        self._store.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._store)


class AnalyticsEngine:
    """Table + region config + statistics cache behind one object, for the dashboard."""

    def __init__(self, table: SeriesTable, region_map: RegionMap = DEFAULT_REGIONS, cache: StatisticsCache | None = None):
        self.table = table
        self.regions_config = normalize_region_map(region_map)
        self.cache = cache if cache is not None else StatisticsCache()
        logger.debug("engine ready: %r, %d regions", table, len(self.regions_config))

    @property
    def series_names(self) -> tuple[str, ...]:
        return self.table.series_names

    def statistics(self, series_name: str) -> StatisticsSummary:
        return self.cache(self.table, series_name)

    def forecast(self, series_name: str, horizon: int = DEFAULT_HORIZON) -> ForecastResult:
        return forecast(self.table, series_name, horizon)

    def regions(self) -> list[RegionalSummary]:
        return aggregate_regions(self.table, self.regions_config, statistics=self.cache)

    def top_consumers(self, limit: int = DEFAULT_TOP_LIMIT) -> list[ConsumerRank]:
        return top_consumers(self.table, limit, statistics=self.cache)

    def statistics_table(self) -> pd.DataFrame:
        return statistics_frame(self.table, statistics=self.cache)
