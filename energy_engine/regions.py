# energy_engine/regions.py
from __future__ import annotations

from typing import Iterable, Mapping, Union

from energy_engine.errors import EngineArgumentError
from energy_engine.schema import (
    ConsumerRank,
    RegionalSummary,
    RegionGroup,
    SeriesTable,
)
from energy_engine.stats import StatisticsFn, compute_statistics

RegionMap = Union[Mapping[str, Iterable[str]], Iterable[RegionGroup], Iterable[tuple]]

DEFAULT_TOP_LIMIT = 10

# Indian grid regions and their member states/UTs
DEFAULT_REGIONS: tuple[RegionGroup, ...] = (
    RegionGroup("North", ("Punjab", "Haryana", "Delhi", "UP", "Uttarakhand", "HP", "J&K", "Chandigarh")),
    RegionGroup("West", ("Gujarat", "Maharashtra", "Goa", "DNH")),
    RegionGroup("South", ("Andhra Pradesh", "Telangana", "Karnataka", "Kerala", "Tamil Nadu", "Pondy")),
    RegionGroup("East", ("Bihar", "Jharkhand", "Odisha", "West Bengal")),
    RegionGroup(
        "Northeast",
        ("Sikkim", "Arunachal Pradesh", "Assam", "Manipur", "Meghalaya", "Mizoram", "Nagaland", "Tripura"),
    ),
    RegionGroup("Central", ("Chhattisgarh", "MP", "Rajasthan")),
)


def normalize_region_map(region_map: RegionMap) -> list[RegionGroup]:
    """
    Accepts {name: members}, [(name, members), ...] or [RegionGroup, ...];
    declaration order is kept.
    """
    items = region_map.items() if isinstance(region_map, Mapping) else region_map
    groups = []
    for item in items:
        if isinstance(item, RegionGroup):
            groups.append(item)
        else:
            name, members = item
            groups.append(RegionGroup(str(name), tuple(members)))
    return groups


def aggregate_regions(
    table: SeriesTable,
    region_map: RegionMap = DEFAULT_REGIONS,
    statistics: StatisticsFn | None = None,
) -> list[RegionalSummary]:
    """
    Sum member totals per region.

    Members missing from the table contribute nothing; member_count still
    reports the declared size of the region.
    """
    stats_fn = statistics if statistics is not None else compute_statistics
    out = []
    for group in normalize_region_map(region_map):
        total = 0.0
        for member in group.members:
            if member in table:
                total += stats_fn(table, member).total
        out.append(RegionalSummary(region=group.name, total=round(total, 2), member_count=len(group.members)))
    return out


def regional_shares(summaries: Iterable[RegionalSummary]) -> dict[str, float]:
    """Fraction of the grand total per region (0 everywhere when the grand total is 0)."""
    summaries = list(summaries)
    grand = sum(s.total for s in summaries)
    if grand == 0:
        return {s.region: 0.0 for s in summaries}
    return {s.region: s.total / grand for s in summaries}


def top_consumers(
    table: SeriesTable,
    limit: int = DEFAULT_TOP_LIMIT,
    statistics: StatisticsFn | None = None,
) -> list[ConsumerRank]:
    """Series ranked by descending total; ties keep series order."""
    if limit < 0:
        raise EngineArgumentError(f"limit must be >= 0, got {limit}")

    stats_fn = statistics if statistics is not None else compute_statistics
    ranks = []
    for name in table.series_names:
        s = stats_fn(table, name)
        ranks.append(ConsumerRank(series_name=name, total=s.total, average=s.average))

    ranks.sort(key=lambda r: r.total, reverse=True)
    return ranks[:limit]
