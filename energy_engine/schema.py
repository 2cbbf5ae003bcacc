# energy_engine/schema.py
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

import numpy as np
import pandas as pd


class SeriesTable:
    """
    Column-indexed set of readings: one row per timestamp label, one float
    column per series name. Column set is fixed at construction.

    Treat as read-only; `to_frame()` hands out a copy.
    """

    def __init__(self, labels: Sequence[str], series_names: Sequence[str], values: Iterable[Sequence[float]] = ()):
        names = tuple(series_names)
        data = np.asarray(list(values), dtype=float).reshape(len(labels), len(names))
        self._frame = pd.DataFrame(data, index=pd.Index(list(labels), dtype=object), columns=pd.Index(names, dtype=object))
        self._series_names = names
        self._version = self._digest()

    @classmethod
    def empty(cls) -> "SeriesTable":
        return cls([], [])

    def _digest(self) -> str:
        h = hashlib.sha1()
        h.update("\x1f".join(self._series_names).encode("utf-8"))
        h.update(b"\x1e")
        h.update("\x1f".join(str(x) for x in self._frame.index).encode("utf-8"))
        h.update(b"\x1e")
        h.update(np.ascontiguousarray(self._frame.to_numpy(dtype=float)).tobytes())
        return h.hexdigest()

    @property
    def series_names(self) -> tuple[str, ...]:
        return self._series_names

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._frame.index)

    @property
    def version(self) -> str:
        """Content digest; equal tables share a version."""
        return self._version

    @property
    def rows(self) -> list[dict]:
        out = []
        for label, values in zip(self._frame.index, self._frame.to_numpy(dtype=float)):
            row = {"date": label}
            row.update(zip(self._series_names, (float(v) for v in values)))
            out.append(row)
        return out

    def column(self, series_name: str) -> pd.Series:
        if series_name not in self._series_names:
            return pd.Series([], dtype=float, name=series_name)
        return self._frame[series_name].copy()

    def to_frame(self) -> pd.DataFrame:
        return self._frame.copy()

    def __len__(self) -> int:
        return len(self._frame)

    def __contains__(self, series_name: object) -> bool:
        return series_name in self._series_names

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeriesTable):
            return NotImplemented
        return (
            self._series_names == other._series_names
            and self.labels == other.labels
            and self._frame.equals(other._frame)
        )

    def __hash__(self) -> int:
        return hash(self._version)

    def __repr__(self) -> str:
        return f"SeriesTable(rows={len(self)}, series={len(self._series_names)})"


@dataclass(frozen=True)
class StatisticsSummary:
    """Descriptive statistics of one series"""
    average: float = 0.0
    maximum: float = 0.0
    minimum: float = 0.0
    standard_deviation: float = 0.0  # population (ddof=0)
    total: float = 0.0

    @property
    def range(self) -> float:
        return self.maximum - self.minimum


class Trend(str, Enum):
    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"


@dataclass(frozen=True)
class ForecastPoint:
    label: str   # "Day 1", "Day 2", ...
    value: float


@dataclass(frozen=True)
class ForecastResult:
    predictions: tuple[ForecastPoint, ...]
    slope: float
    trend: Trend
    intercept: float = 0.0

    @property
    def values(self) -> list[float]:
        return [p.value for p in self.predictions]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"period": [p.label for p in self.predictions], "value": self.values},
            columns=["period", "value"],
        )


@dataclass(frozen=True)
class RegionGroup:
    """Named group of series (e.g. a grid region and its member states)"""
    name: str
    members: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RegionalSummary:
    region: str
    total: float
    member_count: int


@dataclass(frozen=True)
class ConsumerRank:
    series_name: str
    total: float
    average: float
