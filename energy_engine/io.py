from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from energy_engine.errors import EngineArgumentError
from energy_engine.schema import SeriesTable

logger = logging.getLogger(__name__)

DELIMITER = ","
DEFAULT_MAX_ROWS = 99
# leading decimal number of a cell, e.g. "12 MW" -> "12"
NUMERIC_PREFIX = r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"


def _split_header(line: str) -> list[str]:
    # first header field labels the timestamp column and is always dropped
    return [h.strip() for h in line.split(DELIMITER)[1:]]


def _parse_column(col: pd.Series) -> pd.Series:
    """Numeric prefix of each cell; cells without one become NaN."""
    prefix = col.fillna("").astype(str).str.extract(NUMERIC_PREFIX, expand=False)
    return pd.to_numeric(prefix, errors="coerce")


def load_table(text: str | None, max_rows: int | None = DEFAULT_MAX_ROWS) -> SeriesTable:
    """
    Parse delimited text into a SeriesTable.

    Layout:
      ,<series1>,<series2>,...
      <label>,<v1>,<v2>,...

    Bad or missing cells resolve to 0; the load itself never fails on content.
    `max_rows=None` reads every data line.
    """
    if max_rows is not None and max_rows < 0:
        raise EngineArgumentError(f"max_rows must be >= 0, got {max_rows}")

    lines = (text or "").strip().splitlines()
    if not lines:
        return SeriesTable.empty()

    header_fields = _split_header(lines[0])
    series_names = list(dict.fromkeys(header_fields))

    labels: list[str] = []
    cells: list[dict] = []
    for line in lines[1:]:
        if max_rows is not None and len(labels) >= max_rows:
            break
        # a blank line is a row with an empty label and all-zero readings
        fields = line.split(DELIMITER)
        row = {}
        for idx, name in enumerate(header_fields):
            pos = idx + 1
            # repeated header names keep their first position, last column wins
            row[name] = fields[pos].strip() if pos < len(fields) else None
        labels.append(fields[0].strip())
        cells.append(row)

    if not labels or not series_names:
        return SeriesTable(labels, series_names, [() for _ in labels])

    raw = pd.DataFrame(cells, columns=series_names)
    numeric = raw.apply(_parse_column).astype(float)
    numeric = numeric.replace([np.inf, -np.inf], np.nan)
    coerced = int(numeric.isna().to_numpy().sum())
    numeric = numeric.fillna(0.0)

    logger.debug(
        "loaded table: %d rows, %d series, %d cells defaulted to 0",
        len(labels), len(series_names), coerced,
    )
    return SeriesTable(labels, series_names, numeric.to_numpy())


def read_table_csv(path: str | Path, max_rows: int | None = DEFAULT_MAX_ROWS) -> SeriesTable:
    p = Path(path)
    return load_table(p.read_text(encoding="utf-8"), max_rows=max_rows)
