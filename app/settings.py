# app/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from energy_engine.forecast import DEFAULT_HORIZON
from energy_engine.io import DEFAULT_MAX_ROWS
from energy_engine.regions import DEFAULT_TOP_LIMIT


@dataclass(frozen=True)
class DashboardSettings:
    """Dashboard knobs, read from ENERGY_DASHBOARD_* environment variables"""
    data_path: Optional[str] = None   # None -> bundled sample extract
    max_rows: int = DEFAULT_MAX_ROWS
    horizon: int = DEFAULT_HORIZON
    top_n: int = DEFAULT_TOP_LIMIT
    log_level: str = "INFO"


def _resolve_int(env: Mapping[str, str], name: str, default: int) -> int:
    value = (env.get(name) or "").strip()
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if parsed < 0:
        raise ValueError(f"{name} must be >= 0")
    return parsed


def load_settings(env: Mapping[str, str] | None = None) -> DashboardSettings:
    env = os.environ if env is None else env
    data_path = (env.get("ENERGY_DASHBOARD_DATA") or "").strip() or None
    return DashboardSettings(
        data_path=data_path,
        max_rows=_resolve_int(env, "ENERGY_DASHBOARD_MAX_ROWS", DEFAULT_MAX_ROWS),
        horizon=_resolve_int(env, "ENERGY_DASHBOARD_HORIZON", DEFAULT_HORIZON),
        top_n=_resolve_int(env, "ENERGY_DASHBOARD_TOP_N", DEFAULT_TOP_LIMIT),
        log_level=(env.get("ENERGY_DASHBOARD_LOG_LEVEL") or "INFO").strip().upper(),
    )
