"""
Logging setup for the dashboard process.
- One stderr handler on the root logger: timestamp, level, logger name, message.
- Level comes from settings (ENERGY_DASHBOARD_LOG_LEVEL, default INFO).
- Safe to call on every Streamlit rerun; the handler is installed once.
"""
from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "energy-dashboard"


def configure_logging(level_name: str = "INFO") -> None:
    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
    root = logging.getLogger()

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)

    root.setLevel(level)
    # streamlit/tornado chatter stays at WARNING
    for name in ("streamlit", "tornado", "watchdog"):
        logging.getLogger(name).setLevel(logging.WARNING)
