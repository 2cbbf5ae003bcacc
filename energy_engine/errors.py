# energy_engine/errors.py
from __future__ import annotations


class EngineArgumentError(ValueError):
    """Raised when a caller passes an argument the engine cannot honour (e.g. a negative horizon)."""
