import logging

import pytest

from app.logging_config import configure_logging
from app.settings import DashboardSettings, load_settings


def test_defaults_when_env_empty():
    assert load_settings({}) == DashboardSettings()
    assert load_settings({}).max_rows == 99
    assert load_settings({}).horizon == 30


def test_env_overrides():
    s = load_settings(
        {
            "ENERGY_DASHBOARD_DATA": " data/consumption.csv ",
            "ENERGY_DASHBOARD_MAX_ROWS": "10",
            "ENERGY_DASHBOARD_HORIZON": "7",
            "ENERGY_DASHBOARD_TOP_N": "3",
            "ENERGY_DASHBOARD_LOG_LEVEL": "debug",
        }
    )
    assert s.data_path == "data/consumption.csv"
    assert (s.max_rows, s.horizon, s.top_n) == (10, 7, 3)
    assert s.log_level == "DEBUG"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ENERGY_DASHBOARD_HORIZON", "12")
    assert load_settings().horizon == 12


@pytest.mark.parametrize("value", ["abc", "1.5", "-3"])
def test_invalid_integers_rejected(value):
    with pytest.raises(ValueError, match="ENERGY_DASHBOARD_HORIZON"):
        load_settings({"ENERGY_DASHBOARD_HORIZON": value})


def test_configure_logging_installs_one_handler():
    configure_logging("DEBUG")
    configure_logging("WARNING")
    root = logging.getLogger()
    named = [h for h in root.handlers if h.get_name() == "energy-dashboard"]
    assert len(named) == 1
    assert root.level == logging.WARNING
    root.removeHandler(named[0])
