# energy_engine/sample_data.py
from __future__ import annotations

from energy_engine.io import DEFAULT_MAX_ROWS, load_table
from energy_engine.schema import SeriesTable

# State/UT level daily consumption (MW), as shipped with the dashboard.
SAMPLE_CSV = (
    ",Punjab,Haryana,Rajasthan,Delhi,UP,Uttarakhand,HP,J&K,Chandigarh,Chhattisgarh,Gujarat,MP,"
    "Maharashtra,Goa,DNH,Andhra Pradesh,Telangana,Karnataka,Kerala,Tamil Nadu,Pondy,Bihar,Jharkhand,"
    "Odisha,West Bengal,Sikkim,Arunachal Pradesh,Assam,Manipur,Meghalaya,Mizoram,Nagaland,Tripura\n"
    "02/01/2019 00:00:00,119.9,130.3,234.1,85.8,313.9,40.7,30,52.5,5,78.7,319.5,253,428.6,12.8,18.6,"
    "164.6,204.2,206.3,72.7,268.3,6.3,82.3,24.8,70.2,108.2,2,2.1,21.7,2.7,6.1,1.9,2.2,3.4\n"
)


def load_sample_table(max_rows: int | None = DEFAULT_MAX_ROWS) -> SeriesTable:
    return load_table(SAMPLE_CSV, max_rows=max_rows)
