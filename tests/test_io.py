from energy_engine.io import load_table, read_table_csv
from energy_engine.errors import EngineArgumentError
from energy_engine.sample_data import load_sample_table
from energy_engine.stats import compute_statistics

import pytest


CSV = """,A,B,C
d1,1,2,3
d2,4,5,6
d3,7,8,9
"""


def test_load_table_reads_header_and_rows():
    table = load_table(CSV)
    assert table.series_names == ("A", "B", "C")
    assert table.labels == ("d1", "d2", "d3")
    assert table.rows[1] == {"date": "d2", "A": 4.0, "B": 5.0, "C": 6.0}


def test_load_is_idempotent():
    assert load_table(CSV) == load_table(CSV)
    assert load_table(CSV).version == load_table(CSV).version


def test_bad_cells_resolve_to_zero():
    table = load_table(",A,B\nd1,N/A,2\nd2,inf,\nd3,3")
    assert table.rows == [
        {"date": "d1", "A": 0.0, "B": 2.0},
        {"date": "d2", "A": 0.0, "B": 0.0},
        {"date": "d3", "A": 3.0, "B": 0.0},
    ]


def test_empty_text_gives_empty_table():
    for text in ("", "   \n  ", None):
        table = load_table(text)
        assert table.series_names == ()
        assert len(table) == 0
        assert table.rows == []


def test_header_only():
    table = load_table(",A,B")
    assert table.series_names == ("A", "B")
    assert len(table) == 0


def test_max_rows_caps_data_lines():
    lines = [",X"] + [f"d{i},{i}" for i in range(150)]
    assert len(load_table("\n".join(lines))) == 99
    assert len(load_table("\n".join(lines), max_rows=5)) == 5
    assert len(load_table("\n".join(lines), max_rows=None)) == 150


def test_blank_line_is_a_zero_row_and_crlf_handled():
    table = load_table(",A\r\nd1,1\r\n\r\nd2,2\r\n")
    assert table.labels == ("d1", "", "d2")
    assert table.column("A").tolist() == [1.0, 0.0, 2.0]


def test_blank_line_counts_toward_max_rows():
    table = load_table(",A\nd1,10\n\nd2,20")
    assert len(table) == 3
    assert compute_statistics(table, "A").average == 10.0
    assert len(load_table(",A\nd1,10\n\nd2,20", max_rows=2)) == 2
    assert load_table(",A\nd1,10\n\nd2,20", max_rows=2).labels == ("d1", "")


def test_cells_use_their_leading_number():
    table = load_table(",A,B,C,D\nd1,12 MW,N/A,-3.5e1kW,.25")
    assert table.rows[0] == {"date": "d1", "A": 12.0, "B": 0.0, "C": -35.0, "D": 0.25}


def test_duplicate_headers_collapse_last_value_wins():
    table = load_table(",A,B,A\nd1,1,2,3")
    assert table.series_names == ("A", "B")
    assert table.rows[0] == {"date": "d1", "A": 3.0, "B": 2.0}


def test_negative_max_rows_rejected():
    with pytest.raises(EngineArgumentError):
        load_table(CSV, max_rows=-1)


def test_read_table_csv(tmp_path):
    path = tmp_path / "consumption.csv"
    path.write_text(CSV, encoding="utf-8")
    assert read_table_csv(path) == load_table(CSV)


def test_sample_table_has_all_states():
    table = load_sample_table()
    assert len(table.series_names) == 33
    assert "J&K" in table
    assert table.column("Maharashtra").tolist() == [428.6]


def test_names_labels_and_cells_are_trimmed():
    table = load_table(", A , B\n d1 , 1 ,2 ")
    assert table.series_names == ("A", "B")
    assert table.labels == ("d1",)
    assert table.rows[0] == {"date": "d1", "A": 1.0, "B": 2.0}
