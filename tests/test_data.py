from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List

import pytest
from vega_lite_4 import DataFormat, InlineData, NamedData, UrlData, inline_data, named_data, url_data

from conftest import FakeMatrix


@dataclass
class Reading:
    day: date
    value: float


class FakeFrame:
    """Stands in for a pandas DataFrame."""

    columns = ["a", "b"]

    def __init__(self, records: List[Dict[str, Any]]):
        self._records = records

    def to_dict(self, orient: str = "dict") -> Any:
        assert orient == "records"
        return self._records


def test_records():
    values = [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]
    assert inline_data(values) == InlineData(values=values)
    assert inline_data(iter(values)).values == values


def test_dataclass_rows():
    data = inline_data([Reading(day=date(2020, 1, 1), value=1.5), Reading(day=date(2020, 1, 2), value=2)])
    assert data.values == [
        {"day": "2020-01-01", "value": 1.5},
        {"day": "2020-01-02", "value": 2},
    ]


def test_matrix_rows_are_keyed_by_column_index():
    expected = [{"0": 1, "1": 2}, {"0": 3, "1": 4}]
    assert inline_data([[1, 2], [3, 4]]).values == expected
    assert inline_data([(1, 2), (3, 4)]).values == expected
    assert inline_data(FakeMatrix([[1, 2], [3, 4]])).values == expected


def test_data_frame():
    frame = FakeFrame([{"a": 1, "b": date(2020, 5, 17)}])
    assert inline_data(frame).values == [{"a": 1, "b": "2020-05-17"}]


def test_primitive_values():
    assert inline_data([1, 2, 3]).values == [1, 2, 3]


def test_text_and_single_object():
    csv_format = DataFormat(type="csv")
    data = inline_data("a,b\n1,2", format=csv_format, name="table")
    assert data == InlineData(values="a,b\n1,2", format=csv_format, name="table")

    assert inline_data({"type": "FeatureCollection", "features": []}).values == {
        "type": "FeatureCollection",
        "features": [],
    }


def test_not_tabular():
    with pytest.raises(TypeError):
        inline_data(42)


def test_url_and_named_data():
    assert url_data("data/cars.json") == UrlData(url="data/cars.json")
    assert url_data("data/us-10m.json", format=DataFormat(type="topojson", feature="counties")).format.feature == (
        "counties"
    )
    assert named_data("source") == NamedData(name="source")
