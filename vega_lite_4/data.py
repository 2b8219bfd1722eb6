"""
Helpers turning in-memory data into Vega-Lite data sources.

`inline_data` accepts the usual shapes of tabular data:

- records: an iterable of mappings, or of dataclass instances (encoded like any generated record)
- a 2-D matrix: nested sequences, or an object with `tolist()` such as a numpy array; each row becomes an object
  keyed by column index (`"0"`, `"1"`, ...)
- a data frame: anything with `columns` and `to_dict(orient="records")`
- a string holding CSV / TSV / JSON text (set `format` so that Vega-Lite knows how to parse it)
- a mapping, used as a single object value
"""

from dataclasses import is_dataclass
from typing import Any, Iterable, List, Mapping, Optional

from .generated_types import DataFormat, InlineData, InlineDataset, NamedData, UrlData
from .types import to_dict


def inline_data(values: Any, format: Optional[DataFormat] = None, name: Optional[str] = None) -> InlineData:
    return InlineData(values=_to_dataset(values), format=format, name=name)


def url_data(url: str, format: Optional[DataFormat] = None, name: Optional[str] = None) -> UrlData:
    return UrlData(url=url, format=format, name=name)


def named_data(name: str, format: Optional[DataFormat] = None) -> NamedData:
    return NamedData(name=name, format=format)


def _to_dataset(values: Any) -> InlineDataset:
    if isinstance(values, str):
        return values
    if isinstance(values, Mapping):
        return to_dict(dict(values))
    if hasattr(values, "columns") and hasattr(values, "to_dict"):
        return to_dict(values.to_dict(orient="records"))
    if hasattr(values, "tolist"):
        values = values.tolist()
    if not isinstance(values, Iterable):
        raise TypeError(f"Cannot use {type(values).__name__} as inline data")
    return [_to_row(row) for row in values]


def _to_row(row: Any) -> Any:
    if is_dataclass(row) and not isinstance(row, type):
        return to_dict(row)
    if isinstance(row, Mapping):
        return to_dict(dict(row))
    if hasattr(row, "tolist"):
        row = row.tolist()
    if isinstance(row, (list, tuple)):
        return _matrix_row(row)
    # Primitive values: Vega-Lite wraps each one as {"data": value}
    return to_dict(row)


def _matrix_row(row: List[Any]) -> dict:
    return {str(i): to_dict(value) for i, value in enumerate(row)}
