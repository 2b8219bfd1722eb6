import inspect
import typing
from dataclasses import fields, is_dataclass

import pytest
from vega_lite_4 import UNSET, _UnsetType, generated_types
from vega_lite_4.types import field_alias, is_removable_field

RECORDS = [
    obj
    for _, obj in inspect.getmembers(generated_types, inspect.isclass)
    if is_dataclass(obj) and obj.__module__ == generated_types.__name__
]


@pytest.mark.parametrize("cls", RECORDS, ids=lambda cls: cls.__name__)
def test_annotations_resolve(cls):
    hints = typing.get_type_hints(cls)
    for f in fields(cls):
        members = typing.get_args(hints[f.name])
        if is_removable_field(f):
            assert f.default is UNSET
            assert _UnsetType in members and type(None) in members, f"{cls.__name__}.{f.name}"
        else:
            assert _UnsetType not in members, f"{cls.__name__}.{f.name}"


@pytest.mark.parametrize("cls", RECORDS, ids=lambda cls: cls.__name__)
def test_wire_names_are_unique(cls):
    names = [field_alias(f) for f in fields(cls)]
    assert len(names) == len(set(names))


def test_keyword_aliases():
    aliases = {
        (cls.__name__, f.name): field_alias(f) for cls in RECORDS for f in fields(cls) if f.name != field_alias(f)
    }
    assert aliases[("VegaLite", "schema_")] == "$schema"
    assert aliases[("LookupTransform", "from_")] == "from"
    assert aliases[("LogicalNot", "not_")] == "not"
    assert set(aliases.values()) <= {"$schema", "as", "from", "not", "and", "or"}


def test_records_are_keyword_only():
    with pytest.raises(TypeError):
        generated_types.UrlData("data/cars.json")  # type: ignore[misc]
