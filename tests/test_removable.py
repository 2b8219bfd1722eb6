"""
Tests for the tri-state operations in vega_lite_4.removable
"""

from datetime import date

import pytest
from vega_lite_4 import UNSET, Axis, DecodeError, Text, TitleParams, removable


@pytest.mark.parametrize("decoder", [None, int, Text, Axis, date.fromisoformat])
def test_absence_and_null_never_fail(decoder):
    assert removable.decode(UNSET, decoder) is UNSET
    assert removable.decode(None, decoder) is None


def test_decode_present_values():
    assert removable.decode(5, int) == 5
    assert removable.decode({"title": "Date"}, Axis) == Axis(title="Date")
    assert removable.decode(["a", "b"], Text) == ["a", "b"]
    assert removable.decode("2020-01-31", date.fromisoformat) == date(2020, 1, 31)
    assert removable.decode({"any": "thing"}) == {"any": "thing"}


def test_decode_failure_names_the_field():
    with pytest.raises(DecodeError) as exc_info:
        removable.decode("wide", int, path="width")
    assert exc_info.value.path == "width"

    with pytest.raises(DecodeError) as exc_info:
        removable.decode("yesterday", date.fromisoformat, path="start")
    assert exc_info.value.path == "start"
    assert "DecodeError at start" in str(exc_info.value)


def test_decode_field():
    obj = {"title": None, "axis": {"grid": False}}
    assert removable.decode_field(obj, "title", Text) is None
    assert removable.decode_field(obj, "legend", Text) is UNSET
    assert removable.decode_field(obj, "axis", Axis) == Axis(grid=False)

    with pytest.raises(DecodeError) as exc_info:
        removable.decode_field({"title": 42}, "title", Text | TitleParams)
    assert exc_info.value.path == "title"


def test_is_default_only_for_absent():
    assert removable.is_default(UNSET)
    assert not removable.is_default(None)
    assert not removable.is_default("")
    assert not removable.is_default(0)


def test_encode():
    assert removable.encode(UNSET) is UNSET
    assert removable.encode(None) is None
    assert removable.encode("Chart") == "Chart"
    assert removable.encode(Axis(title="Date", grid=None)) == {"title": "Date"}
    assert removable.encode(Axis(title=None)) == {"title": None}


def test_state():
    assert removable.state(UNSET) == "absent"
    assert removable.state(None) == "cleared"
    assert removable.state(TitleParams(text="Chart")) == "present"


@pytest.mark.parametrize("value", [UNSET, None, "Chart", ["Line 1", "Line 2"], TitleParams(text="Chart", anchor="start")])
def test_round_trip_identity(value):
    assert removable.decode(removable.encode(value), Text | TitleParams) == value
