import pytest
from vega_lite_4 import (
    SCHEMA_URL,
    Axis,
    Builder,
    BuildError,
    CalculateTransform,
    Chart,
    Encoding,
    PositionDef,
    UrlData,
    VegaLite,
    builder,
)


def test_builder_equals_keyword_construction():
    built = (
        Builder(VegaLite)
        .title("Weather in Seattle")
        .data(Builder(UrlData).url("data/seattle-weather.csv").build())
        .mark("bar")
        .encoding(Builder(Encoding).x(Builder(PositionDef).field("date").type("ordinal").build()).build())
        .build()
    )
    direct = VegaLite(
        title="Weather in Seattle",
        data=UrlData(url="data/seattle-weather.csv"),
        mark="bar",
        encoding=Encoding(x=PositionDef(field="date", type="ordinal")),
    )
    assert built == direct
    assert built.schema_ == SCHEMA_URL


def test_initial_values_and_tri_state_setters():
    x = builder(PositionDef, field="date").axis(None).build()
    assert x == PositionDef(field="date", axis=None)

    x = builder(PositionDef, field="date").axis(Axis(title="Date")).build()
    assert x.axis == Axis(title="Date")


def test_wire_names_and_attribute_names():
    expected = CalculateTransform(calculate="datum.a * 2", as_="b")
    assert Builder(CalculateTransform).calculate("datum.a * 2").set("as", "b").build() == expected
    assert Builder(CalculateTransform).calculate("datum.a * 2").as_("b").build() == expected
    assert Builder(VegaLite).set("$schema", "custom.json").build().schema_ == "custom.json"


def test_later_values_replace_earlier_ones():
    assert Builder(UrlData).url("a.csv").url("b.csv").build() == UrlData(url="b.csv")


def test_missing_required_fields():
    with pytest.raises(BuildError) as exc_info:
        Builder(CalculateTransform).build()
    assert exc_info.value.type_name == "CalculateTransform"
    assert "as_" in str(exc_info.value)
    assert "calculate" in str(exc_info.value)


def test_unknown_fields():
    with pytest.raises(BuildError):
        Builder(UrlData).set("uri", "a.csv")
    with pytest.raises(BuildError):
        Builder(UrlData, uri="a.csv")
    with pytest.raises(AttributeError):
        Builder(UrlData).uri("a.csv")
    assert not hasattr(Builder(UrlData), "uri")
    assert hasattr(Builder(UrlData), "url")


def test_builder_requires_a_dataclass():
    with pytest.raises(TypeError):
        Builder(dict)


def test_builder_for_chart():
    chart = Builder(Chart).mark("point").build()
    assert isinstance(chart, Chart)
    assert chart == Chart(mark="point")


def test_repr():
    assert repr(Builder(UrlData).url("a.csv")) == "Builder[UrlData](url='a.csv')"
