import pytest
from vega_lite_4 import Builder, Vegalite, VegaLite, VegaliteBuilder, to_dict


def test_vegalite_alias_warns():
    with pytest.warns(DeprecationWarning):
        spec = Vegalite(mark="bar")
    assert isinstance(spec, VegaLite)
    assert to_dict(spec) == to_dict(VegaLite(mark="bar"))


def test_vegalite_builder_warns():
    with pytest.warns(DeprecationWarning):
        builder = VegaliteBuilder(title="Chart")
    assert isinstance(builder, Builder)
    assert builder.mark("line").build() == VegaLite(title="Chart", mark="line")
