from dataclasses import dataclass
from typing import Any, Dict, List

import pytest
from vega_lite_4 import (
    SCHEMA_URL,
    Chart,
    DataFormat,
    Encoding,
    FilterTransform,
    LookupData,
    LookupTransform,
    MarkPropDef,
    PositionDef,
    Projection,
    Scale,
    UrlData,
    inline_data,
)
from vega_lite_4.config import CONFIG_ENV_VAR

VEGA_DATASETS = "https://raw.githubusercontent.com/vega/vega-datasets/master/data"

WEATHER_DOMAIN = ["sun", "fog", "drizzle", "rain", "snow"]
WEATHER_RANGE = ["#e7ba52", "#c7c7c7", "#aec7e8", "#1f77b4", "#9467bd"]


@dataclass
class StockItem:
    symbol: str
    date: str
    price: float


STOCKS = [
    StockItem(symbol="MSFT", date="Jan 1 2000", price=39.81),
    StockItem(symbol="GOOG", date="Aug 1 2004", price=102.37),
    StockItem(symbol="GOOG", date="Sep 1 2004", price=129.6),
    StockItem(symbol="GOOG", date="Oct 1 2004", price=190.64),
]


class FakeMatrix:
    """Stands in for a numpy array: only `tolist()` is used."""

    def __init__(self, rows: List[List[int]]):
        self._rows = rows

    def tolist(self) -> List[List[int]]:
        return [list(row) for row in self._rows]


@pytest.fixture(autouse=True)
def no_config_file(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def stacked_bar_chart() -> Chart:
    return Chart(
        title="Weather in Seattle",
        data=UrlData(url=f"{VEGA_DATASETS}/seattle-weather.csv"),
        mark="bar",
        encoding=Encoding(
            x=PositionDef(field="date", timeUnit="month", type="ordinal", title="Month of the year"),
            y=PositionDef(aggregate="count"),
            color=MarkPropDef(field="weather", scale=Scale(domain=WEATHER_DOMAIN, range=WEATHER_RANGE)),
        ),
    )


@pytest.fixture
def stacked_bar_json() -> Dict[str, Any]:
    return {
        "$schema": SCHEMA_URL,
        "data": {"url": f"{VEGA_DATASETS}/seattle-weather.csv"},
        "encoding": {
            "color": {"field": "weather", "scale": {"domain": WEATHER_DOMAIN, "range": WEATHER_RANGE}},
            "x": {"field": "date", "timeUnit": "month", "title": "Month of the year", "type": "ordinal"},
            "y": {"aggregate": "count"},
        },
        "mark": "bar",
        "title": "Weather in Seattle",
    }


@pytest.fixture
def choropleth_chart() -> Chart:
    return Chart(
        title="Choropleth of Unemployment Rate per County",
        data=UrlData(url=f"{VEGA_DATASETS}/us-10m.json", format=DataFormat(type="topojson", feature="counties")),
        mark="geoshape",
        transform=[
            LookupTransform(
                lookup="id",
                from_=LookupData(data=UrlData(url=f"{VEGA_DATASETS}/unemployment.tsv"), key="id", fields=["rate"]),
            )
        ],
        projection=Projection(type="albersUsa"),
        encoding=Encoding(color=MarkPropDef(field="rate", type="quantitative")),
    )


@pytest.fixture
def choropleth_json() -> Dict[str, Any]:
    return {
        "$schema": SCHEMA_URL,
        "data": {
            "format": {"feature": "counties", "type": "topojson"},
            "url": f"{VEGA_DATASETS}/us-10m.json",
        },
        "encoding": {"color": {"field": "rate", "type": "quantitative"}},
        "mark": "geoshape",
        "projection": {"type": "albersUsa"},
        "title": "Choropleth of Unemployment Rate per County",
        "transform": [
            {
                "from": {"data": {"url": f"{VEGA_DATASETS}/unemployment.tsv"}, "fields": ["rate"], "key": "id"},
                "lookup": "id",
            }
        ],
    }


@pytest.fixture
def stock_chart() -> Chart:
    return Chart(
        title="Stock price",
        description="Google's stock price over time.",
        data=inline_data(STOCKS),
        transform=[FilterTransform(filter="datum.symbol==='GOOG'")],
        mark="line",
        encoding=Encoding(
            x=PositionDef(field="date", type="temporal"),
            y=PositionDef(field="price", type="quantitative"),
        ),
    )


@pytest.fixture
def stock_json() -> Dict[str, Any]:
    return {
        "$schema": SCHEMA_URL,
        "data": {"values": [{"symbol": s.symbol, "date": s.date, "price": s.price} for s in STOCKS]},
        "description": "Google's stock price over time.",
        "encoding": {
            "x": {"field": "date", "type": "temporal"},
            "y": {"field": "price", "type": "quantitative"},
        },
        "mark": "line",
        "title": "Stock price",
        "transform": [{"filter": "datum.symbol==='GOOG'"}],
    }


@pytest.fixture
def matrix_chart() -> Chart:
    # A matrix with 4 rows and 2 columns
    values = FakeMatrix([[1, 2], [3, 4], [5, 6], [7, 8]])
    return Chart(
        title="Random points",
        data=inline_data(values),
        mark="point",
        encoding=Encoding(
            x=PositionDef(field="0", type="quantitative"),
            y=PositionDef(field="1", type="quantitative"),
        ),
    )


@pytest.fixture
def matrix_json() -> Dict[str, Any]:
    return {
        "$schema": SCHEMA_URL,
        "data": {"values": [{"0": 1, "1": 2}, {"0": 3, "1": 4}, {"0": 5, "1": 6}, {"0": 7, "1": 8}]},
        "encoding": {
            "x": {"field": "0", "type": "quantitative"},
            "y": {"field": "1", "type": "quantitative"},
        },
        "mark": "point",
        "title": "Random points",
    }
