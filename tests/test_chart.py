"""
Tests for Chart output: JSON, standalone HTML, saving and opening in a browser.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import List

import pytest
from vega_lite_4 import Chart, DecodeError, EmbedConfig


def test_to_json_round_trip(stacked_bar_chart: Chart):
    assert Chart.from_json(stacked_bar_chart.to_json()) == stacked_bar_chart
    assert Chart.from_json(stacked_bar_chart.to_json(indent=None)) == stacked_bar_chart


def test_from_json_rejects_invalid_text():
    with pytest.raises(DecodeError) as exc_info:
        Chart.from_json('{"mark": ')
    assert exc_info.value.path == ""
    with pytest.raises(DecodeError):
        Chart.from_json(b'{"title": "\xff"}')


def test_to_html_embeds_spec_and_scripts(stacked_bar_chart: Chart):
    html = stacked_bar_chart.to_html()
    assert html.startswith("<!DOCTYPE html>")
    assert '<script src="https://cdn.jsdelivr.net/npm/vega@5"></script>' in html
    assert '<script src="https://cdn.jsdelivr.net/npm/vega-lite@4.0.2"></script>' in html
    assert '<script src="https://cdn.jsdelivr.net/npm/vega-embed@6"></script>' in html
    assert '<div id="vis"></div>' in html
    assert 'vegaEmbed("#vis", {"$schema": ' in html
    assert '"mark": "bar"' in html
    assert '"title": "Weather in Seattle"' in html


def test_to_html_uses_config(stacked_bar_chart: Chart):
    config = EmbedConfig(
        vega_embed_version="6.20.2",
        cdn_url="https://unpkg.com",
        output_div="chart",
        embed_options={"renderer": "svg", "actions": False},
    )
    html = stacked_bar_chart.to_html(config)
    assert "https://unpkg.com/vega-embed@6.20.2" in html
    assert '<div id="chart"></div>' in html
    assert '{"renderer": "svg", "actions": false}' in html


def test_to_html_escapes_markup(stock_chart: Chart):
    stock_chart.description = "Prices </script> & <b>more</b>"
    html = stock_chart.to_html()
    assert "<title>Prices &lt;/script&gt; &amp; &lt;b&gt;more&lt;/b&gt;</title>" in html
    # The spec is embedded as JSON inside a script element
    assert html.count("</script>") == 4
    assert "\\u003c/script\\u003e" in html


def test_save_json(tmp_path: Path, choropleth_chart: Chart, choropleth_json):
    path = choropleth_chart.save(tmp_path / "chart.json")
    assert path == tmp_path / "chart.json"
    assert json.loads(path.read_text()) == choropleth_json


def test_save_html(tmp_path: Path, choropleth_chart: Chart, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO, logger="vega_lite_4.chart"):
        path = choropleth_chart.save(str(tmp_path / "chart.html"))
    assert path.read_text() == choropleth_chart.to_html()
    assert "Saved chart to" in caplog.text


def test_save_rejects_unknown_suffix(tmp_path: Path, choropleth_chart: Chart):
    with pytest.raises(ValueError):
        choropleth_chart.save(tmp_path / "chart.png")
    assert not (tmp_path / "chart.png").exists()


def test_show_opens_browser(tmp_path: Path, matrix_chart: Chart, monkeypatch: pytest.MonkeyPatch):
    opened: List[str] = []
    monkeypatch.setattr("vega_lite_4.chart.webbrowser.open", lambda url: opened.append(url))
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))

    path = matrix_chart.show()

    assert path.parent == tmp_path
    assert path.suffix == ".html"
    assert opened == [path.as_uri()]
    assert '"title": "Random points"' in path.read_text()
