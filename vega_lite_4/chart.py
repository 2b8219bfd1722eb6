"""
A top-level Vega-Lite chart with JSON, HTML and browser output.

Usage:
    chart = Chart(
        title="Weather in Seattle",
        data=url_data("https://raw.githubusercontent.com/vega/vega-datasets/master/data/seattle-weather.csv"),
        mark="bar",
        encoding=Encoding(
            x=PositionDef(field="date", timeUnit="month", type="ordinal"),
            y=PositionDef(aggregate="count"),
        ),
    )
    print(chart.to_json())
    chart.save("weather.html")
    chart.show()
"""

import logging
import tempfile
import webbrowser
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jinja2
from typing_extensions import Self

from . import decoding
from .config import EmbedConfig, load_config
from .generated_types import VegaLite
from .types import to_dict, to_json

logger = logging.getLogger(__name__)

HTML_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{{ page_title }}</title>
{%- for url in script_urls %}
  <script src="{{ url }}"></script>
{%- endfor %}
</head>
<body>
  <div id="{{ output_div }}"></div>
  <script type="text/javascript">
    vegaEmbed({{ ("#" ~ output_div) | tojson }}, {{ spec | tojson }}, {{ embed_options | tojson }}).catch(console.error);
  </script>
</body>
</html>
"""

_env = jinja2.Environment(autoescape=True, undefined=jinja2.StrictUndefined)
# Keep the field order of the spec in the page
_env.policies["json.dumps_kwargs"] = {"sort_keys": False}
_template = _env.from_string(HTML_TEMPLATE)


class Chart(VegaLite):
    """`VegaLite` with output helpers. Construct it with the same keyword arguments."""

    def to_dict(self) -> Dict[str, Any]:
        return to_dict(self)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return to_json(self, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], strict: bool = False) -> Self:
        return decoding.from_dict(cls, data, strict=strict)

    @classmethod
    def from_json(cls, text: Union[str, bytes], strict: bool = False) -> Self:
        return decoding.from_json(cls, text, strict=strict)

    def to_html(self, config: Optional[EmbedConfig] = None) -> str:
        """A standalone HTML page that renders the chart with vega-embed."""
        if config is None:
            config = load_config()
        return _template.render(
            page_title=self.description or "Vega-Lite chart",
            script_urls=config.script_urls(),
            output_div=config.output_div,
            spec=self.to_dict(),
            embed_options=dict(config.embed_options),
        )

    def save(self, path: Union[str, Path], config: Optional[EmbedConfig] = None) -> Path:
        """
        Write the chart to `path`: the JSON spec for `.json`, a standalone page for `.html`.

        Raises:
            ValueError: for any other file suffix
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix == ".json":
            content = self.to_json()
        elif suffix in (".html", ".htm"):
            content = self.to_html(config)
        else:
            raise ValueError(f"Unsupported chart file type {path.suffix!r}, expected .json or .html")
        path.write_text(content, encoding="utf-8")
        logger.info("Saved chart to %s", path)
        return path

    def show(self, config: Optional[EmbedConfig] = None) -> Path:
        """Render the chart into a temporary HTML file and open it in the default browser."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".html", prefix="vega_lite_4_", delete=False, encoding="utf-8"
        ) as f:
            f.write(self.to_html(config))
            path = Path(f.name)
        logger.info("Opening chart %s in the browser", path)
        webbrowser.open(path.as_uri())
        return path
