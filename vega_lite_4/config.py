"""
Configuration for the chart helpers.

The schema version is a constant: every emitted document declares it through the `$schema` default of `VegaLite`.
The HTML embedding settings can be overridden with a TOML file:

```toml
[embed]
vega_version = "5"
vega_lite_version = "4.0.2"
vega_embed_version = "6"
cdn_url = "https://cdn.jsdelivr.net/npm"
output_div = "vis"

[embed.embed_options]
renderer = "svg"
actions = false
```

The file is read when `load_config` is called; nothing is cached at module level.
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml
from typing_extensions import NotRequired, TypedDict

SCHEMA_VERSION = "v4.0.2"
SCHEMA_URL = f"https://vega.github.io/schema/vega-lite/{SCHEMA_VERSION}.json"

CONFIG_ENV_VAR = "VEGA_LITE_4_CONFIG"


class EmbedOptions(TypedDict):
    """Options passed through to `vegaEmbed` (see https://github.com/vega/vega-embed#options)."""

    renderer: NotRequired[str]
    actions: NotRequired[Union[bool, Dict[str, bool]]]
    theme: NotRequired[str]
    mode: NotRequired[str]


@dataclass
class EmbedConfig:
    vega_version: str = "5"
    vega_lite_version: str = SCHEMA_VERSION.lstrip("v")
    vega_embed_version: str = "6"
    cdn_url: str = "https://cdn.jsdelivr.net/npm"
    output_div: str = "vis"
    embed_options: EmbedOptions = field(default_factory=lambda: EmbedOptions())

    def script_urls(self) -> list[str]:
        return [
            f"{self.cdn_url}/vega@{self.vega_version}",
            f"{self.cdn_url}/vega-lite@{self.vega_lite_version}",
            f"{self.cdn_url}/vega-embed@{self.vega_embed_version}",
        ]


def load_config(path: Optional[Union[str, Path]] = None) -> EmbedConfig:
    """
    Load the embedding configuration.

    Args:
        path: A TOML file with an `[embed]` table. Defaults to the file named by the `VEGA_LITE_4_CONFIG`
            environment variable; built-in defaults are used when neither is given.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the `[embed]` table contains unknown keys
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return EmbedConfig()

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    conf: Dict[str, Any] = toml.load(path)
    embed = conf.get("embed", {})
    known = {f.name for f in fields(EmbedConfig)}
    unknown = sorted(set(embed) - known)
    if unknown:
        raise ValueError(f"Unknown keys in [embed] of {path}: {', '.join(unknown)}")

    return EmbedConfig(**embed)
