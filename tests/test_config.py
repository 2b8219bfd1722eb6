from pathlib import Path

import pytest
from vega_lite_4 import SCHEMA_URL, SCHEMA_VERSION, EmbedConfig, VegaLite, load_config
from vega_lite_4.config import CONFIG_ENV_VAR


def test_schema_constants():
    assert SCHEMA_VERSION == "v4.0.2"
    assert SCHEMA_URL == "https://vega.github.io/schema/vega-lite/v4.0.2.json"
    assert VegaLite().schema_ == SCHEMA_URL


def test_defaults():
    config = load_config()
    assert config == EmbedConfig()
    assert config.script_urls() == [
        "https://cdn.jsdelivr.net/npm/vega@5",
        "https://cdn.jsdelivr.net/npm/vega-lite@4.0.2",
        "https://cdn.jsdelivr.net/npm/vega-embed@6",
    ]
    assert config.embed_options == {}


def test_load_from_file(tmp_path: Path):
    config_file = tmp_path / "vega.toml"
    config_file.write_text(
        """
[embed]
vega_embed_version = "6.20.2"
output_div = "chart"

[embed.embed_options]
renderer = "svg"
actions = false
"""
    )
    config = load_config(config_file)
    assert config.vega_embed_version == "6.20.2"
    assert config.output_div == "chart"
    assert config.vega_version == "5"
    assert config.embed_options == {"renderer": "svg", "actions": False}


def test_load_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    config_file = tmp_path / "vega.toml"
    config_file.write_text('[embed]\ncdn_url = "https://unpkg.com"\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
    assert load_config().cdn_url == "https://unpkg.com"


def test_file_without_embed_table(tmp_path: Path):
    config_file = tmp_path / "vega.toml"
    config_file.write_text('[other]\nkey = "value"\n')
    assert load_config(config_file) == EmbedConfig()


def test_unknown_keys(tmp_path: Path):
    config_file = tmp_path / "vega.toml"
    config_file.write_text('[embed]\nvega_lite = "5"\n')
    with pytest.raises(ValueError, match="vega_lite"):
        load_config(config_file)


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")
