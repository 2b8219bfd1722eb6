"""
Unit tests for generate_schema_types.py

Run with: pytest tests/schema_generation -v
"""

import json
from pathlib import Path
from typing import Any, Dict

import generate_schema_types
import vega_lite_4.generated_types
from generate_schema_types import (
    RAW_OUTPUT_FILE,
    generate,
    is_nullable,
    mark_nullable_properties,
    preprocess_schema,
    rewrite_refs_recursive,
)


class TestRewriteRefsRecursive:
    """Test cases for the rewrite_refs_recursive function."""

    def test_simple_ref(self):
        """Test rewriting a simple $ref: #/definitions/Name to $ref: #/$defs/Name."""
        schema = {"$ref": "#/definitions/Axis"}
        assert rewrite_refs_recursive(schema) == {"$ref": "#/$defs/Axis"}

    def test_nested_refs_in_properties_and_arrays(self):
        schema = {
            "type": "object",
            "properties": {
                "axis": {"anyOf": [{"$ref": "#/definitions/Axis"}, {"type": "null"}]},
                "transform": {"type": "array", "items": {"$ref": "#/definitions/Transform"}},
            },
        }
        expected = {
            "type": "object",
            "properties": {
                "axis": {"anyOf": [{"$ref": "#/$defs/Axis"}, {"type": "null"}]},
                "transform": {"type": "array", "items": {"$ref": "#/$defs/Transform"}},
            },
        }
        assert rewrite_refs_recursive(schema) == expected

    def test_preserves_other_refs_and_values(self):
        schema = {
            "other": {"$ref": "#/$defs/AlreadyRewritten"},
            "description": "See #/definitions/Axis",
            "enum": ["#/definitions/Axis", 1, None],
        }
        assert rewrite_refs_recursive(schema) == schema

    def test_does_not_mutate_input(self):
        schema = {"items": {"$ref": "#/definitions/Mark"}}
        rewrite_refs_recursive(schema)
        assert schema == {"items": {"$ref": "#/definitions/Mark"}}


class TestNullable:
    def test_is_nullable(self):
        assert is_nullable({"type": "null"})
        assert is_nullable({"type": ["string", "null"]})
        assert is_nullable({"anyOf": [{"$ref": "#/$defs/Axis"}, {"type": "null"}]})
        assert is_nullable({"anyOf": [{"type": "string"}, {"anyOf": [{"type": "number"}, {"type": "null"}]}]})
        assert not is_nullable({"type": "string"})
        assert not is_nullable({"anyOf": [{"type": "string"}, {"$ref": "#/$defs/TitleParams"}]})

    def test_mark_nullable_properties(self):
        defs: Dict[str, Any] = {
            "PositionFieldDef": {
                "type": "object",
                "properties": {
                    "axis": {"anyOf": [{"$ref": "#/$defs/Axis"}, {"type": "null"}]},
                    "field": {"type": "string"},
                },
            },
            "Mark": {"type": "string", "enum": ["bar", "line"]},
        }
        marked = mark_nullable_properties(defs)
        assert marked == {("PositionFieldDef", "axis")}
        assert defs["PositionFieldDef"]["properties"]["axis"]["x-double-option"] is True
        assert "x-double-option" not in defs["PositionFieldDef"]["properties"]["field"]


def test_preprocess_schema(tmp_path: Path):
    schema = {
        "$ref": "#/definitions/TopLevelSpec",
        "$schema": "http://json-schema.org/draft-07/schema#",
        "definitions": {
            "TopLevelSpec": {
                "type": "object",
                "properties": {
                    "title": {"anyOf": [{"$ref": "#/definitions/Text"}, {"type": "null"}]},
                    "mark": {"$ref": "#/definitions/Mark"},
                },
            },
            "Text": {"anyOf": [{"type": "string"}, {"type": "array", "items": {"type": "string"}}]},
            "Mark": {"type": "string", "enum": ["bar"]},
        },
    }
    output_file = tmp_path / "preprocessed.json"

    marked = preprocess_schema(schema, output_file)

    assert marked == {("TopLevelSpec", "title")}
    preprocessed = json.loads(output_file.read_text())
    assert "definitions" not in preprocessed
    assert preprocessed["$ref"] == "#/$defs/TopLevelSpec"
    assert set(preprocessed["$defs"]) == {"TopLevelSpec", "Text", "Mark"}
    title = preprocessed["$defs"]["TopLevelSpec"]["properties"]["title"]
    assert title["anyOf"][0] == {"$ref": "#/$defs/Text"}
    assert title["x-double-option"] is True


def test_raw_output_is_not_the_package_module():
    assert RAW_OUTPUT_FILE.resolve() != Path(vega_lite_4.generated_types.__file__).resolve()
    assert RAW_OUTPUT_FILE.parent.resolve() != Path(vega_lite_4.generated_types.__file__).parent.resolve()


def test_generate_writes_post_processed_output(tmp_path: Path, monkeypatch):
    schema_path = tmp_path / "vega-lite.json"
    schema_path.write_text(
        json.dumps(
            {
                "$ref": "#/definitions/TopLevelSpec",
                "definitions": {
                    "TopLevelSpec": {
                        "type": "object",
                        "properties": {"title": {"anyOf": [{"type": "string"}, {"type": "null"}]}},
                    }
                },
            }
        )
    )

    def fake_codegen(schema_file: Path, output_file: Path) -> None:
        assert json.loads(schema_file.read_text())["$ref"] == "#/$defs/TopLevelSpec"
        output_file.write_text(
            "from dataclasses import dataclass\n\n\n@dataclass(kw_only=True)\nclass TopLevelSpec:\n"
            "    title: str | None = None\n"
        )

    monkeypatch.setattr(generate_schema_types, "generate_dataclasses_from_schema", fake_codegen)
    monkeypatch.setattr(generate_schema_types, "format_generated_file", lambda output_file: None)

    output_file = tmp_path / "generated_types_raw.py"
    temp_dir = tmp_path / ".temp_schemas"
    generate(output_file, temp_dir, schema_path)

    assert "    title: str | None | _UnsetType = UNSET" in output_file.read_text().split("\n")
    assert not temp_dir.exists()
