# /// script
# requires-python = ">=3.10"
# dependencies = [
#   "datamodel-code-generator==0.35.0",
#   "httpx",
# ]
# ///
"""
Generate Python dataclasses from the Vega-Lite JSON schema.

Vega-Lite JSON Schema (pinned version)
    ↓ (python generate_schema_types.py)
Python Dataclasses (in generated_types_raw.py)
    ↓ (merged by hand)
vega_lite_4/generated_types.py


This script runs the generation pipeline:

1. Downloads the pinned Vega-Lite JSON schema (or reads a local copy passed as the first argument)
2. Preprocesses it so that `datamodel-code-generator` produces the data model we want
3. Generates Python dataclasses from the preprocessed schema
    - For detailed configuration options, see https://koxudaxi.github.io/datamodel-code-generator/.
4. Post-processes the output (see `post_process_types.py`) and formats it with ruff

It also sets up customizations to make the schema work well with the generator:

1.  The Vega-Lite schema keeps its definitions under `definitions` and refers to them as `#/definitions/Name`.
    We move them to `$defs` and rewrite the `$ref`s to `#/$defs/Name`.
2.  Some properties accept an explicit `null` that means something different from leaving the property out
    (e.g. `"axis": null` removes the axis). We mark those properties with `x-double-option: true`, and the
    post-processing step turns them into tri-state fields defaulting to `UNSET`.
3.  Wire names that are not valid identifiers (`$schema`, `as`, `from`, ...) become `schema_`, `as_`, `from_`,
    with the wire name kept in the field's `alias` metadata.

The schema has one definition per combination of channel and field/value/condition variant, while
`vega_lite_4/generated_types.py` merges those into one record per channel family (`PositionDef`, `MarkPropDef`,
...), merges the view specs into `VegaLite` / `Spec`, and orders the unions. The script therefore never writes the
package module: it writes `generated_types_raw.py` at the repository root, and changes are carried over by hand.

To run this script: `uv run generate_schema_types.py [path/to/vega-lite-v4.0.2.json]` from the repository root.
"""

import json
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Set, Tuple

import httpx

from post_process_types import post_process_file

SCHEMA_VERSION = "v4.0.2"
SCHEMA_URL = f"https://vega.github.io/schema/vega-lite/{SCHEMA_VERSION}.json"

SCRIPT_DIR = Path(__file__).parent
# Never the package module, which is merged by hand
RAW_OUTPUT_FILE = SCRIPT_DIR / "generated_types_raw.py"


def download_schema(url: str, output_file: Path) -> Dict[str, Any]:
    """Download the JSON schema at `url` and keep a copy in `output_file`."""
    print(f"Downloading {url}...")
    response = httpx.get(url, follow_redirects=True, timeout=60.0)
    response.raise_for_status()
    schema = response.json()
    output_file.write_text(json.dumps(schema, indent=2))
    print(f"✓ Schema written to {output_file}")
    return schema


def rewrite_refs_recursive(obj: Any) -> Any:
    """
    Recursively rewrite $ref pointers in a schema object.

    Rewrites "$ref": "#/definitions/Name" to "$ref": "#/$defs/Name".

    Args:
        obj: The schema object to process (dict, list, or primitive)

    Returns:
        The schema object with rewritten references
    """
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():  # pyright: ignore[reportUnknownVariableType]
            if key == "$ref" and isinstance(value, str) and value.startswith("#/definitions/"):
                result[key] = "#/$defs/" + value[len("#/definitions/") :]
            else:
                # Recursively process nested objects
                result[key] = rewrite_refs_recursive(value)
        return result  # pyright: ignore[reportUnknownVariableType]
    elif isinstance(obj, list):
        return [rewrite_refs_recursive(item) for item in obj]  # pyright: ignore[reportUnknownVariableType]
    else:
        return obj


def is_nullable(prop_schema: Dict[str, Any]) -> bool:
    """Whether a property schema accepts `null` as one of its alternatives."""
    prop_type = prop_schema.get("type")
    if prop_type == "null" or (isinstance(prop_type, list) and "null" in prop_type):
        return True
    for key in ("anyOf", "oneOf"):
        for alternative in prop_schema.get(key, []):
            if isinstance(alternative, dict) and is_nullable(alternative):  # pyright: ignore[reportUnknownArgumentType]
                return True
    return False


def mark_nullable_properties(defs: Dict[str, Any]) -> Set[Tuple[str, str]]:
    """
    Add `x-double-option: true` to every object property that accepts `null`.

    Returns:
        The (definition name, property name) pairs that were marked
    """
    marked: Set[Tuple[str, str]] = set()
    for def_name, def_schema in defs.items():
        properties = def_schema.get("properties", {})
        for prop_name, prop_schema in properties.items():
            if is_nullable(prop_schema):
                prop_schema["x-double-option"] = True
                marked.add((def_name, prop_name))
    return marked


def preprocess_schema(schema: Dict[str, Any], output_file: Path) -> Set[Tuple[str, str]]:
    """
    Move definitions to `$defs`, rewrite references and mark nullable properties.

    Args:
        schema: The Vega-Lite JSON schema
        output_file: Path to write the preprocessed schema

    Returns:
        The (definition name, property name) pairs marked with `x-double-option`
    """
    defs = rewrite_refs_recursive(schema.get("definitions", {}))
    marked = mark_nullable_properties(defs)
    root = rewrite_refs_recursive({k: v for k, v in schema.items() if k not in ("definitions", "$schema")})

    preprocessed: Dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        **root,
        "$defs": defs,
    }

    # Write preprocessed schema with keys sorted (to preserve ordering of definitions)
    with open(output_file, "w") as f:
        json.dump(preprocessed, f, indent=2, sort_keys=True)

    print(f"✓ Preprocessed schema written to {output_file} ({len(marked)} nullable properties)")
    return marked


def generate_dataclasses_from_schema(schema_file: Path, output_file: Path) -> None:
    """
    Generate Python dataclasses from a JSON schema file using datamodel-code-generator.

    Args:
        schema_file: Path to the JSON schema file
        output_file: Path to write the generated Python code
    """
    print(f"Generating dataclasses from {schema_file.name}...")

    try:
        result = subprocess.run(
            [
                sys.executable,
                "-m",
                "datamodel_code_generator",
                "--input",
                str(schema_file),
                "--input-file-type",
                "jsonschema",
                "--output",
                str(output_file),
                "--output-model-type",
                "dataclasses.dataclass",
                "--target-python-version",
                "3.10",
                # The root schema becomes the top-level record
                "--class-name",
                "VegaLite",
                # For types with a single literal field (like `gradient = Literal["linear"]`), generate default value for it
                "--use-one-literal-as-default",
                # Use list, dict instead of List, Dict
                "--use-standard-collections",
                # Use keyword-only arguments for dataclasses; otherwise we are sensitive to
                # field ordering.
                "--keyword-only",
                # Generate Literal["a", "b", "c"] for enum values
                "--enum-field-as-literal",
                "all",
                # `as` -> `as_`, `$schema` -> `schema_`; the wire name goes to the alias metadata
                "--special-field-name-prefix",
                "",
                "--remove-special-field-name-prefix",
                # Don't add generation timestamp
                "--disable-timestamp",
                # Generate union types as `A | B` instead of `Union[A, B]`
                "--use-union-operator",
                # Use schema / class descriptions for docstrings
                "--use-schema-description",
                # Use field descriptions for docstrings
                "--use-field-description",
                # Explicitly pass extra keys to handle tri-state generation
                "--field-extra-keys",
                "x-double-option",
            ],
            capture_output=True,
            text=True,
            check=True,
        )

        if result.stdout:
            print(result.stdout)
        if result.stderr:
            print(result.stderr, file=sys.stderr)

    except subprocess.CalledProcessError as e:
        print(f"Error generating dataclasses from {schema_file.name}:", file=sys.stderr)
        print(e.stderr, file=sys.stderr)
        sys.exit(1)
    except FileNotFoundError:
        print("Error: datamodel-code-generator not found.", file=sys.stderr)
        print("Install it with: pip install 'vega-lite-4[codegen]'", file=sys.stderr)
        sys.exit(1)


def format_generated_file(output_file: Path) -> None:
    """Fix imports and format the generated dataclasses with ruff."""
    try:
        for command in (
            ["uvx", "ruff", "check", str(output_file), "--extend-select=I", "--fix"],
            ["uvx", "ruff", "format", str(output_file)],
        ):
            result = subprocess.run(command, capture_output=True, text=True, check=True)
            if result.stdout:
                print(result.stdout)
            if result.stderr:
                print(result.stderr, file=sys.stderr)
    except subprocess.CalledProcessError as e:
        print(f"Error fixing and formatting generated dataclasses: {e}", file=sys.stderr)
        print(e.stderr, file=sys.stderr)
        sys.exit(1)


def generate(output_file: Path, temp_dir: Path, schema_path: Optional[Path] = None) -> None:
    """
    Run the whole pipeline, writing the post-processed dataclasses to `output_file`.

    Args:
        output_file: Path to write the generated Python code
        temp_dir: Directory for the downloaded and preprocessed schemas, removed afterwards
        schema_path: A local copy of the schema; downloaded from `SCHEMA_URL` when None
    """
    temp_dir.mkdir(exist_ok=True)

    try:
        # Step 1: Get the schema
        if schema_path is not None:
            schema = json.loads(schema_path.read_text())
        else:
            schema = download_schema(SCHEMA_URL, temp_dir / "vega-lite.json")

        # Step 2: Preprocess it
        preprocessed_file = temp_dir / "preprocessed_schema.json"
        nullable_fields = preprocess_schema(schema, preprocessed_file)

        # Step 3: Generate dataclasses
        generate_dataclasses_from_schema(preprocessed_file, output_file)

        # Step 4: Post-process and format
        post_process_file(output_file, nullable_fields)
        format_generated_file(output_file)

    finally:
        # Clean up temp files
        if temp_dir.exists():
            for temp_file in temp_dir.glob("*"):
                if temp_file.is_file():
                    temp_file.unlink()
            try:
                temp_dir.rmdir()
            except OSError:
                pass


def main() -> None:
    """Main entry point for the script."""
    print("=" * 70)
    print(f"Vega-Lite {SCHEMA_VERSION} Python Schema Generation")
    print("=" * 70)
    print()

    schema_path = None
    if len(sys.argv) > 1:
        schema_path = Path(sys.argv[1])
        if not schema_path.exists():
            print(f"Error: Schema file not found: {schema_path}", file=sys.stderr)
            sys.exit(1)

    generate(RAW_OUTPUT_FILE, SCRIPT_DIR / ".temp_schemas", schema_path)

    print()
    print("=" * 70)
    print("✓ Generation complete!")
    print("=" * 70)
    print()
    print(f"Compare {RAW_OUTPUT_FILE.name} with vega_lite_4/generated_types.py and carry the changes over by hand,")
    print("keeping the merged channel records and the union order.")
    print()


if __name__ == "__main__":
    main()
