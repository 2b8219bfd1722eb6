#!/usr/bin/env python3
"""
Post-process generated types to handle properties where `null` differs from omission.

For fields that can distinguish between:
- Omitted (inherit the default): represented as UNSET sentinel
- Null (remove / disable): represented as None
- Value (set to value): represented as the actual value

Based on schema properties that accept `null`, marked with x-double-option: true by
`generate_schema_types.py`.

It also makes `$schema` default to the pinned schema URL, so that every emitted document declares its version.
"""

import json
import re
import sys
from pathlib import Path
from typing import List, Optional, Set, Tuple

# Imports added after the generated imports
FILE_HEADER = """from .config import SCHEMA_URL
from .unset_type import UNSET, _UnsetType"""

_FIELD_RE = re.compile(r"^    (\w+): (.+?) = None$")
_ALIASED_FIELD_RE = re.compile(r"^    (\w+): (.+?) = field\(default=None, metadata=\{['\"]alias['\"]: ['\"]([^'\"]+)['\"]\}\)$")


def extract_double_option_fields(schema_path: Path) -> Set[Tuple[str, str]]:
    """Extract (class_name, wire_name) tuples from a preprocessed schema with x-double-option: true."""
    schema = json.loads(schema_path.read_text())
    double_option_fields: Set[Tuple[str, str]] = set()

    for class_name, class_schema in schema.get("$defs", {}).items():
        properties = class_schema.get("properties", {})
        for field_name, field_schema in properties.items():
            if field_schema.get("x-double-option") is True:
                double_option_fields.add((class_name, field_name))

    return double_option_fields


def insert_header(lines: List[str]) -> List[str]:
    """Insert `FILE_HEADER` after the last import that precedes the first definition."""
    last_import: Optional[int] = None
    for i, line in enumerate(lines):
        if line.startswith(("from ", "import ")):
            last_import = i
        elif line.startswith(("class ", "@dataclass")) or re.match(r"^\w+ = ", line):
            break
    position = 0 if last_import is None else last_import + 1
    return lines[:position] + FILE_HEADER.split("\n") + lines[position:]


def rewrite_field(line: str, current_class: Optional[str], double_option_fields: Set[Tuple[str, str]]) -> Optional[str]:
    """
    The tri-state form of a generated field line, or None when the line stays as it is.

    Change: field_name: T | None = None
    To: field_name: T | None | _UnsetType = UNSET
    """
    if current_class is None:
        return None

    match = _FIELD_RE.match(line)
    if match:
        field_name, field_type = match.groups()
        if (current_class, field_name) in double_option_fields:
            new_type = field_type.replace(" | None", " | None | _UnsetType")
            return f"    {field_name}: {new_type} = UNSET"
        return None

    match = _ALIASED_FIELD_RE.match(line)
    if match:
        field_name, field_type, wire_name = match.groups()
        if wire_name == "$schema":
            # `$schema` is never null
            schema_type = field_type.removesuffix(" | None")
            return f'    {field_name}: {schema_type} = field(default=SCHEMA_URL, metadata={{"alias": "$schema"}})'
        if (current_class, wire_name) in double_option_fields:
            new_type = field_type.replace(" | None", " | None | _UnsetType")
            return f'    {field_name}: {new_type} = field(default=UNSET, metadata={{"alias": "{wire_name}"}})'
    return None


def post_process_file(file_path: Path, double_option_fields: Set[Tuple[str, str]]) -> None:
    """Post-process the generated types file."""
    lines = insert_header(file_path.read_text().split("\n"))

    # Process each double-option field
    current_class = None
    result_lines: List[str] = []
    modified_count = 0

    for line in lines:
        # Track which class we're in
        class_match = re.match(r"^class (\w+)", line)
        if class_match:
            current_class = class_match.group(1)

        new_line = rewrite_field(line, current_class, double_option_fields)
        if new_line is not None:
            result_lines.append(new_line)
            modified_count += 1
            print(f"✓ Modified {current_class}.{new_line.split(':')[0].strip()}")
            continue

        result_lines.append(line)

    # Write back
    file_path.write_text("\n".join(result_lines))
    print(f"✓ Added UNSET sentinel and updated {modified_count} fields")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(f"Usage: {sys.argv[0]} <preprocessed_schema.json> <types_file.py>")
        sys.exit(1)

    schema_path = Path(sys.argv[1])
    types_path = Path(sys.argv[2])

    if not schema_path.exists():
        print(f"Error: Schema not found: {schema_path}")
        sys.exit(1)

    if not types_path.exists():
        print(f"Error: Types file not found: {types_path}")
        sys.exit(1)

    # Extract fields marked with x-double-option from the schema
    print(f"Reading schema from {schema_path}...")
    double_option_fields = extract_double_option_fields(schema_path)
    print(f"Found {len(double_option_fields)} fields marked with x-double-option")

    # Post-process the generated types file
    print(f"Post-processing {types_path}...")
    post_process_file(types_path, double_option_fields)
