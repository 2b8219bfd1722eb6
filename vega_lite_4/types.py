import math
from dataclasses import MISSING, Field, fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from json import JSONEncoder
from typing import Any, Dict, Optional

from .unset_type import _UnsetType


class BaseVegaLiteError(Exception):
    def __init__(self):
        pass


class DecodeError(BaseVegaLiteError):
    """A present JSON value could not be decoded into the type expected at `path`."""

    def __init__(self, path: str, msg: str):
        self.path = path
        self.msg = msg

    def __str__(self) -> str:
        return f"DecodeError at {self.path or '<root>'}: {self.msg}"


class EncodeError(BaseVegaLiteError):
    def __init__(self, msg: str):
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class BuildError(BaseVegaLiteError):
    def __init__(self, type_name: str, msg: str):
        self.type_name = type_name
        self.msg = msg

    def __str__(self) -> str:
        return f"Cannot build {self.type_name}: {self.msg}"


def field_alias(f: Field) -> str:  # pyright: ignore[reportMissingTypeArgument]
    """Name of the key used for the field in JSON."""
    return f.metadata.get("alias", f.name)


def is_removable_field(f: Field) -> bool:  # pyright: ignore[reportMissingTypeArgument]
    """Fields defaulting to UNSET keep an explicit `None` as `null` on the wire."""
    return f.default is not MISSING and isinstance(f.default, _UnsetType)


class VegaLiteTypeEncoder(JSONEncoder):
    """
    Helper used to serialize Python objects to JSON, which may contain the generated dataclasses like `VegaLite`

    - `UNSET` fields are skipped entirely
    - `None` in an ordinary optional field is skipped as well
    - `None` in a field defaulting to `UNSET` is written as `null`
    """

    def __init__(self, *args: Any, **kwargs: Any):
        kwargs.setdefault("allow_nan", False)
        super().__init__(*args, **kwargs)

    def default(self, o: Any) -> Any:
        if is_dataclass(o) and not isinstance(o, type):
            return self._convert_value(o)
        elif hasattr(o, "to_dict"):
            return o.to_dict()
        elif isinstance(o, Enum):
            return o.value
        elif isinstance(o, (datetime, date)):
            return o.isoformat()
        raise EncodeError(f"Object of type {type(o).__name__} is not JSON serializable")

    def encode(self, o: Any) -> str:
        try:
            return super().encode(self._convert_value(o))
        except ValueError as e:
            # `allow_nan=False` reports non-finite floats as ValueError
            raise EncodeError(str(e)) from e

    def _convert_value(self, value: Any) -> Any:
        """Recursively convert values, filtering out UNSET."""
        if isinstance(value, _UnsetType):
            # This shouldn't happen below a dataclass field, but handle it just in case
            return None
        elif is_dataclass(value) and not isinstance(value, type):
            result: Dict[str, Any] = {}
            for f in fields(value):
                field_value = getattr(value, f.name)
                if isinstance(field_value, _UnsetType):
                    continue
                if field_value is None and not is_removable_field(f):
                    continue
                result[field_alias(f)] = self._convert_value(field_value)
            return result
        elif isinstance(value, (list, tuple)):
            return [self._convert_value(item) for item in value]  # pyright: ignore[reportUnknownVariableType]
        elif isinstance(value, dict):
            return {str(k): self._convert_value(v) for k, v in value.items()}  # pyright: ignore[reportUnknownVariableType]
        elif isinstance(value, float) and not math.isfinite(value):
            raise EncodeError(f"Out of range float value {value!r} has no JSON representation")
        elif value is None or isinstance(value, (str, int, float, bool)):
            return value
        else:
            return self._convert_value(self.default(value))


def to_dict(value: Any) -> Any:
    """Convert a generated dataclass (or a list / dict of them) into plain JSON-ready Python data."""
    return VegaLiteTypeEncoder()._convert_value(value)


def to_json(value: Any, indent: Optional[int] = 2) -> str:
    return VegaLiteTypeEncoder(indent=indent).encode(value)
