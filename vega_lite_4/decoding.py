"""
Type-directed decoding of JSON data into the generated dataclasses.

The generated types only carry type annotations, so decoding walks those annotations:

- dataclasses are decoded from JSON objects, matching keys by their wire name (the field alias, e.g. `$schema`,
  `as`, or else the field name)
- a missing key leaves the field default in place (`None` for ordinary optional fields, `UNSET` for tri-state fields)
- unions are tried member by member in the order they are declared: the first member that decodes with every
  object key recognised wins, otherwise the first member that decodes while ignoring unknown keys
- `Literal` values, lists, string-keyed dicts and primitives are checked structurally

Usage:
    spec = from_dict(VegaLite, {"mark": "bar", "data": {"url": "data.csv"}})
    spec = from_json(VegaLite, text)
"""

import json
import logging
import types
import typing
from dataclasses import MISSING, fields, is_dataclass
from functools import lru_cache
from typing import Any, Dict, Literal, Tuple, TypeVar, Union

from .types import DecodeError, field_alias
from .unset_type import _UnsetType

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NoneType = type(None)


@lru_cache(maxsize=None)
def _resolved_fields(cls: type) -> Tuple[Tuple[str, str, Any, bool], ...]:
    """(attribute name, JSON key, resolved type, required) for every init field of a dataclass."""
    hints = typing.get_type_hints(cls)
    resolved = []
    for f in fields(cls):
        if not f.init:
            continue
        required = f.default is MISSING and f.default_factory is MISSING
        resolved.append((f.name, field_alias(f), hints[f.name], required))
    return tuple(resolved)


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__name__
    return repr(tp).replace("typing.", "")


def _decode_dataclass(cls: type, data: Any, path: str, strict: bool) -> Any:
    if not isinstance(data, dict):
        raise DecodeError(path, f"expected an object for {cls.__name__}, got {type(data).__name__}")

    kwargs: Dict[str, Any] = {}
    known_keys = set()
    for name, key, tp, required in _resolved_fields(cls):
        known_keys.add(key)
        if key not in data:
            if required:
                raise DecodeError(_join(path, key), f"missing required field of {cls.__name__}")
            continue
        kwargs[name] = from_dict(tp, data[key], _join(path, key), strict=strict)

    unknown = [key for key in data if key not in known_keys]
    if unknown:
        if strict:
            raise DecodeError(_join(path, str(unknown[0])), f"unknown field of {cls.__name__}")
        logger.debug("Ignoring unknown fields %s of %s at %s", unknown, cls.__name__, path or "<root>")

    return cls(**kwargs)


def _decode_union(tp: Any, members: Tuple[Any, ...], data: Any, path: str, strict: bool) -> Any:
    if data is None:
        if _NoneType in members:
            return None
        raise DecodeError(path, f"null is not allowed for {_type_name(tp)}")

    candidates = [m for m in members if m is not _NoneType and m is not _UnsetType]

    # Objects often fit several members once unknown keys are ignored (many records have no required field),
    # so prefer the first member that recognises every key, then fall back to the first member that decodes
    passes = (True,) if strict else (True, False)
    errors = []
    for strict_pass in passes:
        errors = []
        for member in candidates:
            try:
                return from_dict(member, data, path, strict=strict_pass)
            except DecodeError as e:
                logger.debug("Union member %s did not match at %s: %s", _type_name(member), path or "<root>", e.msg)
                errors.append(e)

    # Report the deepest error when a single member got past its top level,
    # so the caller sees the field that actually failed
    nested = [e for e in errors if e.path != path]
    if len(nested) == 1:
        raise nested[0]
    alternatives = ", ".join(_type_name(m) for m in candidates)
    raise DecodeError(path, f"value {_short_repr(data)} matches none of: {alternatives}")


def _short_repr(data: Any) -> str:
    text = json.dumps(data, default=str)
    return text if len(text) <= 60 else text[:57] + "..."


def _decode_primitive(tp: type, data: Any, path: str) -> Any:
    if tp is float:
        # JSON does not distinguish 1 from 1.0; keep the int so that encoding reproduces the input
        ok = isinstance(data, (int, float)) and not isinstance(data, bool)
    elif tp is int:
        ok = isinstance(data, int) and not isinstance(data, bool)
    else:
        ok = isinstance(data, tp)
    if not ok:
        raise DecodeError(path, f"expected {tp.__name__}, got {type(data).__name__}")
    return data


def from_dict(tp: Any, data: Any, path: str = "", strict: bool = False) -> Any:
    """
    Decode JSON-ready Python data (as returned by `json.loads`) into `tp`.

    Args:
        tp: The target type: a generated dataclass, a union alias, a `Literal`, `list[...]`, `dict[str, ...]`,
            a primitive or `Any`
        data: The data to decode
        path: JSON path of `data`, used in error messages
        strict: Reject object keys that do not correspond to a field instead of ignoring them

    Raises:
        DecodeError: naming the path of the offending value
    """
    if tp is Any:
        return data
    if tp is _NoneType or tp is None:
        if data is not None:
            raise DecodeError(path, f"expected null, got {type(data).__name__}")
        return None
    if is_dataclass(tp) and isinstance(tp, type):
        return _decode_dataclass(tp, data, path, strict)

    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return _decode_union(tp, typing.get_args(tp), data, path, strict)
    if origin is Literal:
        for allowed in typing.get_args(tp):
            # `True == 1`, so compare types as well
            if data == allowed and type(data) is type(allowed):
                return data
        raise DecodeError(path, f"value {_short_repr(data)} is not one of {list(typing.get_args(tp))}")
    if origin is list:
        if not isinstance(data, list):
            raise DecodeError(path, f"expected an array, got {type(data).__name__}")
        (item_type,) = typing.get_args(tp) or (Any,)
        return [from_dict(item_type, item, f"{path}[{i}]", strict=strict) for i, item in enumerate(data)]
    if origin is dict:
        if not isinstance(data, dict):
            raise DecodeError(path, f"expected an object, got {type(data).__name__}")
        _, value_type = typing.get_args(tp) or (str, Any)
        return {key: from_dict(value_type, value, _join(path, key), strict=strict) for key, value in data.items()}
    if tp in (str, int, float, bool):
        return _decode_primitive(tp, data, path)

    raise TypeError(f"Unsupported type annotation {tp!r} at {path or '<root>'}")


def from_json(tp: Any, text: Union[str, bytes], strict: bool = False) -> Any:
    """Parse JSON text and decode it into `tp`."""
    try:
        data = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, or UnicodeDecodeError for bytes that are not UTF-8
        raise DecodeError("", f"invalid JSON: {e}") from e
    return from_dict(tp, data, strict=strict)


def decode(cls: "type[T]", data: Any, strict: bool = False) -> T:
    """Typed wrapper around `from_dict` for dataclasses."""
    return from_dict(cls, data, strict=strict)
