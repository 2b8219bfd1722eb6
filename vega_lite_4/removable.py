"""
Operations on tri-state ("removable") values.

A removable field is annotated `T | None | _UnsetType` and defaults to `UNSET`:

- UNSET: the key is absent, the consumer inherits the parent or default value
- None: the key is present with `null`, the consumer suppresses the default
- value: the key is present with the encoded value

Absence must never be confused with an explicit null on the wire.
"""

from typing import Any, Callable, Literal, Mapping, Optional, TypeVar, Union

from .decoding import from_dict
from .types import DecodeError, to_dict
from .unset_type import UNSET, _UnsetType

T = TypeVar("T")

RemovableState = Literal["absent", "cleared", "present"]

Decoder = Union[Any, Callable[[Any], Any]]


def decode(raw: Any, decoder: Optional[Decoder] = None, path: str = "") -> Any:
    """
    Produce the tri-state value for a raw JSON value, or `UNSET` when the key was absent.

    Args:
        raw: `UNSET` if the key is missing, otherwise the JSON value (possibly `None`)
        decoder: A type understood by `from_dict`, or a callable parsing a present, non-null value.
            When omitted the raw value is kept as is.
        path: JSON path of the value, used in error messages

    Raises:
        DecodeError: if a present, non-null value cannot be decoded. Absence and null never fail.
    """
    if isinstance(raw, _UnsetType):
        return UNSET
    if raw is None:
        return None
    if decoder is None:
        return raw
    if _is_type(decoder):
        return from_dict(decoder, raw, path)
    try:
        return decoder(raw)
    except DecodeError:
        raise
    except (TypeError, ValueError, KeyError) as e:
        raise DecodeError(path, str(e)) from e


def decode_field(obj: Mapping[str, Any], key: str, decoder: Optional[Decoder] = None) -> Any:
    """Decode `obj[key]` as a tri-state value; errors name `key`."""
    return decode(obj.get(key, UNSET), decoder, path=key)


def is_default(value: Any) -> bool:
    """True only for the absent state; the encoder skips such fields entirely."""
    return isinstance(value, _UnsetType)


def encode(value: Any) -> Any:
    """
    The JSON-ready form of a tri-state value.

    Returns `UNSET` when the key must be omitted, `None` when it must be written as `null`,
    and the encoded value otherwise.
    """
    if isinstance(value, _UnsetType):
        return UNSET
    if value is None:
        return None
    return to_dict(value)


def state(value: Any) -> RemovableState:
    if isinstance(value, _UnsetType):
        return "absent"
    if value is None:
        return "cleared"
    return "present"


def _is_type(decoder: Any) -> bool:
    # Generated dataclasses, primitives and typing constructs (unions, Literal, list[...]) are decoded
    # through `from_dict`; anything else callable is a custom parser
    if isinstance(decoder, type):
        return True
    return not callable(decoder) or hasattr(decoder, "__origin__") or type(decoder).__module__ in ("typing", "types")
