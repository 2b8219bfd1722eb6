"""
Fluent construction of the generated dataclasses.

Every field of the target class becomes a chained setter, addressed by its attribute name or its wire name:

    chart = (
        Builder(VegaLite)
        .title("Stock price")
        .mark("line")
        .encoding(Builder(Encoding).x(PositionDef(field="date", type="temporal")).build())
        .build()
    )

Building gives the same value as calling the class with the same keyword arguments.
"""

from dataclasses import MISSING, fields, is_dataclass
from typing import Any, Callable, Dict, Generic, Type, TypeVar

from typing_extensions import Self

from .types import BuildError, field_alias

T = TypeVar("T")


class Builder(Generic[T]):
    def __init__(self, cls: Type[T], **initial: Any):
        if not (is_dataclass(cls) and isinstance(cls, type)):
            raise TypeError(f"Builder requires a dataclass, got {cls!r}")
        self._cls = cls
        self._names: Dict[str, str] = {}
        self._required = []
        for f in fields(cls):
            if not f.init:
                continue
            self._names[f.name] = f.name
            self._names[field_alias(f)] = f.name
            if f.default is MISSING and f.default_factory is MISSING:
                self._required.append(f.name)
        self._values: Dict[str, Any] = {}
        for name, value in initial.items():
            self.set(name, value)

    def set(self, name: str, value: Any) -> Self:
        """Set a field by attribute name (`as_`) or wire name (`as`, `$schema`)."""
        try:
            attr = self._names[name]
        except KeyError:
            raise BuildError(self._cls.__name__, f"unknown field {name!r}") from None
        self._values[attr] = value
        return self

    def __getattr__(self, name: str) -> Callable[[Any], Self]:
        # Only reached for names that are not regular attributes
        names = self.__dict__.get("_names")
        if name.startswith("_") or names is None or name not in names:
            cls = self.__dict__.get("_cls")
            target = cls.__name__ if cls is not None else "?"
            raise AttributeError(f"Builder[{target}] has no setter {name!r}")

        def setter(value: Any) -> Self:
            return self.set(name, value)

        return setter

    def build(self) -> T:
        missing = [name for name in self._required if name not in self._values]
        if missing:
            raise BuildError(self._cls.__name__, f"missing required field(s): {', '.join(missing)}")
        return self._cls(**self._values)

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"Builder[{self._cls.__name__}]({values})"


def builder(cls: Type[T], **initial: Any) -> Builder[T]:
    return Builder(cls, **initial)
