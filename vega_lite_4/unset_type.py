"""
Helper module for the `UNSET` sentinel value in generated dataclasses, to distinguish between omitted fields and
fields that are explicitly set to null in a Vega-Lite specification.
"""


class _UnsetType:
    """Sentinel value to distinguish between omitted fields and values that are explicitly set to None."""

    _instance: "_UnsetType | None" = None

    def __new__(cls):
        # A single instance, so that `value is UNSET` is always the right check
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo: object):
        return self

    def __reduce__(self):
        return "UNSET"


UNSET = _UnsetType()
"""
Sentinel value to distinguish between omitted and null in a Vega-Lite specification.

Usage:
- UNSET: Field is omitted (inherit the parent or default value)
- None: Field is explicitly set to null (suppress the default)
- value: Field is set to the provided value

Example:
    # Omit the field entirely (keep the default axis)
    x = PositionDef(field="date", axis=UNSET)

    # Set the field to null (remove the axis)
    x = PositionDef(field="date", axis=None)

    # Set the field to a value
    x = PositionDef(field="date", axis=Axis(title="Date"))
"""
