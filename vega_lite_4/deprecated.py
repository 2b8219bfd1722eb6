"""
Deprecated names kept for backward compatibility.

Earlier releases spelled the top-level record `Vegalite` and exposed a `VegaliteBuilder` constructor.
Import `VegaLite` and `Builder` from the main vega_lite_4 module instead.
"""

import warnings

from typing_extensions import Any, deprecated

from .builder import Builder
from .generated_types import VegaLite


@deprecated("Deprecated; use VegaLite instead. This alias will be removed in a future version.")
class Vegalite(VegaLite):
    """Deprecated: Use VegaLite instead."""

    pass


# CAREFUL: deprecated
class VegaliteBuilder:
    def __new__(cls, **kwargs: Any):
        warnings.warn(
            "Please use `Builder(VegaLite)` instead of `VegaliteBuilder()`. In a future release, `VegaliteBuilder` will be removed.",
            DeprecationWarning,
            stacklevel=2,
        )
        return Builder(VegaLite, **kwargs)


__all__ = ["Vegalite", "VegaliteBuilder"]
