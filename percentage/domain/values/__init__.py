from .percentage import Percentage
from .rounding import (
    DEFAULT_ROUNDING_MODE,
    NoRounding,
    PreciseRounding,
    Rounding,
    RoundingMode,
)

__all__ = [
    "DEFAULT_ROUNDING_MODE",
    "NoRounding",
    "Percentage",
    "PreciseRounding",
    "Rounding",
    "RoundingMode",
]
