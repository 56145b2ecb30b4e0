from percentage.domain.exceptions import (
    DomainException,
    InvalidArgumentError,
    InvalidStateError,
)
from percentage.domain.services.collection import sum_percentages
from percentage.domain.services.factory import PercentageFactory
from percentage.domain.services.operations import (
    decrease_by,
    increase_by,
    percent,
    ratio_of,
    relative_change,
    times,
    value_when,
)
from percentage.domain.values import (
    NoRounding,
    Percentage,
    PreciseRounding,
    Rounding,
    RoundingMode,
)

__all__ = [
    "DomainException",
    "InvalidArgumentError",
    "InvalidStateError",
    "NoRounding",
    "Percentage",
    "PercentageFactory",
    "PreciseRounding",
    "Rounding",
    "RoundingMode",
    "decrease_by",
    "increase_by",
    "percent",
    "ratio_of",
    "relative_change",
    "sum_percentages",
    "times",
    "value_when",
]
