from .collection import sum_percentages
from .factory import PercentageFactory

__all__ = [
    "PercentageFactory",
    "sum_percentages",
]
