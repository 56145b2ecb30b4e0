from .percentage_factory import PercentageFactory

__all__ = [
    "PercentageFactory",
]
