from numbers import Real
from typing import TYPE_CHECKING, Iterable, Optional

from percentage.domain.services.collection import sum_percentages
from percentage.domain.values import NoRounding, Percentage, Rounding
from percentage.shared.logging import get_logger

if TYPE_CHECKING:
    from percentage.shared.config import Settings

logger = get_logger(__name__)


class PercentageFactory:
    """Creates percentages that all share one rounding policy."""

    def __init__(self, rounding: Optional[Rounding] = None):
        self._rounding = NoRounding() if rounding is None else rounding

        logger.debug("percentage_factory_initialized", rounding=str(self._rounding))

    @property
    def rounding(self) -> Rounding:
        return self._rounding

    @classmethod
    def from_settings(cls, settings: Optional["Settings"] = None) -> "PercentageFactory":
        """
        Build a factory using the configured default rounding.

        :param settings: Settings to read, the cached application settings if omitted
        :return: PercentageFactory
        """
        if settings is None:
            from percentage.shared.config import get_settings

            settings = get_settings()

        return cls(settings.default_rounding())

    def create(self, value: Real) -> Percentage:
        return Percentage.of(value, self._rounding)

    def ratio_of(self, number: Real, other: Real) -> Percentage:
        return Percentage.ratio_of(number, other, self._rounding)

    def relative_change(self, initial: Real, ending: Real) -> Percentage:
        return Percentage.relative_change(initial, ending, self._rounding)

    def sum(self, percentages: Iterable[Percentage]) -> Percentage:
        """Sum percentages, re-attaching this factory's rounding to the total."""
        return sum_percentages(percentages).with_rounding(self._rounding)
