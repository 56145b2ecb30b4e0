"""
Percentage operations with the number on the left-hand side.

These read in the order the calculation is spoken: ``increase_by(100, percent(50))``
is "100 increased by 50%". The percentage's own rounding policy governs the result.
"""

from numbers import Real

from percentage.domain.values import Percentage
from percentage.domain.values.percentage import RoundingLike


def percent(value: Real, rounding: RoundingLike = None) -> Percentage:
    return Percentage.of(value, rounding)


def ratio_of(number: Real, other: Real, rounding: RoundingLike = None) -> Percentage:
    return Percentage.ratio_of(number, other, rounding)


def relative_change(
    initial: Real, ending: Real, rounding: RoundingLike = None
) -> Percentage:
    return Percentage.relative_change(initial, ending, rounding)


def value_when(number: Real, percentage: Percentage) -> float:
    """Answers "``number`` is ``percentage`` of what?"."""
    return percentage.value_when(number)


def times(number: Real, percentage: Percentage) -> float:
    return percentage.times(number)


def increase_by(number: Real, percentage: Percentage) -> float:
    return percentage.increase(number)


def decrease_by(number: Real, percentage: Percentage) -> float:
    return percentage.decrease(number)
