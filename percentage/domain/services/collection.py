from typing import Iterable

from percentage.domain.exceptions import InvalidArgumentError
from percentage.domain.values import Percentage


def sum_percentages(percentages: Iterable[Percentage]) -> Percentage:
    """
    Sum the values of a collection of percentages.

    :param percentages: Percentages to sum, consumed once in iteration order
    :return: Percentage with the rounding policy of the first element
    :raises InvalidArgumentError: When the collection is empty
    """
    iterator = iter(percentages)
    first = next(iterator, None)

    if first is None:
        raise InvalidArgumentError("percentages", "can not be empty")

    total = first.value
    for percentage in iterator:
        total += percentage.value

    return Percentage.of(total, first.rounding)
