import math
from dataclasses import dataclass, field
from decimal import Decimal
from functools import total_ordering
from numbers import Real
from typing import Union

from percentage.domain.exceptions import InvalidArgumentError, InvalidStateError

from .rounding import NoRounding, PreciseRounding, Rounding

PERCENT = 100.0

RoundingLike = Union[Rounding, int, None]


def _to_rounding(rounding: RoundingLike) -> Rounding:
    if rounding is None:
        return NoRounding()
    if isinstance(rounding, Rounding):
        return rounding

    return PreciseRounding(rounding)


def _compare_floats(a: float, b: float) -> int:
    # NaN is equal to itself and greater than any number, giving a total order.
    if a == b:
        return 0

    a_nan, b_nan = math.isnan(a), math.isnan(b)
    if a_nan or b_nan:
        return a_nan - b_nan

    return -1 if a < b else 1


@total_ordering
@dataclass(frozen=True, eq=False)
class Percentage:
    """
    A percentage: a number divided by 100.

    ``value`` is the number as supplied (25 for 25%) and ``decimal`` the value used
    in calculations (0.25). Every calculation result goes through the attached
    ``rounding`` policy:

        >>> Percentage.of(23) * 57
        13.110000000000001
        >>> Percentage.of(23, 2) * 57
        13.11

    The rounding policy is part of the identity of a percentage: ``Percentage.of(100)``
    and ``Percentage.of(100, 2)`` are not equal.
    """

    value: float
    rounding: Rounding = field(default_factory=NoRounding)
    decimal: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "rounding", _to_rounding(self.rounding))
        object.__setattr__(self, "decimal", self.value / PERCENT)

    @classmethod
    def of(cls, value: Real, rounding: RoundingLike = None) -> "Percentage":
        """
        Create a percentage from a number.

        :param value: The percentage number (50 for 50%)
        :param rounding: None for no rounding, an int scale for half-up rounding
            to that many decimal places, or a Rounding policy
        :return: Percentage
        """
        return cls(value, _to_rounding(rounding))

    @classmethod
    def ratio_of(
        cls, number: Real, other: Real, rounding: RoundingLike = None
    ) -> "Percentage":
        """
        Create the percentage that ``number`` represents of ``other``
        (``Percentage.ratio_of(1, 5)`` is 20%).

        :raises InvalidArgumentError: When ``other`` is zero
        """
        if 0 == float(other):
            raise InvalidArgumentError("other", "can not be zero")

        return cls.of(float(number) / float(other) * PERCENT, rounding)

    @classmethod
    def relative_change(
        cls, initial: Real, ending: Real, rounding: RoundingLike = None
    ) -> "Percentage":
        """
        Create the relative change from ``initial`` to ``ending``
        (``Percentage.relative_change(1, 5)`` is 400%).

        A change from zero to zero is no change at all and yields 0%.

        :raises InvalidArgumentError: When ``initial`` is zero and ``ending`` is not
        """
        initial_value, ending_value = float(initial), float(ending)

        if 0 == initial_value and 0 == ending_value:
            return cls.of(0, rounding)
        if 0 == initial_value:
            raise InvalidArgumentError("initial", "can not be zero")

        return cls.of(
            (ending_value - initial_value) / abs(initial_value) * PERCENT, rounding
        )

    def is_zero(self) -> bool:
        return 0.0 == self.decimal

    def is_not_zero(self) -> bool:
        return not self.is_zero()

    def is_positive(self) -> bool:
        return 0 < self.decimal

    def is_positive_or_zero(self) -> bool:
        return self.is_positive() or self.is_zero()

    def is_negative(self) -> bool:
        return 0 > self.decimal

    def is_negative_or_zero(self) -> bool:
        return self.is_negative() or self.is_zero()

    def is_one_hundred(self) -> bool:
        """True when the absolute value is 100%."""
        return 1.0 == abs(self.decimal)

    def is_not_one_hundred(self) -> bool:
        return not self.is_one_hundred()

    def has_rounding(self) -> bool:
        return self.rounding.has_rounding()

    def with_precision(self, scale: int) -> "Percentage":
        """Returns this percentage rounding calculations to ``scale`` decimal places."""
        return self.with_rounding(self.rounding.with_scale(scale))

    def with_rounding(self, rounding: Rounding) -> "Percentage":
        return Percentage.of(self.value, rounding)

    def value_when(self, number: Real) -> float:
        """
        Calculate the base value of a number for this percentage. Answers the
        question "5 is 20% of what number?" (``Percentage.of(20).value_when(5)`` is 25.0).

        :raises InvalidStateError: When this percentage is zero
        """
        if self.is_zero():
            raise InvalidStateError(
                "This operation can not execute when Percentage is zero"
            )

        return self.rounding.apply(lambda: float(number) / self.decimal)

    def times(self, number: Real) -> float:
        return self.rounding.apply(lambda: float(number) * self.decimal)

    def increase(self, number: Real) -> float:
        """Increase a number by this percentage."""
        whole = float(number)

        return self.rounding.apply(lambda: whole + whole * self.decimal)

    def decrease(self, number: Real) -> float:
        """Decrease a number by this percentage."""
        whole = float(number)

        return self.rounding.apply(lambda: whole - whole * self.decimal)

    def compare(self, other: "Percentage") -> int:
        """
        Three-way comparison: by decimal value first, then by rounding policy.

        :return: negative, zero or positive int
        """
        by_decimal = _compare_floats(self.decimal, other.decimal)

        if by_decimal != 0:
            return by_decimal

        return self.rounding.compare(other.rounding)

    def formatted_value(self) -> str:
        """The value with as many decimal places as it was given."""
        if not math.isfinite(self.value):
            return repr(self.value)
        if self.value == math.trunc(self.value):
            return f"{int(self.value)}"

        return format(Decimal(repr(self.value)), "f")

    def to_detailed_string(self) -> str:
        return f"Percentage[value=[{self.formatted_value()}] rounding=[{self.rounding}]]"

    def __mul__(self, number: object) -> float:
        if not isinstance(number, (Real, Decimal)):
            return NotImplemented

        return self.times(number)

    __rmul__ = __mul__

    def __pos__(self) -> "Percentage":
        if self.is_negative():
            return -self

        return self

    __abs__ = __pos__

    def __neg__(self) -> "Percentage":
        return Percentage.of(-self.value, self.rounding)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Percentage):
            return NotImplemented

        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented

        return self.compare(other) < 0

    def __hash__(self) -> int:
        decimal_key = "nan" if math.isnan(self.decimal) else self.decimal

        return hash((decimal_key, self.rounding))

    def __str__(self) -> str:
        return f"{self.formatted_value()}%"

    def __repr__(self) -> str:
        return self.to_detailed_string()
