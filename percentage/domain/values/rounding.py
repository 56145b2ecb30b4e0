import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    localcontext,
)
from enum import Enum
from functools import total_ordering
from typing import Callable, Union

from percentage.domain.exceptions import InvalidArgumentError


class RoundingMode(Enum):
    """The rounding modes of the ``decimal`` module, in a fixed declaration order."""

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN
    ZERO_FIVE_UP = ROUND_05UP

    @classmethod
    def from_name(cls, name: Union[str, "RoundingMode"]) -> "RoundingMode":
        """
        Resolve a rounding mode from its name ("half_up") or its ``decimal``
        constant ("ROUND_HALF_UP").

        :param name: Mode name, decimal constant or RoundingMode
        :return: The matching RoundingMode
        :raises InvalidArgumentError: When nothing matches
        """
        if isinstance(name, RoundingMode):
            return name

        normalized = str(name).strip().upper()

        try:
            return cls(normalized)
        except ValueError:
            pass

        try:
            return cls[normalized]
        except KeyError:
            valid = ", ".join(mode.name for mode in cls)
            raise InvalidArgumentError(
                "mode", f"must be one of [{valid}], got: {name!r}"
            ) from None


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP

_MODE_ORDER = {mode: index for index, mode in enumerate(RoundingMode)}


@total_ordering
class Rounding(ABC):
    """
    Strategy applied to the result of every percentage calculation.

    There are exactly two strategies: ``NoRounding`` returns results untouched and
    ``PreciseRounding`` rounds them to a number of decimal places. Policies are plain
    values: they compare, hash and sort structurally.
    """

    @abstractmethod
    def apply(self, compute: Callable[[], float]) -> float:
        """
        Evaluate a deferred calculation and round its result.

        :param compute: Zero-argument callable producing the unrounded result
        :return: The result rounded according to this policy
        """

    @abstractmethod
    def with_scale(self, scale: int) -> "PreciseRounding":
        """Returns a precise policy derived from this one with the given scale."""

    @abstractmethod
    def _sort_key(self) -> tuple[int, int, int]: ...

    def has_rounding(self) -> bool:
        return False

    def compare(self, other: "Rounding") -> int:
        mine, theirs = self._sort_key(), other._sort_key()

        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rounding):
            return NotImplemented

        return self.compare(other) < 0

    @staticmethod
    def no() -> "NoRounding":
        return NoRounding()

    @staticmethod
    def to(
        scale: int, mode: Union[str, RoundingMode] = DEFAULT_ROUNDING_MODE
    ) -> "PreciseRounding":
        return PreciseRounding(scale, mode)


@dataclass(frozen=True)
class NoRounding(Rounding):
    def apply(self, compute: Callable[[], float]) -> float:
        return float(compute())

    def with_scale(self, scale: int) -> "PreciseRounding":
        return PreciseRounding(scale)

    # Unbounded precision sorts after any finite scale.
    def _sort_key(self) -> tuple[int, int, int]:
        return 1, 0, 0

    def __str__(self) -> str:
        return "NoRounding"


@dataclass(frozen=True)
class PreciseRounding(Rounding):
    scale: int
    mode: RoundingMode = DEFAULT_ROUNDING_MODE

    def __post_init__(self) -> None:
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise InvalidArgumentError("scale", f"must be an integer: {self.scale!r}")
        if self.scale < 0:
            raise InvalidArgumentError("scale", f"can not be negative: {self.scale}")

        object.__setattr__(self, "mode", RoundingMode.from_name(self.mode))

    def apply(self, compute: Callable[[], float]) -> float:
        result = float(compute())

        if not math.isfinite(result):
            return result

        # Round the shortest decimal form of the float, not its binary expansion.
        exact = Decimal(repr(result))
        quantum = Decimal(1).scaleb(-self.scale)

        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, exact.adjusted() + self.scale + 2)
            return float(exact.quantize(quantum, rounding=self.mode.value))

    def with_scale(self, scale: int) -> "PreciseRounding":
        return replace(self, scale=scale)

    def has_rounding(self) -> bool:
        return True

    def _sort_key(self) -> tuple[int, int, int]:
        return 0, self.scale, _MODE_ORDER[self.mode]

    def __str__(self) -> str:
        return f"PreciseRounding[{self.scale} {self.mode.name}]"
