import pytest
from percentage.domain.exceptions import InvalidArgumentError
from percentage.domain.services import PercentageFactory
from percentage.domain.values import (
    NoRounding,
    Percentage,
    PreciseRounding,
    Rounding,
    RoundingMode,
)
from percentage.shared.config import Settings


def test_factory_defaults_to_no_rounding():
    factory = PercentageFactory()

    assert factory.rounding == NoRounding()
    assert factory.create(25) == Percentage.of(25)


def test_factory_attaches_its_rounding_to_every_percentage():
    rounding = Rounding.to(2, RoundingMode.HALF_EVEN)
    factory = PercentageFactory(rounding)

    assert factory.create(25) == Percentage.of(25, rounding)
    assert factory.ratio_of(1, 4) == Percentage.of(25, rounding)
    assert factory.relative_change(1, 4) == Percentage.of(300, rounding)
    assert factory.sum([Percentage.of(10), Percentage.of(15, 4)]) == Percentage.of(
        25, rounding
    )


def test_factory_propagates_argument_errors():
    factory = PercentageFactory(Rounding.to(2))

    with pytest.raises(InvalidArgumentError):
        factory.ratio_of(1, 0)

    with pytest.raises(InvalidArgumentError):
        factory.relative_change(0, 5)

    with pytest.raises(InvalidArgumentError):
        factory.sum([])


def test_factory_from_explicit_settings():
    settings = Settings(DEFAULT_SCALE=3, DEFAULT_ROUNDING_MODE="floor")

    factory = PercentageFactory.from_settings(settings)

    assert factory.rounding == PreciseRounding(3, RoundingMode.FLOOR)
    assert factory.create(77 / 3.0 * 100).times(33.3) == 854.7


def test_factory_from_environment(monkeypatch):
    monkeypatch.setenv("PERCENTAGE_DEFAULT_SCALE", "2")

    factory = PercentageFactory.from_settings()

    assert factory.rounding == PreciseRounding(2, RoundingMode.HALF_UP)
    assert factory.create(23).times(57) == 13.11


def test_factory_from_environment_without_scale():
    assert PercentageFactory.from_settings().rounding == NoRounding()
