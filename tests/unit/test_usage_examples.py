from percentage import (
    Percentage,
    decrease_by,
    increase_by,
    percent,
    ratio_of,
    relative_change,
    times,
    value_when,
)


def test_multiply_a_number():
    assert 100 * percent(50) == 50.0
    assert Percentage.of(50).times(100) == 50.0


def test_increase_and_decrease_a_number():
    assert increase_by(100, percent(50)) == 150.0
    assert decrease_by(100, percent(50)) == 50.0


def test_ratio_and_relative_change():
    assert ratio_of(1, 4) == percent(25)
    assert relative_change(1, 4) == percent(300)


def test_base_value():
    assert value_when(5, percent(50)) == 10.0


def test_policy_is_part_of_identity():
    assert percent(100) != percent(100, 2)


def test_chained_calculations():
    assert increase_by(times(50, percent(50)), percent(25)) == 31.25
    assert decrease_by(300 * percent(125), percent(8)) == 345.0
    assert decrease_by(increase_by(33, percent(5)), percent(5)) == 32.9175
    assert times(decrease_by(increase_by(33, percent(5)), percent(5)), percent(10)) == 3.29175


def test_chained_calculations_with_rounding():
    # 33 increased by 5% rounded to 3 places, then decreased by 5% rounded to 1 place
    assert decrease_by(increase_by(33, percent(5, 3)), percent(5, 1)) == 32.9

    # 7 is 80% of 8.75
    base = 100 * value_when(7, percent(80))
    assert increase_by(base, ratio_of(1, 4)) == 1093.75
    assert increase_by(base, ratio_of(1, 4, 1)) == 1093.8

    assert increase_by(100, relative_change(33, 77)) * percent(10, 2) == 23.33
    assert increase_by(100, relative_change(33, 77, 4)) * percent(10, 2) == 23.33
