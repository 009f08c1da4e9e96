import pytest

from gopherlab.sums import main, sum_floats, sum_ints, sum_numbers


def test_empty_maps_sum_to_zero():
    assert sum_ints({}) == 0
    assert sum_floats({}) == 0.0
    assert sum_numbers({}) == 0


def test_single_entry_is_its_value():
    assert sum_ints({"only": 34}) == 34
    assert sum_floats({"only": 35.98}) == 35.98


def test_sum_floats_returns_float():
    result = sum_floats({"a": 1.5})
    assert isinstance(result, float) and result == 1.5


@pytest.mark.parametrize(
    "m", [{"first": 34, "second": 12}, {"a": -5, "b": 5, "c": 7}, {1: 2, 3: 4}]
)
def test_generic_matches_int_sum(m):
    assert sum_numbers(m) == sum_ints(m)
    assert sum_ints(m) == sum_ints(dict(reversed(list(m.items()))))


@pytest.mark.parametrize("m", [{"first": 35.98, "second": 26.99}, {"x": 0.25, "y": 0.5}])
def test_generic_matches_float_sum(m):
    assert sum_numbers(m) == pytest.approx(sum_floats(m))


def test_sum_ints_is_additive():
    left = {"a": 3, "b": 9}
    right = {"c": 40}
    assert sum_ints({**left, **right}) == sum_ints(left) + sum_ints(right)


def test_main_prints_same_sums_each_way(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("Non-Generic Sums: ")
    assert lines[3].startswith("Generic Sums with Constraint: ")
    tails = {line.split(": ", 1)[1] for line in lines}
    assert len(tails) == 1
    assert tails.pop().startswith(f"{sum_ints({'first': 34, 'second': 12})} and ")