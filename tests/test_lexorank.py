import pytest

from jittered_indexing import LEXORANK, InvalidArgument
from jittered_indexing.lexorank import midpoint, n_midpoints, validate_key


def test_midpoint_of_empty_range():
    assert midpoint(None, None) == "h"


def test_midpoint_between_keys():
    assert midpoint("a", "c") == "b"
    assert midpoint("a", "b") == "ah"
    assert midpoint(None, "1") == "0h"
    assert midpoint("z", None) == "zh"


def test_midpoint_custom_alphabet():
    assert midpoint(None, None, "012") == "1"
    assert midpoint("1", None, "012") == "11"


@pytest.mark.parametrize(
    "left,right",
    [("b", "a"), ("a", "a"), ("a0", "b"), ("A", None), (None, ""), ("a", "b0")],
)
def test_midpoint_rejects_bad_bounds(left, right):
    with pytest.raises(InvalidArgument):
        midpoint(left, right)


@pytest.mark.parametrize("digits", ["01", "0021", "210"])
def test_midpoint_rejects_bad_alphabet(digits):
    with pytest.raises(InvalidArgument):
        midpoint(None, None, digits)


def test_repeated_inserts_stay_ordered():
    keys = [midpoint(None, None)]
    for _ in range(40):
        keys.insert(0, midpoint(None, keys[0]))
        keys.append(midpoint(keys[-1], None))
        keys.insert(1, midpoint(keys[0], keys[1]))
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)
    for key in keys:
        validate_key(key)


@pytest.mark.parametrize("left,right", [(None, None), ("a", None), (None, "m"), ("a", "b")])
def test_n_midpoints(left, right):
    keys = n_midpoints(left, right, 7)
    assert len(keys) == 7
    assert keys == sorted(set(keys))
    if left is not None:
        assert keys[0] > left
    if right is not None:
        assert keys[-1] < right


def test_n_midpoints_zero():
    assert n_midpoints("a", "b", 0) == []


def test_primitive_uses_base_36_by_default():
    assert LEXORANK.key_between(None, None) == "h"
    assert LEXORANK.n_keys_between(None, None, 1) == ["h"]
    assert LEXORANK.key_between(None, None, "012") == "1"
