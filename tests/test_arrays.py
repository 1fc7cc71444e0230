import pytest

from dstoolbox.arrays import add_element_in_place, remove_element_in_place
from dstoolbox.errors import InvalidArgument


def test_remove_element_shifts_left_and_pads():
    array = ["a", "b", "c", "d"]
    remove_element_in_place(array, 1)
    assert array == ["a", "c", "d", None]


def test_remove_last_element():
    array = ["a", "b", "c"]
    remove_element_in_place(array, 2)
    assert array == ["a", "b", None]


def test_remove_from_single_slot_array():
    array = ["a"]
    remove_element_in_place(array, 0)
    assert array == [None]


def test_remove_keeps_length_over_repeated_calls():
    array = ["a", "b", "c"]
    for _ in range(3):
        remove_element_in_place(array, 0)
        assert len(array) == 3
    assert array == [None, None, None]


def test_add_element_shifts_right_and_evicts_last():
    array = ["a", "b", "c", "d"]
    add_element_in_place(array, 1, "x")
    assert array == ["a", "x", "b", "c"]


def test_add_element_at_front_and_end():
    array = ["a", "b", "c"]
    add_element_in_place(array, 0, "x")
    assert array == ["x", "a", "b"]
    add_element_in_place(array, 2, "y")
    assert array == ["x", "a", "y"]


def test_add_into_padded_array():
    array = ["a", "b", None, None]
    add_element_in_place(array, 1, "x")
    assert array == ["a", "x", "b", None]


def _add_x(array, index):
    add_element_in_place(array, index, "x")


@pytest.mark.parametrize("operation", [remove_element_in_place, _add_x])
@pytest.mark.parametrize("array,index", [(None, 0), (["a", "b"], -1), (["a", "b"], 2), ([], 0)])
def test_invalid_array_arguments(operation, array, index):
    original = None if array is None else list(array)
    with pytest.raises(InvalidArgument):
        operation(array, index)
    if array is not None:
        assert array == original


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        remove_element_in_place(None, 0)
