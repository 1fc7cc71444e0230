"""
In-place editing of fixed-size string arrays.

The array length never changes: removing shifts the tail left and pads with None,
adding shifts the tail right and evicts the last element.
"""

import logging
from collections.abc import MutableSequence

from dstoolbox.errors import InvalidArgument

logger = logging.getLogger(__name__)


def _check_array_index(array: MutableSequence[str | None] | None, index: int) -> None:
    if array is None:
        logger.debug("Rejected array edit: array is None")
        raise InvalidArgument("array cannot be None")
    if index < 0 or index >= len(array):
        logger.debug("Rejected array edit: index %d, length %d", index, len(array))
        raise InvalidArgument(f"index {index} out of bounds for length {len(array)}")


def remove_element_in_place(array: MutableSequence[str | None], index: int) -> None:
    """
    Remove the element at `index`, shifting later elements left and setting the last slot to None.

    Args:
        array: Fixed-size array to modify
        index: Position of the element to remove

    Raises:
        InvalidArgument: If the array is None or the index is out of bounds
    """
    _check_array_index(array, index)

    for i in range(index, len(array) - 1):
        array[i] = array[i + 1]
    array[len(array) - 1] = None

    logger.debug("Removed element at index %d of %d", index, len(array))


def add_element_in_place(array: MutableSequence[str | None], index: int, value: str | None) -> None:
    """
    Write `value` at `index`, shifting later elements right and evicting the last one.

    Args:
        array: Fixed-size array to modify
        index: Position at which to add the value
        value: Value to add

    Raises:
        InvalidArgument: If the array is None or the index is out of bounds
    """
    _check_array_index(array, index)

    # Walk from the end down so nothing is overwritten before it is moved
    for i in range(len(array) - 1, index, -1):
        array[i] = array[i - 1]
    array[index] = value

    logger.debug("Added element at index %d of %d", index, len(array))
