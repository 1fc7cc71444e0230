from collections.abc import Iterable
from typing import Any


class SingleNode:
    """Node of a singly linked list."""

    def __init__(self, data: int, next: "SingleNode | None" = None):
        self.data = data
        self.next = next

    def __repr__(self):
        return f"SingleNode({self.data})"

    def __eq__(self, other):
        if not isinstance(other, SingleNode):
            return False
        return self is other

    def __hash__(self):
        return hash(id(self))


class DoubleNode:
    """Node of a doubly linked list."""

    def __init__(self, data: Any):
        self.data = data
        self.prev: DoubleNode | None = None
        self.next: DoubleNode | None = None

    def __repr__(self):
        return f"DoubleNode({self.data})"

    def __eq__(self, other):
        if not isinstance(other, DoubleNode):
            return False
        return self is other

    def __hash__(self):
        return hash(id(self))


def build_single_list(values: Iterable[int]) -> SingleNode | None:
    """Link the values into a fresh singly linked list and return its head."""
    head: SingleNode | None = None
    tail: SingleNode | None = None
    for value in values:
        node = SingleNode(value)
        if head is None:
            head = tail = node
        else:
            tail.next = node
            tail = node
    return head


def build_double_list(values: Iterable[Any]) -> tuple[DoubleNode | None, DoubleNode | None]:
    """
    Link the values into a fresh doubly linked list.

    Returns:
        (head, tail) of the new list, both None for an empty iterable
    """
    head: DoubleNode | None = None
    tail: DoubleNode | None = None
    for value in values:
        new_node = DoubleNode(value)
        if head is None:
            head = tail = new_node
        else:
            new_node.prev = tail
            tail.next = new_node
            tail = new_node
    return head, tail


def single_values(head: SingleNode | None) -> list[int]:
    result = []
    current = head
    while current:
        result.append(current.data)
        current = current.next
    return result


def double_values(head: DoubleNode | None) -> list[Any]:
    result = []
    current = head
    while current:
        result.append(current.data)
        current = current.next
    return result


def double_values_reversed(tail: DoubleNode | None) -> list[Any]:
    """Payloads walking `prev` links from `tail`, i.e. back to front."""
    result = []
    current = tail
    while current:
        result.append(current.data)
        current = current.prev
    return result
