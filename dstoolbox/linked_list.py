"""
Traversal and relinking helpers for singly and doubly linked lists.

All traversals are iterative and assume well-formed lists: a cyclic singly
linked list makes `find_tail` and friends loop forever.
"""

import logging
from collections import defaultdict

from dstoolbox.errors import InvalidArgument
from dstoolbox.nodes import DoubleNode, SingleNode

logger = logging.getLogger(__name__)


def find_tail(head: SingleNode) -> SingleNode:
    """Return the last node of the singly linked list starting at `head`."""
    if head is None:
        logger.debug("Rejected find_tail: head is None")
        raise InvalidArgument("head cannot be None")

    current = head
    while current.next is not None:
        current = current.next
    return current


def count_occurrences(head: SingleNode) -> dict[int, int]:
    """
    Count how many nodes hold each value.

    Args:
        head: Head node of the singly linked list

    Returns:
        Mapping from each distinct value to the number of nodes holding it
    """
    if head is None:
        logger.debug("Rejected count_occurrences: head is None")
        raise InvalidArgument("head cannot be None")

    occurrences = defaultdict(int)
    current = head
    while current is not None:
        occurrences[current.data] += 1
        current = current.next

    logger.debug("Counted %d distinct values", len(occurrences))
    return dict(occurrences)


def find_nth_element(head: SingleNode, n: int) -> SingleNode | None:
    """
    Return the node at zero-based position `n`.

    Returns:
        The nth node, or None if the list has fewer than n + 1 nodes

    Raises:
        InvalidArgument: If head is None or n is negative
    """
    if head is None:
        logger.debug("Rejected find_nth_element: head is None")
        raise InvalidArgument("head cannot be None")
    if n < 0:
        logger.debug("Rejected find_nth_element: n=%d", n)
        raise InvalidArgument(f"n cannot be negative, got {n}")

    current = head
    count = 0
    while current is not None:
        if count == n:
            return current
        current = current.next
        count += 1
    return None


def insert_node(node: SingleNode, new_node: SingleNode) -> None:
    """Link `new_node` directly after `node`. Both nodes are used as-is, nothing is copied."""
    if node is None or new_node is None:
        logger.debug("Rejected insert_node: node=%r new_node=%r", node, new_node)
        raise InvalidArgument("node and new_node cannot be None")

    new_node.next = node.next
    node.next = new_node


def find_head(tail: DoubleNode) -> DoubleNode:
    """Return the first node of the doubly linked list ending at `tail`."""
    if tail is None:
        logger.debug("Rejected find_head: tail is None")
        raise InvalidArgument("tail cannot be None")

    current = tail
    while current.prev is not None:
        current = current.prev
    return current


def remove_node(node: DoubleNode) -> None:
    """
    Unlink `node` from its neighbours in O(1) time.

    The neighbours are joined to each other and the node's own links are cleared,
    so callers that need the former neighbours must read them first.
    """
    if node is None:
        logger.debug("Rejected remove_node: node is None")
        raise InvalidArgument("node cannot be None")

    if node.prev:
        node.prev.next = node.next
    if node.next:
        node.next.prev = node.prev

    node.next = None
    node.prev = None
    logger.debug("Removed %r", node)
