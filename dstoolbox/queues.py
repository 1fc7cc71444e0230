import logging
from collections import deque

from dstoolbox.errors import InvalidArgument

logger = logging.getLogger(__name__)


def rotate_queue_left(queue: deque[int], k: int) -> None:
    """
    Rotate a FIFO queue left by `k` positions in place.

    The front element is dequeued and enqueued at the back, `k` times, so the
    relative order of the elements is preserved. `k` is first reduced modulo the
    queue length, so rotating by the length leaves the queue unchanged.

    Example: [1, 2, 3, 4, 5] with k = 2 becomes [3, 4, 5, 1, 2].

    Args:
        queue: Queue supporting append (push back) and popleft (pop front)
        k: Number of positions to rotate

    Raises:
        InvalidArgument: If the queue is None, k is negative, or k is positive on an empty queue
    """
    if queue is None:
        logger.debug("Rejected rotate_queue_left: queue is None")
        raise InvalidArgument("queue cannot be None")
    if k < 0:
        logger.debug("Rejected rotate_queue_left: k=%d", k)
        raise InvalidArgument(f"k cannot be negative, got {k}")
    if k == 0:
        return
    if len(queue) == 0:
        logger.debug("Rejected rotate_queue_left: k=%d on empty queue", k)
        raise InvalidArgument(f"cannot rotate an empty queue by {k}")

    steps = k % len(queue)
    for _ in range(steps):
        queue.append(queue.popleft())

    logger.debug("Rotated queue of %d left by %d (k=%d)", len(queue), steps, k)
