import logging
from collections.abc import Iterator

import regex as re

from dstoolbox.errors import InvalidArgument

logger = logging.getLogger(__name__)

OPEN_PAREN = "("
CLOSE_PAREN = ")"
PAREN_PATTERN = re.compile(r"[()]")


def iter_parentheses(text: str) -> Iterator[str]:
    """Yield the parenthesis characters of `text` in order, skipping everything else."""
    for match in PAREN_PATTERN.finditer(text):
        yield match.group()


def has_balanced_parentheses(text: str) -> bool:
    """
    Check whether the parentheses in a string are balanced, using a stack.

    Every '(' must be closed by a later ')' and the pairs must nest correctly.
    Characters other than '(' and ')' are ignored.

    Example:
        - "(()())" -> True
        - "(()" -> False
        - ")" -> False

    Raises:
        InvalidArgument: If text is None
    """
    if text is None:
        logger.debug("Rejected has_balanced_parentheses: text is None")
        raise InvalidArgument("text cannot be None")

    stack: list[str] = []
    for paren in iter_parentheses(text):
        if paren == OPEN_PAREN:
            stack.append(paren)
        elif paren == CLOSE_PAREN:
            if not stack:
                # Closing parenthesis with nothing left to match
                return False
            stack.pop()

    return not stack
