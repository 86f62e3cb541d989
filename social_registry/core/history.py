"""LIFO log of reversible actions."""

from collections import deque
from typing import Deque, Optional, Tuple

from social_registry.core.exceptions import InvalidLimitError
from social_registry.models.action import BaseAction


class ActionHistory:
    """Stack of recorded actions; the most recent action is undone first."""

    def __init__(self):
        self._stack: Deque[BaseAction] = deque()

    def record(self, action: BaseAction) -> None:
        self._stack.append(action)

    def pop(self) -> Optional[BaseAction]:
        """Remove and return the most recent action, or None if empty."""
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> Optional[BaseAction]:
        return self._stack[-1] if self._stack else None

    def recent(self, limit: Optional[int] = None) -> Tuple[BaseAction, ...]:
        """
        Return up to *limit* actions, most recent first.

        Raises:
            InvalidLimitError: If limit is negative
        """
        if limit is not None and limit < 0:
            raise InvalidLimitError(f"limit must be >= 0, got {limit}")
        newest_first = reversed(self._stack)
        if limit is None:
            return tuple(newest_first)
        return tuple(action for _, action in zip(range(limit), newest_first))

    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)
