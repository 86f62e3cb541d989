"""FIFO queue of pending follow requests."""

from collections import deque
from typing import Deque, Optional, Tuple

from social_registry.models.follow_request import FollowRequest


class FollowRequestQueue:
    """
    Pending follow requests in the order they were sent.

    Requests are consumed from the head. The tail is only touched by undo,
    which retracts the most recently sent request.
    """

    def __init__(self):
        self._queue: Deque[FollowRequest] = deque()

    def enqueue(self, request: FollowRequest) -> None:
        self._queue.append(request)

    def dequeue(self) -> Optional[FollowRequest]:
        """Remove and return the oldest request, or None if empty."""
        if not self._queue:
            return None
        return self._queue.popleft()

    def pop_tail(self) -> Optional[FollowRequest]:
        """Remove and return the newest request, or None if empty."""
        if not self._queue:
            return None
        return self._queue.pop()

    def push_tail(self, request: FollowRequest) -> None:
        self._queue.append(request)

    def pending(self) -> Tuple[FollowRequest, ...]:
        return tuple(self._queue)

    def __len__(self) -> int:
        return len(self._queue)
