"""Client model for registered members of the network."""

from dataclasses import dataclass, field
from typing import Any, Dict, Set

from social_registry.core.exceptions import (
    CapacityExceededError,
    DuplicateFollowError,
    InvalidNameError,
    InvalidScoreError,
    SelfFollowError,
)

MAX_FOLLOWING = 2


def validate_name(name: Any) -> str:
    """Return *name* unchanged, or raise if it is not a non-blank string."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError(f"Invalid client name: {name!r}")
    return name


def validate_score(score: Any) -> int:
    """Return *score* unchanged, or raise if it is not a non-negative int."""
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScoreError(f"Score must be an integer, got {score!r}")
    if score < 0:
        raise InvalidScoreError(f"Score must be >= 0, got {score}")
    return score


@dataclass
class Client:
    """
    Represents a client with its score and social relationships.

    Relationships are stored by name. ``following`` holds at most
    ``MAX_FOLLOWING`` names and never the client's own name.
    """

    name: str
    score: int
    following: Set[str] = field(default_factory=set)
    connections: Set[str] = field(default_factory=set)
    followers_count: int = 0

    def __post_init__(self) -> None:
        validate_name(self.name)
        validate_score(self.score)

    def can_follow(self, name: str) -> None:
        """
        Check that following *name* keeps the client's invariants.

        Raises:
            SelfFollowError: If *name* is the client itself
            DuplicateFollowError: If *name* is already followed
            CapacityExceededError: If the client already follows the maximum
        """
        if name == self.name:
            raise SelfFollowError(f"Client {self.name!r} cannot follow itself")
        if name in self.following:
            raise DuplicateFollowError(f"Client {self.name!r} already follows {name!r}")
        if len(self.following) >= MAX_FOLLOWING:
            raise CapacityExceededError(
                f"Client {self.name!r} already follows {MAX_FOLLOWING} clients"
            )

    def follow(self, name: str) -> None:
        """Start following *name*."""
        self.can_follow(name)
        self.following.add(name)

    def unfollow(self, name: str) -> bool:
        """Stop following *name*. Returns whether it was followed."""
        if name in self.following:
            self.following.remove(name)
            return True
        return False

    def add_connection(self, name: str) -> None:
        self.connections.add(name)

    def remove_connection(self, name: str) -> None:
        self.connections.discard(name)

    def increment_followers(self) -> None:
        self.followers_count += 1

    def decrement_followers(self) -> None:
        if self.followers_count > 0:
            self.followers_count -= 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert client to dictionary representation."""
        return {
            'name': self.name,
            'score': self.score,
            'followers_count': self.followers_count,
            'following': sorted(self.following),
            'connections': sorted(self.connections)
        }

    def __repr__(self) -> str:
        return f"Client(name={self.name!r}, score={self.score!r}, followers_count={self.followers_count!r})"
