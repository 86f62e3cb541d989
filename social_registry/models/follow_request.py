"""Follow request model for the pending follow pipeline."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class FollowRequest:
    """A queued, not yet confirmed intent of *requester* to follow *target*."""

    requester: str
    target: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert request to dictionary representation."""
        return {
            'requester': self.requester,
            'target': self.target,
            'timestamp': self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"{self.requester} -> {self.target}"
