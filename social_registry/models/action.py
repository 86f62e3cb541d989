"""Action models for representing reversible registry mutations."""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from social_registry.models.follow_request import FollowRequest


class ActionType(Enum):
    """Types of actions recorded in the undo history."""
    ADD_CLIENT = "add_client"
    REQUEST_FOLLOW = "request_follow"


@dataclass
class BaseAction(ABC):
    """Base class for all recorded actions."""

    type: ActionType
    detail: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert action to dictionary representation."""
        return {
            'type': self.type.value,
            'detail': self.detail,
            'timestamp': self.timestamp.isoformat()
        }


class AddClientAction(BaseAction):
    """Action recorded when a client is created."""

    def __init__(self, name: str, timestamp: datetime):
        super().__init__(ActionType.ADD_CLIENT, name, timestamp)
        self.name = name

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['name'] = self.name
        return result

    def __repr__(self) -> str:
        return f"AddClientAction(name={self.name!r})"


class RequestFollowAction(BaseAction):
    """Action recorded when a follow request is enqueued."""

    def __init__(self, request: FollowRequest, timestamp: datetime):
        super().__init__(ActionType.REQUEST_FOLLOW, str(request), timestamp)
        self.request = request

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['request'] = self.request.to_dict()
        return result

    def __repr__(self) -> str:
        return f"RequestFollowAction(request={self.request!r})"
