"""Facade coordinating the client store and its secondary structures."""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from social_registry.core.client_store import ClientStore
from social_registry.core.connection_graph import ConnectionGraph
from social_registry.core.exceptions import (
    DuplicateNameError,
    HistoryCorruptionError,
    SelfConnectionError,
    UnknownClientError,
)
from social_registry.core.follow_queue import FollowRequestQueue
from social_registry.core.history import ActionHistory
from social_registry.core.loader import LoadReport, load_records
from social_registry.core.score_tree import ScoreTree
from social_registry.models.action import AddClientAction, BaseAction, RequestFollowAction
from social_registry.models.client import Client, validate_name
from social_registry.models.client_record import ClientRecord
from social_registry.models.follow_request import FollowRequest

logger = logging.getLogger(__name__)

REPORT_DEPTH = 4


class SocialNetwork:
    """
    In-memory registry of clients, follows and connections.

    Every mutation goes through this class so the store, the score tree,
    the connection graph, the follow request queue and the undo history
    stay consistent. Instances are independent and not thread-safe; a
    concurrent host must guard each instance with a single lock.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Initialize an empty network.

        Args:
            clock: Source of timestamps for actions and follow requests
        """
        self.clock = clock
        self.clients = ClientStore()
        self.actions = ActionHistory()
        self.follow_requests = FollowRequestQueue()
        self.score_tree = ScoreTree()
        self.graph = ConnectionGraph()

    # Clients

    def add_client(self, name: str, score: int) -> Client:
        """
        Create a client and record the creation for undo.

        Args:
            name: Unique, non-blank client name
            score: Non-negative integer score

        Returns:
            The created client

        Raises:
            InvalidNameError: If the name is empty or blank
            DuplicateNameError: If the name is already registered
            InvalidScoreError: If the score is negative or not an integer
        """
        client = self.register_client(name, score)
        self.actions.record(AddClientAction(name, self.clock()))
        return client

    def register_client(self, name: str, score: int) -> Client:
        """Create a client in every structure without recording history."""
        validate_name(name)
        if name in self.clients:
            raise DuplicateNameError(f"Client already exists: {name}")
        client = Client(name, score)

        self.clients.add(client)
        self.score_tree.insert(name, score)
        self.graph.add_vertex(name)
        logger.debug(f"Registered client {name} with score {score}")
        return client

    def lookup_by_name(self, name: str) -> Optional[Client]:
        return self.clients.get(name)

    def range_by_score(self, min_score: int, max_score: int) -> List[Client]:
        """Clients with a score in [min_score, max_score], ascending by score."""
        return self.clients.range_by_score(min_score, max_score)

    def exact_score(self, score: int) -> List[Client]:
        return self.clients.by_score(score)

    def count(self) -> int:
        return self.clients.count()

    # Follow requests

    def request_follow(self, requester: str, target: str) -> FollowRequest:
        """
        Queue a follow request and record it for undo.

        Raises:
            InvalidNameError: If either name is blank
            UnknownClientError: If either client does not exist
        """
        validate_name(requester)
        validate_name(target)
        self.clients.require(requester)
        self.clients.require(target)

        request = FollowRequest(requester, target, self.clock())
        self.follow_requests.enqueue(request)
        self.actions.record(RequestFollowAction(request, self.clock()))
        logger.debug(f"Queued follow request {request}")
        return request

    def process_next_request(self) -> Optional[FollowRequest]:
        """Dequeue the oldest pending request without confirming it."""
        return self.follow_requests.dequeue()

    def confirm_follow(self, requester: str, target: str) -> None:
        """
        Make *requester* follow *target* and bump the target's follower count.

        Raises:
            InvalidNameError: If either name is blank
            UnknownClientError: If either client does not exist
            SelfFollowError: If requester and target are the same client
            DuplicateFollowError: If requester already follows target
            CapacityExceededError: If requester already follows the maximum
        """
        validate_name(requester)
        validate_name(target)
        follower = self.clients.require(requester)
        followed = self.clients.require(target)

        follower.follow(target)
        followed.increment_followers()
        logger.debug(f"{requester} now follows {target}")

    def pending_count(self) -> int:
        return len(self.follow_requests)

    def pending_requests(self) -> Tuple[FollowRequest, ...]:
        return self.follow_requests.pending()

    # Undo

    def undo(self) -> Optional[BaseAction]:
        """
        Revert the most recent recorded action.

        Returns:
            The reverted action, or None if there is nothing to undo

        Raises:
            HistoryCorruptionError: If the structures no longer match the history
        """
        action = self.actions.pop()
        if action is None:
            return None

        match action:
            case AddClientAction():
                self._undo_add_client(action)
            case RequestFollowAction():
                self._undo_request_follow(action)
            case _:
                raise HistoryCorruptionError(f"Unknown action in history: {action!r}")

        logger.info(f"Undid {action.type.value}: {action.detail}")
        return action

    def _undo_add_client(self, action: AddClientAction) -> None:
        try:
            client = self.clients.remove(action.name)
        except UnknownClientError as e:
            logger.error(f"Cannot undo creation of missing client {action.name}")
            raise HistoryCorruptionError(f"Client to undo is not stored: {action.name}") from e

        self.score_tree.remove(client.name, client.score)
        self.graph.remove_vertex(client.name)

        for followed_name in client.following:
            followed = self.clients.get(followed_name)
            if followed is not None:
                followed.decrement_followers()

        for other in self.clients:
            other.unfollow(client.name)
            other.remove_connection(client.name)

    def _undo_request_follow(self, action: RequestFollowAction) -> None:
        last_request = self.follow_requests.pop_tail()
        if last_request is None:
            logger.error(f"Cannot undo follow request {action.request}: queue is empty")
            raise HistoryCorruptionError(
                f"Undo of follow request {action.request} found an empty queue"
            )

        if last_request != action.request:
            self.follow_requests.push_tail(last_request)
            logger.error(f"Cannot undo follow request {action.request}: queue tail is {last_request}")
            raise HistoryCorruptionError(
                f"Tried to undo {action.request} but the queue tail was {last_request}"
            )

    def history(self, limit: Optional[int] = None) -> Tuple[BaseAction, ...]:
        """Recorded actions, most recent first, up to *limit* entries."""
        return self.actions.recent(limit)

    # Connections

    def connect(self, a: str, b: str) -> bool:
        """
        Connect two existing clients in both directions.

        Returns:
            False if the connection already existed

        Raises:
            InvalidNameError: If either name is blank
            SelfConnectionError: If a and b are the same client
            UnknownClientError: If either client does not exist
        """
        validate_name(a)
        validate_name(b)
        if a == b:
            raise SelfConnectionError(f"Client {a!r} cannot connect to itself")
        first = self.clients.require(a)
        second = self.clients.require(b)

        added = self.graph.connect(a, b)
        first.add_connection(b)
        second.add_connection(a)
        return added

    def neighbors(self, name: str) -> FrozenSet[str]:
        return self.graph.neighbors(name)

    def exists_edge(self, a: str, b: str) -> bool:
        return self.graph.exists_edge(a, b)

    def distance(self, origin: str, destination: str) -> int:
        """Shortest hop count between two clients, 0 for itself, -1 if unreachable."""
        return self.graph.distance(origin, destination)

    # Score tree

    def clients_at_depth(self, depth: int) -> List[Client]:
        return [self.clients.require(name) for name in self.score_tree.at_depth(depth)]

    def ranked_at_depth(self, depth: int) -> List[Client]:
        """Clients at *depth* of the score tree, most followed first."""
        names = self.score_tree.ranked_at_depth(
            depth, lambda name: self.clients.require(name).followers_count
        )
        return [self.clients.require(name) for name in names]

    def level_four_by_followers(self) -> List[Client]:
        return self.ranked_at_depth(REPORT_DEPTH)

    # Bulk load

    def load(self, records: Iterable[ClientRecord]) -> LoadReport:
        """Bulk-load *records* without recording history; all or nothing."""
        return load_records(self, records)

    def snapshot(self) -> Dict[str, Any]:
        """Get the whole state of the network as plain data."""
        clients = sorted(self.clients, key=lambda client: client.score, reverse=True)
        return {
            'client_count': self.clients.count(),
            'pending_count': len(self.follow_requests),
            'clients': [client.to_dict() for client in clients],
            'score_index': self.clients.score_index(),
            'pending_requests': [request.to_dict() for request in self.follow_requests.pending()],
            'history': [action.to_dict() for action in self.actions.recent()],
            'score_tree': {
                'size': len(self.score_tree),
                'height': self.score_tree.height(),
                'is_empty': self.score_tree.is_empty()
            },
            'graph': {
                'vertex_count': self.graph.vertex_count(),
                'edge_count': self.graph.edge_count(),
                'is_empty': self.graph.is_empty()
            }
        }
