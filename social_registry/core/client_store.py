"""Indexed storage for clients: by name and by score."""

import bisect
import logging
from typing import Dict, Iterator, List, Optional

from social_registry.core.exceptions import DuplicateNameError, UnknownClientError
from social_registry.models.client import Client

logger = logging.getLogger(__name__)


class ClientStore:
    """
    Owns every client of a network.

    ``_by_name`` maps name to client. ``_by_score`` maps a score to the names
    holding it, in insertion order, and ``_scores`` keeps the populated
    scores sorted so range queries only touch the matching buckets.
    """

    def __init__(self):
        self._by_name: Dict[str, Client] = {}
        self._by_score: Dict[int, Dict[str, None]] = {}
        self._scores: List[int] = []

    def add(self, client: Client) -> None:
        """
        Index a new client.

        Raises:
            DuplicateNameError: If a client with the same name exists
        """
        if client.name in self._by_name:
            raise DuplicateNameError(f"Client already exists: {client.name}")

        self._by_name[client.name] = client
        bucket = self._by_score.get(client.score)
        if bucket is None:
            bucket = self._by_score[client.score] = {}
            bisect.insort(self._scores, client.score)
        bucket[client.name] = None
        logger.debug(f"Indexed client {client.name} with score {client.score}")

    def remove(self, name: str) -> Client:
        """
        Drop a client from both indices and return it.

        Raises:
            UnknownClientError: If the name is not stored
        """
        client = self._by_name.pop(name, None)
        if client is None:
            raise UnknownClientError(f"Client not found: {name}")

        bucket = self._by_score[client.score]
        del bucket[name]
        if not bucket:
            del self._by_score[client.score]
            del self._scores[bisect.bisect_left(self._scores, client.score)]
        logger.debug(f"Removed client {name} from indices")
        return client

    def get(self, name: str) -> Optional[Client]:
        return self._by_name.get(name)

    def require(self, name: str) -> Client:
        """Return the client named *name* or raise UnknownClientError."""
        client = self._by_name.get(name)
        if client is None:
            raise UnknownClientError(f"Client not found: {name}")
        return client

    def by_score(self, score: int) -> List[Client]:
        return [self._by_name[name] for name in self._by_score.get(score, ())]

    def range_by_score(self, min_score: int, max_score: int) -> List[Client]:
        """Return clients with min_score <= score <= max_score, ascending."""
        if min_score > max_score:
            return []
        start = bisect.bisect_left(self._scores, min_score)
        end = bisect.bisect_right(self._scores, max_score)
        result = []
        for score in self._scores[start:end]:
            result.extend(self._by_name[name] for name in self._by_score[score])
        return result

    def score_index(self) -> Dict[int, List[str]]:
        """Return a copy of the score index in ascending score order."""
        return {score: list(self._by_score[score]) for score in self._scores}

    def count(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Client]:
        return iter(list(self._by_name.values()))

    def __len__(self) -> int:
        return len(self._by_name)
