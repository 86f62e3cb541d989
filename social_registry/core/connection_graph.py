"""Undirected, unweighted graph of client connections."""

import logging
from collections import deque
from typing import Dict, FrozenSet, Set

from social_registry.core.exceptions import SelfConnectionError, UnknownClientError
from social_registry.models.client import validate_name

logger = logging.getLogger(__name__)


class ConnectionGraph:
    """
    Adjacency map from client name to the names it is connected to.

    Edges are always stored in both directions and never loop back on a
    vertex.
    """

    def __init__(self):
        self._adjacency: Dict[str, Set[str]] = {}

    def add_vertex(self, name: str) -> None:
        """Register *name* with no edges. Existing vertices are left alone."""
        validate_name(name)
        self._adjacency.setdefault(name, set())

    def remove_vertex(self, name: str) -> Set[str]:
        """Drop *name* and its incident edges; return its former neighbors."""
        neighbors = self._adjacency.pop(name, set())
        for other in neighbors:
            self._adjacency[other].discard(name)
        return neighbors

    def connect(self, a: str, b: str) -> bool:
        """
        Add the undirected edge a-b. Returns False if it already existed.

        Raises:
            InvalidNameError: If either name is blank
            SelfConnectionError: If a and b are the same client
        """
        validate_name(a)
        validate_name(b)
        if a == b:
            raise SelfConnectionError(f"Client {a!r} cannot connect to itself")

        if b in self._adjacency.get(a, ()):
            return False
        self._adjacency.setdefault(a, set()).add(b)
        self._adjacency.setdefault(b, set()).add(a)
        logger.debug(f"Connected {a} <-> {b}")
        return True

    def neighbors(self, name: str) -> FrozenSet[str]:
        """
        Return the names directly connected to *name*.

        Raises:
            InvalidNameError: If the name is blank
        """
        validate_name(name)
        return frozenset(self._adjacency.get(name, ()))

    def exists_edge(self, a: str, b: str) -> bool:
        return b in self._adjacency.get(a, ())

    def distance(self, origin: str, destination: str) -> int:
        """
        Return the number of hops on a shortest path, or -1 if none exists.

        Raises:
            InvalidNameError: If either name is blank
            UnknownClientError: If either name is not a vertex
        """
        validate_name(origin)
        validate_name(destination)
        if origin == destination:
            return 0
        for name in (origin, destination):
            if name not in self._adjacency:
                raise UnknownClientError(f"Client not in graph: {name}")

        visited = {origin}
        queue = deque([(origin, 0)])
        while queue:
            current, hops = queue.popleft()
            for neighbor in self._adjacency[current]:
                if neighbor in visited:
                    continue
                if neighbor == destination:
                    return hops + 1
                visited.add(neighbor)
                queue.append((neighbor, hops + 1))
        return -1

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def is_empty(self) -> bool:
        return not self._adjacency

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency
