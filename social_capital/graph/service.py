"""
NetworkAnalyzer: one entry point per network operation.

Every analyzer owns the adjacency view built from the edge list it was given.
Construct one per request; nothing is shared between analyzers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..models import (
    MAX_DEGREES,
    AllPathsResult,
    Cluster,
    ConnectionCount,
    DegreeLimit,
    EgoNetwork,
    PathResult,
    PersonRef,
    RelationshipEdge,
)
from . import analytics, ego_network, pathfinding
from .adjacency import build_adjacency

logger = logging.getLogger(__name__)


class NetworkAnalyzer:
    """Runs pathfinding and graph analytics over one account's relationships"""

    def __init__(
        self,
        edges: Iterable[RelationshipEdge],
        people: Iterable[PersonRef] | None = None,
        max_degrees: int = MAX_DEGREES,
        path_limit: int = pathfinding.DEFAULT_PATH_LIMIT,
        enumeration_budget: int | None = None,
    ):
        self.view = build_adjacency(edges, people)
        self.max_degrees = max_degrees
        self.path_limit = path_limit
        self.enumeration_budget = enumeration_budget

    def shortest_path(self, from_id: str, to_id: str) -> PathResult | None:
        return pathfinding.find_shortest_path(self.view, from_id, to_id, self.max_degrees)

    def all_paths(self, from_id: str, to_id: str) -> AllPathsResult:
        return pathfinding.find_all_paths(
            self.view,
            from_id,
            to_id,
            max_degrees=self.max_degrees,
            limit=self.path_limit,
            max_enumerated=self.enumeration_budget,
        )

    def suggested_intermediaries(self, from_id: str, to_id: str, limit: int = 5) -> list[dict[str, Any]]:
        """Shared direct connections, with display details where known."""
        shared = pathfinding.suggest_intermediaries(self.view, from_id, to_id, limit)
        return self.view.path_details(shared)

    def ego_network(self, focal_id: str, max_degrees: DegreeLimit) -> EgoNetwork:
        return ego_network.expand_from_focus(self.view, focal_id, max_degrees)

    def clusters(self) -> list[Cluster]:
        return analytics.find_clusters(self.view)

    def central_nodes(self, limit: int = 10) -> list[ConnectionCount]:
        return analytics.central_nodes(self.view, limit)

    def isolated(self, max_connections: int = 1) -> list[ConnectionCount]:
        return analytics.isolated_people(self.view, max_connections)

    def density(self) -> float:
        return analytics.network_density(len(self.view), self.view.edge_count)

    def health(self) -> dict[str, Any]:
        return analytics.network_health(self.view)

    def graph_data(self, relationship_type: str | None = None, min_strength: int | None = None) -> dict[str, Any]:
        return analytics.graph_data(self.view, relationship_type, min_strength)
