"""
Whole-network analytics: clusters, central and isolated people, density.
"""

from __future__ import annotations

import logging
from typing import Any

import networkx as nx

from ..models import Cluster, ConnectionCount
from .adjacency import AdjacencyView

logger = logging.getLogger(__name__)


def find_clusters(view: AdjacencyView) -> list[Cluster]:
    """Partition the network into connected components.

    Cluster ids are assigned in discovery order (node insertion order) and
    kept when the list is re-ordered by size, largest first.
    """
    clusters: list[Cluster] = []
    visited: set[str] = set()

    for node in view.nodes():
        if node in visited:
            continue
        members = list(nx.dfs_preorder_nodes(view.graph, node))
        visited.update(members)
        clusters.append(Cluster(id=len(clusters) + 1, members=members))

    clusters.sort(key=lambda c: c.size, reverse=True)
    logger.debug(f"Found {len(clusters)} clusters across {len(view)} people")
    return clusters


def connection_counts(view: AdjacencyView) -> list[ConnectionCount]:
    return [
        ConnectionCount(id=node, name=view.display_name(node), connection_count=view.connection_count(node))
        for node in view.nodes()
    ]


def central_nodes(view: AdjacencyView, limit: int = 10) -> list[ConnectionCount]:
    """Most connected people by degree centrality (relationship count)."""
    ranked = sorted(connection_counts(view), key=lambda c: c.connection_count, reverse=True)
    return ranked[:limit]


def isolated_people(view: AdjacencyView, max_connections: int = 1) -> list[ConnectionCount]:
    """People with at most ``max_connections`` relationships, fewest first."""
    isolated = [c for c in connection_counts(view) if c.connection_count <= max_connections]
    isolated.sort(key=lambda c: (c.connection_count, c.name))
    return isolated


def network_density(node_count: int, edge_count: int) -> float:
    """Actual relationships over possible relationships, capped at 1.0.

    Duplicate records can push the raw ratio past 1, hence the cap.
    """
    if node_count < 2:
        return 0.0

    max_connections = node_count * (node_count - 1) / 2
    return min(edge_count / max_connections, 1.0)


def network_health(view: AdjacencyView) -> dict[str, Any]:
    """Aggregate relationship metrics for the dashboard."""
    strengths = [edge.strength for edge in view.edges()]
    average_strength = round(sum(strengths) / len(strengths), 2) if strengths else 0.0

    return {
        "average_relationship_strength": average_strength,
        "total_connections": view.edge_count,
        "network_density": network_density(len(view), view.edge_count),
    }


def graph_data(
    view: AdjacencyView,
    relationship_type: str | None = None,
    min_strength: int | None = None,
) -> dict[str, list[dict[str, Any]]]:
    """Nodes and links for the force-directed network visualization.

    When a filter is applied, only people touched by a matching link are
    returned as nodes.
    """
    links = []
    for edge in view.edges():
        if relationship_type and edge.relationship_type != relationship_type:
            continue
        if min_strength and edge.strength < min_strength:
            continue
        links.append(edge.to_link())

    node_ids = view.nodes()
    if relationship_type or min_strength:
        linked = {link["source"] for link in links} | {link["target"] for link in links}
        node_ids = [node for node in node_ids if node in linked]

    return {"nodes": [view.node_payload(node) for node in node_ids], "links": links}
