"""
Ego-network expansion: everyone within N degrees of a focal person.
"""

from __future__ import annotations

import logging
from collections import Counter

import networkx as nx

from ..models import DegreeLimit, EgoNetwork
from .adjacency import AdjacencyView

logger = logging.getLogger(__name__)


def degrees_from_focus(view: AdjacencyView, focal_id: str, max_degrees: DegreeLimit) -> dict[str, int]:
    """Hop distance from the focal person for every node within the limit.

    Breadth-first, so a node reachable along several routes is recorded at
    its shortest distance. An unknown focal person reaches nobody but itself.
    """
    try:
        return dict(nx.single_source_shortest_path_length(view.graph, focal_id, cutoff=max_degrees.hops))
    except nx.NodeNotFound:
        logger.debug(f"Focal person {focal_id} has no relationships")
        return {focal_id: 0}


def cumulative_counts(degree_counts: dict[int, int], max_degrees: DegreeLimit) -> dict[str, int]:
    """Running totals ``n0``, ``n1``, ... up to the display cap."""
    counts: dict[str, int] = {}
    cumulative = 0
    for degree in range(max_degrees.display_cap() + 1):
        cumulative += degree_counts.get(degree, 0)
        counts[f"n{degree}"] = cumulative
    return counts


def expand_from_focus(view: AdjacencyView, focal_id: str, max_degrees: DegreeLimit) -> EgoNetwork:
    """Build the focused subgraph around a person.

    Args:
        view: Adjacency view for the account
        focal_id: Person at the center of the network
        max_degrees: How many hops to expand, or unbounded

    Returns:
        Visible nodes tagged with their degree from the focal person, the
        links between visible nodes, and per-degree and cumulative counts
    """
    distances = degrees_from_focus(view, focal_id, max_degrees)
    degree_counts = dict(sorted(Counter(distances.values()).items()))

    # Keep the people lookup order for display; the focal person is always
    # present even when nothing else is known about them
    visible = [node for node in view.nodes() if node in distances]
    if focal_id not in view:
        visible.insert(0, focal_id)

    nodes = []
    for node in visible:
        payload = view.node_payload(node)
        payload["degree_from_focus"] = distances[node]
        payload["is_focal_person"] = node == focal_id
        nodes.append(payload)

    links = [
        edge.to_link()
        for edge in view.edges()
        if edge.person_a_id in distances and edge.person_b_id in distances
    ]

    focal_person = view.node_payload(focal_id) if view.person(focal_id) is not None else None

    logger.info(
        f"Ego network for {focal_id} ({max_degrees.to_json()} degrees): {len(nodes)} nodes, {len(links)} links"
    )

    return EgoNetwork(
        focal_id=focal_id,
        nodes=nodes,
        links=links,
        degree_counts=degree_counts,
        cumulative_counts=cumulative_counts(degree_counts, max_degrees),
        max_degrees=max_degrees,
        focal_person=focal_person,
    )
