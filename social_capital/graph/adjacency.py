"""
Adjacency view over one account's relationships.

The view is rebuilt for every request from the edge list the caller fetched
and discarded afterwards. A personal contact list is small enough that this
is cheaper than keeping an incrementally maintained graph in sync.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

import networkx as nx

from ..models import MAX_STRENGTH, Neighbor, PersonRef, RelationshipEdge

logger = logging.getLogger(__name__)


class AdjacencyView:
    """Undirected relationship graph annotated with strength and type.

    Backed by a ``networkx.MultiGraph`` so duplicate relationship records for
    the same pair survive as parallel edges instead of overwriting each other.
    Node and neighbor iteration follow insertion order, which is the order the
    data source returned people and relationships in.
    """

    def __init__(self) -> None:
        self.graph = nx.MultiGraph()
        self.skipped_self_references = 0

    def add_person(self, person: PersonRef) -> None:
        self.graph.add_node(person.id, person=person)

    def add_edge(self, edge: RelationshipEdge) -> None:
        if edge.is_self_referential:
            self.skipped_self_references += 1
            logger.warning(
                f"Skipping self-referential relationship: person {edge.person_a_id} related to themselves"
            )
            return

        self.graph.add_edge(
            edge.person_a_id,
            edge.person_b_id,
            strength=edge.strength,
            relationship_type=edge.relationship_type,
        )

    # ========================================
    # Read access. Unknown nodes read as empty.
    # ========================================

    def __contains__(self, node: object) -> bool:
        return node in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def nodes(self) -> list[str]:
        return list(self.graph.nodes())

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def neighbors(self, node: str) -> list[Neighbor]:
        """All (neighbor, strength, type) entries for a node, one per edge."""
        if node not in self.graph:
            return []
        return [
            Neighbor(node=other, strength=data["strength"], relationship_type=data["relationship_type"])
            for _, other, data in self.graph.edges(node, data=True)
        ]

    def neighbor_ids(self, node: str) -> list[str]:
        """Distinct neighbors of a node, parallel edges collapsed."""
        if node not in self.graph:
            return []
        return list(self.graph.adj[node])

    def edge_between(self, a: str, b: str) -> Neighbor | None:
        """First-inserted edge between ``a`` and ``b`` as seen from ``a``."""
        if not self.graph.has_edge(a, b):
            return None
        data = next(iter(self.graph.adj[a][b].values()))
        return Neighbor(node=b, strength=data["strength"], relationship_type=data["relationship_type"])

    def connection_count(self, node: str) -> int:
        """Number of relationships touching ``node``. Parallel edges each count."""
        if node not in self.graph:
            return 0
        return int(self.graph.degree(node))

    def person(self, node: str) -> PersonRef | None:
        if node not in self.graph:
            return None
        return self.graph.nodes[node].get("person")

    def display_name(self, node: str) -> str:
        person = self.person(node)
        return person.name if person and person.name else ""

    def node_payload(self, node: str) -> dict[str, Any]:
        """Visualization payload for a node (id, name, picture, importance)."""
        person = self.person(node)
        return {
            "id": node,
            "name": person.name if person else "",
            "picture": person.photo_url if person else None,
            "importance": person.importance if person else None,
        }

    def edges(self) -> Iterator[RelationshipEdge]:
        for a, b, data in self.graph.edges(data=True):
            yield RelationshipEdge(
                person_a_id=a,
                person_b_id=b,
                strength=data["strength"],
                relationship_type=data["relationship_type"],
            )

    def path_strength(self, path: list[str]) -> int:
        """Weakest relationship strength along a path.

        Starts from the top of the strength scale, so a zero-hop path reports
        the maximum strength.
        """
        min_strength = MAX_STRENGTH
        for a, b in zip(path, path[1:]):
            edge = self.edge_between(a, b)
            if edge is not None:
                min_strength = min(min_strength, edge.strength)
        return min_strength

    def path_details(self, path: list[str]) -> list[dict[str, Any]]:
        """Display payload for every node on a path known to the people lookup."""
        details = []
        for node in path:
            person = self.person(node)
            if person is not None:
                details.append(person.summary())
        return details


def build_adjacency(
    edges: Iterable[RelationshipEdge],
    people: Iterable[PersonRef] | None = None,
) -> AdjacencyView:
    """Materialize the adjacency view for an account.

    Args:
        edges: Every relationship in the account, in storage order
        people: Optional people lookup. Registers people without any
            relationship as nodes and attaches display payload.

    Returns:
        Adjacency view with each edge inserted in both directions
    """
    view = AdjacencyView()

    if people is not None:
        for person in people:
            view.add_person(person)

    for edge in edges:
        view.add_edge(edge)

    logger.debug(f"Built adjacency view with {len(view)} nodes and {view.edge_count} edges")
    return view
