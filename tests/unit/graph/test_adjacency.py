"""Tests for building the adjacency view from an edge list."""

from __future__ import annotations

import logging

from social_capital.graph.adjacency import build_adjacency
from social_capital.models import PersonRef, RelationshipEdge


def _edge(a: str, b: str, strength: int = 3, relationship_type: str = "friend") -> RelationshipEdge:
    return RelationshipEdge(person_a_id=a, person_b_id=b, strength=strength, relationship_type=relationship_type)


class TestBuildAdjacency:
    def test_edges_are_traversable_both_ways(self):
        view = build_adjacency([_edge("A", "B", 4, "colleague")])

        forward = view.neighbors("A")
        backward = view.neighbors("B")

        assert [(n.node, n.strength, n.relationship_type) for n in forward] == [("B", 4, "colleague")]
        assert [(n.node, n.strength, n.relationship_type) for n in backward] == [("A", 4, "colleague")]

    def test_empty_edge_list_is_valid(self):
        view = build_adjacency([])

        assert len(view) == 0
        assert view.edge_count == 0
        assert view.neighbors("A") == []

    def test_unknown_node_reads_as_empty(self):
        view = build_adjacency([_edge("A", "B")])

        assert "Z" not in view
        assert view.neighbors("Z") == []
        assert view.neighbor_ids("Z") == []
        assert view.connection_count("Z") == 0
        assert view.person("Z") is None
        assert view.edge_between("A", "Z") is None

    def test_neighbors_follow_insertion_order(self):
        view = build_adjacency([_edge("A", "C"), _edge("A", "B"), _edge("D", "A")])

        assert view.neighbor_ids("A") == ["C", "B", "D"]

    def test_parallel_edges_are_kept(self):
        view = build_adjacency([_edge("A", "B", 2, "friend"), _edge("B", "A", 5, "family")])

        assert view.edge_count == 2
        assert len(view.neighbors("A")) == 2
        assert view.neighbor_ids("A") == ["B"]
        assert view.connection_count("A") == 2

    def test_edge_between_returns_first_inserted(self):
        view = build_adjacency([_edge("A", "B", 2, "friend"), _edge("A", "B", 5, "family")])

        first = view.edge_between("B", "A")

        assert first is not None
        assert (first.strength, first.relationship_type) == (2, "friend")

    def test_self_referential_relationship_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            view = build_adjacency([_edge("A", "A"), _edge("A", "B")])

        assert view.edge_count == 1
        assert view.skipped_self_references == 1
        assert "self-referential" in caplog.text

    def test_people_without_relationships_are_nodes(self, chain_edges, sample_people):
        view = build_adjacency(chain_edges, sample_people)

        assert view.nodes() == ["A", "B", "C", "D", "E"]
        assert view.connection_count("E") == 0
        assert view.display_name("E") == "Eve"

    def test_edge_only_nodes_have_no_payload(self, chain_edges):
        view = build_adjacency(chain_edges, [PersonRef(id="A", name="Alice")])

        assert view.person("A") is not None
        assert view.person("B") is None
        assert view.display_name("B") == ""
        assert view.node_payload("B") == {"id": "B", "name": "", "picture": None, "importance": None}


class TestPathHelpers:
    def test_path_strength_is_weakest_link(self, chain_edges):
        view = build_adjacency(chain_edges)

        assert view.path_strength(["A", "B", "C", "D"]) == 2
        assert view.path_strength(["C", "D"]) == 4

    def test_path_strength_of_single_node(self, chain_edges):
        view = build_adjacency(chain_edges)

        assert view.path_strength(["A"]) == 5

    def test_path_details_skip_unknown_people(self, chain_edges):
        view = build_adjacency(chain_edges, [PersonRef(id="A", name="Alice", email="a@example.com")])

        assert view.path_details(["A", "B"]) == [{"id": "A", "name": "Alice", "email": "a@example.com"}]
