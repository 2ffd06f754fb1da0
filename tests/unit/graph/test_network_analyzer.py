"""Tests for the NetworkAnalyzer entry point."""

from __future__ import annotations

from social_capital import DegreeLimit, NetworkAnalyzer, PersonRef, RelationshipEdge


def _edge(a: str, b: str, strength: int = 3, relationship_type: str = "friend") -> RelationshipEdge:
    return RelationshipEdge(person_a_id=a, person_b_id=b, strength=strength, relationship_type=relationship_type)


class TestNetworkAnalyzer:
    def test_chain_operations(self, chain_edges, sample_people):
        analyzer = NetworkAnalyzer(chain_edges, sample_people)

        shortest = analyzer.shortest_path("A", "D")
        ranked = analyzer.all_paths("A", "D")

        assert shortest is not None
        assert shortest.path == ["A", "B", "C", "D"]
        assert ranked.total_found == 1
        assert ranked.paths[0].path == shortest.path

    def test_configured_degree_bound(self, chain_edges):
        analyzer = NetworkAnalyzer(chain_edges, max_degrees=2)

        assert analyzer.shortest_path("A", "D") is None
        assert analyzer.all_paths("A", "D").found is False

    def test_configured_path_limit(self):
        edges = [e for i in range(6) for e in (_edge("S", f"M{i}"), _edge(f"M{i}", "T"))]
        analyzer = NetworkAnalyzer(edges, path_limit=2)

        result = analyzer.all_paths("S", "T")

        assert result.total_found == 6
        assert len(result.paths) == 2

    def test_enumeration_budget(self):
        edges = [e for i in range(6) for e in (_edge("S", f"M{i}"), _edge(f"M{i}", "T"))]
        analyzer = NetworkAnalyzer(edges, enumeration_budget=4)

        result = analyzer.all_paths("S", "T")

        assert result.truncated is True
        assert result.total_found == 4

    def test_suggested_intermediaries_have_details(self):
        people = [PersonRef(id="M", name="Mutual", email="m@example.com")]
        analyzer = NetworkAnalyzer([_edge("A", "M"), _edge("B", "M")], people, max_degrees=1)

        assert analyzer.all_paths("A", "B").found is False
        assert analyzer.suggested_intermediaries("A", "B") == [
            {"id": "M", "name": "Mutual", "email": "m@example.com"}
        ]

    def test_ego_network(self, chain_edges, sample_people):
        analyzer = NetworkAnalyzer(chain_edges, sample_people)

        ego = analyzer.ego_network("B", DegreeLimit.bounded(1))

        assert {n["id"] for n in ego.nodes} == {"A", "B", "C"}
        assert ego.focal_person["name"] == "Bob"

    def test_whole_network_metrics(self, two_triangles):
        analyzer = NetworkAnalyzer(two_triangles)

        assert len(analyzer.clusters()) == 2
        assert analyzer.density() == 0.4
        assert analyzer.health()["total_connections"] == 6
        assert analyzer.isolated() == []
        assert len(analyzer.central_nodes(limit=3)) == 3
        assert len(analyzer.graph_data()["links"]) == 6

    def test_empty_network(self):
        analyzer = NetworkAnalyzer([])

        assert analyzer.shortest_path("A", "B") is None
        assert analyzer.clusters() == []
        assert analyzer.density() == 0.0
