"""
Root test configuration and fixtures for the CRM network project.

This conftest.py provides common fixtures for all test categories:
- unit/graph: Graph algorithms over in-memory edge lists
- unit/api: Routers, repository and settings with PocketBase mocked out

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from social_capital.models import PersonRef, RelationshipEdge  # noqa: E402


def create_mock_pocketbase():
    """Create a mock PocketBase instance with empty collections."""
    mock_pb = Mock()

    mock_collection = Mock()
    mock_collection.auth_with_password = Mock(return_value=True)
    mock_collection.get_full_list = Mock(return_value=[])
    mock_collection.get_first_list_item = Mock()

    mock_pb.collection = Mock(return_value=mock_collection)

    mock_pb.auth_store = Mock()
    mock_pb.auth_store.base_token = "mock-token"

    return mock_pb


@pytest.fixture(autouse=True)
def mock_all_external_services():
    """Automatically mock PocketBase to prevent real connections.

    Set SKIP_MOCKING=true to run against a real server.
    """
    if os.environ.get("SKIP_MOCKING") == "true":
        yield {}
        return

    mock_pb = create_mock_pocketbase()

    with patch("pocketbase.PocketBase") as mock_pb_class:
        mock_pb_class.return_value = mock_pb
        yield {"pocketbase": mock_pb}


def edge(a: str, b: str, strength: int = 3, relationship_type: str = "friend") -> RelationshipEdge:
    """Shorthand for building relationship edges in tests."""
    return RelationshipEdge(person_a_id=a, person_b_id=b, strength=strength, relationship_type=relationship_type)


@pytest.fixture
def chain_edges() -> list[RelationshipEdge]:
    """A - B - C - D with mixed strengths and types."""
    return [
        edge("A", "B", 3, "friend"),
        edge("B", "C", 2, "colleague"),
        edge("C", "D", 4, "family"),
    ]


@pytest.fixture
def sample_people() -> list[PersonRef]:
    """People for A..E, with E having no relationships."""
    return [
        PersonRef(id="A", name="Alice", email="alice@example.com"),
        PersonRef(id="B", name="Bob", email="bob@example.com"),
        PersonRef(id="C", name="Charlie", email="charlie@example.com"),
        PersonRef(id="D", name="Dana", email="dana@example.com"),
        PersonRef(id="E", name="Eve", email="eve@example.com"),
    ]


@pytest.fixture
def two_triangles() -> list[RelationshipEdge]:
    """Two disjoint triangles: A-B-C and X-Y-Z."""
    return [
        edge("A", "B"),
        edge("B", "C"),
        edge("C", "A"),
        edge("X", "Y"),
        edge("Y", "Z"),
        edge("Z", "X"),
    ]
