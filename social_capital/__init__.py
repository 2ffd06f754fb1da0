"""
Social Capital - Relationship network analytics for the personal CRM.

This package contains:
- models: Relationship edges, people references and result types
- graph: Adjacency view, pathfinding, ego networks and network analytics
- logging_config: Unified log format shared by all services
"""

from social_capital.graph.service import NetworkAnalyzer
from social_capital.models import (
    DegreeLimit,
    PersonRef,
    RelationshipEdge,
    RelationshipType,
)

__all__ = [
    "DegreeLimit",
    "NetworkAnalyzer",
    "PersonRef",
    "RelationshipEdge",
    "RelationshipType",
]
