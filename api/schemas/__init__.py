"""
Pydantic schemas for the CRM network API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .network import (
    CentralNode,
    CentralNodesResponse,
    ClusterItem,
    ClustersResponse,
    FocusedGraphResponse,
    FocusedNode,
    GraphDataResponse,
    IsolatedPeopleResponse,
    IsolatedPerson,
    NetworkHealthResponse,
    NetworkLink,
    NetworkNode,
    PathsResponse,
    PersonSummary,
    RankedPath,
    ShortestPathResponse,
)

__all__ = [
    "CentralNode",
    "CentralNodesResponse",
    "ClusterItem",
    "ClustersResponse",
    "FocusedGraphResponse",
    "FocusedNode",
    "GraphDataResponse",
    "IsolatedPeopleResponse",
    "IsolatedPerson",
    "NetworkHealthResponse",
    "NetworkLink",
    "NetworkNode",
    "PathsResponse",
    "PersonSummary",
    "RankedPath",
    "ShortestPathResponse",
]
