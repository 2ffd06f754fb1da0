"""
Pydantic schemas for network endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PersonSummary(BaseModel):
    """Person attached to a path for display"""

    id: str
    name: str = ""
    email: str | None = None


class NetworkNode(BaseModel):
    """Node in the network visualization"""

    id: str
    name: str = ""
    picture: str | None = None
    importance: int | None = None


class FocusedNode(NetworkNode):
    """Node in a focused graph, tagged with its distance from the focal person"""

    degreeFromFocus: int
    isFocalPerson: bool = False


class NetworkLink(BaseModel):
    """Relationship in the network visualization"""

    source: str
    target: str
    type: str
    strength: int


class GraphDataResponse(BaseModel):
    nodes: list[NetworkNode]
    links: list[NetworkLink]


class ClusterItem(BaseModel):
    id: int
    members: list[str]
    size: int


class ClustersResponse(BaseModel):
    clusters: list[ClusterItem]


class CentralNode(BaseModel):
    person_id: str
    name: str
    connection_count: int


class CentralNodesResponse(BaseModel):
    central_nodes: list[CentralNode]


class IsolatedPerson(BaseModel):
    id: str
    name: str
    connection_count: int


class IsolatedPeopleResponse(BaseModel):
    isolated_people: list[IsolatedPerson]


class RankedPath(BaseModel):
    """One path between two people with its ranking scores"""

    path: list[str]
    degrees: int
    qualityScore: float
    strength: int  # Weakest relationship along the path
    pathWithDetails: list[PersonSummary] = Field(default_factory=list)


class PathsResponse(BaseModel):
    """Ranked paths between two people, or suggested intermediaries"""

    found: bool
    totalFound: int
    paths: list[RankedPath]
    truncated: bool = False
    message: str | None = None
    suggestedIntermediaries: list[PersonSummary] | None = None


class ShortestPathResponse(BaseModel):
    """Shortest path between two people, or suggested intermediaries"""

    found: bool
    path: list[str] = Field(default_factory=list)
    degrees: int | None = None
    strength: int | None = None
    from_: PersonSummary | None = Field(default=None, alias="from", serialization_alias="from")
    to: PersonSummary | None = None
    intermediaries: list[PersonSummary] = Field(default_factory=list)
    message: str | None = None
    suggestedIntermediaries: list[PersonSummary] | None = None

    model_config = ConfigDict(populate_by_name=True)


class FocusedGraphResponse(BaseModel):
    """Nodes within N degrees of a focal person"""

    nodes: list[FocusedNode]
    links: list[NetworkLink]
    focal_person: NetworkNode | None = None
    degree_counts: dict[int, int]
    cumulative_counts: dict[str, int]
    total_connections: int
    max_degrees: int | str


class NetworkHealthResponse(BaseModel):
    average_relationship_strength: float
    total_connections: int
    network_density: float
