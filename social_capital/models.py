"""
Domain models for the relationship network.

These are plain dataclasses shared by the graph algorithms and the API layer.
The API converts them into pydantic response schemas at the edge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Maximum degrees of separation considered by the pathfinders and the
# display cap for cumulative ego-network counts
MAX_DEGREES = 6

# Strength scale declared by the user for each relationship
MIN_STRENGTH = 1
MAX_STRENGTH = 5


class RelationshipType(Enum):
    FAMILY = "family"
    FRIEND = "friend"
    EXTENDED_FAMILY = "extended_family"
    COLLEAGUE = "colleague"
    ACQUAINTANCE = "acquaintance"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: str | None) -> RelationshipType:
        """Map a stored relationship type onto the enum, unknown types become OTHER."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


# Weights for path quality scoring. Closer relationships make better
# introductions, so they weigh more per unit of strength.
RELATIONSHIP_TYPE_WEIGHTS: dict[RelationshipType, float] = {
    RelationshipType.FAMILY: 1.5,
    RelationshipType.FRIEND: 1.3,
    RelationshipType.EXTENDED_FAMILY: 1.2,
    RelationshipType.COLLEAGUE: 1.0,
    RelationshipType.ACQUAINTANCE: 0.8,
    RelationshipType.OTHER: 0.5,
}


def type_weight(relationship_type: str | None) -> float:
    """Quality weight for a raw relationship type string."""
    return RELATIONSHIP_TYPE_WEIGHTS[RelationshipType.from_value(relationship_type)]


@dataclass(frozen=True)
class RelationshipEdge:
    """An undirected relationship between two people in one account"""

    person_a_id: str
    person_b_id: str
    strength: int
    relationship_type: str = RelationshipType.OTHER.value

    @property
    def is_self_referential(self) -> bool:
        return self.person_a_id == self.person_b_id

    def to_link(self) -> dict[str, Any]:
        """Link payload for the network visualization."""
        return {
            "source": self.person_a_id,
            "target": self.person_b_id,
            "type": self.relationship_type,
            "strength": self.strength,
        }


@dataclass(frozen=True)
class Neighbor:
    """One entry of a node's adjacency list"""

    node: str
    strength: int
    relationship_type: str


@dataclass
class PersonRef:
    """Display payload attached to a node. Never used for traversal."""

    id: str
    name: str = ""
    email: str | None = None
    photo_url: str | None = None
    importance: int | None = None

    def summary(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass
class PathResult:
    """Shortest path between two people"""

    path: list[str]
    degrees: int
    strength: int
    path_with_details: list[dict[str, Any]] = field(default_factory=list)

    def details_for(self, node: str) -> dict[str, Any] | None:
        """Display details of a path node, None when the node has no person record."""
        for details in self.path_with_details:
            if details["id"] == node:
                return details
        return None

    @property
    def from_person(self) -> dict[str, Any] | None:
        return self.details_for(self.path[0])

    @property
    def to_person(self) -> dict[str, Any] | None:
        return self.details_for(self.path[-1])

    @property
    def intermediaries(self) -> list[dict[str, Any]]:
        """Details of the people between the endpoints that have a person record."""
        intermediaries = []
        for node in self.path[1:-1]:
            details = self.details_for(node)
            if details is not None:
                intermediaries.append(details)
        return intermediaries


@dataclass
class ScoredPath:
    """A path found by exhaustive enumeration, with its ranking scores"""

    path: list[str]
    degrees: int
    quality_score: float
    strength: int
    path_with_details: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class AllPathsResult:
    """Ranked paths between two people"""

    found: bool
    total_found: int
    paths: list[ScoredPath]
    truncated: bool = False


@dataclass
class Cluster:
    """Connected component of the relationship graph"""

    id: int
    members: list[str]

    @property
    def size(self) -> int:
        return len(self.members)


@dataclass
class ConnectionCount:
    """Number of relationships a person participates in"""

    id: str
    name: str
    connection_count: int


class InvalidDegreeLimitError(ValueError):
    """Raised when a degree limit is neither an integer 1..6 nor "all"."""


@dataclass(frozen=True)
class DegreeLimit:
    """How far an ego-network expansion may travel from its focal node.

    ``hops`` is None for the unbounded ("all") mode.
    """

    hops: int | None

    ALL = "all"

    @classmethod
    def bounded(cls, hops: int) -> DegreeLimit:
        if not 1 <= hops <= MAX_DEGREES:
            raise InvalidDegreeLimitError(f"Degrees must be 1-{MAX_DEGREES} or \"{cls.ALL}\", got {hops}")
        return cls(hops)

    @classmethod
    def unbounded(cls) -> DegreeLimit:
        return cls(None)

    @classmethod
    def parse(cls, value: int | str) -> DegreeLimit:
        """Parse a query value such as ``3``, ``"3"`` or ``"all"``."""
        if isinstance(value, str):
            if value.strip().lower() == cls.ALL:
                return cls.unbounded()
            try:
                value = int(value)
            except ValueError as e:
                raise InvalidDegreeLimitError(f"Degrees must be 1-{MAX_DEGREES} or \"{cls.ALL}\", got {value!r}") from e
        return cls.bounded(value)

    @property
    def is_unbounded(self) -> bool:
        return self.hops is None

    def display_cap(self) -> int:
        """Highest degree reported in cumulative counts."""
        if self.is_unbounded:
            return MAX_DEGREES
        return min(self.hops, MAX_DEGREES)

    def to_json(self) -> int | str:
        return self.ALL if self.is_unbounded else self.hops


@dataclass
class EgoNetwork:
    """Nodes and links within a bounded distance of a focal person"""

    focal_id: str
    nodes: list[dict[str, Any]]
    links: list[dict[str, Any]]
    degree_counts: dict[int, int]
    cumulative_counts: dict[str, int]
    max_degrees: DegreeLimit
    focal_person: dict[str, Any] | None = None

    @property
    def total_connections(self) -> int:
        return len(self.nodes) - 1
