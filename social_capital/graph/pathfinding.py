"""
Pathfinding between two people, bounded by degrees of separation.

Two searches are offered:
- find_shortest_path: breadth-first, returns the first shortest path found
- find_all_paths: exhaustive depth-first enumeration of simple paths, scored
  and ranked for "who can introduce me" style lookups

Exhaustive enumeration is exponential in the branching factor. It is only
tractable because a personal contact graph is small and sparse; the degree
bound is the sole structural limit unless an enumeration budget is given.
"""

from __future__ import annotations

import logging
from collections import deque

from ..logging_config import TRACE
from ..models import MAX_DEGREES, AllPathsResult, PathResult, ScoredPath, type_weight
from .adjacency import AdjacencyView

logger = logging.getLogger(__name__)

# Ranked paths returned by find_all_paths
DEFAULT_PATH_LIMIT = 10


def find_shortest_path(
    view: AdjacencyView,
    from_id: str,
    to_id: str,
    max_degrees: int = MAX_DEGREES,
) -> PathResult | None:
    """Breadth-first search for the shortest path between two people.

    Each queue entry carries the whole path taken to reach it, so the first
    path that reaches ``to_id`` is returned as-is. Ties between equally short
    paths go to whichever neighbor was inserted first.

    Args:
        view: Adjacency view for the account
        from_id: Starting person
        to_id: Target person
        max_degrees: Paths longer than this many hops are pruned

    Returns:
        The path with its weakest-link strength, or None when no path exists
        within the bound
    """
    queue: deque[list[str]] = deque([[from_id]])
    visited = {from_id}

    while queue:
        path = queue.popleft()
        node = path[-1]

        if node == to_id:
            return PathResult(
                path=path,
                degrees=len(path) - 1,
                strength=view.path_strength(path),
                path_with_details=view.path_details(path),
            )

        # Extending would exceed the degree bound
        if len(path) > max_degrees:
            continue

        for neighbor in view.neighbors(node):
            if neighbor.node not in visited:
                visited.add(neighbor.node)
                queue.append([*path, neighbor.node])

    logger.debug(f"No path from {from_id} to {to_id} within {max_degrees} degrees")
    return None


def quality_score(view: AdjacencyView, path: list[str]) -> float:
    """Average type-weighted strength per hop, rounded to 2 places.

    Score = sum(strength x type_weight) / degrees. A zero-hop path scores 0.
    """
    degrees = len(path) - 1
    if degrees <= 0:
        return 0.0

    total_weighted_strength = 0.0
    for a, b in zip(path, path[1:]):
        edge = view.edge_between(a, b)
        if edge is not None:
            total_weighted_strength += edge.strength * type_weight(edge.relationship_type)

    return round(total_weighted_strength / degrees, 2)


def enumerate_simple_paths(
    view: AdjacencyView,
    from_id: str,
    to_id: str,
    max_degrees: int = MAX_DEGREES,
    max_paths: int | None = None,
) -> tuple[list[list[str]], bool]:
    """Depth-first enumeration of every simple path between two people.

    A path is a sequence of people, so parallel relationships between the
    same pair do not produce duplicate paths.

    Returns:
        (paths in discovery order, whether ``max_paths`` cut the search short)
    """
    paths: list[list[str]] = []
    path = [from_id]
    on_path = {from_id}
    truncated = False
    trace_enabled = logger.isEnabledFor(TRACE)

    def dfs() -> None:
        nonlocal truncated
        node = path[-1]

        if node == to_id:
            paths.append(list(path))
            if max_paths is not None and len(paths) >= max_paths:
                truncated = True
            return

        if len(path) > max_degrees:
            if trace_enabled:
                logger.log(TRACE, f"Pruned branch {' -> '.join(path)} at {max_degrees} degrees")
            return

        for neighbor in view.neighbor_ids(node):
            if truncated:
                return
            if neighbor in on_path:
                continue
            path.append(neighbor)
            on_path.add(neighbor)
            dfs()
            on_path.discard(neighbor)
            path.pop()

    dfs()
    return paths, truncated


def rank_paths(view: AdjacencyView, paths: list[list[str]]) -> list[ScoredPath]:
    """Score paths and order them shortest first, best quality first."""
    scored = [
        ScoredPath(
            path=path,
            degrees=len(path) - 1,
            quality_score=quality_score(view, path),
            strength=view.path_strength(path),
        )
        for path in paths
    ]
    scored.sort(key=lambda p: (p.degrees, -p.quality_score))
    return scored


def find_all_paths(
    view: AdjacencyView,
    from_id: str,
    to_id: str,
    max_degrees: int = MAX_DEGREES,
    limit: int = DEFAULT_PATH_LIMIT,
    max_enumerated: int | None = None,
) -> AllPathsResult:
    """Find, score and rank every simple path between two people.

    Args:
        view: Adjacency view for the account
        from_id: Starting person
        to_id: Target person
        max_degrees: Maximum hops per path
        limit: Number of ranked paths to return
        max_enumerated: Optional budget on discovered paths. None searches
            exhaustively.

    Returns:
        Ranked paths; ``total_found`` counts every path discovered, even those
        cut by ``limit``
    """
    paths, truncated = enumerate_simple_paths(view, from_id, to_id, max_degrees, max_enumerated)

    if not paths:
        return AllPathsResult(found=False, total_found=0, paths=[])

    if truncated:
        logger.warning(
            f"Path enumeration from {from_id} to {to_id} stopped at budget of {max_enumerated} paths"
        )

    ranked = rank_paths(view, paths)[:limit]
    for scored in ranked:
        scored.path_with_details = view.path_details(scored.path)

    logger.info(f"Found {len(paths)} paths from {from_id} to {to_id}, returning top {len(ranked)}")
    return AllPathsResult(found=True, total_found=len(paths), paths=ranked, truncated=truncated)


def suggest_intermediaries(
    view: AdjacencyView,
    from_id: str,
    to_id: str,
    limit: int = 5,
) -> list[str]:
    """People directly connected to both ``from_id`` and ``to_id``.

    Offered as a fallback when no path is found so the lookup never dead-ends.
    """
    to_neighbors = set(view.neighbor_ids(to_id))
    shared = [
        node
        for node in view.neighbor_ids(from_id)
        if node in to_neighbors and node not in (from_id, to_id)
    ]
    return shared[:limit]
