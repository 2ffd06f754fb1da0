"""
Network Router - Endpoints for relationship network visualization and analysis.

This router handles:
- Graph data for the force-directed network view
- Connected clusters, most connected and isolated people
- Connection paths between two people (ranked and shortest)
- Focused graphs within N degrees of a person
- Network health metrics for the dashboard
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from social_capital.graph.service import NetworkAnalyzer
from social_capital.models import MAX_DEGREES, MAX_STRENGTH, MIN_STRENGTH, DegreeLimit, InvalidDegreeLimitError

from ..dependencies import get_account_id, pb
from ..schemas import (
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
from ..services.network_repository import NetworkRepository
from ..settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/network", tags=["network"])

AccountId = Annotated[str, Depends(get_account_id)]


# Dependency function for repository injection (mockable in tests)
def get_network_repository() -> NetworkRepository:
    """Get a NetworkRepository instance."""
    return NetworkRepository(pb)


async def _load_analyzer(account_id: str) -> NetworkAnalyzer:
    """Fetch the account's network and build a fresh analyzer for this request."""
    settings = get_settings()
    edges, people = await get_network_repository().fetch_network(account_id)
    return NetworkAnalyzer(
        edges,
        people,
        max_degrees=settings.max_path_degrees,
        path_limit=settings.max_ranked_paths,
        enumeration_budget=settings.path_enumeration_budget,
    )


def _no_path_message() -> str:
    return f"No connection found within {get_settings().max_path_degrees} degrees of separation"


def _reject_self_path(from_id: str, to_id: str) -> None:
    if from_id == to_id:
        raise HTTPException(status_code=400, detail="Cannot find path to same person")


# ========================================
# Graph Data Endpoint
# ========================================


@router.get("/graph")
async def get_graph(
    account_id: AccountId,
    type: Annotated[str | None, Query(description="Only include relationships of this type")] = None,
    min_strength: Annotated[
        int | None, Query(ge=MIN_STRENGTH, le=MAX_STRENGTH, description="Minimum relationship strength")
    ] = None,
) -> GraphDataResponse:
    """Get nodes and links for the network visualization.

    When a filter is applied, people without a matching relationship are left out.
    """
    try:
        analyzer = await _load_analyzer(account_id)
        data = analyzer.graph_data(relationship_type=type, min_strength=min_strength)

        return GraphDataResponse(
            nodes=[NetworkNode(**node) for node in data["nodes"]],
            links=[NetworkLink(**link) for link in data["links"]],
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error building network graph: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# ========================================
# Cluster and Centrality Endpoints
# ========================================


@router.get("/clusters")
async def get_clusters(account_id: AccountId) -> ClustersResponse:
    """Get groups of people connected to each other, largest first."""
    try:
        analyzer = await _load_analyzer(account_id)
        clusters = analyzer.clusters()

        return ClustersResponse(
            clusters=[ClusterItem(id=c.id, members=c.members, size=c.size) for c in clusters],
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error finding network clusters: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/central-nodes")
async def get_central_nodes(
    account_id: AccountId,
    limit: Annotated[int, Query(ge=1, le=50, description="Number of people to return")] = 10,
) -> CentralNodesResponse:
    """Get the most connected people."""
    try:
        analyzer = await _load_analyzer(account_id)

        return CentralNodesResponse(
            central_nodes=[
                CentralNode(person_id=c.id, name=c.name, connection_count=c.connection_count)
                for c in analyzer.central_nodes(limit)
            ],
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error ranking central people: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/isolated")
async def get_isolated(
    account_id: AccountId,
    max_connections: Annotated[int, Query(ge=0, le=5, description="Most relationships an isolated person has")] = 1,
) -> IsolatedPeopleResponse:
    """Get people with few or no relationships."""
    try:
        analyzer = await _load_analyzer(account_id)

        return IsolatedPeopleResponse(
            isolated_people=[
                IsolatedPerson(id=c.id, name=c.name, connection_count=c.connection_count)
                for c in analyzer.isolated(max_connections)
            ],
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error finding isolated people: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# ========================================
# Path Endpoints
# ========================================


@router.get("/path")
async def get_paths(
    account_id: AccountId,
    from_id: Annotated[str, Query(alias="from", min_length=1, description="Person to start from")],
    to_id: Annotated[str, Query(alias="to", min_length=1, description="Person to reach")],
) -> PathsResponse:
    """Find every way to reach a person, ranked shortest and strongest first.

    Returns suggested intermediaries instead when no path exists within the
    degree limit.
    """
    _reject_self_path(from_id, to_id)

    try:
        settings = get_settings()
        analyzer = await _load_analyzer(account_id)

        # Exhaustive enumeration is CPU bound; keep it off the event loop
        result = await asyncio.to_thread(analyzer.all_paths, from_id, to_id)

        if not result.found:
            logger.info(f"No path from {from_id} to {to_id}, suggesting intermediaries")
            intermediaries = analyzer.suggested_intermediaries(
                from_id, to_id, settings.suggested_intermediaries_limit
            )
            return PathsResponse(
                found=False,
                totalFound=0,
                paths=[],
                message=_no_path_message(),
                suggestedIntermediaries=[PersonSummary(**p) for p in intermediaries],
            )

        return PathsResponse(
            found=True,
            totalFound=result.total_found,
            truncated=result.truncated,
            paths=[
                RankedPath(
                    path=p.path,
                    degrees=p.degrees,
                    qualityScore=p.quality_score,
                    strength=p.strength,
                    pathWithDetails=[PersonSummary(**d) for d in p.path_with_details],
                )
                for p in result.paths
            ],
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error finding paths: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/shortest-path")
async def get_shortest_path(
    account_id: AccountId,
    from_id: Annotated[str, Query(alias="from", min_length=1, description="Person to start from")],
    to_id: Annotated[str, Query(alias="to", min_length=1, description="Person to reach")],
) -> ShortestPathResponse:
    """Find the fewest introductions needed to reach a person."""
    _reject_self_path(from_id, to_id)

    try:
        settings = get_settings()
        analyzer = await _load_analyzer(account_id)
        result = analyzer.shortest_path(from_id, to_id)

        if result is None:
            intermediaries = analyzer.suggested_intermediaries(
                from_id, to_id, settings.suggested_intermediaries_limit
            )
            return ShortestPathResponse(
                found=False,
                message=_no_path_message(),
                suggestedIntermediaries=[PersonSummary(**p) for p in intermediaries],
            )

        return ShortestPathResponse(
            found=True,
            path=result.path,
            degrees=result.degrees,
            strength=result.strength,
            from_=PersonSummary(**result.from_person) if result.from_person else None,
            to=PersonSummary(**result.to_person) if result.to_person else None,
            intermediaries=[PersonSummary(**d) for d in result.intermediaries],
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error finding shortest path: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# ========================================
# Focused Graph Endpoint
# ========================================


@router.get("/focus")
async def get_focused_graph(
    account_id: AccountId,
    person_id: Annotated[str, Query(min_length=1, description="Focal person")],
    degrees: Annotated[str | None, Query(description=f'Degrees of separation (1-{MAX_DEGREES}) or "all"')] = None,
) -> FocusedGraphResponse:
    """Get everyone within N degrees of a person, tagged with their distance."""
    try:
        max_degrees = DegreeLimit.parse(degrees if degrees is not None else get_settings().default_focus_degrees)
    except InvalidDegreeLimitError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        analyzer = await _load_analyzer(account_id)
        ego = analyzer.ego_network(person_id, max_degrees)

        return FocusedGraphResponse(
            nodes=[
                FocusedNode(
                    id=node["id"],
                    name=node["name"],
                    picture=node["picture"],
                    importance=node["importance"],
                    degreeFromFocus=node["degree_from_focus"],
                    isFocalPerson=node["is_focal_person"],
                )
                for node in ego.nodes
            ],
            links=[NetworkLink(**link) for link in ego.links],
            focal_person=NetworkNode(**ego.focal_person) if ego.focal_person else None,
            degree_counts=ego.degree_counts,
            cumulative_counts=ego.cumulative_counts,
            total_connections=ego.total_connections,
            max_degrees=ego.max_degrees.to_json(),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error building focused graph: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# ========================================
# Network Health Endpoint
# ========================================


@router.get("/health-metrics")
async def get_network_health(account_id: AccountId) -> NetworkHealthResponse:
    """Get relationship strength, size and density of the network."""
    try:
        analyzer = await _load_analyzer(account_id)
        return NetworkHealthResponse(**analyzer.health())

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error calculating network health: {e}")
        raise HTTPException(status_code=500, detail=str(e))
