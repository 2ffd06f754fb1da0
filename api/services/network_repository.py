"""Data access layer for the relationship network.

This module isolates all PocketBase interactions for the network endpoints,
enabling dependency injection and testability. Each request fetches one
consistent snapshot of the account's people and relationships and hands it to
the graph algorithms, which never touch storage themselves.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from social_capital.models import PersonRef, RelationshipEdge, RelationshipType

if TYPE_CHECKING:
    from pocketbase import PocketBase

logger = logging.getLogger(__name__)


def _escape_filter_value(value: str) -> str:
    """Escape a string value for use inside a double-quoted PocketBase filter."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _to_int(value: Any, default: int | None = None) -> int | None:
    # PocketBase returns numbers as floats
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class NetworkRepository:
    """Data access layer for people and relationships - enables mocking in tests.

    Records are returned in creation order, which fixes the adjacency order the
    pathfinders break ties with.
    """

    def __init__(self, pb: PocketBase) -> None:
        """Initialize with PocketBase client.

        Args:
            pb: PocketBase client instance.
        """
        self.pb = pb

    def _account_query(self, account_id: str) -> dict[str, str]:
        return {"filter": f'user_id = "{_escape_filter_value(account_id)}"', "sort": "created"}

    async def fetch_relationships(self, account_id: str) -> list[RelationshipEdge]:
        """Fetch every relationship owned by an account.

        Args:
            account_id: The owning account.

        Returns:
            Relationship edges in creation order. Records missing an endpoint
            are skipped.
        """
        records = await asyncio.to_thread(
            self.pb.collection("relationships").get_full_list,
            query_params=self._account_query(account_id),
        )

        edges = []
        for record in records:
            person_a = getattr(record, "person_a_id", None)
            person_b = getattr(record, "person_b_id", None)
            if not person_a or not person_b:
                logger.warning(f"Skipping relationship {getattr(record, 'id', '?')} with a missing endpoint")
                continue

            edges.append(
                RelationshipEdge(
                    person_a_id=str(person_a),
                    person_b_id=str(person_b),
                    strength=_to_int(getattr(record, "strength", None), default=1) or 1,
                    relationship_type=getattr(record, "relationship_type", None) or RelationshipType.OTHER.value,
                )
            )

        logger.debug(f"Fetched {len(edges)} relationships for account {account_id}")
        return edges

    async def fetch_people(self, account_id: str) -> list[PersonRef]:
        """Fetch every person owned by an account.

        Args:
            account_id: The owning account.

        Returns:
            People in creation order.
        """
        records = await asyncio.to_thread(
            self.pb.collection("people").get_full_list,
            query_params=self._account_query(account_id),
        )

        people = [
            PersonRef(
                id=str(record.id),
                name=getattr(record, "name", "") or "",
                email=getattr(record, "email", None) or None,
                photo_url=getattr(record, "photo_url", None) or None,
                importance=_to_int(getattr(record, "importance", None)),
            )
            for record in records
        ]

        logger.debug(f"Fetched {len(people)} people for account {account_id}")
        return people

    async def fetch_network(self, account_id: str) -> tuple[list[RelationshipEdge], list[PersonRef]]:
        """Fetch relationships and people for an account concurrently."""
        edges, people = await asyncio.gather(
            self.fetch_relationships(account_id),
            self.fetch_people(account_id),
        )
        return edges, people
