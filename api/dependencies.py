"""
Shared dependencies for the CRM network API.

This module provides:
- PocketBase client management (global instance, admin authentication)
- Account scoping for incoming requests
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import Header, HTTPException
from pocketbase import PocketBase

from .settings import get_settings

logger = logging.getLogger(__name__)

# ========================================
# PocketBase Client
# ========================================

# A single client authenticated as admin on startup. The PocketBase API is
# stateless; only the auth store is shared, and it only ever holds the admin
# token.
_settings = get_settings()
pb_url = _settings.pocketbase_url
pb = PocketBase(pb_url)


async def authenticate_pb() -> None:
    """Authenticate with PocketBase as admin."""
    settings = get_settings()
    try:
        await asyncio.to_thread(
            pb.collection("_superusers").auth_with_password,
            settings.pocketbase_admin_email,
            settings.pocketbase_admin_password,
        )
        logger.info("Successfully authenticated with PocketBase")
    except Exception as e:
        logger.error(f"Failed to authenticate with PocketBase: {e}")
        raise


# ========================================
# Account Scope
# ========================================


async def get_account_id(
    x_account_id: Annotated[str | None, Header(description="Account that owns the network")] = None,
) -> str:
    """Account whose relationships the request operates on.

    The session layer in front of this API resolves the signed-in user and
    forwards their id in the X-Account-Id header.
    """
    if not x_account_id:
        raise HTTPException(status_code=401, detail="Missing account")
    return x_account_id


__all__ = [
    "pb",
    "pb_url",
    "authenticate_pb",
    "get_account_id",
]
