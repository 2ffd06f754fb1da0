"""Service layer for the CRM network API."""

from .network_repository import NetworkRepository

__all__ = ["NetworkRepository"]
