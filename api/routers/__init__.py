"""
API Routers - Organized endpoint handlers for the CRM network API.

Each router handles a specific domain:
- network: Network visualization, pathfinding and graph analytics
"""
