"""
Graph algorithms over the relationship network
"""

from .adjacency import AdjacencyView, build_adjacency
from .service import NetworkAnalyzer

__all__ = ["AdjacencyView", "NetworkAnalyzer", "build_adjacency"]
