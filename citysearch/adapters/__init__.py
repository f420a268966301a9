"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Graph storage (tab-separated city files)
- Path solving (Dijkstra)
- Caching systems (in-memory, null)
"""
