"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, scan, viewer

__all__ = ["health", "scan", "viewer"]
