"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import detect, health

__all__ = ["detect", "health"]
