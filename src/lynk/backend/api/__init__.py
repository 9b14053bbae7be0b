"""
API package for REST endpoints.
"""

from .channel import router as channel_router

__all__ = [
    "channel_router",
]
