"""Data models"""
from .channel import ChannelFile, ChannelData, StoredChannel

__all__ = [
    "ChannelFile",
    "ChannelData",
    "StoredChannel",
]
