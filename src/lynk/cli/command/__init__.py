"""CLI command package"""

from .init import init
from .start import start

__all__ = ["init", "start"]
