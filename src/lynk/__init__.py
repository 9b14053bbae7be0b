"""Lynk - ephemeral text and file sharing channels"""

__version__ = "0.1.0"
