"""CLI utility functions"""

from pathlib import Path

INSTANCE_FLAG_FILE = ".lynk_instance"


def get_instance_path(path: str | None = None) -> Path:
    """Get instance path, default to ~/.lynk

    Args:
        path: Custom path (relative or absolute), None for default

    Returns:
        Resolved absolute path
    """
    if path is None:
        return Path.home() / ".lynk"
    return Path(path).resolve()


def is_initialized(instance_path: Path) -> bool:
    """Check if instance is initialized

    Args:
        instance_path: Instance directory path

    Returns:
        True if .lynk_instance exists
    """
    return (instance_path / INSTANCE_FLAG_FILE).exists()
