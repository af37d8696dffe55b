"""Utility functions for Word Swarm."""

import sys
from pathlib import Path


def get_resource_path(relative_path: str) -> Path:
    """
    Get resource path for bundled application or development.

    Args:
        relative_path: Relative path from the package directory

    Returns:
        Path to resource file

    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        # Running in PyInstaller bundle
        base_path = Path(sys._MEIPASS)
    else:
        # Running in development
        base_path = Path(__file__).parent
    return base_path / relative_path


def get_app_data_path() -> Path:
    """
    Get the per-user application data directory, creating it if needed.

    - On Windows, this is ``AppData/Local/wordswarm``.
    - On macOS, this is ``~/Library/Application Support/wordswarm``.
    - On Linux, this is ``~/.config/wordswarm``.
    - If the platform is not supported, raise a ValueError.

    Returns:
        Path to the application data directory

    """
    if sys.platform not in ["win32", "darwin", "linux"]:
        msg = f"Unsupported platform: {sys.platform}"
        raise ValueError(msg)
    if sys.platform == "win32":
        data_path = Path.home() / "AppData" / "Local" / "wordswarm"
    elif sys.platform == "darwin":
        data_path = Path.home() / "Library" / "Application Support" / "wordswarm"
    else:
        data_path = Path.home() / ".config" / "wordswarm"
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
