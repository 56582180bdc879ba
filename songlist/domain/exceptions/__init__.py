"""
Domain Exceptions Module

Contains domain-specific exceptions:
- LocationWriteError: Root location could not be persisted
- InvalidRootError: Root location does not exist
- UnparseableProjectNameError: Folder name is not "Artist - Song"
- LaunchError: Project files could not be handed to the OS
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SongListError(Exception):
    """Base class for all SongList errors."""
    pass


class LocationWriteError(SongListError, OSError):
    """Raised when the root location file cannot be written."""

    def __init__(self, location_file: Path, reason: Optional[BaseException] = None):
        self.location_file = location_file
        self.reason = reason
        message = f"Failed to save location to {location_file}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidRootError(SongListError):
    """Raised when a root location does not exist or is not a directory."""

    def __init__(self, path: Optional[Path]):
        self.path = path
        super().__init__(f"Location does not exist: {path}")


class UnparseableProjectNameError(SongListError, ValueError):
    """Raised when a folder name does not split into artist and song."""

    def __init__(self, folder_name: str, separator: str):
        self.folder_name = folder_name
        self.separator = separator
        super().__init__(
            f"Artist/song name could not be extracted for project: {folder_name!r}"
        )


class LaunchError(SongListError):
    """Raised when a project folder cannot be opened."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


__all__ = [
    "SongListError",
    "LocationWriteError",
    "InvalidRootError",
    "UnparseableProjectNameError",
    "LaunchError",
]
