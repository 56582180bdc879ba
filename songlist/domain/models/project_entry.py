"""
Project Entry Domain Model

Represents one song project folder found under the root location.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProjectEntry:
    """
    Domain model representing a song project folder.

    The folder name has the form "Artist - Song"; ``artist`` and ``song``
    are its trimmed halves.
    """

    folder_name: str
    artist: str
    song: str

    @property
    def display_name(self) -> str:
        """Name shown in list widgets."""
        return f"{self.artist} - {self.song}"

    def folder_path(self, root: Path) -> Path:
        """Get the project folder inside the given root location."""
        return Path(root) / self.folder_name

    def matches(self, text: str) -> bool:
        """Case-insensitive substring match on the folder name."""
        if not text:
            return True
        return text.casefold() in self.folder_name.casefold()
