"""
Launch Service

Hands a project's REAPER and Guitar Pro files to the operating system so
they open in their default applications.
"""

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from ...core.constants import COMPANION_SUFFIXES, MARKER_SUFFIX
from ...domain.exceptions import LaunchError
from ...domain.models import ProjectEntry

logger = logging.getLogger(__name__)

# Type alias for the OS open request
Opener = Callable[[Path], None]

DEFAULT_SUFFIXES: Tuple[str, ...] = (MARKER_SUFFIX,) + COMPANION_SUFFIXES


def system_open(path: Path) -> None:
    """Open ``path`` with the platform's default application."""
    path_str = str(path)
    if sys.platform == "win32":
        os.startfile(path_str)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path_str])
    else:
        subprocess.Popen(["xdg-open", path_str])


def desktop_open(path: Path) -> None:
    """Open ``path`` through Qt's desktop services (needs a QApplication)."""
    from PySide6.QtCore import QUrl
    from PySide6.QtGui import QDesktopServices

    if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(path))):
        logger.warning(f"Desktop services refused to open {path}")


class LaunchService:
    """
    Opens the files of a project folder.

    Each matching file is requested once; the service does not wait for
    the external application.
    """

    def __init__(
        self,
        opener: Optional[Opener] = None,
        suffixes: Iterable[str] = DEFAULT_SUFFIXES,
    ):
        """
        Args:
            opener: Callable issuing the OS open request for one file
            suffixes: File name endings to open (case-sensitive)
        """
        self.opener = opener or system_open
        self.suffixes = tuple(suffixes)

    @classmethod
    def from_config(cls, manager, opener: Optional[Opener] = None) -> "LaunchService":
        """Build a service from a ConfigManager's ``catalog`` section."""
        marker = manager.get("catalog.marker_suffix", MARKER_SUFFIX)
        companions = manager.get("catalog.companion_suffixes", list(COMPANION_SUFFIXES)) or []
        return cls(opener=opener, suffixes=[marker, *companions])

    def launch_targets(self, entry: ProjectEntry, root: Path) -> List[Path]:
        """
        Files of the project folder that would be opened, in name order.

        Raises:
            LaunchError: If the project folder cannot be listed.
        """
        folder = entry.folder_path(root).absolute()
        if not folder.is_dir():
            raise LaunchError(folder, "Project folder does not exist")

        try:
            files = sorted(
                item for item in folder.iterdir()
                if item.is_file() and not item.name.startswith('.')
            )
        except OSError as e:
            raise LaunchError(folder, f"Cannot list project folder ({e})") from e

        return [item for item in files if item.name.endswith(self.suffixes)]

    def open_project(self, entry: ProjectEntry, root: Path) -> int:
        """
        Open the project and tablature files of ``entry``.

        Returns:
            Number of open requests issued (zero is not an error).

        Raises:
            LaunchError: If the folder is missing or the opener fails to start.
        """
        count = 0
        for target in self.launch_targets(entry, root):
            try:
                self.opener(target)
            except OSError as e:
                raise LaunchError(target, f"Failed to open ({e})") from e
            logger.info(f"Opened {target}")
            count += 1

        if count == 0:
            logger.info(f"Nothing to open for project: {entry.folder_name}")
        return count
