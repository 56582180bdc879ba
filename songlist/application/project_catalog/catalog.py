"""
Project Catalog

Scans the root location for song project folders and turns their names
into artist/song entries for display.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from ...core.constants import MARKER_SUFFIX, NAME_SEPARATOR, RESERVED_PREFIX
from ...domain.exceptions import (
    InvalidRootError,
    LocationWriteError,
    UnparseableProjectNameError,
)
from ...domain.models import CatalogState, CatalogStatus, ProjectEntry
from .location_store import LocationStore

logger = logging.getLogger(__name__)

# Type alias for event callbacks
CatalogCallback = Callable[[CatalogState], None]


@dataclass(frozen=True)
class CatalogRules:
    """Conventions that decide which folders are projects."""

    marker_suffix: str = MARKER_SUFFIX
    reserved_prefix: str = RESERVED_PREFIX
    name_separator: str = NAME_SEPARATOR

    @classmethod
    def from_config(cls, manager) -> "CatalogRules":
        """Build rules from a ConfigManager's ``catalog`` section."""
        return cls(
            marker_suffix=manager.get("catalog.marker_suffix", MARKER_SUFFIX),
            reserved_prefix=manager.get("catalog.reserved_prefix", RESERVED_PREFIX),
            name_separator=manager.get("catalog.name_separator", NAME_SEPARATOR),
        )


def parse_project_name(folder_name: str, separator: str = NAME_SEPARATOR) -> Tuple[str, str]:
    """
    Split "Artist - Song" into its trimmed parts.

    Zero-length segments (doubled or edge separators) are skipped before
    trimming; a whitespace-only segment still counts as a part.

    Raises:
        UnparseableProjectNameError: If the name does not yield exactly
            two non-empty parts.
    """
    parts = [part.strip() for part in folder_name.split(separator) if part]

    if len(parts) != 2 or not all(parts):
        raise UnparseableProjectNameError(folder_name, separator)

    return parts[0], parts[1]


def filter_entries(entries: Iterable[ProjectEntry], text: str) -> List[ProjectEntry]:
    """Keep entries whose folder name contains ``text`` (case-insensitive)."""
    return [entry for entry in entries if entry.matches(text)]


def _list_names(directory: Path, want_dirs: bool) -> List[str]:
    """Visible immediate children of ``directory`` in case-insensitive name order."""
    names = []
    with os.scandir(directory) as it:
        for item in it:
            if item.name.startswith('.'):
                continue
            try:
                is_match = item.is_dir() if want_dirs else item.is_file()
            except OSError:
                continue
            if is_match:
                names.append(item.name)
    return sorted(names, key=lambda name: (name.casefold(), name))


class ProjectCatalog:
    """
    Catalog of song projects under a root location.

    Provides:
    - Root location changes with optional persistence
    - Full rescans on every change (no caching)
    - Event notifications for UI updates
    """

    def __init__(
        self,
        store: Optional[LocationStore] = None,
        rules: Optional[CatalogRules] = None,
    ):
        """
        Args:
            store: Location store used to restore and persist the root
            rules: Project folder conventions
        """
        self.store = store if store is not None else LocationStore()
        self.rules = rules or CatalogRules()

        self._root: Optional[Path] = None
        self._state = CatalogState.unset()
        self._on_changed: List[CatalogCallback] = []

    @property
    def root(self) -> Optional[Path]:
        return self._root

    @property
    def state(self) -> CatalogState:
        return self._state

    # Event subscription

    def on_changed(self, callback: CatalogCallback) -> None:
        """Subscribe to catalog state changes."""
        self._on_changed.append(callback)

    def _emit_changed(self, state: CatalogState) -> None:
        for callback in self._on_changed:
            try:
                callback(state)
            except Exception as e:
                logger.error(f"Error in catalog changed callback: {e}", exc_info=True)

    # Root location

    def initialize(self, root: Optional[Path] = None) -> CatalogState:
        """
        Restore the saved root location, if any.

        Args:
            root: Location chosen at startup (for example on the command
                line). It replaces the saved one and is persisted.
        """
        if root is not None:
            return self.set_root(root, persist=True)

        saved = self.store.load()
        if saved is None:
            logger.info("No saved location")
            return self._update(CatalogState.unset())
        return self.set_root(saved, persist=False)

    def set_root(self, path: Path, persist: bool = True) -> CatalogState:
        """
        Make ``path`` the active root location and rescan it.

        Args:
            path: New root location
            persist: Whether to save the location for the next startup

        Returns:
            The new catalog state. A path that does not exist leaves the
            catalog unset and nothing is persisted.
        """
        path = Path(path)
        if not path.is_dir():
            logger.warning(f"Location does not exist: {path}")
            self._root = None
            return self._update(CatalogState.unset())

        warning = None
        if persist:
            try:
                self.store.save(path)
            except LocationWriteError as e:
                logger.warning(str(e))
                warning = "Failed to save location"

        self._root = path.absolute()
        return self._update(self._scan(warning))

    def require_root(self) -> Path:
        """
        Get the active root location.

        Raises:
            InvalidRootError: If no valid root is set or it has disappeared.
        """
        if self._root is None or not self._root.is_dir():
            raise InvalidRootError(self._root)
        return self._root

    def refresh(self) -> CatalogState:
        """Rescan the active root location."""
        if self._root is None:
            return self._update(CatalogState.unset())
        if not self._root.is_dir():
            logger.warning(f"Location no longer exists: {self._root}")
            self._root = None
            return self._update(CatalogState.unset())
        return self._update(self._scan())

    # Scanning

    def enumerate(self) -> List[ProjectEntry]:
        """
        List the projects under the active root, sorted by artist.

        Returns an empty list when no root is set.
        """
        if self._root is None:
            return []
        entries, _ = self._collect(self._root)
        return entries

    def is_project_folder(self, folder: Path) -> bool:
        """Check whether ``folder`` holds a project marker file."""
        try:
            files = _list_names(folder, want_dirs=False)
        except OSError as e:
            logger.warning(f"Cannot list {folder}: {e}")
            return False
        return any(name.endswith(self.rules.marker_suffix) for name in files)

    def _collect(self, root: Path) -> Tuple[List[ProjectEntry], List[str]]:
        try:
            folders = _list_names(root, want_dirs=True)
        except OSError as e:
            logger.error(f"Cannot list location {root}: {e}")
            return [], []

        folders = [name for name in folders if not name.startswith(self.rules.reserved_prefix)]
        folders = [name for name in folders if self.is_project_folder(root / name)]

        entries: List[ProjectEntry] = []
        skipped: List[str] = []
        for name in folders:
            try:
                artist, song = parse_project_name(name, self.rules.name_separator)
            except UnparseableProjectNameError as e:
                logger.debug(str(e))
                skipped.append(name)
                continue
            entries.append(ProjectEntry(folder_name=name, artist=artist, song=song))

        # sorted() is stable, ties keep folder name order
        entries = sorted(entries, key=lambda entry: entry.artist.casefold())
        return entries, skipped

    def _scan(self, warning: Optional[str] = None) -> CatalogState:
        entries, skipped = self._collect(self._root)
        status = CatalogStatus.READY if entries else CatalogStatus.EMPTY

        logger.info(f"Found {len(entries)} projects in {self._root}")
        if skipped:
            logger.info(f"Skipped {len(skipped)} folders without 'Artist{self.rules.name_separator}Song' names")

        return CatalogState(
            status=status,
            root=self._root,
            entries=tuple(entries),
            skipped=tuple(skipped),
            warning=warning,
        )

    def _update(self, state: CatalogState) -> CatalogState:
        self._state = state
        self._emit_changed(state)
        return state
