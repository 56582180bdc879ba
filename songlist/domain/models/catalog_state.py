"""
Catalog State Domain Model

Snapshot of the project catalog handed to the presentation layer after
every root change or refresh.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from ...core.constants import NO_PROJECTS_TEXT, SELECT_LOCATION_TEXT
from .project_entry import ProjectEntry


class CatalogStatus(Enum):
    """Display state of the catalog."""
    UNSET = "unset"    # no valid root location
    EMPTY = "empty"    # valid root, no qualifying projects
    READY = "ready"


@dataclass(frozen=True)
class CatalogState:
    """Result of scanning the root location."""

    status: CatalogStatus = CatalogStatus.UNSET
    root: Optional[Path] = None
    entries: Tuple[ProjectEntry, ...] = field(default_factory=tuple)
    skipped: Tuple[str, ...] = field(default_factory=tuple)
    warning: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return self.status is not CatalogStatus.UNSET

    @property
    def has_entries(self) -> bool:
        return self.status is CatalogStatus.READY

    @property
    def location_text(self) -> str:
        """Text for the location label."""
        if self.root is None:
            return SELECT_LOCATION_TEXT
        return str(self.root)

    @property
    def message(self) -> Optional[str]:
        """Placeholder text when there is nothing to list."""
        if self.status is CatalogStatus.UNSET:
            return SELECT_LOCATION_TEXT
        if self.status is CatalogStatus.EMPTY:
            return NO_PROJECTS_TEXT
        return None

    @classmethod
    def unset(cls, warning: Optional[str] = None) -> CatalogState:
        return cls(status=CatalogStatus.UNSET, warning=warning)
