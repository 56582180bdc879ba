"""
Domain Models Module

Contains all domain models for SongList.
"""

from .project_entry import ProjectEntry
from .catalog_state import CatalogState, CatalogStatus

__all__ = [
    "ProjectEntry",
    "CatalogState",
    "CatalogStatus",
]
