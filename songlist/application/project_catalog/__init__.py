"""
Project Catalog Module

Provides the browsing core of SongList.

Features:
- Root location persistence (single-line location file)
- Project folder scanning and "Artist - Song" name parsing
- Search filtering on folder names
- Opening project and tablature files with the default applications
"""

from .location_store import LocationStore
from .catalog import (
    CatalogRules,
    ProjectCatalog,
    filter_entries,
    parse_project_name,
)
from .launcher import (
    LaunchService,
    desktop_open,
    system_open,
)

__all__ = [
    'LocationStore',
    'CatalogRules',
    'ProjectCatalog',
    'filter_entries',
    'parse_project_name',
    'LaunchService',
    'desktop_open',
    'system_open',
]
