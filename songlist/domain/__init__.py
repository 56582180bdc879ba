"""
Domain Layer

Contains the core entities and exceptions of SongList:
- models: ProjectEntry, CatalogState, CatalogStatus
- exceptions: SongListError hierarchy
"""
