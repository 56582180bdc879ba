"""
SongList - Music Project Browser

A small desktop utility for browsing a folder of song project directories
and opening their REAPER project and Guitar Pro files.

Architecture:
- UI Layer: PySide6 + qfluentwidgets user interface components
- Application Layer: project catalog, location store and launch service
- Domain Layer: project entries, catalog state and exceptions
- Runtime Layer: data directories, bootstrap and logging
"""

__version__ = "1.0.0"
__author__ = "SongList Team"
__description__ = "Music Project Browser"
