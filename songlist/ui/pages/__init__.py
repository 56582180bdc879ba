"""
Page modules - PySide6 + Fluent Widgets.

- SongTablePage: table with search box (double-click to open)
- SongComboPage: combo box with an Open button
"""

__all__ = [
    'SongTablePage',
    'SongComboPage',
]


def __getattr__(name):
    """Lazy imports."""
    if name == 'SongTablePage':
        from .song_table_page import SongTablePage
        return SongTablePage
    elif name == 'SongComboPage':
        from .song_combo_page import SongComboPage
        return SongComboPage
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
