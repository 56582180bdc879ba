"""
Unit tests for domain/models
"""

from pathlib import Path

from songlist.domain.models import CatalogState, CatalogStatus, ProjectEntry


class TestProjectEntry:
    """Tests for ProjectEntry"""

    def test_display_name_uses_trimmed_parts(self):
        entry = ProjectEntry(folder_name="Muse  -  Uprising", artist="Muse", song="Uprising")
        assert entry.display_name == "Muse - Uprising"

    def test_folder_path(self, tmp_path):
        entry = ProjectEntry("Muse - Uprising", "Muse", "Uprising")
        assert entry.folder_path(tmp_path) == tmp_path / "Muse - Uprising"

    def test_repr_shows_folder_name(self):
        """The raw folder name is visible when entries are compared in failures"""
        entry = ProjectEntry("Muse  -  Uprising", "Muse", "Uprising")
        assert "folder_name='Muse  -  Uprising'" in repr(entry)


class TestCatalogState:
    """Tests for CatalogState display texts"""

    def test_unset(self):
        state = CatalogState.unset()

        assert state.location_text == "Select location..."
        assert state.message == "Select location..."
        assert not state.is_set

    def test_empty(self, tmp_path):
        state = CatalogState(status=CatalogStatus.EMPTY, root=tmp_path)

        assert state.location_text == str(tmp_path)
        assert state.message == "No projects found"
        assert not state.has_entries

    def test_ready(self):
        entry = ProjectEntry("Muse - Uprising", "Muse", "Uprising")
        state = CatalogState(status=CatalogStatus.READY, root=Path("/music"), entries=(entry,))

        assert state.message is None
        assert state.has_entries
