"""
Integration tests for the command line (__main__.py)
"""

import pytest

from songlist import __main__ as cli
from songlist import __version__
from songlist.application.project_catalog import LocationStore, ProjectCatalog, launcher as launcher_module
from songlist.domain.models import CatalogStatus
from songlist.runtime import runtime_config


@pytest.fixture
def opened(monkeypatch):
    """Replace the OS opener used by the CLI."""
    calls = []
    monkeypatch.setattr(launcher_module, "system_open", calls.append)
    return calls


@pytest.fixture
def blocked_data_dir(tmp_path, monkeypatch):
    """A data directory path that is a regular file, so nothing can be saved."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv(runtime_config.DATA_DIR_ENV, str(blocker))
    monkeypatch.setattr(runtime_config, "_runtime_config", None)
    return blocker


@pytest.fixture
def gui_launches(monkeypatch):
    """Replace the GUI entry point; each launch starts the catalog like the window does."""
    launches = []

    def fake_main(view_mode=None, initial_root=None):
        state = ProjectCatalog().initialize(initial_root)
        launches.append((view_mode, initial_root, state))
        return 0

    monkeypatch.setattr(cli, "main", fake_main)
    return launches


class TestList:
    """Tests for --list"""

    def test_list_with_root(self, music_root, capsys, isolated_app_data):
        assert cli.run_cli(["--list", "--root", str(music_root)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == ["Metallica - Enter Sandman"]
        assert LocationStore(isolated_app_data).load() == music_root.absolute()

    def test_list_uses_saved_location(self, music_root, capsys, isolated_app_data):
        LocationStore(isolated_app_data).save(music_root)

        assert cli.run_cli(["--list"]) == 0
        assert "Metallica - Enter Sandman" in capsys.readouterr().out

    def test_list_without_location(self, capsys):
        assert cli.run_cli(["--list"]) == 1
        assert "Select location..." in capsys.readouterr().out

    def test_list_empty_location(self, tmp_path, capsys):
        empty = tmp_path / "empty"
        empty.mkdir()

        assert cli.run_cli(["--list", "--root", str(empty)]) == 0
        assert "No projects found" in capsys.readouterr().out

    def test_list_with_filter(self, tmp_path, capsys, project_factory):
        root = tmp_path / "music"
        project_factory(root, "Muse - Uprising", "a.rpp")
        project_factory(root, "ABBA - Waterloo", "a.rpp")

        assert cli.run_cli(["--list", "--root", str(root), "--filter", "muse"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Muse - Uprising"]


    def test_list_reports_save_failure(self, music_root, capsys, blocked_data_dir):
        assert cli.run_cli(["--list", "--root", str(music_root)]) == 0

        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["Metallica - Enter Sandman"]
        assert "Failed to save location" in captured.err


class TestOpen:
    """Tests for --open"""

    def test_open_matching_project(self, tmp_path, capsys, opened, project_factory):
        root = tmp_path / "music"
        folder = project_factory(root, "Metallica - One", "one.rpp", "one.gp", "notes.txt")

        assert cli.run_cli(["--open", "one", "--root", str(root)]) == 0

        assert sorted(opened) == [folder / "one.gp", folder / "one.rpp"]
        assert "Opened 2 file(s)" in capsys.readouterr().out

    def test_open_without_match(self, music_root, capsys, opened):
        assert cli.run_cli(["--open", "zeppelin", "--root", str(music_root)]) == 1
        assert opened == []

    def test_open_without_location(self, opened):
        assert cli.run_cli(["--open", "anything"]) == 1
        assert opened == []


class TestMisc:
    """Tests for --version and --diagnose"""

    def test_version(self, capsys):
        assert cli.run_cli(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_diagnose(self, capsys, isolated_app_data):
        assert cli.run_cli(["--diagnose"]) == 0

        out = capsys.readouterr().out
        assert str(isolated_app_data) in out
        assert "catalog.marker_suffix: .rpp" in out

    def test_invalid_view_is_rejected(self):
        with pytest.raises(SystemExit):
            cli.run_cli(["--view", "grid"])


class TestGuiRoot:
    """Tests for --root when launching the GUI"""

    def test_root_is_handed_to_the_window_catalog(self, music_root, gui_launches, isolated_app_data):
        assert cli.run_cli(["--root", str(music_root), "--view", "combo"]) == 0

        [(view_mode, initial_root, state)] = gui_launches
        assert view_mode == "combo"
        assert initial_root == music_root
        assert state.status is CatalogStatus.READY
        assert LocationStore(isolated_app_data).load() == music_root.absolute()

    def test_unsaved_root_stays_active(self, music_root, gui_launches, blocked_data_dir):
        assert cli.run_cli(["--root", str(music_root)]) == 0

        [(_, _, state)] = gui_launches
        assert state.status is CatalogStatus.READY
        assert state.root == music_root.absolute()
        assert state.warning == "Failed to save location"

    def test_missing_root_exits_before_gui(self, tmp_path, gui_launches, capsys):
        assert cli.run_cli(["--root", str(tmp_path / "missing")]) == 1

        assert gui_launches == []
        assert "Location does not exist" in capsys.readouterr().err

    def test_no_root_restores_saved_location(self, music_root, gui_launches, isolated_app_data):
        LocationStore(isolated_app_data).save(music_root)

        assert cli.run_cli([]) == 0

        [(view_mode, initial_root, state)] = gui_launches
        assert view_mode is None
        assert initial_root is None
        assert state.root == music_root.absolute()
