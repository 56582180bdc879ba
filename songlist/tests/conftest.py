"""
Shared fixtures: isolated application data and project folder trees.
"""

import importlib
import logging
from pathlib import Path

import pytest

from songlist.core import config as config_module
from songlist.runtime import runtime_config

bootstrap_module = importlib.import_module("songlist.runtime.bootstrap")


@pytest.fixture(autouse=True)
def isolated_app_data(tmp_path, monkeypatch):
    """Point the application data directory at a temporary folder."""
    data_dir = tmp_path / "appdata"
    monkeypatch.setenv(runtime_config.DATA_DIR_ENV, str(data_dir))
    monkeypatch.setattr(runtime_config, "_runtime_config", None)
    monkeypatch.setattr(config_module, "_config_manager", None)

    previous_level = logging.getLogger().level
    yield data_dir

    if bootstrap_module._bootstrap is not None:
        bootstrap_module._bootstrap.shutdown()
        bootstrap_module._bootstrap = None
    logging.getLogger().setLevel(previous_level)


def make_project(root: Path, name: str, *files: str) -> Path:
    """Create ``root/name`` containing empty ``files``."""
    folder = root / name
    folder.mkdir(parents=True, exist_ok=True)
    for filename in files:
        (folder / filename).write_text("", encoding="utf-8")
    return folder


@pytest.fixture
def music_root(tmp_path):
    """
    A root location with a mix of project and non-project folders:

        Metallica - Enter Sandman/song.rpp      project
        __Archive/old.rpp                       reserved
        Bad Folder/track.rpp                    no artist/song
    """
    root = tmp_path / "music"
    root.mkdir()
    make_project(root, "Metallica - Enter Sandman", "song.rpp")
    make_project(root, "__Archive", "old.rpp")
    make_project(root, "Bad Folder", "track.rpp")
    return root


@pytest.fixture
def project_factory():
    """Return the ``make_project`` helper."""
    return make_project
