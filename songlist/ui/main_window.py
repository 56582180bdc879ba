"""
SongList - Main Window

Location bar on top, one song page below (table or combo variant).
The window wires user actions to the project catalog and launch service.
"""

import sys
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QVBoxLayout

from qfluentwidgets import setTheme, setThemeColor, Theme
from qframelesswindow import FramelessWindow, StandardTitleBar

from .pages.song_combo_page import SongComboPage
from .pages.song_table_page import SongTablePage
from .utils.notifications import NotificationHelper
from .widgets.location_bar import LocationBar
from .. import __version__
from ..application.project_catalog import (
    CatalogRules,
    LaunchService,
    ProjectCatalog,
    desktop_open,
)
from ..core.config import VIEW_MODES, ConfigManager, get_config_manager
from ..core.constants import APP_NAME
from ..domain.exceptions import LaunchError
from ..domain.models import CatalogState, ProjectEntry

logger = logging.getLogger(__name__)


class SongListWindow(FramelessWindow):
    """SongList main window."""

    def __init__(
        self,
        catalog: Optional[ProjectCatalog] = None,
        launcher: Optional[LaunchService] = None,
        config: Optional[ConfigManager] = None,
        view_mode: Optional[str] = None,
        initial_root: Optional[Path] = None,
    ):
        super().__init__()

        self._config = config or get_config_manager()
        self._catalog = catalog or ProjectCatalog(rules=CatalogRules.from_config(self._config))
        self._launcher = launcher or LaunchService.from_config(self._config, opener=desktop_open)

        mode = view_mode or self._config.get("ui.view_mode", "table")
        if mode not in VIEW_MODES:
            logger.warning(f"Unknown view mode '{mode}', using table")
            mode = "table"
        self._view_mode = mode

        self.setWindowTitle(f"{APP_NAME} v{__version__}")
        self.resize(
            int(self._config.get("ui.window_width", 720)),
            int(self._config.get("ui.window_height", 520)),
        )

        setThemeColor("#3399ff")
        self._apply_user_theme_preference()
        self._setup_title_bar()
        self._setup_ui()

        self._catalog.on_changed(self._on_catalog_changed)
        self._catalog.initialize(initial_root)

        logger.info(f"Main window ready ({self._view_mode} view)")

    @property
    def page(self):
        return self._page

    def _apply_user_theme_preference(self):
        """Apply the theme mode from configuration."""
        theme_pref = str(self._config.get("ui.theme", "dark") or "dark").strip().lower()
        if theme_pref == "light":
            setTheme(Theme.LIGHT)
        else:
            setTheme(Theme.DARK)

    def _setup_title_bar(self):
        self._customTitleBar = StandardTitleBar(self)
        self.setTitleBar(self._customTitleBar)
        self._customTitleBar.raise_()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 40, 16, 16)
        layout.setSpacing(12)

        self.location_bar = LocationBar(self)
        self.location_bar.location_chosen.connect(self._on_change_location)
        layout.addWidget(self.location_bar)

        if self._view_mode == "combo":
            self._page = SongComboPage(self)
        else:
            self._page = SongTablePage(self)
        self._page.open_requested.connect(self._on_open_requested)
        layout.addWidget(self._page, 1)

    # Event handlers

    def _on_catalog_changed(self, state: CatalogState):
        self.location_bar.show_state(state)
        self._page.show_state(state)

        if state.warning:
            NotificationHelper.warning(self, "Warning", state.warning)

    def _on_change_location(self, path: Path):
        self._catalog.set_root(path, persist=True)

    def _on_open_requested(self, entry: ProjectEntry):
        root = self._catalog.root
        if root is None:
            return

        try:
            count = self._launcher.open_project(entry, root)
        except LaunchError as e:
            logger.error(f"Open failed: {e}")
            NotificationHelper.error(self, "Open failed", str(e))
            return

        if count == 0:
            NotificationHelper.info(self, "Nothing to open", entry.display_name)


def run_app(view_mode: Optional[str] = None, initial_root: Optional[Path] = None) -> int:
    """Create the QApplication and show the main window."""
    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setApplicationVersion(__version__)

    window = SongListWindow(view_mode=view_mode, initial_root=initial_root)
    window.show()
    return app.exec()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(run_app())
