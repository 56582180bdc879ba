"""
Location Bar Widget

Shows the current root location and lets the user pick a new one.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFileDialog, QHBoxLayout, QWidget

from qfluentwidgets import BodyLabel, CaptionLabel, FluentIcon, PushButton

from songlist.core.constants import SELECT_LOCATION_TEXT
from songlist.domain.models import CatalogState

logger = logging.getLogger(__name__)


class LocationBar(QWidget):
    """Location caption, current location and a Change button."""

    location_chosen = Signal(object)  # Path

    def __init__(self, parent=None):
        super().__init__(parent)
        self._current: Optional[Path] = None
        self._init_ui()

    def _init_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        caption = CaptionLabel("Location:")
        layout.addWidget(caption)

        self.value_label = BodyLabel(SELECT_LOCATION_TEXT)
        self.value_label.setObjectName("locationValueLabel")
        layout.addWidget(self.value_label, 1)

        self.change_button = PushButton(FluentIcon.FOLDER, "Change")
        self.change_button.setObjectName("changeButton")
        self.change_button.clicked.connect(self._on_change_clicked)
        layout.addWidget(self.change_button)

    def show_state(self, state: CatalogState) -> None:
        """Show the active root of ``state``, or the selection prompt."""
        self._current = state.root
        self.value_label.setText(state.location_text)
        self.value_label.setToolTip(str(state.root) if state.root is not None else "")

    def _on_change_clicked(self):
        start_dir = str(self._current) if self._current is not None else ""
        folder = QFileDialog.getExistingDirectory(
            self,
            "Select Location",
            start_dir,
            QFileDialog.Option.ShowDirsOnly
        )
        if folder:
            logger.debug(f"Location chosen: {folder}")
            self.location_chosen.emit(Path(folder))
