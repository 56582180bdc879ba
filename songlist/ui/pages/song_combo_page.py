"""
Song Combo Page

Compact variant: a combo box of projects and an Open button.
"""

import logging
from typing import List, Optional

from PySide6.QtWidgets import QHBoxLayout, QVBoxLayout, QWidget
from PySide6.QtCore import Signal

from qfluentwidgets import CaptionLabel, ComboBox, FluentIcon, PrimaryPushButton

from songlist.domain.models import CatalogState, ProjectEntry

logger = logging.getLogger(__name__)


class SongComboPage(QWidget):
    """Project combo box with an Open button."""

    open_requested = Signal(object)  # ProjectEntry

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("songComboPage")
        self._entries: List[ProjectEntry] = []
        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        row = QHBoxLayout()
        row.setSpacing(8)

        self.combo = ComboBox()
        self.combo.setPlaceholderText("No projects found")
        row.addWidget(self.combo, 1)

        self.open_button = PrimaryPushButton(FluentIcon.PLAY, "Open")
        self.open_button.clicked.connect(self._on_open_clicked)
        row.addWidget(self.open_button)

        layout.addLayout(row)

        self.status_label = CaptionLabel("")
        self.status_label.hide()
        layout.addWidget(self.status_label)
        layout.addStretch(1)

    def show_state(self, state: CatalogState) -> None:
        """Rebuild the combo box from a catalog state."""
        self._entries = list(state.entries)

        self.combo.clear()
        self.combo.addItems([entry.display_name for entry in self._entries])
        if self._entries:
            self.combo.setCurrentIndex(0)

        has_entries = state.has_entries
        self.combo.setEnabled(has_entries)
        self.open_button.setEnabled(has_entries)

        if state.message:
            self.status_label.setText(state.message)
            self.status_label.show()
        else:
            self.status_label.hide()

    def selected_entry(self) -> Optional[ProjectEntry]:
        index = self.combo.currentIndex()
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def _on_open_clicked(self):
        entry = self.selected_entry()
        if entry is not None:
            self.open_requested.emit(entry)
