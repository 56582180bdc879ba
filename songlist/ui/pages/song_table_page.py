"""
Song Table Page

Table of projects with a search box. Clicking a column header sorts
the rows; double-clicking a row opens the project.
"""

import logging
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView, QHeaderView, QTableWidgetItem, QVBoxLayout, QWidget
)

from qfluentwidgets import CaptionLabel, SearchLineEdit, TableWidget

from songlist.domain.models import CatalogState, ProjectEntry

logger = logging.getLogger(__name__)

PROJECT_COLUMN = 0
ARTIST_COLUMN = 1
SONG_COLUMN = 2


class SongTablePage(QWidget):
    """Project table with search filtering."""

    open_requested = Signal(object)  # ProjectEntry

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("songTablePage")
        self._sort_column: Optional[int] = None
        self._sort_order = Qt.SortOrder.AscendingOrder
        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.search_box = SearchLineEdit()
        self.search_box.setPlaceholderText("Search projects...")
        self.search_box.textChanged.connect(self._on_search_text_changed)
        layout.addWidget(self.search_box)

        self.table = TableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Project", "Artist", "Song"])
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().hide()
        self.table.cellDoubleClicked.connect(self._on_cell_double_clicked)

        header = self.table.horizontalHeader()
        header.setSectionResizeMode(ARTIST_COLUMN, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(SONG_COLUMN, QHeaderView.ResizeMode.Stretch)
        header.setSectionsClickable(True)
        header.setSortIndicatorShown(True)
        header.sectionClicked.connect(self._on_header_clicked)

        # The folder name is only used for search and launching
        self.table.setColumnHidden(PROJECT_COLUMN, True)
        layout.addWidget(self.table, 1)

        self.status_label = CaptionLabel("")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_label.hide()
        layout.addWidget(self.status_label)

    def show_state(self, state: CatalogState) -> None:
        """Rebuild the table from a catalog state."""
        self.table.setRowCount(0)
        for row, entry in enumerate(state.entries):
            self.table.insertRow(row)
            project_item = QTableWidgetItem(entry.folder_name)
            project_item.setData(Qt.ItemDataRole.UserRole, entry)
            self.table.setItem(row, PROJECT_COLUMN, project_item)
            self.table.setItem(row, ARTIST_COLUMN, QTableWidgetItem(entry.artist))
            self.table.setItem(row, SONG_COLUMN, QTableWidgetItem(entry.song))

        # Keep the column the user sorted by across rescans
        if self._sort_column is not None:
            self.table.sortItems(self._sort_column, self._sort_order)

        has_entries = state.has_entries
        self.table.setEnabled(has_entries)
        self.search_box.setEnabled(has_entries)

        if state.message:
            self.status_label.setText(state.message)
            self.status_label.show()
        else:
            self.status_label.hide()

        self._apply_filter(self.search_box.text())

    def entry_at(self, row: int) -> Optional[ProjectEntry]:
        item = self.table.item(row, PROJECT_COLUMN)
        if item is None:
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    def visible_entries(self) -> List[ProjectEntry]:
        """Entries whose rows are not hidden by the search filter, in row order."""
        return [
            self.entry_at(row) for row in range(self.table.rowCount())
            if not self.table.isRowHidden(row)
        ]

    def sort_by(self, column: int) -> None:
        """
        Sort rows by ``column``.

        Sorting the same column again reverses the order.
        """
        if column == self._sort_column and self._sort_order == Qt.SortOrder.AscendingOrder:
            order = Qt.SortOrder.DescendingOrder
        else:
            order = Qt.SortOrder.AscendingOrder

        self._sort_column = column
        self._sort_order = order
        self.table.horizontalHeader().setSortIndicator(column, order)
        self.table.sortItems(column, order)

    def _apply_filter(self, text: str) -> None:
        for row in range(self.table.rowCount()):
            entry = self.entry_at(row)
            self.table.setRowHidden(row, entry is None or not entry.matches(text))

    def _on_search_text_changed(self, text: str):
        self._apply_filter(text)

    def _on_header_clicked(self, column: int):
        self.sort_by(column)

    def _on_cell_double_clicked(self, row: int, column: int):
        entry = self.entry_at(row)
        if entry is not None:
            self.open_requested.emit(entry)
