"""
Scrollable, incrementally loaded document list.

The widget renders whatever DocumentListController publishes. Row widgets
are reconciled by row identity, the same way keyed children are reconciled
in a virtual DOM: surviving rows keep their widget (and the key editor state
inside it), new rows get a widget, vanished rows are deleted.
"""

import logging
from typing import Dict

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget

from pyqt_doclist.core import SignalService
from pyqt_doclist.protocols import WidgetViewportMetrics, get_doclist_config
from pyqt_doclist.services import DocumentListController, ScrollPaginationTrigger
from pyqt_doclist.state import ListViewState
from pyqt_doclist.widgets.document_row import DocumentRowWidget

logger = logging.getLogger(__name__)


class DocumentListWidget(QWidget):
    """
    Insert button, status line and the scrolling list of document rows.

    Usage:
        controller = DocumentListController(channels, fetch_next_page=store.fetch_next)
        widget = DocumentListWidget(controller)
        controller.insert_dialog_requested.connect(dialog_service.open_insert_document_dialog)
    """

    def __init__(self, controller: DocumentListController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.row_widgets: Dict[int, DocumentRowWidget] = {}
        self._setup_ui()

        self.trigger = ScrollPaginationTrigger(WidgetViewportMetrics(self.list_body), controller)
        self._setup_connections()
        self.sync_rows(controller.state)
        self._update_status(controller.state)

    def _setup_ui(self):
        config = get_doclist_config()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(5)

        header = QHBoxLayout()
        self.insert_button = QPushButton(config.insert_button_text)
        header.addWidget(self.insert_button)
        self.status_label = QLabel()
        header.addWidget(self.status_label, 1)
        layout.addLayout(header)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.list_body = QWidget()
        self.list_body.setObjectName(config.list_object_name)
        self.list_layout = QVBoxLayout(self.list_body)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(2)
        self.list_layout.addStretch(1)
        self.scroll_area.setWidget(self.list_body)
        layout.addWidget(self.scroll_area, 1)

    def _setup_connections(self):
        self.insert_button.clicked.connect(self.controller.open_insert_dialog)
        self.scroll_area.verticalScrollBar().valueChanged.connect(self.trigger.handle_scroll)
        self.controller.rows_changed.connect(self.sync_rows)
        self.controller.state_changed.connect(self._update_status)

    def _update_status(self, state: ListViewState):
        self.status_label.setText(
            get_doclist_config().status_format.format(loaded=state.loaded_count, total=state.total_count)
        )

    def sync_rows(self, state: ListViewState):
        """Match row widgets to ``state.rows``: reuse, create, delete, reorder."""
        wanted = {id(row): row for row in state.rows}
        scroll_bar = self.scroll_area.verticalScrollBar()

        with SignalService.block_signals(scroll_bar):
            for key in list(self.row_widgets):
                if key not in wanted:
                    widget = self.row_widgets.pop(key)
                    self.list_layout.removeWidget(widget)
                    widget.deleteLater()

            created = 0
            for position, row in enumerate(state.rows):
                widget = self.row_widgets.get(id(row))
                if widget is None:
                    widget = DocumentRowWidget(row, parent=self.list_body)
                    widget.delete_requested.connect(self.controller.request_row_removal)
                    self.row_widgets[id(row)] = widget
                    created += 1
                if self.list_layout.indexOf(widget) != position:
                    self.list_layout.removeWidget(widget)
                    self.list_layout.insertWidget(position, widget)

        logger.debug(f"Synced {len(state.rows)} rows ({created} new)")
