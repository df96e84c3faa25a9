"""Row widget rendering one document's fields."""

from typing import Any, List

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from pyqt_doclist.state import Row
from pyqt_doclist.widgets.editable_key import EditableKeyLineEdit

INDENT_PX = 16
ROW_OBJECT_NAME = "document"


def format_value(element) -> str:
    """Short display text for a field value."""
    if element.is_container():
        return f"{element.current_type}[{len(element.elements)}]"
    if element.current_type == "String":
        return f'"{element.current_value}"'
    return str(element.current_value)


class DocumentRowWidget(QFrame):
    """
    One list entry: every field as ``key : value``, nested fields indented.

    Signals:
        delete_requested: Id of the document the user asked to delete
    """

    delete_requested = pyqtSignal(object)

    def __init__(self, row: Row, insert_mode: bool = False, parent=None):
        super().__init__(parent)
        self.row = row
        self._insert_mode = insert_mode
        self.key_editors: List[EditableKeyLineEdit] = []
        self.setObjectName(ROW_OBJECT_NAME)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        for index, element in enumerate(self.row.model.elements, start=1):
            self._add_element(layout, element, depth=0, insert_index=index if self._insert_mode else None)

        if not self._insert_mode:
            delete_button = QPushButton("Delete")
            delete_button.clicked.connect(lambda: self.delete_requested.emit(self.row.id))
            layout.addWidget(delete_button)

    def _add_element(self, layout: QVBoxLayout, element: Any, depth: int, insert_index=None):
        line = QWidget(self)
        line_layout = QHBoxLayout(line)
        line_layout.setContentsMargins(depth * INDENT_PX, 0, 0, 0)
        line_layout.setSpacing(4)

        key_editor = EditableKeyLineEdit(element, insert_index=insert_index, parent=line)
        self.key_editors.append(key_editor)
        line_layout.addWidget(key_editor)
        line_layout.addWidget(QLabel(":"))
        line_layout.addWidget(QLabel(format_value(element)), 1)
        layout.addWidget(line)

        if element.is_container():
            for child in element.elements:
                self._add_element(layout, child, depth + 1)
