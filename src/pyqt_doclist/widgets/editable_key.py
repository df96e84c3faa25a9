"""
Key editor widget bound to an EditableKeyController.

The line edit is a thin shell: Qt focus, edit and key events go to the
controller, and controller state comes back as the ``class`` dynamic
property (for QSS selectors such as ``QLineEdit[class~="duplicate"]``),
the tooltip and the width.
"""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFocusEvent, QKeyEvent, QShowEvent
from PyQt6.QtWidgets import QLineEdit

from pyqt_doclist.protocols import DocumentElement, get_doclist_config
from pyqt_doclist.services.editable_key_controller import EditableKeyController, EditableKeyState


class EditableKeyLineEdit(QLineEdit):
    """QLineEdit editing one field key in place.

    Args:
        element: Field whose key is edited
        insert_index: 1-based position of the field when shown in the insert dialog
        parent: Parent widget
    """

    def __init__(self, element: DocumentElement, insert_index: Optional[int] = None, parent=None):
        super().__init__(parent)
        self.controller = EditableKeyController(element, parent=self)
        self._insert_index = insert_index
        self._initial_focus_done = False

        self.setText(element.current_key)
        # Non-editable keys keep their text; Qt has no controlled inputs.
        self.setReadOnly(not self.controller.is_editable())

        self.textEdited.connect(self._on_text_edited)
        self.controller.state_changed.connect(self._apply_state)
        self.controller.width_hint_changed.connect(self._apply_width_hint)
        self.controller.focus_release_requested.connect(self.clearFocus)

        self._apply_state(self.controller.state)
        self._apply_width_hint(self.controller.width_hint)

    def _on_text_edited(self, text: str) -> None:
        self.controller.handle_change(text)
        # Title tracks the key even when the state did not change
        self.setToolTip(self.controller.title())

    def _apply_state(self, state: EditableKeyState) -> None:
        self.setProperty("class", self.controller.style_class())
        self.setProperty("editing", state.editing)
        self.setProperty("duplicate", state.duplicate)
        self.setToolTip(self.controller.title())
        self.style().unpolish(self)
        self.style().polish(self)

    def _apply_width_hint(self, chars: int) -> None:
        char_width = self.fontMetrics().horizontalAdvance("M")
        self.setFixedWidth(char_width * max(chars, 1) + get_doclist_config().key_char_width_padding)

    def focusInEvent(self, event: QFocusEvent):
        super().focusInEvent(event)
        self.controller.handle_focus()

    def focusOutEvent(self, event: QFocusEvent):
        super().focusOutEvent(event)
        self.controller.handle_blur()

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key.Key_Escape:
            self.controller.handle_escape()
            event.accept()
            return
        super().keyPressEvent(event)

    def showEvent(self, event: QShowEvent):
        super().showEvent(event)
        if self._initial_focus_done:
            return
        self._initial_focus_done = True
        if self.controller.should_claim_initial_focus(self._insert_index):
            self.setFocus(Qt.FocusReason.OtherFocusReason)
