"""
Editable key controller.

One controller per rendered field key. It owns the focus/edit/duplicate state
of that key, forwards renames to the document model, and derives the style
tokens and title the key editor displays. It never touches the list's rows.

State machine:
    editing:   False --focus--> True --blur--> False   (editable keys only)
    duplicate: recomputed on every change against the current siblings

Duplicate detection is advisory. The rename is applied on every keystroke,
duplicate or not, so the user can see the clash and fix it without losing
input; the model decides what is valid when the document is saved.
"""

from dataclasses import dataclass, replace
import logging
from typing import List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_doclist.protocols import ContainerType, DocumentElement, get_doclist_config

logger = logging.getLogger(__name__)

KEY_CLASS = "editable-key"
EDITING = "editing"
DUPLICATE = "duplicate"


@dataclass(frozen=True)
class EditableKeyState:
    """Render-affecting state of one key editor."""
    editing: bool = False
    duplicate: bool = False


class EditableKeyController(QObject):
    """
    Focus, edit and duplicate lifecycle for one field key.

    Signals:
        state_changed: New EditableKeyState
        width_hint_changed: Key length in characters after a change
        focus_release_requested: The editor should drop input focus
    """

    state_changed = pyqtSignal(object)
    width_hint_changed = pyqtSignal(int)
    focus_release_requested = pyqtSignal()

    def __init__(self, element: DocumentElement, parent=None):
        super().__init__(parent)
        self.element = element
        self._state = EditableKeyState()
        self._width_hint = len(element.current_key)

    @property
    def state(self) -> EditableKeyState:
        return self._state

    @property
    def width_hint(self) -> int:
        return self._width_hint

    def _set_state(self, **changes) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        logger.debug(f"Key {self.element.current_key!r}: {self._state} -> {new_state}")
        self._state = new_state
        self.state_changed.emit(new_state)

    def is_editable(self) -> bool:
        """Array elements have positional keys and are never editable."""
        return (
            self.element.is_key_editable()
            and self.element.parent_container_type() is not ContainerType.ARRAY
        )

    # ========== INPUT EVENTS ==========

    def handle_focus(self) -> None:
        if self.is_editable():
            self._set_state(editing=True)

    def handle_blur(self) -> None:
        if self.is_editable():
            self._set_state(editing=False)

    def handle_change(self, text: str) -> None:
        """Apply typed key text to the model."""
        self._width_hint = len(text)
        self.width_hint_changed.emit(self._width_hint)
        if not self.is_editable():
            return

        self._set_state(duplicate=self.element.is_duplicate_key(text))
        self.element.rename(text)

    def handle_escape(self) -> None:
        """Drop focus; the resulting blur settles the state."""
        self.focus_release_requested.emit()

    def should_claim_initial_focus(self, insert_index: Optional[int] = None) -> bool:
        """
        Decide whether the editor takes focus when first shown.

        Only fields of added documents ever claim focus. In the insert dialog
        (``insert_index`` given, 1-based) the first field claims it while its key
        is still empty. Elsewhere a read-only key claims it so tab moves on to
        the value instead of stopping on the key.
        """
        if not self.element.is_added():
            return False
        if insert_index:
            return insert_index == 1 and self.element.current_key == ""
        return not self.is_editable()

    # ========== RENDERING ==========

    def style_tokens(self) -> List[str]:
        tokens = [KEY_CLASS]
        if self._state.editing:
            tokens.append(EDITING)
        if self._state.duplicate:
            tokens.append(DUPLICATE)
        return tokens

    def style_class(self) -> str:
        return " ".join(self.style_tokens())

    def title(self) -> str:
        if self._state.duplicate:
            return get_doclist_config().duplicate_key_message.format(key=self.element.current_key)
        return self.element.current_key
