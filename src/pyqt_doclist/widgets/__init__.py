"""
Document list widgets.

PyQt6 views over the list and key controllers.
"""

from .editable_key import EditableKeyLineEdit
from .document_row import DocumentRowWidget, format_value
from .document_list import DocumentListWidget

__all__ = [
    "EditableKeyLineEdit",
    "DocumentRowWidget",
    "format_value",
    "DocumentListWidget",
]
