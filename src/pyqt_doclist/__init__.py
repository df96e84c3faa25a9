"""
pyqt-doclist: incremental document list and in-place key editing for PyQt6.

The view/state layer of a database document browser: a scrollable list of
documents kept consistent with asynchronous store events, and per-field key
editors with duplicate detection.

Architecture:
- Tier 1 (Core): Document id helpers and Qt signal plumbing
- Tier 2 (Protocols): Document model and viewport ABCs, configuration
- Tier 3 (Model/State): Reference document model, immutable list state and its reducer
- Tier 4 (Services): List, pagination, key editor and insert dialog controllers
- Tier 5 (Widgets): PyQt6 views over the controllers

Key Features:
- One reducer for reset/append/remove/insert events, no partial updates
- Pagination cursor that gives slots back on removal
- Structured-id aware row matching
- Advisory duplicate-key detection that never drops keystrokes
"""

__version__ = "0.1.0"

from pyqt_doclist.exceptions import DocListError, InconsistentStateError
from pyqt_doclist.model import Document, Element
from pyqt_doclist.state import ListViewState, Row, apply_event, should_rerender
from pyqt_doclist.services import (
    DocumentListController,
    DocumentStoreChannels,
    EditableKeyController,
    InsertDocumentDialogService,
    ScrollPaginationTrigger,
)

__all__ = [
    "__version__",
    "DocListError",
    "InconsistentStateError",
    "Document",
    "Element",
    "ListViewState",
    "Row",
    "apply_event",
    "should_rerender",
    "DocumentListController",
    "DocumentStoreChannels",
    "EditableKeyController",
    "InsertDocumentDialogService",
    "ScrollPaginationTrigger",
]
