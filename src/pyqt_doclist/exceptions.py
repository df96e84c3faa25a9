"""Document list exceptions."""

from typing import Any, Optional


class DocListError(Exception):
    """Base class for errors raised by pyqt-doclist."""


class InconsistentStateError(DocListError):
    """Raised when an event references a row the view does not hold.

    The view and the data source have diverged; the event is rejected and the
    list state is left untouched.
    """

    def __init__(self, doc_id: Any, message: Optional[str] = None):
        self.doc_id = doc_id
        super().__init__(message or f"No row with id {doc_id!r} in document list")
