"""
Document list synchronization controller.

Owns the ListViewState and is the only thing that replaces it. Inbound store
signals are turned into events and run through ``apply_event`` one at a time;
listeners hear about the result through Qt signals.
"""

import copy
import logging
from typing import Any, Callable, List

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_doclist.exceptions import InconsistentStateError
from pyqt_doclist.model import Document
from pyqt_doclist.protocols import get_doclist_config
from pyqt_doclist.services.store_channels import DocumentStoreChannels
from pyqt_doclist.state import (
    AppendEvent, DocumentFactory, InsertResultEvent, ListViewState, RemoveEvent,
    ResetEvent, apply_event, row_factory_for, should_rerender,
)

logger = logging.getLogger(__name__)


class DocumentListController(QObject):
    """
    Keeps the ordered row collection consistent with the document stores.

    Signals:
        state_changed: Any new state (counters included)
        rows_changed: New state that warrants redrawing the rows
        insert_dialog_requested: Template document for the insert dialog
        row_removal_requested: Id of a row the user deleted
        inconsistency_detected: InconsistentStateError for a rejected event

    Usage:
        controller = DocumentListController(channels, fetch_next_page=store.fetch_next)
        controller.rows_changed.connect(list_widget.sync_rows)
        ...
        controller.detach()  # when the view goes away
    """

    state_changed = pyqtSignal(object)
    rows_changed = pyqtSignal(object)
    insert_dialog_requested = pyqtSignal(object)
    row_removal_requested = pyqtSignal(object)
    inconsistency_detected = pyqtSignal(object)

    def __init__(
        self,
        channels: DocumentStoreChannels,
        fetch_next_page: Callable[[int], None],
        document_factory: DocumentFactory = Document,
        parent=None
    ):
        super().__init__(parent)
        self._channels = channels
        self._fetch_next_page = fetch_next_page
        self._row_factory = row_factory_for(document_factory)
        self._state = ListViewState()
        self._attached = False
        self.attach()

    @property
    def state(self) -> ListViewState:
        return self._state

    def attach(self) -> None:
        """Subscribe to the store channels. Idempotent."""
        if self._attached:
            return
        self._channels.documents_reset.connect(self.handle_reset)
        self._channels.documents_loaded.connect(self.handle_load_more)
        self._channels.document_removed.connect(self.handle_remove)
        self._channels.document_inserted.connect(self.handle_insert)
        self._attached = True

    def detach(self) -> None:
        """Unsubscribe from the store channels. Idempotent."""
        if not self._attached:
            return
        self._channels.documents_reset.disconnect(self.handle_reset)
        self._channels.documents_loaded.disconnect(self.handle_load_more)
        self._channels.document_removed.disconnect(self.handle_remove)
        self._channels.document_inserted.disconnect(self.handle_insert)
        self._attached = False

    # ========== STORE EVENTS ==========

    def handle_reset(self, documents: List[Any], count: int) -> None:
        """The query changed: start over from the first page."""
        self.apply(ResetEvent(documents=list(documents), total_count=count))

    def handle_load_more(self, documents: List[Any]) -> None:
        """Append the next page after every row already loaded."""
        self.apply(AppendEvent(documents=list(documents)))

    def handle_remove(self, doc_id: Any) -> None:
        self.apply(RemoveEvent(doc_id=doc_id))

    def handle_insert(self, success: bool, payload: Any) -> None:
        """Count the new document and pull it into view.

        A failed insert is reported by the insert dialog; the list is untouched.
        """
        if not success:
            logger.debug(f"Insert failed, list unchanged: {payload!r}")
        self.apply(InsertResultEvent(success=success, payload=payload))

    def apply(self, event) -> ListViewState:
        """Run one event through the reducer and publish the result."""
        previous = self._state
        try:
            current = apply_event(previous, event, self._row_factory)
        except InconsistentStateError as error:
            logger.error(f"Document list diverged from its store: {error}")
            self.inconsistency_detected.emit(error)
            return previous

        if get_doclist_config().debug_reconciliation:
            logger.info(
                f"🔄 {event.kind.value}: rows {len(previous.rows)}→{len(current.rows)}, "
                f"skip {previous.next_skip}→{current.next_skip}, "
                f"total {previous.total_count}→{current.total_count}"
            )

        self._state = current
        if current is not previous:
            logger.debug(f"State after {event.kind.value}: {current.loaded_count}/{current.total_count} loaded")
            self.state_changed.emit(current)
            if should_rerender(previous, current):
                self.rows_changed.emit(current)

        if isinstance(event, InsertResultEvent) and event.success:
            self.load_more()
        return current

    # ========== PAGINATION ==========

    def has_more(self) -> bool:
        return self._state.has_more

    def load_more(self) -> bool:
        """Request the next page if the store has documents we have not shown.

        Returns:
            True if a fetch was requested
        """
        if not self._state.has_more:
            return False
        logger.info(f"Fetching next documents at skip={self._state.next_skip}")
        self._fetch_next_page(self._state.next_skip)
        return True

    # ========== OUTBOUND REQUESTS ==========

    def open_insert_dialog(self) -> None:
        """Ask the shell to open the insert dialog with an empty document."""
        template = copy.deepcopy(get_doclist_config().insert_template)
        self.insert_dialog_requested.emit(template)

    def request_row_removal(self, doc_id: Any) -> None:
        """Forward a completed user delete upward."""
        logger.debug(f"Row removal requested for {doc_id!r}")
        self.row_removal_requested.emit(doc_id)
