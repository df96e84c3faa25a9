"""
Single reducer for the document list.

Four event streams converge on one ListViewState. Rather than four callbacks
each mutating shared state, every event goes through ``apply_event``, which
dispatches on the event's kind to a handler returning the next state:

    state = ListViewState()
    state = apply_event(state, ResetEvent(docs, total_count=10))
    state = apply_event(state, AppendEvent(more_docs))
    state = apply_event(state, RemoveEvent(doc_id))

Handlers never mutate their input. A handler either returns a complete new
state or raises before building one, so no partial update is observable.
"""

from functools import partial
import logging
from typing import Callable, Dict

from pyqt_doclist.core.document_id import ids_equal
from pyqt_doclist.exceptions import InconsistentStateError
from pyqt_doclist.model import Document
from pyqt_doclist.state.events import (
    AppendEvent, EventKind, InsertResultEvent, RemoveEvent, ResetEvent,
)
from pyqt_doclist.state.list_state import DocumentFactory, ListViewState, Row

logger = logging.getLogger(__name__)

RowFactory = Callable[..., Row]


class ListReconciler:
    """
    Enum-dispatched reducer over ListViewState.

    Every EventKind must have a handler; the table is checked at construction
    so a new event variant cannot be silently ignored.
    """

    def __init__(self):
        self._handlers: Dict[EventKind, Callable] = {
            EventKind.RESET: self._reset,
            EventKind.APPEND: self._append,
            EventKind.REMOVE: self._remove,
            EventKind.INSERT_RESULT: self._insert_result,
        }
        missing = set(EventKind) - set(self._handlers)
        if missing:
            raise ValueError(f"{self.__class__.__name__}: no handler for {sorted(k.value for k in missing)}")
        logger.debug(f"{self.__class__.__name__}: Registered {len(self._handlers)} handlers")

    def dispatch(self, state: ListViewState, event, row_factory: RowFactory = Row.from_document) -> ListViewState:
        kind = getattr(event, "kind", None)
        handler = self._handlers.get(kind)
        if handler is None:
            raise ValueError(f"{self.__class__.__name__}: unknown event {event!r}")
        return handler(state, event, row_factory)

    def _reset(self, state: ListViewState, event: ResetEvent, row_factory: RowFactory) -> ListViewState:
        rows = tuple(row_factory(doc) for doc in event.documents)
        return ListViewState(
            rows=rows,
            next_skip=len(rows),
            loaded_count=len(rows),
            total_count=event.total_count,
        )

    def _append(self, state: ListViewState, event: AppendEvent, row_factory: RowFactory) -> ListViewState:
        if not event.documents:
            return state
        rows = tuple(row_factory(doc) for doc in event.documents)
        return ListViewState(
            rows=state.rows + rows,
            next_skip=state.next_skip + len(rows),
            loaded_count=state.loaded_count + len(rows),
            total_count=state.total_count,
        )

    def _remove(self, state: ListViewState, event: RemoveEvent, row_factory: RowFactory) -> ListViewState:
        for index, row in enumerate(state.rows):
            if ids_equal(event.doc_id, row.id):
                break
        else:
            raise InconsistentStateError(event.doc_id)

        # The cursor gives the slot back so the next page starts at the first
        # document not yet displayed.
        return ListViewState(
            rows=state.rows[:index] + state.rows[index + 1:],
            next_skip=state.next_skip - 1,
            loaded_count=state.loaded_count - 1,
            total_count=state.total_count,
        )

    def _insert_result(self, state: ListViewState, event: InsertResultEvent, row_factory: RowFactory) -> ListViewState:
        if not event.success:
            return state
        return ListViewState(
            rows=state.rows,
            next_skip=state.next_skip,
            loaded_count=state.loaded_count,
            total_count=state.total_count + 1,
        )


_RECONCILER = ListReconciler()


def row_factory_for(document_factory: DocumentFactory = Document) -> RowFactory:
    """Bind a document factory into a row factory."""
    return partial(Row.from_document, document_factory=document_factory)


def apply_event(state: ListViewState, event, row_factory: RowFactory = Row.from_document) -> ListViewState:
    """Return the state after ``event``; raises InconsistentStateError on unknown ids."""
    return _RECONCILER.dispatch(state, event, row_factory)


def should_rerender(previous: ListViewState, current: ListViewState) -> bool:
    """Rows are redrawn only when their count or the cursor/counters move.

    Edits inside a row's model never reach here, so typing in a key does not
    redraw the whole list.
    """
    return (
        len(current.rows) != len(previous.rows)
        or current.next_skip != previous.next_skip
        or current.loaded_count != previous.loaded_count
    )
