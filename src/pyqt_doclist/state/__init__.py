"""
List view state and its reducer.

Pure data and pure functions; no Qt objects live here.
"""

from .list_state import Row, ListViewState, DocumentFactory
from .events import EventKind, ResetEvent, AppendEvent, RemoveEvent, InsertResultEvent
from .reconciler import ListReconciler, apply_event, should_rerender, row_factory_for

__all__ = [
    "Row",
    "ListViewState",
    "DocumentFactory",
    "EventKind",
    "ResetEvent",
    "AppendEvent",
    "RemoveEvent",
    "InsertResultEvent",
    "ListReconciler",
    "apply_event",
    "should_rerender",
    "row_factory_for",
]
