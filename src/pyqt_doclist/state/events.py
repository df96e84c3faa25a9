"""Inbound data events, one frozen dataclass per variant."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Sequence


class EventKind(Enum):
    """Tag for every event the list reconciles."""
    RESET = "reset"
    APPEND = "append"
    REMOVE = "remove"
    INSERT_RESULT = "insert_result"


@dataclass(frozen=True)
class ResetEvent:
    """A new query result replaces the list."""
    kind: ClassVar[EventKind] = EventKind.RESET
    documents: Sequence[Any]
    total_count: int


@dataclass(frozen=True)
class AppendEvent:
    """The next page of the current query."""
    kind: ClassVar[EventKind] = EventKind.APPEND
    documents: Sequence[Any]


@dataclass(frozen=True)
class RemoveEvent:
    """The store confirmed a document deletion."""
    kind: ClassVar[EventKind] = EventKind.REMOVE
    doc_id: Any


@dataclass(frozen=True)
class InsertResultEvent:
    """Outcome of an insert; ``payload`` is the new document or the error."""
    kind: ClassVar[EventKind] = EventKind.INSERT_RESULT
    success: bool
    payload: Any = None
