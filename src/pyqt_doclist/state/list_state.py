"""
View state of the document list.

Both types are immutable: every reconciliation produces a new ListViewState,
and an operation that changes nothing hands back the very same object.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Tuple

from pyqt_doclist.core.document_id import document_id
from pyqt_doclist.model import Document

DocumentFactory = Callable[[Mapping], Any]


@dataclass(frozen=True, eq=False)
class Row:
    """One rendered document: its id and the model that owns its fields."""
    id: Any
    model: Any

    @classmethod
    def from_document(cls, record: Mapping, document_factory: DocumentFactory = Document) -> "Row":
        return cls(id=document_id(record), model=document_factory(record))


@dataclass(frozen=True)
class ListViewState:
    """Ordered rows plus the pagination cursor and counters.

    Invariants:
        loaded_count == len(rows)
        next_skip only decreases on row removal or reset
        loaded_count <= total_count once the total is known
    """
    rows: Tuple[Row, ...] = ()
    next_skip: int = 0
    loaded_count: int = 0
    total_count: int = 0

    @property
    def has_more(self) -> bool:
        return self.loaded_count < self.total_count

    @property
    def row_ids(self) -> Tuple[Any, ...]:
        return tuple(row.id for row in self.rows)
