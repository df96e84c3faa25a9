"""
Core utilities.

Identity helpers and Qt signal plumbing with no document-list semantics.
"""

from .document_id import ID_FIELD, document_id, ids_equal, object_id_hex
from .signal_service import SignalService

__all__ = [
    "ID_FIELD",
    "document_id",
    "ids_equal",
    "object_id_hex",
    "SignalService",
]
