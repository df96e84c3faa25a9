"""
Reference document model.

An in-memory implementation of the ``DocumentElement`` contract: raw records
become trees of renameable fields.
"""

from .types import type_of
from .element import Element
from .document import Document

__all__ = [
    "type_of",
    "Element",
    "Document",
]
