"""Type names for document values."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pyqt_doclist.core.document_id import OBJECT_ID_LENGTH

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def type_of(value: Any) -> str:
    """Return the document type name of a raw value."""
    if value is None:
        return "Null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, Mapping):
        return "Object"
    if isinstance(value, (list, tuple)):
        return "Array"
    if isinstance(value, str):
        return "String"
    if isinstance(value, int):
        return "Int32" if INT32_MIN <= value <= INT32_MAX else "Int64"
    if isinstance(value, float):
        return "Double"
    if isinstance(value, datetime):
        return "Date"
    binary = getattr(value, "binary", None)
    if isinstance(binary, (bytes, bytearray)) and len(binary) == OBJECT_ID_LENGTH:
        return "ObjectId"
    if isinstance(value, (bytes, bytearray)):
        return "Binary"
    return type(value).__name__
