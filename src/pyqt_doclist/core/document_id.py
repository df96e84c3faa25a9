"""
Document identity helpers.

Document ids are either primitives (str, int) or structured 12-byte object
identifiers. Structured ids are anything exposing a 12-byte ``binary``
attribute (bson.ObjectId does) or raw 12-byte ``bytes``. A structured id is
also equal to its 24-character hex string form.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

ID_FIELD = "_id"
OBJECT_ID_LENGTH = 12

_HEX_ID = re.compile(r"^[0-9a-fA-F]{24}$")


def document_id(record: Any) -> Any:
    """Return the ``_id`` of a raw record or a wrapped document."""
    if isinstance(record, Mapping):
        return record.get(ID_FIELD)
    return getattr(record, "doc_id", None)


def object_id_hex(value: Any) -> Optional[str]:
    """Return the lowercase hex form of a structured id, or None for primitives."""
    if isinstance(value, (bytes, bytearray)) and len(value) == OBJECT_ID_LENGTH:
        return bytes(value).hex()
    binary = getattr(value, "binary", None)
    if isinstance(binary, (bytes, bytearray)) and len(binary) == OBJECT_ID_LENGTH:
        return bytes(binary).hex()
    return None


def ids_equal(left: Any, right: Any) -> bool:
    """Value equality for document ids, structured-id aware.

    Same-typed ids compare with ``==``. Mixed pairs compare through their
    canonical hex form so an ObjectId matches its hex string.
    """
    if left is right:
        return True
    if type(left) is type(right):
        return left == right

    left_hex = object_id_hex(left)
    right_hex = object_id_hex(right)
    if left_hex is None and right_hex is None:
        return left == right

    if left_hex is None:
        left_hex = left.lower() if isinstance(left, str) and _HEX_ID.match(left) else None
    if right_hex is None:
        right_hex = right.lower() if isinstance(right, str) and _HEX_ID.match(right) else None
    return left_hex is not None and left_hex == right_hex
