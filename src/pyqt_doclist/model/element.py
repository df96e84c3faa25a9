"""
Reference implementation of a document field.

An Element wraps one key/value pair of a raw record. Object and Array values
are expanded into child Elements so that every key in the tree can be edited
in place. Keys are renamed on the element; the raw record is never mutated,
``generate_object()`` rebuilds it with the current keys.
"""

import logging
from typing import Any, List, Optional

from pyqt_doclist.core.document_id import ID_FIELD
from pyqt_doclist.protocols.document_model import ContainerType, DocumentElement
from pyqt_doclist.model.types import type_of

logger = logging.getLogger(__name__)


class Element(DocumentElement):
    """One field of a document tree.

    Attributes:
        key: Key as loaded (or as created, for added fields)
        parent: Containing Element or Document (non-owning)
        added: Field was created in the editor and has not been persisted
        current_type: Type name of the value, see ``type_of``
        elements: Child elements for Object/Array values, otherwise None
    """

    def __init__(self, key: str, value: Any, parent: Any, added: bool = False):
        self.key = key
        self._current_key = key
        self.parent = parent
        self.added = added
        self.current_type = type_of(value)
        self.elements: Optional[List["Element"]] = None
        self._value = None

        if self.current_type == ContainerType.OBJECT.value:
            self.elements = [Element(k, v, self) for k, v in value.items()]
        elif self.current_type == ContainerType.ARRAY.value:
            self.elements = [Element(str(i), v, self) for i, v in enumerate(value)]
        else:
            self._value = value

    def __repr__(self) -> str:
        return f"Element({self._current_key!r}, type={self.current_type})"

    @property
    def current_key(self) -> str:
        return self._current_key

    @property
    def current_value(self) -> Any:
        return self.generate_object()

    def is_root(self) -> bool:
        return False

    def is_container(self) -> bool:
        return self.elements is not None

    def is_added(self) -> bool:
        return self.added or self.parent.is_added()

    def parent_container_type(self) -> ContainerType:
        return ContainerType.from_type_name(self.parent.current_type)

    def _is_parent_editable(self) -> bool:
        if self.parent.is_root():
            return True
        return self.parent.is_key_editable()

    def is_key_editable(self) -> bool:
        """A root-level ``_id`` loaded from the store is the only protected key."""
        if not self._is_parent_editable():
            return False
        return self.is_added() or self.key != ID_FIELD or not self.parent.is_root()

    def is_duplicate_key(self, candidate: str) -> bool:
        if candidate == self._current_key:
            return False
        return any(
            sibling is not self and sibling.current_key == candidate
            for sibling in self.parent.elements
        )

    def rename(self, new_key: str) -> None:
        logger.debug(f"Rename {self._current_key!r} -> {new_key!r}")
        self._current_key = new_key

    def is_renamed(self) -> bool:
        return self._current_key != self.key

    def is_modified(self) -> bool:
        if self.added or self.is_renamed():
            return True
        return self.is_container() and any(el.is_modified() for el in self.elements)

    def generate_object(self) -> Any:
        """Rebuild the raw value using current keys."""
        if self.current_type == ContainerType.OBJECT.value:
            return {el.current_key: el.generate_object() for el in self.elements}
        if self.current_type == ContainerType.ARRAY.value:
            return [el.generate_object() for el in self.elements]
        return self._value
