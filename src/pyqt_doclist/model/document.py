"""Root container of the reference document model."""

from collections.abc import Mapping
import logging
from typing import Any, Dict, List, Optional

from pyqt_doclist.core.document_id import ID_FIELD
from pyqt_doclist.protocols.document_model import ContainerType
from pyqt_doclist.model.element import Element

logger = logging.getLogger(__name__)


class Document:
    """
    A raw record wrapped as an editable tree of Elements.

    Usage:
        doc = Document({"_id": 1, "name": "a", "tags": ["x"]})
        doc.elements[1].rename("title")
        doc.generate_object()  # {"_id": 1, "title": "a", "tags": ["x"]}

    New documents (``is_new=True``) come from the insert dialog; every field of
    a new document is considered added, including its ``_id``.
    """

    current_type = ContainerType.DOCUMENT.value

    def __init__(self, record: Mapping, is_new: bool = False):
        self.doc: Dict[str, Any] = dict(record)
        self.is_new = is_new
        self.elements: List[Element] = [
            Element(key, value, self, added=is_new) for key, value in self.doc.items()
        ]
        self._removed_keys: List[str] = []

    def __repr__(self) -> str:
        return f"Document(_id={self.doc_id!r}, fields={len(self.elements)}, new={self.is_new})"

    @property
    def doc_id(self) -> Any:
        return self.doc.get(ID_FIELD)

    def is_root(self) -> bool:
        return True

    def is_added(self) -> bool:
        return self.is_new

    def get(self, key: str) -> Optional[Element]:
        """Return the top-level element currently named ``key``."""
        for element in self.elements:
            if element.current_key == key:
                return element
        return None

    def remove_element(self, element: Element) -> None:
        self.elements.remove(element)
        self._removed_keys.append(element.key)
        logger.debug(f"Removed field {element.key!r} from document {self.doc_id!r}")

    def is_modified(self) -> bool:
        return bool(self._removed_keys) or any(el.is_modified() for el in self.elements)

    def generate_object(self) -> Dict[str, Any]:
        """Rebuild the record with current keys, in field order."""
        return {el.current_key: el.generate_object() for el in self.elements}
