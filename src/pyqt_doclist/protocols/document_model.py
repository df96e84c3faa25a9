"""
Document model contracts for the editable key layer.

The key editor never touches raw records. It talks to a field through the
``DocumentElement`` ABC, so any document tree (the reference model in
``pyqt_doclist.model`` or an application's own) can back the editor as long
as it implements these operations.

Design Philosophy:
- Explicit inheritance over duck typing
- The model is the source of truth for key validity; the editor only advises
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class ContainerType(Enum):
    """Declared type of the container holding a field."""
    OBJECT = "Object"
    ARRAY = "Array"
    DOCUMENT = "Document"

    @classmethod
    def from_type_name(cls, type_name: str) -> "ContainerType":
        """Map a model type name to a container type; scalars count as objects."""
        for member in cls:
            if member.value == type_name:
                return member
        return cls.OBJECT


class DocumentElement(ABC):
    """
    ABC for one key/value field inside a document tree.

    Implementations hold a non-owning reference to their parent so that
    sibling lookups and container type checks can be answered locally.
    """

    @property
    @abstractmethod
    def current_key(self) -> str:
        """The key as currently edited (may differ from the persisted key)."""
        pass

    @property
    @abstractmethod
    def current_value(self) -> Any:
        """The value as currently held by the field."""
        pass

    @abstractmethod
    def is_key_editable(self) -> bool:
        """
        Whether the model allows this key to be renamed.

        Returns:
            False for keys the model protects (e.g. a persisted root ``_id``).
        """
        pass

    @abstractmethod
    def parent_container_type(self) -> ContainerType:
        """Declared type of the container this field lives in."""
        pass

    @abstractmethod
    def is_duplicate_key(self, candidate: str) -> bool:
        """
        Check a candidate key against the field's siblings.

        Args:
            candidate: Proposed key text

        Returns:
            True if another sibling already uses ``candidate``. The field's own
            key never counts as a duplicate.
        """
        pass

    @abstractmethod
    def rename(self, new_key: str) -> None:
        """Apply a new key to the field. Duplicates are accepted."""
        pass

    @abstractmethod
    def is_added(self) -> bool:
        """True if the field (or its document) is new and not yet persisted."""
        pass
