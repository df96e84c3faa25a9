"""Base configuration for the document list.

Provides hooks for applications to customize list and key editor behavior.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, field


@dataclass
class DocListConfig:
    """Configuration for document list behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        insert_template: Document handed to the insert dialog for a new document
        duplicate_key_message: Title shown on a key that clashes with a sibling
        list_object_name: Qt object name of the list container
        insert_button_text: Label of the insert button
        status_format: Status line template, receives ``loaded`` and ``total``
        key_char_width_padding: Extra pixels added to a key editor's width hint
        debug_reconciliation: Trace every reconciliation step at INFO level
    """

    insert_template: Dict[str, Any] = field(default_factory=lambda: {"": ""})
    duplicate_key_message: str = "Duplicate key: '{key}'"
    list_object_name: str = "document-list"
    insert_button_text: str = "Insert Document"
    status_format: str = "Showing {loaded} of {total}"
    key_char_width_padding: int = 12
    debug_reconciliation: bool = False


# Global config instance (set by application)
_doclist_config: Optional[DocListConfig] = None


def set_doclist_config(config: Optional[DocListConfig]) -> None:
    """Set the global document list configuration.

    Args:
        config: DocListConfig instance, or None to restore defaults
    """
    global _doclist_config
    _doclist_config = config


def get_doclist_config() -> DocListConfig:
    """Get the current document list configuration.

    Returns:
        Current DocListConfig or default if not set
    """
    if _doclist_config is None:
        return DocListConfig()
    return _doclist_config
