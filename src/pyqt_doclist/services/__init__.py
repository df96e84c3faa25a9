"""
Controllers and services for the document list.

Qt-signal based controllers that own view state, plus the store channel
contract they subscribe to.
"""

from .store_channels import DocumentStoreChannels
from .document_list_controller import DocumentListController
from .pagination_trigger import ScrollPaginationTrigger
from .editable_key_controller import EditableKeyController, EditableKeyState
from .insert_dialog_service import InsertDocumentDialogService

__all__ = [
    "DocumentStoreChannels",
    "DocumentListController",
    "ScrollPaginationTrigger",
    "EditableKeyController",
    "EditableKeyState",
    "InsertDocumentDialogService",
]
