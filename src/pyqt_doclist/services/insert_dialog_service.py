"""Opens the insert document dialog with a fresh editable document."""

import logging
from collections.abc import Mapping

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_doclist.core.document_id import ID_FIELD
from pyqt_doclist.model import Document

logger = logging.getLogger(__name__)


class InsertDocumentDialogService(QObject):
    """
    Turns a template record into a new Document for the insert dialog.

    Usage:
        service = InsertDocumentDialogService()
        service.document_opened.connect(dialog.show_document)
        controller.insert_dialog_requested.connect(service.open_insert_document_dialog)
    """

    document_opened = pyqtSignal(object)

    def open_insert_document_dialog(self, record: Mapping, clone: bool = False) -> Document:
        """
        Wrap ``record`` as a new document and publish it.

        Args:
            record: Template or document to copy
            clone: Copying an existing document; its ``_id`` is dropped so the
                insert does not collide with the original (``_id`` is not editable)

        Returns:
            The new Document
        """
        document = Document(record, is_new=True)
        if clone and document.elements and document.elements[0].current_key == ID_FIELD:
            document.remove_element(document.elements[0])
        logger.info(f"Opening insert dialog ({'clone' if clone else 'new'}, {len(document.elements)} fields)")
        self.document_opened.emit(document)
        return document
