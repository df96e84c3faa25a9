"""Signal channels published by the document stores."""

from PyQt6.QtCore import QObject, pyqtSignal


class DocumentStoreChannels(QObject):
    """
    The four result streams of the data-fetch layer.

    The fetch layer owns an instance and emits on it; the list controller
    receives it at construction and subscribes. Stale results from a previous
    query must be dropped by the emitter: the list applies whatever it is given.

    Usage:
        channels = DocumentStoreChannels()
        controller = DocumentListController(channels, fetch_next_page=store.fetch)

        # In the store, when a query completes:
        channels.documents_reset.emit(documents, count)
    """

    documents_reset = pyqtSignal(list, int)    # documents, total count
    documents_loaded = pyqtSignal(list)        # next page of documents
    document_removed = pyqtSignal(object)      # id of the deleted document
    document_inserted = pyqtSignal(bool, object)  # success, document or error
