"""Tests for the insert dialog service."""

from pyqt_doclist.services import InsertDocumentDialogService


def test_open_wraps_new_document(qapp):
    service = InsertDocumentDialogService()
    opened = []
    service.document_opened.connect(opened.append)

    document = service.open_insert_document_dialog({"": ""})

    assert opened == [document]
    assert document.is_new
    assert document.elements[0].is_added()
    assert document.elements[0].is_key_editable()


def test_clone_drops_leading_id(qapp):
    service = InsertDocumentDialogService()
    document = service.open_insert_document_dialog({"_id": 1, "name": "a"}, clone=True)
    assert [el.current_key for el in document.elements] == ["name"]
    assert document.generate_object() == {"name": "a"}


def test_plain_open_keeps_id(qapp):
    service = InsertDocumentDialogService()
    document = service.open_insert_document_dialog({"_id": 1, "name": "a"})
    assert [el.current_key for el in document.elements] == ["_id", "name"]


def test_clone_keeps_id_not_in_first_position(qapp):
    service = InsertDocumentDialogService()
    document = service.open_insert_document_dialog({"name": "a", "_id": 1}, clone=True)
    assert [el.current_key for el in document.elements] == ["name", "_id"]
