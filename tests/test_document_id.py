"""Tests for document id helpers."""

from pyqt_doclist.core import document_id, ids_equal, object_id_hex
from pyqt_doclist.model import Document

HEX = "507f1f77bcf86cd799439011"


def test_document_id_from_record_and_document():
    """_id is read from raw records and wrapped documents alike."""
    assert document_id({"_id": "a", "x": 1}) == "a"
    assert document_id({"x": 1}) is None
    assert document_id(Document({"_id": 7})) == 7


def test_primitive_ids_compare_by_value():
    assert ids_equal("abc", "abc")
    assert not ids_equal("abc", "abd")
    assert ids_equal(5, 5)
    assert not ids_equal(5, "5")


def test_structured_ids_compare_by_value(make_object_id):
    """Two distinct ObjectId instances with the same bytes are equal."""
    assert ids_equal(make_object_id(HEX), make_object_id(HEX))
    assert not ids_equal(make_object_id(HEX), make_object_id("0" * 24))


def test_structured_id_matches_hex_string(make_object_id):
    assert ids_equal(make_object_id(HEX), HEX)
    assert ids_equal(HEX.upper(), make_object_id(HEX))
    assert not ids_equal(make_object_id(HEX), "not-an-id")


def test_object_id_hex_for_raw_bytes(make_object_id):
    assert object_id_hex(bytes.fromhex(HEX)) == HEX
    assert object_id_hex(make_object_id(HEX)) == HEX
    assert object_id_hex(b"short") is None
    assert object_id_hex("text") is None
